import abc
from collections.abc import Iterable
from typing import ClassVar

from ..ballots import Tally, Vote

__all__ = ("CountingStrategy",)

class CountingStrategy(abc.ABC):
    """Manages how the history of votes turns into per-candidate totals.

    This is an abstract base class.
    Each concrete strategy also carries its own way of naming a winner from
    the totals it returns, which is not part of this common interface.
    """

    name: ClassVar[str]

    @abc.abstractmethod
    def count(self, votes: Iterable[Vote], /) -> Tally:
        """Returns the totals of each candidate based upon the `votes`.

        This is an abstract method that needs to be overridden in subclasses.
        Must raise ValueError if `votes` is None. An empty `votes` is not an
        error and must return an empty Tally.
        """
