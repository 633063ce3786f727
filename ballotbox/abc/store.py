import abc
from collections.abc import MutableSequence

from ..ballots import Vote

__all__ = ("VoteStore",)

class VoteStore(abc.ABC):
    """Manages how the votes are kept between the moment they are cast and
    the moment they are counted.

    This is an abstract base class.
    A store keeps every vote it is given, in order, without deduplicating
    them : preventing a voter from voting twice is the tally service's
    business, not the store's.
    """

    @abc.abstractmethod
    def save(self, vote: Vote, /) -> None:
        """Appends the `vote` at the end of the history.

        Must raise ValueError if `vote` is None.
        """

    @abc.abstractmethod
    def find_all(self) -> MutableSequence[Vote]:
        """Returns the whole history, in insertion order.

        The return value must be a snapshot : modifying it must not modify the
        store.
        """

    @abc.abstractmethod
    def clear(self) -> None:
        """Empties the history."""

    def count(self) -> int:
        """Returns the number of stored votes.

        Subclasses should override this when they can do better than taking a
        whole snapshot.
        """
        return len(self.find_all())
