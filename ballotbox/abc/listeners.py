import abc

from ..ballots import Vote

__all__ = ("VoteListener",)

class VoteListener(abc.ABC):
    """An observer of the votes recorded by a tally service."""

    @abc.abstractmethod
    def on_vote(self, vote: Vote|None, /) -> None:
        """Called once for each vote, after it was stored.

        Listeners are called in the order in which they were registered.
        A None `vote` must be tolerated without raising.
        """
