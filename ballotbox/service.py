import threading
from typing import Any

from . import _settings
from .abc.counting import CountingStrategy
from .abc.listeners import VoteListener
from .abc.store import VoteStore
from .ballots import Tally, Vote

__all__ = ("AlreadyVoted", "TallyService")

class AlreadyVoted(Exception):
    """Raised when a voter tries to cast a second vote.

    The offending voter is available as the `voter_id` attribute.
    """

    def __init__(self, voter_id: str):
        super().__init__(f"The voter {voter_id} has already voted")
        self.voter_id = voter_id

class TallyService:
    """The entry point for casting and counting votes.

    It stores the votes in the `store` it is given, prevents voters from
    voting twice, and notifies its listeners of each recorded vote. Counting
    is delegated to whichever strategy is passed to `count`.

    The store is not owned by the service and may outlive it.
    """

    store: VoteStore

    def __init__(self, store: VoteStore, /):
        if store is None:
            raise ValueError("The store cannot be None")
        self.store = store
        self._listeners: list[VoteListener] = []
        self._voted: set[str] = set()
        # guards the listeners, and the voted set together with the store
        self._state_lock = threading.Lock()

    # listeners

    def add_listener(self, listener: VoteListener, /) -> None:
        """Registers `listener`, to be notified after the ones already there."""
        if listener is None:
            raise ValueError("The listener cannot be None")
        with self._state_lock:
            self._listeners.append(listener)

    def remove_listener(self, listener: VoteListener, /) -> None:
        """Unregisters `listener`. Does nothing if it was not registered."""
        with self._state_lock:
            try:
                self._listeners.remove(listener)
            except ValueError:
                pass

    @property
    def listener_count(self) -> int:
        with self._state_lock:
            return len(self._listeners)

    # casting

    def cast(self, vote: Vote, /) -> None:
        """Records the `vote` and notifies the listeners.

        Raises ValueError if `vote` is None, and AlreadyVoted if its voter
        already voted, in which case nothing is stored nor notified.
        The check, the storing and the marking of the voter happen as one
        step, so that of two concurrent casts from the same voter only one can
        succeed. The listeners are notified afterwards, on the calling thread.
        """
        if vote is None:
            raise ValueError("The vote cannot be None")

        with self._state_lock:
            if vote.voter_id in self._voted:
                raise AlreadyVoted(vote.voter_id)
            self.store.save(vote)
            self._voted.add(vote.voter_id)

        self._notify(vote)

    def cast_unchecked(self, vote: Vote, /) -> None:
        """Records the `vote` without checking whether its voter already voted.

        The voter is not marked as having voted either. This is meant for
        bulk-loading and testing, where repeated votes are intended.
        """
        if vote is None:
            raise ValueError("The vote cannot be None")

        self.store.save(vote)
        self._notify(vote)

    def _notify(self, vote: Vote) -> None:
        with self._state_lock:
            listeners = tuple(self._listeners)

        for listener in listeners:
            try:
                listener.on_vote(vote)
            except Exception as e:
                # a failing listener must not prevent the others from being notified
                _settings.console.log(f"[TALLY] Listener {listener!r} failed: {e!r}", markup=False)

    # counting and queries

    def count(self, strategy: CountingStrategy, /) -> Tally:
        """Counts all the stored votes using `strategy`."""
        if strategy is None:
            raise ValueError("The strategy cannot be None")
        return strategy.count(self.store.find_all())

    def has_voted(self, voter_id: str, /) -> bool:
        with self._state_lock:
            return voter_id in self._voted

    @property
    def total_votes(self) -> int:
        return self.store.count()

    def get_all_votes(self) -> list[Vote]:
        return list(self.store.find_all())

    def statistics(self) -> dict[str, Any]:
        """Returns the total_votes, unique_voters and listener_count figures."""
        total_votes = self.total_votes
        with self._state_lock:
            return dict(
                total_votes=total_votes,
                unique_voters=len(self._voted),
                listener_count=len(self._listeners),
            )

    def reset(self) -> None:
        """Forgets every vote and every voter."""
        with self._state_lock:
            self.store.clear()
            self._voted.clear()
