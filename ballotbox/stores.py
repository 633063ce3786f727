"""
Exports ``InMemoryVoteStore`` and the ``create_store`` factory which builds a
store from its type tag.
"""

import threading

from .abc.store import VoteStore
from .ballots import Vote

__all__ = ("InMemoryVoteStore", "create_store", "create_default_store",
           "MEMORY", "FILE", "DATABASE")

MEMORY = "memory"
FILE = "file"
DATABASE = "database"

class InMemoryVoteStore(VoteStore):
    """Keeps the votes in a list, for the lifetime of the process.

    Every access goes through a lock, so that find_all always returns a
    fully-formed snapshot even while other threads save or clear.
    """

    def __init__(self):
        self._votes: list[Vote] = []
        self._lock = threading.Lock()

    def save(self, vote: Vote, /) -> None:
        if vote is None:
            raise ValueError("The vote cannot be None")
        with self._lock:
            self._votes.append(vote)

    def find_all(self) -> list[Vote]:
        with self._lock:
            return list(self._votes)

    def clear(self) -> None:
        with self._lock:
            self._votes.clear()

    def count(self) -> int:
        with self._lock:
            return len(self._votes)

    def __repr__(self):
        return f"<{type(self).__name__} with {self.count()} votes>"

# None marks a type which is recognized but not implemented yet
_STORE_TYPES = {
    MEMORY: InMemoryVoteStore,
    FILE: None,
    DATABASE: None,
}

def create_store(store_type: str, /) -> VoteStore:
    """Builds a new, empty store of the given `store_type`.

    The type is case-insensitive.
    Raises ValueError if the type is blank or unknown, and NotImplementedError
    if the type is reserved for a store which does not exist yet.
    """
    if store_type is None or not store_type.strip():
        raise ValueError("The store type cannot be blank")

    key = store_type.lower()
    try:
        factory = _STORE_TYPES[key]
    except KeyError:
        supported = ", ".join(k for k, v in _STORE_TYPES.items() if v is not None)
        raise ValueError(f"unknown store type: {store_type!r}. Supported types: {supported}") from None

    if factory is None:
        raise NotImplementedError(f"The {key!r} store type is not implemented yet")
    return factory()

def create_default_store() -> VoteStore:
    """Builds a new in-memory store."""
    return create_store(MEMORY)
