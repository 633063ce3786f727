"""Abstract base classes for the swappable parts of the tally.

A VoteStore persists votes, a CountingStrategy turns them into a Tally, and a
VoteListener is notified of each vote the service records.
"""

from .counting import CountingStrategy
from .listeners import VoteListener
from .store import VoteStore

__all__ = ("VoteStore", "CountingStrategy", "VoteListener")
