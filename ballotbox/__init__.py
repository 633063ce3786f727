"""Tallying of votes cast by identified voters for identified candidates.

The TallyService records the votes into a VoteStore, refuses a second vote
from the same voter, notifies its VoteListeners, and counts the votes with the
CountingStrategy it is given.
"""

from .ballots import Candidate, Tally, Vote
from .counting import Majority, Plurality, get_strategy
from .listeners import AuditListener, LoggingListener
from .service import AlreadyVoted, TallyService
from .stores import InMemoryVoteStore, create_default_store, create_store

__all__ = (
    "Vote", "Candidate", "Tally",
    "Plurality", "Majority", "get_strategy",
    "LoggingListener", "AuditListener",
    "TallyService", "AlreadyVoted",
    "InMemoryVoteStore", "create_store", "create_default_store",
)

__version__ = "1.0.0"
