"""Module storing the values exchanged between the tally components.

A Vote is what a voter casts, a Candidate is what a vote refers to, and a
Tally is what a counting strategy returns after opening the votes.
"""

from collections import Counter, namedtuple

from . import _settings

__all__ = ("Vote", "Candidate", "Tally")

def _check_id(value, what: str) -> None:
    if not isinstance(value, str):
        raise ValueError(f"The {what} must be a string, not {type(value).__name__}")
    if not value.strip():
        raise ValueError(f"The {what} cannot be blank")

class Vote(namedtuple("Vote", ("voter_id", "candidate_id", "timestamp"))):
    """A single cast ballot, immutable.

    Vote(voter_id, candidate_id) -> timestamped now, using the configured clock
    Vote(voter_id, candidate_id, timestamp) -> timestamped explicitly

    The timestamp is an int, in milliseconds since the epoch, and must be
    positive. Raises ValueError when either id is not a non-blank string, or
    when the timestamp is invalid.
    The validation also applies to _make and _replace.
    """

    __slots__ = ()

    def __new__(cls, voter_id: str, candidate_id: str, timestamp: int|None = None):
        _check_id(voter_id, "voter id")
        _check_id(candidate_id, "candidate id")
        if timestamp is None:
            timestamp = _settings.clock()
        elif isinstance(timestamp, bool) or not isinstance(timestamp, int):
            raise ValueError(f"The timestamp must be an int, not {type(timestamp).__name__}")
        elif timestamp <= 0:
            raise ValueError("The timestamp must be positive")
        return super().__new__(cls, voter_id, candidate_id, timestamp)

    @classmethod
    def _make(cls, iterable):
        return cls(*iterable)

class Candidate(namedtuple("Candidate", ("id", "name"))):
    """A candidate for which votes can be cast.

    Nothing in the tally checks that the candidate_id of a vote matches a
    Candidate : this is a reference value for the callers.
    """

    __slots__ = ()

    def __new__(cls, id: str, name: str):
        _check_id(id, "candidate id")
        _check_id(name, "candidate name")
        return super().__new__(cls, id, name)

    @classmethod
    def _make(cls, iterable):
        return cls(*iterable)

class Tally(Counter[str]):
    """Tally : Counter(candidate id : number of votes)

    {"alice" : 5, "bob" : 3} -> 5 votes for alice, 3 for bob

    Candidates which received no vote are not in the tally. Reading one
    returns 0 as with any Counter, but `in` will be False.
    The order of the keys is the order in which the candidates were first
    encountered while counting, which is what decides the ties.
    """

    __slots__ = ()
