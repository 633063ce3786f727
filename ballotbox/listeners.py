"""
Exports the two concrete vote listeners: ``LoggingListener``, which prints
each vote on the console, and ``AuditListener``, which keeps a queryable
history of the votes.
"""

from collections import defaultdict
from datetime import datetime
import threading
from typing import Any

from . import _settings
from .abc.listeners import VoteListener
from .ballots import Vote

__all__ = ("LoggingListener", "AuditListener")

def _format_timestamp(timestamp: int) -> str:
    return datetime.fromtimestamp(timestamp / 1000).strftime("%Y-%m-%d %H:%M:%S")

class LoggingListener(VoteListener):
    """Prints a readable line for each vote, and keeps nothing."""

    def on_vote(self, vote: Vote|None, /) -> None:
        console = _settings.console
        if vote is None:
            console.log("[LOG] Attempted to log a None vote", markup=False)
            return

        console.print(
            f"[LOG] {_format_timestamp(vote.timestamp)} | "
            f"voter: {vote.voter_id} -> candidate: {vote.candidate_id}",
            markup=False, highlight=False,
        )

class AuditListener(VoteListener):
    """Keeps the full history of the votes, indexed for queries.

    The history is held three ways : in chronological order, by voter and by
    candidate. All three, along with the running count, are only ever
    modified together while holding the same lock, so that no query can see
    one of them updated and not the others.
    Every accessor returns a copy.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._trail: list[Vote] = []
        self._by_voter: defaultdict[str, list[Vote]] = defaultdict(list)
        self._by_candidate: defaultdict[str, list[Vote]] = defaultdict(list)
        self._total = 0

    def on_vote(self, vote: Vote|None, /) -> None:
        if vote is None:
            _settings.console.log("[AUDIT] Attempted to audit a None vote", markup=False)
            return

        with self._lock:
            self._trail.append(vote)
            self._total += 1
            self._by_voter[vote.voter_id].append(vote)
            self._by_candidate[vote.candidate_id].append(vote)
            number = self._total

        _settings.console.print(
            f"[AUDIT] Vote #{number} | voter: {vote.voter_id} -> candidate: {vote.candidate_id}"
            f" | time: {_format_timestamp(vote.timestamp)}",
            markup=False, highlight=False,
        )

    # queries

    def get_audit_log(self) -> list[Vote]:
        with self._lock:
            return list(self._trail)

    @property
    def audit_count(self) -> int:
        with self._lock:
            return self._total

    def get_votes_by_voter(self, voter_id: str, /) -> list[Vote]:
        with self._lock:
            return list(self._by_voter.get(voter_id, ()))

    def get_votes_for_candidate(self, candidate_id: str, /) -> list[Vote]:
        with self._lock:
            return list(self._by_candidate.get(candidate_id, ()))

    def vote_count_for_candidate(self, candidate_id: str, /) -> int:
        with self._lock:
            return len(self._by_candidate.get(candidate_id, ()))

    def has_voter_voted(self, voter_id: str, /) -> bool:
        with self._lock:
            return voter_id in self._by_voter

    @property
    def unique_voter_count(self) -> int:
        with self._lock:
            return len(self._by_voter)

    @property
    def unique_candidate_count(self) -> int:
        with self._lock:
            return len(self._by_candidate)

    @property
    def first_vote_timestamp(self) -> int:
        """The timestamp of the oldest audited vote, or -1 if there is none."""
        with self._lock:
            if not self._trail:
                return -1
            return self._trail[0].timestamp

    @property
    def last_vote_timestamp(self) -> int:
        """The timestamp of the latest audited vote, or -1 if there is none."""
        with self._lock:
            if not self._trail:
                return -1
            return self._trail[-1].timestamp

    def statistics(self) -> dict[str, Any]:
        """Returns a snapshot of the audit figures.

        The keys are total_votes, unique_voters, unique_candidates,
        audit_trail_size, and votes_by_candidate which maps each candidate to
        its number of votes.
        """
        with self._lock:
            return dict(
                total_votes=self._total,
                unique_voters=len(self._by_voter),
                unique_candidates=len(self._by_candidate),
                audit_trail_size=len(self._trail),
                votes_by_candidate={c: len(v) for c, v in self._by_candidate.items()},
            )

    def export_report(self) -> str:
        """Returns the whole audit as readable text."""
        with self._lock:
            lines = [
                "=== VOTE AUDIT REPORT ===",
                f"Total votes: {self._total}",
                f"Unique voters: {len(self._by_voter)}",
                f"Unique candidates: {len(self._by_candidate)}",
                "",
                "Votes by candidate:",
            ]
            lines.extend(f"  {candidate}: {len(votes)} votes"
                         for candidate, votes in self._by_candidate.items())
            lines.append("")
            lines.append("Chronological history:")
            lines.extend(f"  {i}. voter: {vote.voter_id} -> candidate: {vote.candidate_id}"
                         for i, vote in enumerate(self._trail, start=1))
        return "\n".join(lines) + "\n"

    def clear_audit(self) -> None:
        """Empties the whole history at once."""
        with self._lock:
            self._trail.clear()
            self._by_voter.clear()
            self._by_candidate.clear()
            self._total = 0
        _settings.console.log("[AUDIT] Audit history cleared", markup=False)
