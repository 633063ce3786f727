import threading

import pytest

from ballotbox.ballots import Vote
from ballotbox.listeners import AuditListener, LoggingListener

@pytest.fixture
def audit():
    return AuditListener()

# logging

def test_logging_listener_prints_vote(console_output):
    LoggingListener().on_vote(Vote("v1", "alice", 1_700_000_000_000))
    line = console_output.getvalue()
    assert "[LOG]" in line
    assert "voter: v1 -> candidate: alice" in line

def test_logging_listener_tolerates_none(console_output):
    LoggingListener().on_vote(None)
    assert "None vote" in console_output.getvalue()

def test_logging_listener_does_not_interpret_markup(console_output):
    LoggingListener().on_vote(Vote("[bold]v1", "alice", 1))
    assert "[bold]v1" in console_output.getvalue()

# audit

def test_audit_starts_empty(audit):
    assert audit.get_audit_log() == []
    assert audit.audit_count == 0
    assert audit.unique_voter_count == 0
    assert audit.unique_candidate_count == 0
    assert audit.first_vote_timestamp == -1
    assert audit.last_vote_timestamp == -1

def test_audit_records_vote(audit, console_output):
    vote = Vote("v1", "alice", 1)
    audit.on_vote(vote)
    assert audit.audit_count == 1
    assert audit.get_audit_log() == [vote]
    assert "[AUDIT] Vote #1" in console_output.getvalue()

def test_audit_ignores_none(audit):
    audit.on_vote(None)
    assert audit.audit_count == 0
    assert audit.get_audit_log() == []

def test_audit_keeps_chronological_order(audit):
    votes = [Vote("v1", "alice", 10), Vote("v2", "bob", 20), Vote("v3", "alice", 30)]
    for vote in votes:
        audit.on_vote(vote)
    assert audit.audit_count == 3
    assert audit.get_audit_log() == votes
    assert audit.first_vote_timestamp == 10
    assert audit.last_vote_timestamp == 30

def test_audit_log_is_a_copy(audit):
    log = audit.get_audit_log()
    audit.on_vote(Vote("v1", "alice", 1))
    assert log == []

    log = audit.get_audit_log()
    log.clear()
    assert len(audit.get_audit_log()) == 1
    assert audit.audit_count == 1

def test_votes_by_voter(audit):
    first = Vote("alice", "x", 1)
    other = Vote("bob", "y", 2)
    second = Vote("alice", "z", 3)
    for vote in (first, other, second):
        audit.on_vote(vote)

    assert audit.get_votes_by_voter("alice") == [first, second]
    assert audit.get_votes_by_voter("nobody") == []
    assert audit.has_voter_voted("alice")
    assert not audit.has_voter_voted("nobody")

def test_votes_for_candidate(audit):
    first = Vote("v1", "alice", 1)
    other = Vote("v2", "bob", 2)
    second = Vote("v3", "alice", 3)
    for vote in (first, other, second):
        audit.on_vote(vote)

    assert audit.get_votes_for_candidate("alice") == [first, second]
    assert audit.get_votes_for_candidate("carol") == []
    assert audit.vote_count_for_candidate("alice") == 2
    assert audit.vote_count_for_candidate("carol") == 0

def test_index_views_are_copies(audit):
    audit.on_vote(Vote("v1", "alice", 1))
    audit.get_votes_by_voter("v1").clear()
    audit.get_votes_for_candidate("alice").clear()
    assert audit.get_votes_by_voter("v1") == [Vote("v1", "alice", 1)]
    assert audit.vote_count_for_candidate("alice") == 1

def test_unknown_lookups_do_not_create_entries(audit):
    audit.get_votes_by_voter("ghost")
    audit.vote_count_for_candidate("ghost")
    assert audit.unique_voter_count == 0
    assert audit.unique_candidate_count == 0

def test_statistics(audit):
    for vote in (Vote("v1", "alice", 1), Vote("v2", "bob", 2), Vote("v1", "alice", 3)):
        audit.on_vote(vote)

    assert audit.statistics() == dict(
        total_votes=3,
        unique_voters=2,
        unique_candidates=2,
        audit_trail_size=3,
        votes_by_candidate={"alice": 2, "bob": 1},
    )

def test_export_report(audit):
    audit.on_vote(Vote("v1", "alice", 1))
    audit.on_vote(Vote("v2", "bob", 2))
    report = audit.export_report()

    assert report.startswith("=== VOTE AUDIT REPORT ===\n")
    assert "Total votes: 2\n" in report
    assert "Unique voters: 2\n" in report
    assert "Unique candidates: 2\n" in report
    assert "  alice: 1 votes\n" in report
    assert "  1. voter: v1 -> candidate: alice\n" in report
    assert "  2. voter: v2 -> candidate: bob\n" in report

def test_clear_audit(audit, console_output):
    audit.on_vote(Vote("v1", "alice", 1))
    audit.on_vote(Vote("v2", "bob", 2))
    assert audit.audit_count == 2

    audit.clear_audit()
    assert audit.audit_count == 0
    assert audit.get_audit_log() == []
    assert audit.get_votes_by_voter("v1") == []
    assert audit.get_votes_for_candidate("bob") == []
    assert audit.statistics()["votes_by_candidate"] == {}
    assert "cleared" in console_output.getvalue()

def test_concurrent_audit_stays_consistent(audit):
    def worker(n):
        for i in range(100):
            audit.on_vote(Vote(f"v{n}", f"c{i % 3}", i + 1))

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(6)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    stats = audit.statistics()
    assert stats["total_votes"] == 600
    assert stats["audit_trail_size"] == 600
    assert stats["unique_voters"] == 6
    assert sum(stats["votes_by_candidate"].values()) == 600
