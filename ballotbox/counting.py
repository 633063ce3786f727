from collections.abc import Iterable, Mapping
from typing import ClassVar

from .abc.counting import CountingStrategy
from .ballots import Tally, Vote

__all__ = ("Plurality", "Majority", "get_strategy")

class _CountingBase(CountingStrategy):
    """One vote gives one point to the candidate it is cast for.

    Ties are broken in favor of the candidate encountered first in the
    votes, which is the order of the keys of the returned Tally.
    """

    name: ClassVar[str]

    def count(self, votes: Iterable[Vote], /) -> Tally:
        if votes is None:
            raise ValueError("The votes cannot be None")

        scores = Tally()
        for vote in votes:
            scores[vote.candidate_id] += 1
        return scores

    def __repr__(self):
        return f"<{type(self).__name__} strategy>"

class Plurality(_CountingBase):
    """The candidate with the most votes wins, with no threshold.

    This is the single-turn first-past-the-post attribution.
    """

    name = "Plurality (Simple Majority)"

    def get_winner(self, results: Mapping[str, int]|None, /) -> str|None:
        """Returns the candidate with the highest total in `results`.

        In case of a tie, the first of the tied candidates in the iteration
        order of `results` wins.
        Returns None if there is no result at all.
        """
        if not results:
            return None
        # max returns the first maximal element
        return max(results, key=results.__getitem__)

class Majority(_CountingBase):
    """A candidate needs strictly more than half of the votes to win.

    The totals are the same as with Plurality. Exactly half of the votes is
    not enough, even when only two candidates split the votes evenly.
    """

    name = "Majority (Absolute > 50%)"

    def get_majority_winner(self, results: Mapping[str, int]|None, total_votes: int, /) -> str|None:
        """Returns the candidate holding an absolute majority of `total_votes`.

        Returns None if `results` is empty, if `total_votes` is not positive,
        or if no candidate reached the majority.
        """
        if not results or total_votes <= 0:
            return None

        for candidate_id in results:
            if self.has_majority(candidate_id, results, total_votes):
                return candidate_id
        return None

    def has_majority(self, candidate_id: str, results: Mapping[str, int]|None, total_votes: int, /) -> bool:
        """Whether `candidate_id` holds strictly more than half of `total_votes`.

        An unknown candidate never has the majority.
        """
        if not results or total_votes <= 0 or candidate_id not in results:
            return False
        return results[candidate_id] * 2 > total_votes

_STRATEGIES = {
    "plurality": Plurality,
    "majority": Majority,
}

def get_strategy(name: str, /) -> CountingStrategy:
    """Builds a new strategy from its case-insensitive short name.

    Raises ValueError for a missing or unknown name.
    """
    if name is None:
        raise ValueError("The strategy name cannot be None")

    try:
        factory = _STRATEGIES[name.strip().lower()]
    except KeyError:
        supported = ", ".join(_STRATEGIES)
        raise ValueError(f"unknown strategy: {name!r}. Supported strategies: {supported}") from None
    return factory()
