"""Shared test helpers."""

from collections.abc import Sequence

from beatpath.ballots import prepare
from beatpath.models import RankMatrix


def make_table(
    candidates: Sequence[str], orderings: Sequence[Sequence[str]]
) -> dict[str, list[int | None]]:
    """Build a ballot table from ballots written as preference orders.

    Args:
        candidates: Candidate labels, in row order
        orderings: One sequence per ballot, most preferred first. Candidates
            left out of an ordering abstain on that ballot.

    Returns:
        {candidate: [rank on ballot 0, rank on ballot 1, ...]}
    """
    table: dict[str, list[int | None]] = {c: [] for c in candidates}
    for ordering in orderings:
        ranks = {c: r for r, c in enumerate(ordering, start=1)}
        for c in candidates:
            table[c].append(ranks.get(c))
    return table


def make_rank_matrix(
    candidates: Sequence[str], orderings: Sequence[Sequence[str]]
) -> RankMatrix:
    return prepare(make_table(candidates, orderings))
