"""Pairwise preference counts from a rank matrix."""

from collections.abc import Sequence

import numpy as np

from beatpath.models import PairwiseMatrix, RankMatrix


def compute_pairwise(
    matrix: RankMatrix, indices: Sequence[int] | None = None
) -> PairwiseMatrix:
    """Count, for every ordered pair of candidates, the ballots preferring one.

    d[i][j] = number of ballots ranking candidate i strictly better (lower
    rank number) than candidate j. Equal ranks, such as two abstentions on
    the same ballot, count toward neither side.

    Args:
        matrix: Rank matrix, read but never modified
        indices: Rows of matrix to compare, in the order the result should use.
            Defaults to every candidate.

    Returns:
        PairwiseMatrix over the selected candidates

    Complexity: O(n² · m) for n candidates and m ballots.
    """
    if indices is None:
        indices = range(matrix.num_candidates)
    indices = list(indices)
    k = len(indices)
    d = np.zeros((k, k), dtype=np.uint32)

    for a in range(k):
        row_a = matrix.ranks[indices[a]]
        for b in range(a + 1, k):
            row_b = matrix.ranks[indices[b]]
            d[a, b] = np.count_nonzero(row_a < row_b)
            d[b, a] = np.count_nonzero(row_b < row_a)

    return PairwiseMatrix(
        candidates=tuple(matrix.candidates[i] for i in indices),
        values=d,
    )
