"""Schulze method: strongest beatpaths between candidates."""

import numpy as np

from beatpath.config import DEFAULT_MAX_CANDIDATES
from beatpath.models import BeatpathMatrix, PairwiseMatrix


class CandidateCountExceededError(ValueError):
    """Raised instead of running the O(n³) closure on too many candidates.

    Attributes:
        count: Number of candidates in the pairwise matrix
        ceiling: Configured maximum
    """

    def __init__(self, count: int, ceiling: int):
        super().__init__(
            f"{count} candidates exceeds the beatpath ceiling of {ceiling}; "
            f"raise max_candidates to compute it anyway"
        )
        self.count = count
        self.ceiling = ceiling


def seed_beatpaths(pairwise: PairwiseMatrix) -> np.ndarray:
    """Direct defeats only: p[i][j] = d[i][j] if i beats j, else 0."""
    d = pairwise.counts
    p = np.where(d > d.T, d, 0).astype(np.uint32)
    np.fill_diagonal(p, 0)
    return p


def strengthen(p: np.ndarray) -> np.ndarray:
    """Floyd-Warshall variant over the (max, min) semiring, in place.

    For each intermediate k, then each i != k and j != i, k:
        p[i][j] = max(p[i][j], min(p[i][k], p[k][j]))

    Row k and column k cannot change during pass k because p[k][k] is zero,
    so each pass updates the whole matrix from them at once.
    """
    n = p.shape[0]
    for k in range(n):
        via_k = np.minimum.outer(p[:, k], p[k, :])
        np.maximum(p, via_k, out=p)
        np.fill_diagonal(p, 0)
    return p


def compute_beatpaths(
    pairwise: PairwiseMatrix, max_candidates: int | None = DEFAULT_MAX_CANDIDATES
) -> BeatpathMatrix:
    """Calculate strongest path strengths using "winning votes".

    Args:
        pairwise: Pairwise preference counts
        max_candidates: Refuse matrices larger than this. None disables the
            check.

    Returns:
        BeatpathMatrix indexed like the pairwise matrix

    Raises:
        CandidateCountExceededError: If pairwise has more than max_candidates
            candidates

    Complexity: O(n³) where n is the number of candidates.
    """
    if max_candidates is not None and pairwise.size > max_candidates:
        raise CandidateCountExceededError(pairwise.size, max_candidates)

    p = strengthen(seed_beatpaths(pairwise))
    return BeatpathMatrix(candidates=pairwise.candidates, values=p)


def schulze_wins(beatpaths: BeatpathMatrix) -> dict[str, int]:
    """Count, per candidate, the opponents it beats by beatpath."""
    p = beatpaths.strengths
    wins = (p > p.T).sum(axis=1)
    return {c: int(w) for c, w in zip(beatpaths.candidates, wins)}
