"""Pairwise comparison, beatpath closure and Condorcet ranking."""

from .condorcet import CondorcetRanker, Election, NoUniqueWinnerError, RankerState, rank
from .pairwise import compute_pairwise
from .schulze import (
    CandidateCountExceededError,
    compute_beatpaths,
    schulze_wins,
    seed_beatpaths,
    strengthen,
)
