"""Pairwise preferential-voting ranking engine (Condorcet with Schulze fallback)."""

from loguru import logger

from .ballots import MalformedBallotError, prepare
from .config import (
    DEFAULT_MAX_CANDIDATES,
    RandomTieBreak,
    RankerConfig,
    lexicographic_tie_break,
)
from .models import (
    BeatpathMatrix,
    Method,
    PairwiseMatrix,
    RankingEntry,
    RankingResult,
    RankMatrix,
    RoundRecord,
)
from .voting import (
    CandidateCountExceededError,
    CondorcetRanker,
    NoUniqueWinnerError,
    compute_beatpaths,
    compute_pairwise,
    rank,
)

# Silent until the application calls setup_logging()
logger.disable("beatpath")
