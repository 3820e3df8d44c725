"""Configuration for the ranking engine."""

import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass

# Ceiling on the number of candidates the O(n³) beatpath closure will accept
DEFAULT_MAX_CANDIDATES = 500

# Values in a ballot table meaning "this ballot expressed no preference"
NO_PREFERENCE_MARKERS = (None, "", "-")

TieBreak = Callable[[Sequence[str]], str]


def lexicographic_tie_break(tied: Sequence[str]) -> str:
    """Pick the tied candidate whose label sorts first."""
    return min(tied)


class RandomTieBreak:
    """Pick a tied candidate at random, using a private seeded generator.

    Each instance owns its own random.Random, so two rankings never share
    state through the module-level generator.
    """

    def __init__(self, seed: int | None = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def __call__(self, tied: Sequence[str]) -> str:
        return self._rng.choice(sorted(tied))

    def __repr__(self) -> str:
        return f"RandomTieBreak(seed={self.seed!r})"


@dataclass(frozen=True)
class RankerConfig:
    """Options for CondorcetRanker.

    Attributes:
        max_candidates: Largest active candidate count for which the beatpath
            closure may run. None disables the check.
        tie_break: Strategy choosing among the undominated candidates when a
            round has no unique winner. None means the round fails with
            NoUniqueWinnerError.
    """
    max_candidates: int | None = DEFAULT_MAX_CANDIDATES
    tie_break: TieBreak | None = None

    def __post_init__(self):
        if self.max_candidates is not None and self.max_candidates < 1:
            raise ValueError(
                f"max_candidates must be positive, got {self.max_candidates}"
            )
        if self.tie_break is not None and not callable(self.tie_break):
            raise ValueError(f"tie_break must be callable, got {self.tie_break!r}")
