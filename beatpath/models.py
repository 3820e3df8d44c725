"""Core data models for rank matrices, pairwise matrices and rankings."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import numpy as np


@dataclass(eq=False)
class RankMatrix:
    """Dense ballot data: one row per candidate, one column per ballot.

    Attributes:
        candidates: Candidate labels, in row order
        ranks: uint32 array of shape (n_candidates, n_ballots); cell (c, b) is
            the rank ballot b gives candidate c (1 = best). Abstentions hold
            the sentinel n_candidates + 1.

    Example:
        >>> matrix = RankMatrix(
        ...     candidates=("A", "B", "C"),
        ...     ranks=np.array([[1, 2], [2, 1], [3, 4]], dtype=np.uint32),
        ... )
        >>> matrix.sentinel
        4
    """
    candidates: tuple[str, ...]
    ranks: np.ndarray

    def __post_init__(self):
        self.candidates = tuple(self.candidates)
        ranks = np.asarray(self.ranks)
        if ranks.ndim != 2:
            raise ValueError(f"ranks must be 2-dimensional, got {ranks.ndim}")
        # checked before the uint32 cast, which would wrap or overflow
        if ranks.size and (ranks < 1).any():
            raise ValueError(f"ranks must be at least 1, got {ranks.min()}")
        self.ranks = ranks.astype(np.uint32)
        if self.ranks.shape[0] != len(self.candidates):
            raise ValueError(
                f"ranks has {self.ranks.shape[0]} rows for "
                f"{len(self.candidates)} candidates"
            )
        if len(set(self.candidates)) != len(self.candidates):
            raise ValueError("candidate labels must be unique")

    @property
    def num_candidates(self) -> int:
        return len(self.candidates)

    @property
    def num_ballots(self) -> int:
        return self.ranks.shape[1]

    @property
    def sentinel(self) -> int:
        """Rank stored for a missing vote, worse than any expressed rank."""
        return self.num_candidates + 1

    def get_ballot(self, ballot: int) -> dict[str, int]:
        """Get the ranks one ballot assigns, keyed by candidate."""
        return {c: int(r) for c, r in zip(self.candidates, self.ranks[:, ballot])}


@dataclass(eq=False)
class _CandidateMatrix:
    """Square matrix indexed on both axes by the same candidate ordering."""
    candidates: tuple[str, ...]
    values: np.ndarray

    def __post_init__(self):
        self.candidates = tuple(self.candidates)
        self.values = np.asarray(self.values, dtype=np.uint32)
        n = len(self.candidates)
        if self.values.shape != (n, n):
            raise ValueError(
                f"expected a {n}x{n} matrix, got shape {self.values.shape}"
            )

    @property
    def size(self) -> int:
        return len(self.candidates)

    def index(self, name: str) -> int:
        return self.candidates.index(name)

    def get(self, row: str, column: str) -> int:
        return int(self.values[self.index(row), self.index(column)])

    def dominant(self) -> list[int]:
        """Indices that strictly beat every other index."""
        beats = self.values > self.values.T
        np.fill_diagonal(beats, True)
        return np.flatnonzero(beats.all(axis=1)).tolist()

    def undominated(self) -> list[int]:
        """Indices that no other index strictly beats."""
        holds = self.values >= self.values.T
        return np.flatnonzero(holds.all(axis=1)).tolist()

    def to_dict(self) -> dict[str, dict[str, int]]:
        return {
            self.candidates[i]: {
                self.candidates[j]: int(self.values[i, j])
                for j in range(self.size)
            }
            for i in range(self.size)
        }


class PairwiseMatrix(_CandidateMatrix):
    """Pairwise preference counts.

    Cell (i, j) is the number of ballots ranking candidate i strictly better
    than candidate j. The diagonal carries no meaning.
    """

    @property
    def counts(self) -> np.ndarray:
        return self.values


class BeatpathMatrix(_CandidateMatrix):
    """Strongest beatpath strengths.

    Cell (i, j) is the strength of the strongest path of pairwise victories
    from i to j, where a path is as strong as its weakest link. The diagonal
    is always zero. undominated() is the Schwartz set.
    """

    @property
    def strengths(self) -> np.ndarray:
        return self.values


class Method(str, Enum):
    """How a ranking position was decided."""
    CONDORCET = "condorcet"
    SCHULZE = "schulze"
    UNRESOLVED = "unresolved"


@dataclass(frozen=True)
class RankingEntry:
    """A candidate's position in the final ranking.

    Attributes:
        name: Candidate label
        position: 1-indexed position (no two entries share one)
        method: Winner test that decided this position
    """
    name: str
    position: int
    method: Method

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "position": self.position, "method": self.method.value}


@dataclass
class RoundRecord:
    """Everything computed during one elimination round.

    beatpaths is None when the Condorcet test settled the round, and winner
    is None for a round that could not be resolved.
    """
    number: int
    candidates: tuple[str, ...]
    pairwise: PairwiseMatrix
    beatpaths: BeatpathMatrix | None = None
    winner: str | None = None
    method: Method | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "round": self.number,
            "candidates": list(self.candidates),
            "winner": self.winner,
            "method": self.method.value if self.method is not None else None,
            "pairwise_preferences": self.pairwise.to_dict(),
        }
        if self.beatpaths is not None:
            data["path_strengths"] = self.beatpaths.to_dict()
        return data


@dataclass
class RankingResult:
    """Result of ranking a RankMatrix.

    Attributes:
        entries: Ranking entries, position 1 first
        rounds: Round-by-round record of the computation
    """
    entries: list[RankingEntry]
    rounds: list[RoundRecord] = field(default_factory=list)

    @property
    def names(self) -> list[str]:
        return [e.name for e in self.entries]

    def get_position(self, name: str) -> int | None:
        """Get the 1-indexed position for a candidate, or None if not ranked."""
        for e in self.entries:
            if e.name == name:
                return e.position
        return None
