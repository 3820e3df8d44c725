"""Condorcet ranking by repeated winner extraction, with a Schulze fallback."""

from collections.abc import Sequence
from enum import Enum

import numpy as np

from beatpath.config import RankerConfig
from beatpath.logging_config import get_logger
from beatpath.models import (
    Method,
    RankingEntry,
    RankingResult,
    RankMatrix,
    RoundRecord,
)
from beatpath.voting.pairwise import compute_pairwise
from beatpath.voting.schulze import CandidateCountExceededError, compute_beatpaths

logger = get_logger("condorcet")


class NoUniqueWinnerError(Exception):
    """Raised when a round has neither a Condorcet nor a unique Schulze winner.

    The Schwartz set of the round has more than one member, so the ranking
    cannot continue without an explicit tie-break.

    Attributes:
        round: 1-indexed round (equal to the position being decided)
        remaining: Candidates still unranked, in rank-matrix order
        tied: Candidates no other candidate beats by beatpath
        ranking: Entries decided before the failing round
        rounds: Records of every round so far, the failing one last
    """

    def __init__(
        self,
        round: int,
        remaining: list[str],
        tied: list[str],
        ranking: list[RankingEntry],
        rounds: list[RoundRecord],
    ):
        super().__init__(
            f"no unique winner in round {round}: "
            f"{', '.join(tied)} are tied among {len(remaining)} remaining candidates"
        )
        self.round = round
        self.remaining = remaining
        self.tied = tied
        self.ranking = ranking
        self.rounds = rounds

    def resolve(self, name: str) -> list[RankingEntry]:
        """Partial ranking extended with the caller's pick for this round.

        Pass the result as `start` to rank() to resume.
        """
        if name not in self.tied:
            raise ValueError(f"{name!r} is not one of the tied candidates {self.tied}")
        return [*self.ranking, RankingEntry(name, self.round, Method.UNRESOLVED)]


class RankerState(Enum):
    ACTIVE = "active"
    RESOLVING = "resolving"
    DONE = "done"
    STUCK = "stuck"


class Election:
    """One run of the ranking loop over a rank matrix.

    Candidates stay at their rank-matrix rows for the whole run; a boolean
    mask records which of them are still unranked.
    """

    def __init__(
        self,
        matrix: RankMatrix,
        config: RankerConfig | None = None,
        start: Sequence[RankingEntry] = (),
    ):
        self.matrix = matrix
        self.config = config or RankerConfig()
        self.active = np.ones(matrix.num_candidates, dtype=bool)
        self.entries: list[RankingEntry] = []
        self.rounds: list[RoundRecord] = []

        for expected, entry in enumerate(start, start=1):
            if entry.position != expected:
                raise ValueError(
                    f"start entry {entry.name!r} has position {entry.position}, "
                    f"expected {expected}"
                )
            if entry.name not in matrix.candidates:
                raise ValueError(f"start entry {entry.name!r} is not a candidate")
            i = matrix.candidates.index(entry.name)
            if not self.active[i]:
                raise ValueError(f"start entry {entry.name!r} appears twice")
            self.active[i] = False
            self.entries.append(entry)

        self.state = RankerState.ACTIVE if self.active.any() else RankerState.DONE

    @property
    def remaining(self) -> list[str]:
        return [self.matrix.candidates[i] for i in np.flatnonzero(self.active)]

    def step(self) -> RankingEntry:
        """Decide the next ranking position."""
        if self.state is not RankerState.ACTIVE:
            raise RuntimeError(f"cannot step an election in state {self.state.value}")
        self.state = RankerState.RESOLVING

        number = len(self.entries) + 1
        indices = np.flatnonzero(self.active)
        pairwise = compute_pairwise(self.matrix, indices)
        record = RoundRecord(number=number, candidates=pairwise.candidates, pairwise=pairwise)
        self.rounds.append(record)
        logger.debug(f"Round {number}: {len(indices)} candidates remaining")

        # Condorcet test: beats every other remaining candidate head-to-head
        winners = pairwise.dominant()
        if len(winners) == 1:
            return self._record_winner(record, indices[winners[0]], Method.CONDORCET)

        try:
            beatpaths = compute_beatpaths(pairwise, self.config.max_candidates)
        except CandidateCountExceededError:
            self.state = RankerState.STUCK
            raise
        record.beatpaths = beatpaths
        winners = beatpaths.dominant()
        if len(winners) == 1:
            return self._record_winner(record, indices[winners[0]], Method.SCHULZE)

        tied = [beatpaths.candidates[i] for i in beatpaths.undominated()]
        if self.config.tie_break is None:
            self.state = RankerState.STUCK
            logger.warning(f"Round {number}: no unique winner among {tied}")
            raise NoUniqueWinnerError(
                round=number,
                remaining=self.remaining,
                tied=tied,
                ranking=list(self.entries),
                rounds=list(self.rounds),
            )

        chosen = self.config.tie_break(tied)
        if chosen not in tied:
            self.state = RankerState.STUCK
            raise ValueError(f"tie-break returned {chosen!r}, which is not one of {tied}")
        logger.warning(f"Round {number}: tie among {tied} broken in favour of {chosen!r}")
        return self._record_winner(
            record, self.matrix.candidates.index(chosen), Method.UNRESOLVED
        )

    def _record_winner(self, record: RoundRecord, row: int, method: Method) -> RankingEntry:
        name = self.matrix.candidates[row]
        entry = RankingEntry(name=name, position=record.number, method=method)
        record.winner = name
        record.method = method
        self.entries.append(entry)
        self.active[row] = False
        self.state = RankerState.ACTIVE if self.active.any() else RankerState.DONE
        logger.debug(f"Round {record.number}: {name!r} wins by {method.value}")
        return entry

    def run(self) -> RankingResult:
        """Step until every candidate is ranked."""
        while self.state is RankerState.ACTIVE:
            self.step()
        logger.info(
            f"Ranked {len(self.entries)} candidates from "
            f"{self.matrix.num_ballots} ballots in {len(self.rounds)} rounds"
        )
        return RankingResult(entries=list(self.entries), rounds=list(self.rounds))


class CondorcetRanker:
    """Rank every candidate by repeatedly extracting a winner.

    Algorithm, per round over the candidates not yet ranked:
    1. Build the pairwise preference matrix
    2. If one candidate beats every other head-to-head, it wins (Condorcet)
    3. Otherwise compute strongest beatpaths; if one candidate beats every
       other by beatpath, it wins (Schulze)
    4. Otherwise apply the configured tie-break, or fail with
       NoUniqueWinnerError when there is none
    5. Rank the winner next and remove it

    Each call to rank() works on its own Election, so one ranker can be
    shared between threads.
    """

    def __init__(self, config: RankerConfig | None = None):
        self.config = config or RankerConfig()

    def rank(
        self, matrix: RankMatrix, start: Sequence[RankingEntry] = ()
    ) -> RankingResult:
        return Election(matrix, self.config, start).run()


def rank(
    matrix: RankMatrix,
    config: RankerConfig | None = None,
    start: Sequence[RankingEntry] = (),
) -> RankingResult:
    """Rank all candidates of a rank matrix.

    Args:
        matrix: Prepared rank matrix
        config: Candidate ceiling and tie-break strategy
        start: Entries already decided (positions 1..k), e.g. from
            NoUniqueWinnerError.resolve()

    Returns:
        RankingResult with one entry per candidate and a record per round

    Raises:
        NoUniqueWinnerError: If a round has no unique winner and no tie-break
            is configured
        CandidateCountExceededError: If a round needs the beatpath closure
            over more candidates than the configured ceiling
    """
    return CondorcetRanker(config).rank(matrix, start)
