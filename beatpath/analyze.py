"""Orchestrator: prepare a ballot table and rank it, for reporting layers."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from beatpath.ballots import prepare
from beatpath.config import RankerConfig
from beatpath.models import RankingResult, RankMatrix
from beatpath.voting.condorcet import NoUniqueWinnerError, rank
from beatpath.voting.schulze import schulze_wins


@dataclass
class AnalysisResult:
    """Complete analysis with the rank matrix and the (possibly partial) ranking."""
    matrix: RankMatrix
    result: RankingResult
    error: NoUniqueWinnerError | None = None

    @property
    def complete(self) -> bool:
        return len(self.result.entries) == self.matrix.num_candidates

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        rounds = []
        for record in self.result.rounds:
            data = record.to_dict()
            if record.beatpaths is not None:
                data["schulze_wins"] = schulze_wins(record.beatpaths)
            rounds.append(data)

        error = None
        if self.error is not None:
            error = {
                "message": str(self.error),
                "round": self.error.round,
                "remaining": self.error.remaining,
                "tied": self.error.tied,
            }

        return {
            "candidates": list(self.matrix.candidates),
            "num_candidates": self.matrix.num_candidates,
            "num_ballots": self.matrix.num_ballots,
            "complete": self.complete,
            "ranking": [e.to_dict() for e in self.result.entries],
            "rounds": rounds,
            "error": error,
        }


def analyze(
    table: Mapping[str, Sequence[object]], config: RankerConfig | None = None
) -> AnalysisResult:
    """Prepare a ballot table and rank its candidates.

    A round without a unique winner does not raise: the partial ranking and
    the error are both kept on the result.

    Args:
        table: Candidate label -> per-ballot ranks (see beatpath.ballots.prepare)
        config: Ranker configuration

    Returns:
        AnalysisResult with the rank matrix, ranking and round details

    Raises:
        MalformedBallotError: If the table is not a valid ballot table
        CandidateCountExceededError: If the beatpath closure is needed for
            more candidates than the configured ceiling
    """
    matrix = prepare(table)
    try:
        result = rank(matrix, config)
    except NoUniqueWinnerError as e:
        # Keep the partial ranking rather than failing entirely
        return AnalysisResult(
            matrix=matrix,
            result=RankingResult(entries=e.ranking, rounds=e.rounds),
            error=e,
        )
    return AnalysisResult(matrix=matrix, result=result)
