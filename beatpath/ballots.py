"""Turn a ballot table into a dense RankMatrix."""

import math
from collections.abc import Mapping, Sequence

import numpy as np

from beatpath.config import NO_PREFERENCE_MARKERS
from beatpath.logging_config import get_logger
from beatpath.models import RankMatrix

logger = get_logger("ballots")


class MalformedBallotError(ValueError):
    """Raised when a ballot table cannot be turned into a rank matrix.

    Attributes:
        ballot: 0-indexed column of the offending ballot, or None when the
            problem is the shape of the table as a whole
    """

    def __init__(self, message: str, ballot: int | None = None):
        super().__init__(message)
        self.ballot = ballot


def _is_missing(value: object, markers: Sequence[object]) -> bool:
    if isinstance(value, (float, np.floating)) and math.isnan(value):
        return True
    if isinstance(value, (bool, np.bool_)):
        return False
    return value in markers


def _to_rank(value: object) -> int | None:
    """Return value as an int rank, or None if it isn't an integer."""
    if isinstance(value, (bool, np.bool_)):
        return None
    if isinstance(value, (int, np.integer)):
        return int(value)
    if isinstance(value, (float, np.floating)) and float(value).is_integer():
        return int(value)
    return None


def prepare(
    table: Mapping[str, Sequence[object]],
    no_preference: Sequence[object] = NO_PREFERENCE_MARKERS,
) -> RankMatrix:
    """Build a RankMatrix from a ballot table.

    Args:
        table: Maps each candidate label to its row of ranks, one entry per
            ballot (1 = best). Entries equal to a no-preference marker, or
            NaN, are abstentions.
        no_preference: Values that mark an abstention (strings, None or
            numbers; booleans never match)

    Returns:
        RankMatrix with abstentions replaced by n_candidates + 1

    Raises:
        MalformedBallotError: If the table is empty or ragged, or a ballot's
            expressed ranks are not distinct integers in 1..n_candidates

    Example:
        >>> matrix = prepare({"A": [1, 2], "B": [2, None], "C": [3, 1]})
        >>> matrix.ranks.tolist()
        [[1, 2], [2, 4], [3, 1]]
    """
    candidates = list(table.keys())
    n = len(candidates)
    if n == 0:
        raise MalformedBallotError("ballot table has no candidates")

    rows = [list(table[c]) for c in candidates]
    num_ballots = len(rows[0])
    for candidate, row in zip(candidates, rows):
        if len(row) != num_ballots:
            raise MalformedBallotError(
                f"candidate {candidate!r} has {len(row)} ranks, "
                f"expected {num_ballots} (one per ballot)"
            )

    sentinel = n + 1
    ranks = np.full((n, num_ballots), sentinel, dtype=np.uint32)
    abstentions = 0

    for b in range(num_ballots):
        seen: dict[int, str] = {}
        for c, candidate in enumerate(candidates):
            value = rows[c][b]
            if _is_missing(value, no_preference):
                abstentions += 1
                continue
            rank = _to_rank(value)
            if rank is None:
                raise MalformedBallotError(
                    f"ballot {b}: rank {value!r} for {candidate!r} is not an integer",
                    ballot=b,
                )
            if not 1 <= rank <= n:
                raise MalformedBallotError(
                    f"ballot {b}: rank {rank} for {candidate!r} is outside 1..{n}",
                    ballot=b,
                )
            if rank in seen:
                raise MalformedBallotError(
                    f"ballot {b}: rank {rank} given to both "
                    f"{seen[rank]!r} and {candidate!r}",
                    ballot=b,
                )
            seen[rank] = candidate
            ranks[c, b] = rank

    logger.debug(
        f"Prepared {n} candidates x {num_ballots} ballots "
        f"({abstentions} abstentions mapped to {sentinel})"
    )
    return RankMatrix(candidates=tuple(candidates), ranks=ranks)
