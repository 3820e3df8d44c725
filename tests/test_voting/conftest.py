"""Shared fixtures for voting tests."""

import pytest
from beatpath.ballots import prepare
from tests.conftest import make_rank_matrix


@pytest.fixture
def condorcet_chain():
    """Five candidates, 8 ballots, a Condorcet winner in every round.

         b1  b2  b3  b4  b5  b6  b7  b8
    A     2   2   1   3   1   3   2   1
    B     4   4   5   4   3   5   4   4
    C     1   1   2   1   2   2   1   3
    D     5   5   4   5   5   4   5   5
    E     3   3   3   2   4   1   3   2

    Round 1: C beats A 5-3, E 6-2, B and D 8-0.
    Round 2: A beats E 6-2, B and D 8-0.
    Round 3: E beats B 7-1, D 8-0.
    Round 4: B beats D 6-2.
    Ranking: C, A, E, B, D.
    """
    return prepare({
        "A": [2, 2, 1, 3, 1, 3, 2, 1],
        "B": [4, 4, 5, 4, 3, 5, 4, 4],
        "C": [1, 1, 2, 1, 2, 2, 1, 3],
        "D": [5, 5, 4, 5, 5, 4, 5, 5],
        "E": [3, 3, 3, 2, 4, 1, 3, 2],
    })


@pytest.fixture
def indirect_cycle():
    """Three candidates in a majority cycle, 9 ballots.

         b1  b2  b3  b4  b5  b6  b7  b8  b9
    A     1   1   2   3   3   3   2   2   2
    B     2   2   1   1   1   1   3   3   3
    C     3   3   3   2   2   2   1   1   1

    2x ABC, 1x BAC, 3x BCA, 3x CAB.
    Cycle: A>B (5-4), B>C (6-3), C>A (6-3). No Condorcet winner.
    Beatpaths: B->A 6 via C, A->C 5 via B, C->B 5 via A, so B is the Schulze
    winner. Then C beats A 6-3 head-to-head.
    """
    return make_rank_matrix("ABC", [
        "ABC", "ABC",
        "BAC",
        "BCA", "BCA", "BCA",
        "CAB", "CAB", "CAB",
    ])


@pytest.fixture
def perfect_cycle():
    """Perfect cycle, 3 ballots, 3 candidates.

         b1  b2  b3
    A     1   3   2
    B     2   1   3
    C     3   2   1

    Every pairwise contest is 2-1 and every beatpath is 2: no winner at all.
    """
    return make_rank_matrix("ABC", ["ABC", "BCA", "CAB"])


@pytest.fixture
def cycle_after_winner():
    """D beats everyone 3-0, then A, B, C form a perfect cycle.

         b1  b2  b3
    A     2   4   3
    B     3   2   4
    C     4   3   2
    D     1   1   1
    """
    return make_rank_matrix("ABCD", ["DABC", "DBCA", "DCAB"])


@pytest.fixture
def unanimous():
    """Three ballots all reading A, B, C."""
    return make_rank_matrix("ABC", ["ABC", "ABC", "ABC"])


@pytest.fixture
def languages():
    """Four candidates, 11 ballots: 10 in the original poll plus one Java-first.

    1x Python Java Rust Go
    2x Python Java Go Rust
    2x Rust Python Go Java
    4x Go Java Rust Python
    1x Java Python Rust Go
    1x Java Python Go Rust   (the late ballot)

    Direct defeats: Rust>Python 6-5, Python>Go 7-4, Go>Rust 7-4, Java>Rust 9-2,
    Java>Python 6-5, Go>Java 6-5.
    Python beats Rust and Go by beatpath (7-6) but ties Java at 6; Java ties
    Python and Go. The Schwartz set is {Python, Java}.
    """
    names = ["Python", "Rust", "Go", "Java"]
    ballots = (
        [["Python", "Java", "Rust", "Go"]]
        + [["Python", "Java", "Go", "Rust"]] * 2
        + [["Rust", "Python", "Go", "Java"]] * 2
        + [["Go", "Java", "Rust", "Python"]] * 4
        + [["Java", "Python", "Rust", "Go"]]
        + [["Java", "Python", "Go", "Rust"]]
    )
    return make_rank_matrix(names, ballots)
