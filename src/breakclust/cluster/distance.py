import itertools
from typing import Sequence

import numpy as np

from ..junction import Junction

INFINITE_DISTANCE = int(np.iinfo(np.int32).max)
"""stand-in for an infinite distance. Kept finite so that it can be averaged during linkage"""


def junction_distance(lhs: Junction, rhs: Junction) -> int:
    """
    distance between two junctions. The sum of the distances between the first mates, the second mates
    and the difference in inserted sequence length

    Reference:                      ................
    Junction 1 with mates A and B:     A------->B    (2bp inserted)
    Junction 2 with mates C and D:    C------>D      (5bp inserted)
    Distance = 1 (A-C) + 2 (B-D) + 3 (insertion size difference) = 6

    Junctions on different references or orientations can never be clustered and are
    INFINITE_DISTANCE apart. Partitioning already separates such junctions so the clustering
    step never sees this case
    """
    if (
        lhs.mate1.seq_name == rhs.mate1.seq_name
        and lhs.mate1.orientation == rhs.mate1.orientation
        and lhs.mate2.seq_name == rhs.mate2.seq_name
        and lhs.mate2.orientation == rhs.mate2.orientation
    ):
        return (
            abs(lhs.mate1.position - rhs.mate1.position)
            + abs(lhs.mate2.position - rhs.mate2.position)
            + abs(lhs.inserted_length - rhs.inserted_length)
        )
    return INFINITE_DISTANCE


def condensed_distance_matrix(junctions: Sequence[Junction]) -> np.ndarray:
    """
    upper triangle of the pairwise distance matrix, row by row (pairs (i, j) where i < j)
    """
    return np.fromiter(
        (junction_distance(a, b) for a, b in itertools.combinations(junctions, 2)),
        dtype=float,
        count=len(junctions) * (len(junctions) - 1) // 2,
    )
