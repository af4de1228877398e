"""
coarse grouping of junctions by the proximity of their mates. Clustering is quadratic in the
number of junctions so it is only run within these partitions
"""
from typing import List, Optional, Sequence

from ..junction import Breakend, Junction
from ..util import logger
from .constants import DEFAULTS


def _mate1(junction: Junction) -> Breakend:
    return junction.mate1


def _mate2(junction: Junction) -> Breakend:
    return junction.mate2


def _is_distant(mate: Breakend, previous: Breakend, max_distance: int) -> bool:
    return (
        mate.seq_name != previous.seq_name
        or mate.orientation != previous.orientation
        or abs(mate.position - previous.position) > max_distance
    )


def _split_on_mate(junctions, get_mate, max_distance) -> List[List[Junction]]:
    partitions = []
    current_partition: List[Junction] = []

    for junction in junctions:
        if current_partition and _is_distant(
            get_mate(junction), get_mate(current_partition[-1]), max_distance
        ):
            partitions.append(current_partition)
            current_partition = []
        current_partition.append(junction)
    if current_partition:
        partitions.append(current_partition)
    return partitions


def split_partition_based_on_mate2(
    partition: Sequence[Junction], max_distance: Optional[int] = None
) -> List[List[Junction]]:
    """
    Split a partition wherever consecutive mate2 loci are on different references/orientations or further
    than max_distance apart

    Args:
        partition: junctions sorted by mate2
        max_distance: maximum distance between neighbouring mate2 positions

    Returns:
        the sub-partitions, each sorted
    """
    if max_distance is None:
        max_distance = DEFAULTS.partition_max_distance
    return [sorted(p) for p in _split_on_mate(partition, _mate2, max_distance)]


def partition_junctions(
    junctions: Sequence[Junction], max_distance: Optional[int] = None
) -> List[List[Junction]]:
    """
    Partition junctions so that, within a partition, neighbouring junctions have both mate1 and mate2 on the same
    reference and orientation and no more than max_distance apart

    The input is expected to be sorted by mate1 (the natural order of coordinate sorted alignments). When it is not,
    a warning is logged and the junctions are sorted first

    Args:
        junctions: junctions sorted by mate1
        max_distance: maximum distance between neighbouring mate positions

    Returns:
        list of partitions, each sorted
    """
    if max_distance is None:
        max_distance = DEFAULTS.partition_max_distance
    junctions = list(junctions)
    if any(_mate1(curr) < _mate1(prev) for prev, curr in zip(junctions, junctions[1:])):
        logger.warning(f'junctions are not sorted by mate1, sorting {len(junctions)} junctions before partitioning')
        junctions = sorted(junctions, key=_mate1)

    final_partitions = []
    for partition in _split_on_mate(junctions, _mate1, max_distance):
        partition = sorted(partition, key=_mate2)
        final_partitions.extend(split_partition_based_on_mate2(partition, max_distance))
    return final_partitions
