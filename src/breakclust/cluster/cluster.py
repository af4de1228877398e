from typing import Dict, List, Optional, Sequence

import numpy as np

from ..junction import Cluster, Junction
from ..util import logger
from .backend import LINKAGE_METHOD, LinkageBackend, ScipyLinkageBackend
from .constants import DEFAULTS
from .distance import condensed_distance_matrix
from .partition import partition_junctions


def subsample_partition(
    partition: Sequence[Junction], sample_size: int, rng: Optional[np.random.Generator] = None
) -> List[Junction]:
    """
    Draw sample_size junctions from the partition, uniformly at random and without replacement. The
    relative order of the drawn junctions is kept

    Args:
        partition: the junctions to sample from
        sample_size: number of junctions to keep
        rng: source of randomness, a freshly seeded generator is used if not given
    """
    assert len(partition) >= sample_size, 'cannot subsample more junctions than are in the partition'
    if rng is None:
        rng = np.random.default_rng()
    chosen = np.sort(rng.choice(len(partition), size=sample_size, replace=False))
    return [partition[i] for i in chosen]


def cluster_partition(
    partition: Sequence[Junction], clustering_cutoff: float, backend: LinkageBackend
) -> List[Cluster]:
    """
    Cluster a single partition by average linkage, stopping at merges whose distance reaches the cutoff
    """
    if len(partition) < 2:
        return [Cluster(partition)]
    merges, heights = backend.linkage(
        len(partition), condensed_distance_matrix(partition), method=LINKAGE_METHOD.AVERAGE
    )
    labels = backend.cut(merges, heights, clustering_cutoff)

    junctions_by_label: Dict[int, List[Junction]] = {}
    for label, junction in zip(labels, partition):
        junctions_by_label.setdefault(int(label), []).append(junction)
    return [Cluster(junctions) for junctions in junctions_by_label.values()]


def hierarchical_clustering_method(
    junctions: Sequence[Junction],
    clustering_cutoff: Optional[float] = None,
    max_partition_size: Optional[int] = None,
    partition_max_distance: Optional[int] = None,
    backend: Optional[LinkageBackend] = None,
    rng: Optional[np.random.Generator] = None,
) -> List[Cluster]:
    """
    two-step clustering of junctions

    1. partition the junctions by the proximity of their mates (see :func:`partition_junctions`)
    2. hierarchically cluster each partition using :func:`junction_distance` and cut the resulting
       dendrogram at the clustering cutoff

    Partitions larger than max_partition_size are randomly subsampled down to that size before
    clustering. The junctions which are not sampled are not part of any output cluster

    Args:
        junctions: the junctions to cluster, sorted by mate1
        clustering_cutoff: merges at or above this average linkage distance are not performed
        max_partition_size: partitions above this size are subsampled
        partition_max_distance: proximity window used for partitioning
        backend: the agglomerative clustering implementation
        rng: random generator used for subsampling

    Returns:
        list of Cluster: the clusters, sorted
    """
    if clustering_cutoff is None:
        clustering_cutoff = DEFAULTS.clustering_cutoff
    if max_partition_size is None:
        max_partition_size = DEFAULTS.max_partition_size
    if backend is None:
        backend = ScipyLinkageBackend()

    partitions = partition_junctions(junctions, max_distance=partition_max_distance)
    logger.info(f'clustering {len(junctions)} junctions in {len(partitions)} partitions')
    clusters = []
    for partition in partitions:
        if len(partition) > max_partition_size:
            logger.warning(
                f'A partition exceeds the maximum size ({len(partition)}>{max_partition_size}) and has to be '
                f'subsampled. Representative partition member: {partition[0].describe()}'
            )
            partition = subsample_partition(partition, max_partition_size, rng=rng)
        clusters.extend(cluster_partition(partition, clustering_cutoff, backend))
    logger.info(f'computed {len(clusters)} clusters')
    return sorted(clusters)
