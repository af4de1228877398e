from ..util import WeakNamespace

DEFAULTS = WeakNamespace()
"""
Tunable parameters of the clustering step. Any of them can be overridden by setting the
environment variable of the same name prefixed with ``BREAKCLUST_`` (e.g. ``BREAKCLUST_MAX_PARTITION_SIZE``)

- clustering_cutoff
- max_partition_size
- partition_max_distance
"""
DEFAULTS.add(
    'clustering_cutoff',
    10.0,
    cast_type=float,
    defn='junctions are only merged into a cluster while the average linkage distance between them stays below '
    'this value',
)
DEFAULTS.add(
    'max_partition_size',
    200,
    defn='the maximum number of junctions clustered together. Larger partitions are randomly subsampled down to '
    'this size; a trade-off between runtime and keeping as many junctions as possible',
)
DEFAULTS.add(
    'partition_max_distance',
    50,
    defn='maximum distance (bp) between neighbouring mate positions for junctions to fall into the same partition',
)
