"""
The cluster sub-package groups junctions which support the same structural variant breakpoint.

Algorithm Overview
--------------------

- Partition the junctions (sorted by mate1) wherever neighbouring mate1 positions are on different
  references/orientations or further apart than the proximity window
- Re-sort each partition by mate2 and split it again on the same rule applied to mate2
- Within each partition

    - subsample partitions which exceed the maximum partition size
    - compute the pairwise junction distances
    - cluster by average linkage and cut the dendrogram at the clustering cutoff

- Return all clusters, sorted
"""
from .backend import LINKAGE_METHOD, LinkageBackend, ScipyLinkageBackend
from .cluster import cluster_partition, hierarchical_clustering_method, subsample_partition
from .constants import DEFAULTS
from .distance import INFINITE_DISTANCE, condensed_distance_matrix, junction_distance
from .partition import partition_junctions, split_partition_based_on_mate2
