"""
holds submodules related to clustering structural variant junctions
"""
from .alignment import AlignedSegment
from .cluster import hierarchical_clustering_method, partition_junctions
from .constants import STRAND
from .junction import Breakend, Cluster, Junction

__version__ = '0.1.0'
