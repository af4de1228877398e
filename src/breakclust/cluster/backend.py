"""
Agglomerative clustering primitives used by the cluster engine. The engine only depends on the
:class:`LinkageBackend` interface so that other implementations can be swapped in
"""
from abc import ABC, abstractmethod
from typing import Tuple

import numpy as np
from scipy.cluster import hierarchy

from ..constants import BreakclustNamespace

LINKAGE_METHOD = BreakclustNamespace(
    SINGLE='single', COMPLETE='complete', AVERAGE='average', WEIGHTED='weighted'
)
""":class:`BreakclustNamespace`: linkage methods which are valid for arbitrary (non-euclidean) distances"""


class LinkageBackend(ABC):
    @abstractmethod
    def linkage(
        self, n: int, condensed: np.ndarray, method: str = LINKAGE_METHOD.AVERAGE
    ) -> Tuple[np.ndarray, np.ndarray]:
        """
        Hierarchically cluster n elements

        Args:
            n: the number of elements
            condensed: the condensed distance matrix (length n(n-1)/2)
            method (LINKAGE_METHOD): the linkage method

        Returns:
            the merges ((n-1) x 2 array) and the merge heights (n-1 array, non-decreasing). Ids below n refer to the
            input elements, id n + i to the cluster formed in step i
        """

    @abstractmethod
    def cut(self, merges: np.ndarray, heights: np.ndarray, cutoff: float) -> np.ndarray:
        """
        Flatten the dendrogram, skipping every merge with a height greater than or equal to the cutoff

        Returns:
            a cluster label for each of the n input elements
        """


class ScipyLinkageBackend(LinkageBackend):
    """
    clustering by scipy.cluster.hierarchy
    """

    def linkage(self, n, condensed, method=LINKAGE_METHOD.AVERAGE):
        LINKAGE_METHOD(method)
        if len(condensed) != n * (n - 1) // 2:
            raise ValueError(
                'condensed distance matrix does not match the number of elements', n, len(condensed)
            )
        if n < 2:
            return np.zeros((0, 2), dtype=int), np.zeros(0)
        tree = hierarchy.linkage(np.asarray(condensed, dtype=float), method=method)
        return tree[:, :2].astype(int), tree[:, 2]

    def cut(self, merges, heights, cutoff):
        n = len(heights) + 1
        if n < 2:
            return np.ones(n, dtype=int)
        sizes = np.ones(2 * n - 1)
        for step, (left, right) in enumerate(merges):
            sizes[n + step] = sizes[left] + sizes[right]
        tree = np.column_stack([np.asarray(merges, dtype=float), heights, sizes[n:]])
        # fcluster keeps merges at exactly the threshold, the cutoff itself must be excluded
        threshold = np.nextafter(float(cutoff), -np.inf)
        return hierarchy.fcluster(tree, threshold, criterion='distance')
