import logging
from collections import Counter

import numpy as np
import pytest
from breakclust.cluster import (
    LinkageBackend,
    ScipyLinkageBackend,
    cluster_partition,
    hierarchical_clustering_method,
    subsample_partition,
)
from breakclust.junction import Cluster

from ..util import build_junction
from .test_partition import random_junctions


class TestSubsamplePartition:
    def test_size_and_subset(self):
        partition = [build_junction(pos1=1000 + i) for i in range(50)]
        sample = subsample_partition(partition, 20)
        assert len(sample) == 20
        assert len(set(sample)) == 20
        assert set(sample) <= set(partition)

    def test_order_preserved(self):
        partition = [build_junction(pos1=1000 + i) for i in range(50)]
        sample = subsample_partition(partition, 20, rng=np.random.default_rng(7))
        assert sample == sorted(sample)

    def test_reproducible_with_seeded_generator(self):
        partition = [build_junction(pos1=1000 + i) for i in range(50)]
        first = subsample_partition(partition, 10, rng=np.random.default_rng(42))
        second = subsample_partition(partition, 10, rng=np.random.default_rng(42))
        assert first == second

    def test_full_size(self):
        partition = [build_junction(pos1=1000 + i) for i in range(5)]
        assert subsample_partition(partition, 5) == partition

    def test_sample_larger_than_partition(self):
        with pytest.raises(AssertionError):
            subsample_partition([build_junction()], 2)


class TestClusterPartition:
    def test_single(self):
        junction = build_junction()
        assert cluster_partition([junction], 0, ScipyLinkageBackend()) == [Cluster([junction])]

    def test_average_linkage(self):
        a = build_junction(pos1=1000)
        b = build_junction(pos1=1010)
        c = build_junction(pos1=1025)
        # single linkage would join c at 15, average linkage joins it at 20
        clusters = sorted(cluster_partition([a, b, c], 16, ScipyLinkageBackend()))
        assert clusters == [Cluster([a, b]), Cluster([c])]
        clusters = cluster_partition([a, b, c], 21, ScipyLinkageBackend())
        assert clusters == [Cluster([a, b, c])]


class TestHierarchicalClusteringMethod:
    def test_empty(self):
        assert hierarchical_clustering_method([], 10) == []

    def test_close_pair(self):
        a = build_junction(pos1=1000, pos2=5000)
        b = build_junction(pos1=1005, pos2=5010)
        assert hierarchical_clustering_method([a, b], 20) == [Cluster([a, b])]
        assert hierarchical_clustering_method([a, b], 10) == [Cluster([a]), Cluster([b])]

    def test_cutoff_equal_to_distance_does_not_merge(self):
        a = build_junction(pos1=1000, pos2=5000)
        b = build_junction(pos1=1005, pos2=5010)
        assert len(hierarchical_clustering_method([a, b], 15)) == 2

    def test_insertion_size(self):
        a = build_junction(inserted_sequence='')
        b = build_junction(inserted_sequence='A' * 100)
        assert hierarchical_clustering_method([a, b], 50) == [Cluster([a]), Cluster([b])]
        assert hierarchical_clustering_method([a, b], 101) == [Cluster([a, b])]

    def test_single_junction(self):
        junction = build_junction()
        for cutoff in [0, 1, 1000]:
            assert hierarchical_clustering_method([junction], cutoff) == [Cluster([junction])]

    def test_zero_cutoff(self):
        junctions = [build_junction(read_name='a'), build_junction(read_name='b')]
        assert len(hierarchical_clustering_method(junctions, 0)) == 2

    def test_separate_partitions_never_merge(self):
        a = build_junction(pos1=1000)
        b = build_junction(pos1=1060)
        assert len(hierarchical_clustering_method([a, b], 10000)) == 2

    def test_default_cutoff(self, monkeypatch):
        monkeypatch.delenv('BREAKCLUST_CLUSTERING_CUTOFF', raising=False)
        a = build_junction(pos1=1000)
        b = build_junction(pos1=1009)
        c = build_junction(pos1=1030)
        assert hierarchical_clustering_method([a, b, c]) == [Cluster([a, b]), Cluster([c])]

    def test_output_sorted(self):
        clusters = hierarchical_clustering_method(random_junctions(300, seed=5), 30)
        assert clusters == sorted(clusters)
        for cluster in clusters:
            assert list(cluster) == sorted(cluster)

    def test_totality(self):
        junctions = random_junctions(300, seed=11)
        for cutoff in [0, 5, 20, 100, 1000]:
            clusters = hierarchical_clustering_method(junctions, cutoff)
            assert Counter(j for c in clusters for j in c) == Counter(junctions)

    def test_cutoff_monotonicity(self):
        junctions = random_junctions(300, seed=13)
        counts = [len(hierarchical_clustering_method(junctions, cutoff)) for cutoff in [0, 2, 5, 10, 20, 50, 200]]
        assert counts == sorted(counts, reverse=True)

    def test_subsampling(self, caplog):
        junctions = [build_junction(pos1=1000 + i // 10, read_name=str(i)) for i in range(250)]
        with caplog.at_level(logging.WARNING, logger='breakclust'):
            clusters = hierarchical_clustering_method(junctions, 5, rng=np.random.default_rng(1))
        members = [j for c in clusters for j in c]
        assert len(members) == 200
        assert len(set(members)) == 200
        assert set(members) <= set(junctions)
        assert '250>200' in caplog.text
        assert 'chr1:1000(+)' in caplog.text

    def test_custom_partition_size(self):
        junctions = [build_junction(pos1=1000 + i, read_name=str(i)) for i in range(12)]
        clusters = hierarchical_clustering_method(junctions, 5, max_partition_size=5)
        assert sum(len(c) for c in clusters) == 5

    def test_no_subsampling_at_cap(self, caplog):
        junctions = [build_junction(pos1=1000 + i // 10, read_name=str(i)) for i in range(20)]
        with caplog.at_level(logging.WARNING, logger='breakclust'):
            clusters = hierarchical_clustering_method(junctions, 5, max_partition_size=20)
        assert sum(len(c) for c in clusters) == 20
        assert not caplog.records

    def test_custom_backend(self):
        class SingleClusterBackend(LinkageBackend):
            def __init__(self):
                self.calls = []

            def linkage(self, n, condensed, method='average'):
                self.calls.append((n, list(condensed), method))
                return np.zeros((n - 1, 2), dtype=int), np.zeros(n - 1)

            def cut(self, merges, heights, cutoff):
                return np.ones(len(heights) + 1, dtype=int)

        backend = SingleClusterBackend()
        a = build_junction(pos1=1000)
        b = build_junction(pos1=1040)
        assert hierarchical_clustering_method([a, b], 1, backend=backend) == [Cluster([a, b])]
        assert backend.calls == [(2, [40.0], 'average')]
