from collections import namedtuple
from typing import Iterable, Optional, Tuple

from shortuuid import uuid

from .alignment import AlignedSegment
from .constants import STRAND
from .error import InvalidBreakend, InvalidCluster


class Breakend(namedtuple('Breakend', ['seq_name', 'orientation', 'position'])):
    """
    one mate of a junction. Sorts by reference name, then orientation, then position
    """

    def __new__(cls, seq_name: str, orientation: str, position: int):
        try:
            STRAND.enforce(orientation)
        except KeyError:
            raise InvalidBreakend('orientation must be a valid strand', orientation, STRAND.values())
        return super(Breakend, cls).__new__(cls, str(seq_name), orientation, int(position))

    def __str__(self):
        return '{}:{}({})'.format(self.seq_name, self.position, self.orientation)


class Junction(
    namedtuple('Junction', ['mate1', 'mate2', 'inserted_sequence', 'read_name', 'segments'])
):
    """
    a breakpoint observation joining two genomic loci (the mates) with (possibly) some
    inserted sequence in between

    Ordering is by mate1 and then mate2. The remaining fields only break ties so that the ordering
    agrees with equality

    Attributes:
        mate1 (Breakend): the first locus
        mate2 (Breakend): the second locus
        inserted_sequence (str): bases inserted between the two mates
        read_name (str): name of the read the junction was observed in
        segments (tuple of AlignedSegment): the aligned segments the mates were derived from, if known
    """

    def __new__(
        cls,
        mate1: Breakend,
        mate2: Breakend,
        inserted_sequence: str = '',
        read_name: str = '',
        segments: Tuple[AlignedSegment, ...] = (),
    ):
        return super(Junction, cls).__new__(
            cls, mate1, mate2, inserted_sequence or '', read_name or '', tuple(segments)
        )

    @property
    def inserted_length(self) -> int:
        return len(self.inserted_sequence)

    def describe_mate1(self) -> str:
        return str(self.segments[0]) if self.segments else str(self.mate1)

    def describe_mate2(self) -> str:
        return str(self.segments[-1]) if self.segments else str(self.mate2)

    def describe(self) -> str:
        return '[{}] -> [{}]'.format(self.describe_mate1(), self.describe_mate2())


class Cluster:
    """
    a group of junctions supporting the same structural variant breakpoint. Members are kept
    sorted and are not changed after creation
    """

    def __init__(self, junctions: Iterable[Junction], cluster_id: Optional[str] = None):
        members = tuple(sorted(junctions))
        if not members:
            raise InvalidCluster('a cluster must contain at least one junction')
        self._junctions = members
        self.cluster_id = cluster_id if cluster_id else str(uuid())

    @property
    def junctions(self) -> Tuple[Junction, ...]:
        return self._junctions

    def __len__(self):
        return len(self._junctions)

    def __iter__(self):
        return iter(self._junctions)

    def __getitem__(self, index):
        return self._junctions[index]

    def __eq__(self, other):
        if not hasattr(other, 'junctions'):
            return False
        return self.junctions == other.junctions

    def __hash__(self):
        return hash(self._junctions)

    def __lt__(self, other):
        if not hasattr(other, 'junctions'):
            return NotImplemented
        return self.junctions < other.junctions

    def __repr__(self):
        return 'Cluster({}, size={})'.format(self._junctions[0].describe(), len(self))

    def get_cluster_size(self) -> int:
        return len(self._junctions)

    def get_average_mate1_position(self) -> int:
        return int(round(sum(j.mate1.position for j in self._junctions) / len(self)))

    def get_average_mate2_position(self) -> int:
        return int(round(sum(j.mate2.position for j in self._junctions) / len(self)))

    def get_average_inserted_sequence_size(self) -> int:
        return int(round(sum(j.inserted_length for j in self._junctions) / len(self)))

    def _common_mate(self, mates, position) -> Breakend:
        loci = {(m.seq_name, m.orientation) for m in mates}
        if len(loci) > 1:
            raise InvalidCluster('cluster members do not share a reference name and orientation', sorted(loci))
        seq_name, orientation = loci.pop()
        return Breakend(seq_name, orientation, position)

    def get_common_mate1(self) -> Breakend:
        """
        Returns:
            Breakend: the shared mate1 locus of all members, positioned at the average member position

        Raises:
            InvalidCluster: the members are on different references or orientations
        """
        return self._common_mate([j.mate1 for j in self._junctions], self.get_average_mate1_position())

    def get_common_mate2(self) -> Breakend:
        return self._common_mate([j.mate2 for j in self._junctions], self.get_average_mate2_position())
