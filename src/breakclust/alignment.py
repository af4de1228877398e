"""
holds the read segment geometry that upstream junction extraction works from. A chimeric/split-aligned read is
described by several aligned segments (the primary alignment and those listed in its SA tag)
"""
from collections import namedtuple
from typing import Tuple

import pysam

from .constants import ALIGNED_STATES, CIGAR, NA_MAPPING_QUALITY, REFERENCE_ALIGNED_STATES, STRAND

CigarTuples = Tuple[Tuple[int, int], ...]


class AlignedSegment(namedtuple('AlignedSegment', ['orientation', 'ref_name', 'pos', 'mapq', 'cigar'])):
    """
    Read segment aligned to the reference genome

    Attributes:
        orientation (STRAND): mapping orientation
        ref_name (str): reference/chromosome name
        pos (int): start position of the alignment
        mapq (int): mapping quality
        cigar (tuple of tuple of int and int): cigar tuples of the alignment (pysam encoding)
    """

    def __new__(
        cls,
        orientation: str,
        ref_name: str,
        pos: int,
        mapq: int = NA_MAPPING_QUALITY,
        cigar: CigarTuples = (),
    ):
        STRAND.enforce(orientation)
        return super(AlignedSegment, cls).__new__(
            cls, orientation, ref_name, pos, mapq, tuple((int(op), int(freq)) for op, freq in cigar)
        )

    @classmethod
    def from_pysam(cls, read: pysam.AlignedSegment) -> 'AlignedSegment':
        return cls(
            STRAND.REV if read.is_reverse else STRAND.FWD,
            read.reference_name,
            read.reference_start,
            read.mapping_quality,
            read.cigartuples or (),
        )

    def get_reference_start(self) -> int:
        return self.pos

    def get_reference_end(self) -> int:
        return self.pos + sum(freq for op, freq in self.cigar if op in REFERENCE_ALIGNED_STATES)

    def get_left_soft_clip(self) -> int:
        if self.cigar and self.cigar[0][0] == CIGAR.S:
            return self.cigar[0][1]
        return 0

    def get_right_soft_clip(self) -> int:
        if self.cigar and self.cigar[-1][0] == CIGAR.S:
            return self.cigar[-1][1]
        return 0

    def get_query_start(self) -> int:
        """
        start of the aligned part of the query, in the orientation the read was sequenced in
        """
        if self.orientation == STRAND.FWD:
            return self.get_left_soft_clip()
        return self.get_right_soft_clip()

    def get_query_length(self) -> int:
        """
        number of query bases covered by the alignment (clipped bases excluded)
        """
        return sum(freq for op, freq in self.cigar if op in ALIGNED_STATES | {CIGAR.I})

    def get_query_end(self) -> int:
        return self.get_query_start() + self.get_query_length()

    def __str__(self):
        return '{};{}-{};{}-{};{};{}'.format(
            self.ref_name,
            self.get_reference_start(),
            self.get_reference_end(),
            self.get_query_start(),
            self.get_query_end(),
            self.orientation,
            self.mapq,
        )
