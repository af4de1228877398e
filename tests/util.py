from breakclust.constants import STRAND
from breakclust.junction import Breakend, Junction


def build_junction(
    chr1='chr1',
    pos1=1000,
    chr2='chr2',
    pos2=5000,
    strand1=STRAND.FWD,
    strand2=STRAND.REV,
    inserted_sequence='',
    read_name='',
):
    return Junction(
        Breakend(chr1, strand1, pos1),
        Breakend(chr2, strand2, pos2),
        inserted_sequence=inserted_sequence,
        read_name=read_name,
    )
