class InvalidBreakend(Exception):
    """
    raised when a breakend (junction mate) is given an orientation which is not a valid strand
    """
    pass


class InvalidCluster(Exception):
    pass
