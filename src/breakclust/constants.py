"""
controlled vocabularies used throughout the breakclust package
"""
import os

ENV_VAR_PREFIX = 'BREAKCLUST'


class BreakclustNamespace:
    """
    Namespace of named values. Calling the namespace with a value checks that it is a member

    Example:
        >>> nspace = BreakclustNamespace(thing=1, otherthing=2)
        >>> nspace.thing
        1
        >>> nspace(3)
        Traceback (most recent call last):
        ....
    """

    def __init__(self, **kwargs):
        object.__setattr__(self, '_defns', {})
        object.__setattr__(self, '_types', {})
        object.__setattr__(self, '_members', {})
        object.__setattr__(self, '_env_overwritable', set())

        for attr, val in kwargs.items():
            self.add(attr, val)

    def get_env_name(self, attr):
        """
        Example:
            >>> BreakclustNamespace(a=1).get_env_name('a')
            'BREAKCLUST_A'
        """
        return '{}_{}'.format(ENV_VAR_PREFIX, attr).upper()

    def is_env_overwritable(self, attr):
        return attr in self._env_overwritable

    def __getattribute__(self, attr):
        try:
            return object.__getattribute__(self, attr)
        except AttributeError as err:
            variables = object.__getattribute__(self, '_members')
            if attr not in variables:
                raise err
            if self.is_env_overwritable(attr):
                env = os.environ.get(self.get_env_name(attr))
                if env is not None:
                    return self._types[attr](env.strip())
            return variables[attr]

    def __setattr__(self, attr, val):
        if attr.startswith('_'):
            raise ValueError('cannot set private', attr)
        object.__getattribute__(self, '_members')[attr] = val

    def keys(self):
        return list(self._members)

    def values(self):
        return [getattr(self, k) for k in self._members]

    def enforce(self, value):
        """
        Returns:
            the input value

        Raises:
            KeyError: the value is not a member of the namespace
        """
        if value not in self.values():
            raise KeyError('value {0} is not a valid member of '.format(repr(value)), self.values())
        return value

    def define(self, attr, *pos):
        """
        Get the definition of an attribute, or the default (when given) if it has none

        Raises:
            KeyError: the attribute has no definition and a default was not given
        """
        try:
            return self._defns[attr]
        except KeyError as err:
            if pos:
                return pos[0]
            raise err

    def add(self, attr, value, defn=None, cast_type=None, env_overwritable=False):
        """
        Add an attribute to the name space

        Args:
            attr (str): name of the attribute being added
            value: the value of the attribute
            defn (str): the definition, used in generating documentation
            cast_type (callable): the function used to cast the environment variable value
            env_overwritable (bool): True if this attribute will be overriden by its environment variable equivalent
        """
        if attr in self._members:
            raise AttributeError('Cannot respecify existing attribute', attr, self._members[attr])
        self._types[attr] = cast_type if cast_type else type(value)
        if defn:
            self._defns[attr] = defn
        if env_overwritable:
            self._env_overwritable.add(attr)
        setattr(self, attr, value)

    def __call__(self, value):
        try:
            return self.enforce(value)
        except KeyError:
            raise TypeError(
                'Invalid value {} for {}. Must be a valid member: {}'.format(
                    repr(value), self.__class__.__name__, self.values()
                )
            )


STRAND = BreakclustNamespace(FWD='+', REV='-')
""":class:`BreakclustNamespace`: holds controlled vocabulary for allowed orientation values of a mate

- ``FWD``: the forward strand
- ``REV``: the reverse strand

Note:
    the symbols are chosen so that forward sorts before reverse
"""

CIGAR = BreakclustNamespace(M=0, I=1, D=2, N=3, S=4, H=5, P=6, X=8, EQ=7)  # noqa
""":class:`BreakclustNamespace`: Enum-like. For readable cigar values (pysam cigartuples encoding)

- ``M``: alignment match (can be a sequence match or mismatch)
- ``I``: insertion to the reference
- ``D``: deletion from the reference
- ``N``: skipped region from the reference
- ``S``: soft clipping (clipped sequences present in SEQ)
- ``H``: hard clipping (clipped sequences NOT present in SEQ)
- ``P``: padding (silent deletion from padded reference)
- ``EQ``: sequence match (=)
- ``X``: sequence mismatch
"""

ALIGNED_STATES = {CIGAR.M, CIGAR.X, CIGAR.EQ}
REFERENCE_ALIGNED_STATES = ALIGNED_STATES | {CIGAR.D, CIGAR.N}

NA_MAPPING_QUALITY = 255
""":class:`int`: mapping quality value to indicate mapping was not performed/calculated"""
