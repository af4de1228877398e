import logging

from .constants import BreakclustNamespace

logger = logging.getLogger('breakclust')


class WeakNamespace(BreakclustNamespace):
    def is_env_overwritable(self, attr):
        return True
