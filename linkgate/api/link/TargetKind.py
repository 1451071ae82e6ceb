"""Kind of a link target."""

from enum import Enum


class TargetKind(Enum):
    """Whether a target is fetched over the network or looked up on disk."""

    NETWORK = "network"
    LOCAL = "local"
