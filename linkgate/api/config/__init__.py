"""Configuration for linkgate runs."""

from .CheckConfig import CheckConfig
from .LinkGateConfig import LinkGateConfig
from .LogConfig import LogConfig

__all__ = [
    "CheckConfig",
    "LinkGateConfig",
    "LogConfig",
]
