"""
GitDesk Core Module
Logging, result types, configuration and feature toggles
"""

from . import log
from . import result
from . import config_manager
from . import feature_flags

__all__ = [
    "log",
    "result",
    "config_manager",
    "feature_flags",
]
