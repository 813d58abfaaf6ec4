"""vernum core — configuration and logging setup.

    from vernum.core import get_config, set_config, VernumConfig
"""

from vernum.core.config import (
    VernumConfig,
    get_config,
    parse_bool,
    set_config,
    system_case_sensitive,
)
from vernum.core.logging_config import configure_logging

__all__ = [
    "VernumConfig",
    "configure_logging",
    "get_config",
    "parse_bool",
    "set_config",
    "system_case_sensitive",
]
