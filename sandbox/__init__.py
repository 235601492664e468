"""`sandbox`: in-memory practice containers.

- `IntegerStringArrayStore`: parallel integer/string sequences whose storage
  always holds exactly the live elements,
- `ReversibleStringMap`: string map where each key is the reverse of its value.

Public API:
- `IntegerStringArrayStore`, `ReversibleStringMap`
- `SandboxConfig`, `load_config()`, `load_default_config()`, `configure_logging()`
- `InvalidArgument`, `InvariantViolation`
"""

from .config import SandboxConfig, configure_logging, load_config, load_default_config
from .errors import InvalidArgument, InvariantViolation
from .state import IntegerStringArrayStore, ReversibleStringMap

__all__ = [
    "IntegerStringArrayStore",
    "ReversibleStringMap",
    "SandboxConfig",
    "configure_logging",
    "load_config",
    "load_default_config",
    "InvalidArgument",
    "InvariantViolation",
]
