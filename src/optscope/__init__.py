"""optscope - Hierarchical, typed option scopes with usage tracking"""

__version__ = "1.0.0"
__description__ = "Hierarchical, typed option scopes with usage tracking"

from .core.option_id import OptionId
from .core.parser import ScopeTextParser, parse_scope
from .core.scope import ConfigScope
from .core.validation import check_all_read, check_tree_read, find_unread
from .core.value_type import ValueType
from .errors import (
    DuplicateSubscopeError,
    KeyNotFoundError,
    OptionsError,
    ScopeSyntaxError,
    SubscopeNotFoundError,
    UnrecognizedOptionError,
)

__all__ = [
    "ConfigScope",
    "OptionId",
    "ScopeTextParser",
    "ValueType",
    "parse_scope",
    "check_all_read",
    "check_tree_read",
    "find_unread",
    "OptionsError",
    "KeyNotFoundError",
    "SubscopeNotFoundError",
    "DuplicateSubscopeError",
    "ScopeSyntaxError",
    "UnrecognizedOptionError",
    "__version__",
]
