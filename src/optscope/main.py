#!/usr/bin/env python3
"""optscope: print the option tree configured in the environment"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from .adapters.config_env import load_app_config, load_scope_from_env
from .core.option_id import display_name
from .core.value_type import ValueType
from .errors import OptionsError
from .logging_utils import setup_logging

if TYPE_CHECKING:
    from .core.scope import ConfigScope


def format_tree(scope: ConfigScope, indent: int = 0) -> list[str]:
    """Render a scope and its subscopes, one option per line."""
    pad = "  " * indent
    lines = []
    for value_type in ValueType:
        for key, value in scope.store(value_type).items():
            lines.append(f"{pad}{display_name(key)} = {value!r} ({value_type.value})")
    for name, subscope in scope.iter_subscopes():
        lines.append(f"{pad}{name}:")
        lines.extend(format_tree(subscope, indent + 1))
    return lines


def main() -> int:
    app_config = load_app_config()
    setup_logging(app_config.debug)

    try:
        scope = load_scope_from_env(app_config.options_var)
    except OptionsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    lines = format_tree(scope)
    if not lines:
        print(f"No options set in {app_config.options_var}")
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
