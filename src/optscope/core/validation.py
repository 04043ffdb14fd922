"""Detect options that were set but never read.

Run after every consumer has pulled its settings; anything still unread is
most likely a typo in user supplied options.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..errors import UnrecognizedOptionError
from .option_id import display_name
from .value_type import ValueType

if TYPE_CHECKING:
    from .scope import ConfigScope


def check_all_read(scope: ConfigScope, path_label: str = "") -> None:
    """Raise for the first unread option in ``scope``'s own stores.

    Stores are checked in ``ValueType`` order. Subscopes and ancestors are
    ignored.
    """
    for value_type in ValueType:
        key = scope.store(value_type).find_unread()
        if key is not None:
            raise UnrecognizedOptionError(value_type.value, path_label + display_name(key))


def _walk(scope: ConfigScope, path: str):
    """Depth first, subscopes in name order; iterative so depth is unbounded."""
    pending = [(scope, path)]
    while pending:
        node, label = pending.pop()
        yield node, label
        children = [(subscope, f"{label}{name}.") for name, subscope in node.iter_subscopes()]
        pending.extend(reversed(children))


def check_tree_read(scope: ConfigScope, path: str = "") -> None:
    """``check_all_read`` on ``scope`` and every descendant, depth first.

    Each subscope is labelled with the dotted names leading to it.
    """
    for node, label in _walk(scope, path):
        check_all_read(node, label)


def find_unread(scope: ConfigScope, path: str = "") -> list[str]:
    """Dotted paths of every unread option in the tree, without raising."""
    unread = []
    for node, label in _walk(scope, path):
        for value_type in ValueType:
            store = node.store(value_type)
            unread.extend(label + display_name(key) for key in store if not store.is_read(key))
    return unread
