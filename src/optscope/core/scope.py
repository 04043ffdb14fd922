"""Hierarchical option scopes.

A ``ConfigScope`` holds one ``TypedStore`` per ``ValueType``, a weak reference
to its parent and the subscopes it owns. Reads fall back to the parent chain;
writes always land in the scope they are called on.

    root = ConfigScope()
    root.set("threads", 2)
    search = root.add_subscope("search")
    search.set("threads", 4)

    search.get("threads", int)   # 4
    root.get("threads", int)     # 2
"""

from __future__ import annotations

import weakref
from typing import TYPE_CHECKING

from ..errors import DuplicateSubscopeError, KeyNotFoundError, SubscopeNotFoundError
from .option_id import OptionId, display_name, key_of
from .typed_store import StoreEntry, TypedStore
from .value_type import ValueType

if TYPE_CHECKING:
    from collections.abc import Iterator


class ConfigScope:
    """A node of the option tree."""

    def __init__(self, parent: ConfigScope | None = None):
        self._parent_ref = weakref.ref(parent) if parent is not None else None
        self._stores: dict[ValueType, TypedStore] = {
            value_type: TypedStore(value_type.zero) for value_type in ValueType
        }
        self._subscopes: dict[str, ConfigScope] = {}

    @property
    def parent(self) -> ConfigScope | None:
        """The enclosing scope, or None for a root.

        Raises:
            ReferenceError: If the parent scope has already been destroyed
        """
        if self._parent_ref is None:
            return None
        parent = self._parent_ref()
        if parent is None:
            raise ReferenceError("Parent options scope no longer exists")
        return parent

    def store(self, value_type) -> TypedStore:
        """This scope's own store for one value type."""
        return self._stores[ValueType.of(value_type)]

    # Lookup

    def get(self, key: str | OptionId, value_type):
        """Return the value of ``key``, searching this scope then its ancestors.

        Raises:
            KeyNotFoundError: If no scope in the chain defines the key
        """
        name = key_of(key)
        scope = self
        while scope is not None:
            store = scope.store(value_type)
            if name in store:
                return store.get(name)
            scope = scope.parent
        raise KeyNotFoundError(display_name(name))

    def exists(self, key: str | OptionId, value_type) -> bool:
        name = key_of(key)
        scope = self
        while scope is not None:
            if name in scope.store(value_type):
                return True
            scope = scope.parent
        return False

    def get_or_default(self, key: str | OptionId, default, value_type=None):
        """Like ``get`` but returns ``default`` when the chain has no value.

        The store is picked from ``value_type`` or, if omitted, from the
        type of ``default``.
        """
        if value_type is None:
            value_type = ValueType.infer(default)
        name = key_of(key)
        scope = self
        while scope is not None:
            store = scope.store(value_type)
            if name in store:
                return store.get(name)
            scope = scope.parent
        return default

    def get_ref(self, key: str | OptionId, value_type) -> StoreEntry:
        """Return this scope's own slot for ``key``, creating it if needed.

        Ancestors are not consulted. The slot is marked read; assigning to its
        ``value`` updates the option in place.
        """
        return self.store(value_type).entry(key_of(key))

    def set(self, key: str | OptionId, value, value_type=None) -> None:
        """Store ``value`` in this scope; the entry counts as unread again."""
        if value_type is None:
            value_type = ValueType.infer(value)
        else:
            value_type = ValueType.of(value_type)
            value = value_type.coerce(value)
        self._stores[value_type].set(key_of(key), value)

    def is_default(self, key: str | OptionId, value_type) -> bool:
        """True if the key is not overridden anywhere below the root.

        A value held by the root itself still counts as the default.
        """
        name = key_of(key)
        scope = self
        while scope.parent is not None:
            if name in scope.store(value_type):
                return False
            scope = scope.parent
        return True

    def keys(self, value_type) -> list[str | OptionId]:
        """Own keys of one store, in insertion order."""
        return list(self.store(value_type))

    # Subscopes

    def add_subscope(self, name: str) -> ConfigScope:
        if name in self._subscopes:
            raise DuplicateSubscopeError(name)
        subscope = ConfigScope(parent=self)
        self._subscopes[name] = subscope
        return subscope

    def get_subscope(self, name: str) -> ConfigScope:
        try:
            return self._subscopes[name]
        except KeyError:
            raise SubscopeNotFoundError(name) from None

    def get_mutable_subscope(self, name: str) -> ConfigScope:
        # Python has no const views; kept so call sites can state intent.
        return self.get_subscope(name)

    def has_subscope(self, name: str) -> bool:
        return name in self._subscopes

    def list_subscopes(self) -> list[str]:
        return sorted(self._subscopes)

    def iter_subscopes(self) -> Iterator[tuple[str, ConfigScope]]:
        for name in self.list_subscopes():
            yield name, self._subscopes[name]

    def add_subscope_from_string(self, text: str) -> None:
        """Parse ``text`` into this scope.

        Example: ``option1=1, option_two = "string val", subdict(option3=3.14)``
        """
        from .parser import ScopeTextParser

        ScopeTextParser(text).parse_into(self)

    # Validation

    def check_all_read(self, path_label: str = "") -> None:
        """Fail on the first option of this scope that nothing has read.

        Subscopes are not visited; see ``validation.check_tree_read``.

        Raises:
            UnrecognizedOptionError: Naming ``path_label`` followed by the key
        """
        from .validation import check_all_read

        check_all_read(self, path_label)

    def __repr__(self) -> str:
        counts = ", ".join(
            f"{value_type.value}={len(store)}" for value_type, store in self._stores.items() if len(store)
        )
        return f"ConfigScope({counts or 'empty'}; subscopes={self.list_subscopes()})"
