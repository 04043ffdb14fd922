"""Identity-compared option keys.

An ``OptionId`` is declared once, usually at module level next to the code
that reads it, and then used in place of a string key:

    THREADS = OptionId("threads", "Threads", "Number of worker threads.", "t")

    scope.set(THREADS, 4)
    scope.get(THREADS, int)

Stores are keyed by the ``OptionId`` object itself, so two ids never share
storage with each other or with any string key, even when their flags and
help text are equal.
"""

from __future__ import annotations

import itertools

_counter = itertools.count(1)


class OptionId:
    """Immutable option declaration compared by identity.

    ``storage_key`` is a per-process unique label for diagnostics; it is not
    used to address stored values.
    """

    __slots__ = ("long_flag", "uci_option", "help_text", "short_flag", "storage_key")

    def __init__(
        self,
        long_flag: str,
        uci_option: str,
        help_text: str,
        short_flag: str | None = None,
    ):
        if short_flag is not None and len(short_flag) != 1:
            raise ValueError(f"short_flag must be a single character, got {short_flag!r}")
        for name, value in (
            ("long_flag", long_flag),
            ("uci_option", uci_option),
            ("help_text", help_text),
            ("short_flag", short_flag),
            ("storage_key", f"option#{next(_counter)}"),
        ):
            object.__setattr__(self, name, value)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    # Ids are never copied; a copy would be a different key.
    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        raise TypeError(f"{type(self).__name__} cannot be pickled")

    def __repr__(self) -> str:
        return f"OptionId(--{self.long_flag}, {self.storage_key})"


def key_of(key: str | OptionId) -> str | OptionId:
    """Validate ``key`` and return what a scope stores it under."""
    if isinstance(key, (OptionId, str)):
        return key
    raise TypeError(f"Option key must be str or OptionId, got {type(key).__name__}")


def display_name(key: str | OptionId) -> str:
    """Human-readable name for a stored key."""
    if isinstance(key, OptionId):
        return f"--{key.long_flag}"
    return key
