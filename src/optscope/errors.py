"""Exceptions raised by option scopes and the scope text parser."""

from __future__ import annotations


class OptionsError(Exception):
    """Base class for all option errors."""


class KeyNotFoundError(OptionsError, LookupError):
    """Key is missing from a scope and all of its ancestors."""

    def __init__(self, key: str):
        super().__init__(f"Key [{key}] was not set in options.")
        self.key = key


class SubscopeNotFoundError(OptionsError, LookupError):
    def __init__(self, name: str):
        super().__init__(f"Subdictionary not found: {name}")
        self.name = name


class DuplicateSubscopeError(OptionsError):
    def __init__(self, name: str):
        super().__init__(f"Subdictionary already exists: {name}")
        self.name = name


class ScopeSyntaxError(OptionsError, ValueError):
    """Malformed scope text.

    Attributes:
        position: Zero-based offset into ``text`` where parsing stopped
        text: The full input that was being parsed
    """

    def __init__(self, message: str, text: str, position: int):
        super().__init__(f"{message} at position {position}: {text!r}")
        self.text = text
        self.position = position


class UnrecognizedOptionError(OptionsError):
    """An option was set but never read."""

    def __init__(self, type_name: str, path: str):
        super().__init__(f"Unknown {type_name} option: {path}")
        self.type_name = type_name
        self.path = path
