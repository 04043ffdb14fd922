"""Parser for the one-line scope syntax.

    threads=4, net("weights.pb", scale=1.0), search(cpuct=3.1, "name"="test run")

``key=value`` sets an option in the current scope and ``name(...)`` opens a
subscope. Quoted values are always strings; bare values become bool, int or
float when they look like one, and strings otherwise. A quoted value with no
key is stored under the empty key. Giving the same key twice in one scope
is an error.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Iterator

from ..errors import ScopeSyntaxError
from .value_type import ValueType

if TYPE_CHECKING:
    from .scope import ConfigScope

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"[+-]?\d+")
_FLOAT_RE = re.compile(r"[+-]?(\d+\.\d*|\.\d+|\d+)([eE][+-]?\d+)?")
_PUNCTUATION = {",": "COMMA", "=": "EQUALS", "(": "OPEN", ")": "CLOSE"}
_BARE_STOP = set(_PUNCTUATION) | {'"'}


class TokenKind(Enum):
    BARE = auto()
    QUOTED = auto()
    COMMA = auto()
    EQUALS = auto()
    OPEN = auto()
    CLOSE = auto()
    END = auto()


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    position: int


def tokenize(text: str) -> Iterator[Token]:
    """Split scope text into tokens, ending with a single END token."""
    pos = 0
    length = len(text)
    while True:
        while pos < length and text[pos].isspace():
            pos += 1
        if pos >= length:
            yield Token(TokenKind.END, "", pos)
            return

        char = text[pos]
        if char in _PUNCTUATION:
            yield Token(TokenKind[_PUNCTUATION[char]], char, pos)
            pos += 1
        elif char == '"':
            value, end = _read_quoted(text, pos)
            yield Token(TokenKind.QUOTED, value, pos)
            pos = end
        else:
            start = pos
            while pos < length and not text[pos].isspace() and text[pos] not in _BARE_STOP:
                pos += 1
            yield Token(TokenKind.BARE, text[start:pos], start)


def _read_quoted(text: str, start: int) -> tuple[str, int]:
    """Read a quoted string starting at the opening quote.

    Returns the unescaped value and the offset just past the closing quote.
    """
    chars: list[str] = []
    pos = start + 1
    while pos < len(text):
        char = text[pos]
        if char == '"':
            return "".join(chars), pos + 1
        if char == "\\":
            pos += 1
            if pos >= len(text):
                break
            char = text[pos]
        chars.append(char)
        pos += 1
    raise ScopeSyntaxError("Unterminated quoted string", text, start)


def infer_value(token: Token) -> tuple[object, ValueType]:
    """Turn a value token into a typed value."""
    raw = token.text
    if token.kind is TokenKind.QUOTED:
        return raw, ValueType.STRING
    if raw in ("true", "false"):
        return raw == "true", ValueType.BOOL
    if _INT_RE.fullmatch(raw):
        return int(raw), ValueType.INT
    if _FLOAT_RE.fullmatch(raw):
        return float(raw), ValueType.FLOAT
    return raw, ValueType.STRING


class ScopeTextParser:
    """Single-pass parser building scopes from text."""

    # Deeper nesting is rejected instead of exhausting the interpreter stack.
    MAX_DEPTH = 64

    def __init__(self, text: str):
        self._text = text
        self._tokens = tokenize(text)
        self._current = next(self._tokens)
        self._depth = 0
        # Keys assigned by this parse, per scope object.
        self._assigned: dict[int, set[str]] = {}

    def _advance(self) -> Token:
        token = self._current
        if token.kind is not TokenKind.END:
            self._current = next(self._tokens)
        return token

    def _error(self, message: str, token: Token | None = None) -> ScopeSyntaxError:
        token = token or self._current
        return ScopeSyntaxError(message, self._text, token.position)

    def parse_into(self, scope: ConfigScope) -> None:
        """Parse the whole text, adding options and subscopes to ``scope``."""
        self._parse_scope(scope)
        if self._current.kind is TokenKind.CLOSE:
            raise self._error("Unmatched ')'")
        if self._current.kind is not TokenKind.END:
            raise self._error(f"Unexpected {self._current.text!r}")

    def _parse_scope(self, scope: ConfigScope) -> None:
        if self._current.kind in (TokenKind.END, TokenKind.CLOSE):
            return
        self._parse_item(scope)
        while self._current.kind is TokenKind.COMMA:
            self._advance()
            self._parse_item(scope)

    def _parse_item(self, scope: ConfigScope) -> None:
        if self._current.kind not in (TokenKind.BARE, TokenKind.QUOTED):
            raise self._error("Expected option name or value")
        head = self._advance()

        if self._current.kind is TokenKind.EQUALS:
            self._advance()
            if self._current.kind not in (TokenKind.BARE, TokenKind.QUOTED):
                raise self._error(f"Expected value for {head.text!r}")
            self._assign(scope, head.text, self._advance(), head)
        elif self._current.kind is TokenKind.OPEN:
            opening = self._advance()
            if self._depth >= self.MAX_DEPTH:
                raise self._error(f"Subscopes nested deeper than {self.MAX_DEPTH}", opening)
            logger.debug("Opening subscope %r", head.text)
            subscope = scope.add_subscope(head.text)
            self._depth += 1
            self._parse_scope(subscope)
            self._depth -= 1
            if self._current.kind is not TokenKind.CLOSE:
                raise self._error(f"Expected ')' to close {head.text!r} opened at {opening.position}")
            self._advance()
        elif head.kind is TokenKind.QUOTED and self._current.kind in (
            TokenKind.COMMA,
            TokenKind.CLOSE,
            TokenKind.END,
        ):
            self._assign(scope, "", head, head)
        else:
            raise self._error(f"Expected '=' or '(' after {head.text!r}")

    def _assign(self, scope: ConfigScope, key: str, token: Token, key_token: Token) -> None:
        assigned = self._assigned.setdefault(id(scope), set())
        if key in assigned:
            raise self._error(f"Option {key!r} given more than once", key_token)
        assigned.add(key)

        value, value_type = infer_value(token)
        logger.debug("Setting %s option %r = %r", value_type.value, key, value)
        scope.set(key, value, value_type)


def parse_scope(text: str, parent: ConfigScope | None = None) -> ConfigScope:
    """Build a new scope (child of ``parent`` if given) from ``text``."""
    from .scope import ConfigScope

    scope = ConfigScope(parent=parent)
    ScopeTextParser(text).parse_into(scope)
    return scope
