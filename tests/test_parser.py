import pytest

from optscope import (
    ConfigScope,
    DuplicateSubscopeError,
    KeyNotFoundError,
    ScopeSyntaxError,
    ScopeTextParser,
    parse_scope,
)
from optscope.core.parser import TokenKind, tokenize


def test_parse_values_and_subscope():
    scope = parse_scope('a=1, b=2.5, c="x", d(e=3)')

    assert scope.get("a", int) == 1
    assert scope.get("b", float) == 2.5
    assert scope.get("c", str) == "x"
    assert scope.has_subscope("d")
    assert scope.get_subscope("d").get("e", int) == 3
    with pytest.raises(KeyNotFoundError):
        scope.get("e", int)


def test_subscope_delegates_to_enclosing_scope():
    scope = parse_scope("threads=4, search(cpuct=3.1)")
    search = scope.get_subscope("search")

    assert search.parent is scope
    assert search.get("threads", int) == 4


def test_parse_full_example():
    scope = parse_scope('threads=4, net("weights.pb", scale=1.0), search(cpuct=3.1, "name"="test run")')

    net = scope.get_subscope("net")
    assert net.get("", str) == "weights.pb"
    assert net.get("scale", float) == 1.0
    search = scope.get_subscope("search")
    assert search.get("cpuct", float) == 3.1
    assert search.get("name", str) == "test run"
    assert scope.list_subscopes() == ["net", "search"]


@pytest.mark.parametrize(
    "text, value_type, expected",
    [
        ("x=true", bool, True),
        ("x=false", bool, False),
        ("x=-3", int, -3),
        ("x=+7", int, 7),
        ("x=1e3", float, 1000.0),
        ("x=.5", float, 0.5),
        ("x=weights.pb", str, "weights.pb"),
        ("x=cudnn-fp16", str, "cudnn-fp16"),
        ('x="true"', str, "true"),
        ('x="42"', str, "42"),
        ("x=inf", str, "inf"),
    ],
)
def test_value_type_inference(text, value_type, expected):
    assert parse_scope(text).get("x", value_type) == expected


def test_whitespace_is_ignored():
    scope = parse_scope('  a = 1 ,\tsub ( b = "two words" )  ')
    assert scope.get("a", int) == 1
    assert scope.get_subscope("sub").get("b", str) == "two words"


def test_escapes_in_quoted_strings():
    scope = parse_scope(r'path="C:\\dir", quote="say \"hi\""')
    assert scope.get("path", str) == "C:\\dir"
    assert scope.get("quote", str) == 'say "hi"'


def test_empty_input_and_empty_subscope():
    assert repr(parse_scope("")) == "ConfigScope(empty; subscopes=[])"
    scope = parse_scope("backend()")
    assert scope.has_subscope("backend")


def test_nested_subscopes():
    scope = parse_scope("a(b(c(depth=3)))")
    deepest = scope.get_subscope("a").get_subscope("b").get_subscope("c")
    assert deepest.get("depth", int) == 3


def test_parse_into_existing_scope():
    root = ConfigScope()
    root.set("threads", 2)
    root.add_subscope_from_string("gpu0(gpu=0), gpu1(gpu=1)")

    assert root.list_subscopes() == ["gpu0", "gpu1"]
    assert root.get_subscope("gpu1").get("gpu", int) == 1
    assert root.get_subscope("gpu1").get("threads", int) == 2


def test_parse_with_parent():
    parent = ConfigScope()
    parent.set("threads", 2)
    scope = parse_scope("cpuct=1.0", parent=parent)
    assert scope.get("threads", int) == 2


def test_repeated_subscope_name_raises():
    with pytest.raises(DuplicateSubscopeError):
        parse_scope("a(x=1), a(y=2)")


@pytest.mark.parametrize(
    "text, message, position",
    [
        ("a=1, b(c=2", "Expected '\\)'", 10),
        ("a=1)", "Unmatched", 3),
        ("a 1", "Expected '=' or '\\('", 2),
        ('a="abc', "Unterminated", 2),
        ('a="abc\\', "Unterminated", 2),
        ("a=1 b=2", "Unexpected", 4),
        ("a=", "Expected value", 2),
        ("=1", "Expected option name", 0),
        ("a=1,", "Expected option name", 4),
        ("a=(b)", "Expected value", 2),
        ("threads, x=1", "Expected '=' or '\\('", 7),
        ("a(b)", "Expected '=' or '\\('", 3),
        ('net("a.pb", "b.pb")', "given more than once", 12),
        ("a=1, a=2", "given more than once", 5),
        ('a=1, a="x"', "given more than once", 5),
        ("a(" * 600 + "x=1" + ")" * 600, "nested deeper", 129),
    ],
)
def test_syntax_errors(text, message, position):
    with pytest.raises(ScopeSyntaxError, match=message) as exc_info:
        parse_scope(text)
    assert exc_info.value.position == position
    assert exc_info.value.text == text


def test_syntax_error_is_value_error():
    with pytest.raises(ValueError):
        parse_scope("a=1)")


def test_tokenize():
    kinds = [token.kind for token in tokenize('a=1,b("x")')]
    assert kinds == [
        TokenKind.BARE,
        TokenKind.EQUALS,
        TokenKind.BARE,
        TokenKind.COMMA,
        TokenKind.BARE,
        TokenKind.OPEN,
        TokenKind.QUOTED,
        TokenKind.CLOSE,
        TokenKind.END,
    ]


def test_same_key_in_different_subscopes():
    scope = parse_scope("x=1, a(x=2), b(x=3)")
    assert scope.get("x", int) == 1
    assert scope.get_subscope("a").get("x", int) == 2
    assert scope.get_subscope("b").get("x", int) == 3


def test_nesting_up_to_the_limit_is_accepted():
    depth = ScopeTextParser.MAX_DEPTH
    scope = parse_scope("a(" * depth + "x=1" + ")" * depth)
    for _ in range(depth):
        scope = scope.get_subscope("a")
    assert scope.get("x", int) == 1


def test_keys_already_in_target_scope_can_be_overridden_by_text():
    root = ConfigScope()
    root.set("threads", 2)
    root.add_subscope_from_string("threads=8")
    assert root.get("threads", int) == 8
