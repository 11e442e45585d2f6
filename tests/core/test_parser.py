import pytest

from backend.core.datacompare import COMPARE_KEYWORDS, DirectiveParseError


class TestIsDirective:

    def test_accepts_simple_directive(self, parser):
        assert parser.is_directive("{{compare:startsWith:Hello}}")

    def test_accepts_surrounding_whitespace(self, parser):
        assert parser.is_directive("  {{compare:ignore}}\n")

    def test_accepts_inner_braces(self, parser):
        assert parser.is_directive("{{compare:regex:user_[0-9]{5}}}")

    @pytest.mark.parametrize("value", [
        "Hello",
        "{{compare:}}",
        "{{other:startsWith:a}}",
        "prefix {{compare:ignore}}",
        42,
        None,
        ["{{compare:ignore}}"],
    ])
    def test_rejects_non_directives(self, parser, value):
        assert not parser.is_directive(value)


class TestFindDirectives:

    def test_finds_all_occurrences(self, parser):
        content = "a {{compare:ignore}} b {{compare:contains:x}} c"
        assert parser.find_directives(content) == ["{{compare:ignore}}", "{{compare:contains:x}}"]

    def test_non_string_returns_empty(self, parser):
        assert parser.find_directives({"a": 1}) == []


class TestParse:

    def test_action_and_args(self, parser):
        parsed = parser.parse("{{compare:time:range:-300:+300:seconds}}")
        assert parsed.action == "time"
        assert parsed.args == ["range", "-300", "+300", "seconds"]
        assert parsed.transforms == []
        assert parsed.original == "{{compare:time:range:-300:+300:seconds}}"

    def test_keyword_parses_without_args(self, parser):
        parsed = parser.parse("{{compare:ignore}}")
        assert parsed.action == "ignore"
        assert parsed.args == []

    def test_escaped_colon_does_not_split(self, parser):
        parsed = parser.parse(r"{{compare:startsWith:http\://host}}")
        assert parsed.args == ["http://host"]

    def test_other_backslashes_are_preserved(self, parser):
        parsed = parser.parse(r"{{compare:regex:user_\d{5}}}")
        assert parsed.args == [r"user_\d{5}"]

    def test_transform_pipeline(self, parser):
        parsed = parser.parse("{{compare:contains:abc|lowercase|trim:both}}")
        assert parsed.args == ["abc"]
        assert [t.name for t in parsed.transforms] == ["lowercase", "trim"]
        assert parsed.transforms[1].params == ["both"]

    def test_escaped_pipe_becomes_literal(self, parser):
        parsed = parser.parse(r"{{compare:regex:a\|b}}")
        assert parsed.args == ["a|b"]
        assert parsed.transforms == []

    def test_trailing_empty_segment_is_kept(self, parser):
        parsed = parser.parse("{{compare:contains:a:}}")
        assert parsed.args == ["a", ""]

    def test_empty_action_raises(self, parser):
        with pytest.raises(DirectiveParseError):
            parser.parse("{{compare::x}}")

    def test_non_directive_raises(self, parser):
        with pytest.raises(DirectiveParseError):
            parser.parse("not a directive")


def test_unescape(parser):
    assert parser.unescape(r"a\:b\\c") == "a:b\\c"


def test_is_keyword(parser):
    for keyword in COMPARE_KEYWORDS.values():
        assert parser.is_keyword(keyword)
    assert not parser.is_keyword("{{compare:contains:x}}")
    assert not parser.is_keyword(None)
