from dataclasses import fields
from datetime import datetime, timezone

import pytest

from backend.core.datacompare import (
    CompareContext, CompareErrorType, DirectiveConfigurationError, DirectiveRequest, MatchContext
)
from backend.core.datacompare.directives import (
    ContainsDirective, EndsWithDirective, NumberDirective, RegexDirective,
    StartsWithDirective, TimeDirective
)


BASE_TIME = "2025-11-05T15:30:00+01:00"


def build_matcher(parser, directive, text, context=None):
    context = context or CompareContext(start_time_test=BASE_TIME)
    request = DirectiveRequest(directive=parser.parse(text), context=context)
    matcher = directive.create_matcher(request)

    def run(actual):
        match_context = MatchContext(path=["value"], actual=actual, expected=text, compare_context=context)
        return matcher(actual, text, match_context)

    return run


class TestStringPatterns:

    def test_starts_with(self, parser):
        run = build_matcher(parser, StartsWithDirective(), "{{compare:startsWith:Hello}}")
        assert run("Hello world").success
        result = run("world Hello")
        assert not result.success
        assert "Hello" in result.error
        assert "world Hello" in result.error

    def test_ends_with(self, parser):
        run = build_matcher(parser, EndsWithDirective(), "{{compare:endsWith:@example.com}}")
        assert run("john@example.com").success
        assert not run("john@example.org").success

    def test_contains(self, parser):
        run = build_matcher(parser, ContainsDirective(), "{{compare:contains:needle}}")
        assert run("haystack needle haystack").success
        assert not run("haystack").success

    def test_colon_args_are_joined(self, parser):
        run = build_matcher(parser, StartsWithDirective(), "{{compare:startsWith:http://}}")
        assert run("http://example.com").success

    def test_non_string_actual_fails(self, parser):
        run = build_matcher(parser, ContainsDirective(), "{{compare:contains:1}}")
        result = run(123)
        assert not result.success
        assert "number" in result.error

    def test_requires_argument(self, parser):
        with pytest.raises(DirectiveConfigurationError):
            build_matcher(parser, StartsWithDirective(), "{{compare:startsWith}}")


class TestRegex:

    def test_quantifier_braces(self, parser):
        run = build_matcher(parser, RegexDirective(), "{{compare:regex:user_[0-9]{5}}}")
        assert run("user_12345").success
        assert not run("user_12a45").success

    def test_escaped_pipe_is_alternation(self, parser):
        run = build_matcher(parser, RegexDirective(), r"{{compare:regex:^(foo\|bar)$}}")
        assert run("foo").success
        assert run("bar").success
        assert not run("foo|bar").success

    def test_search_semantics(self, parser):
        run = build_matcher(parser, RegexDirective(), r"{{compare:regex:\d{3}}}")
        assert run("abc 123 def").success

    def test_invalid_pattern_fails_construction(self, parser):
        with pytest.raises(DirectiveConfigurationError):
            build_matcher(parser, RegexDirective(), "{{compare:regex:(unclosed}}")

    def test_non_string_actual_fails(self, parser):
        run = build_matcher(parser, RegexDirective(), "{{compare:regex:.*}}")
        assert not run(None).success


class TestNumber:

    @pytest.mark.parametrize("actual", [0, 50, 100, 99.99])
    def test_range_inclusive(self, parser, actual):
        run = build_matcher(parser, NumberDirective(), "{{compare:number:range:0:100}}")
        assert run(actual).success

    @pytest.mark.parametrize("actual", [-0.001, 100.001])
    def test_range_exceeded(self, parser, actual):
        run = build_matcher(parser, NumberDirective(), "{{compare:number:range:0:100}}")
        result = run(actual)
        assert not result.success
        assert result.error_type == CompareErrorType.RANGE_EXCEEDED

    def test_range_reports_signed_distance(self, parser):
        run = build_matcher(parser, NumberDirective(), "{{compare:number:range:0:100}}")
        assert "(distancia: 5)" in run(105).error
        assert "(distancia: -5)" in run(-5).error

    @pytest.mark.parametrize("actual, expected", [
        (37, True), (42, True), (47, True), (36.9, False), (47.1, False)
    ])
    def test_absolute_tolerance(self, parser, actual, expected):
        run = build_matcher(parser, NumberDirective(), "{{compare:number:tolerance:42:±5}}")
        assert run(actual).success is expected

    @pytest.mark.parametrize("actual, expected", [
        (90, True), (110, True), (89, False), (111, False)
    ])
    def test_percentage_tolerance(self, parser, actual, expected):
        run = build_matcher(parser, NumberDirective(), "{{compare:number:tolerance:100:±10%}}")
        assert run(actual).success is expected

    def test_tolerance_message_shows_difference(self, parser):
        run = build_matcher(parser, NumberDirective(), "{{compare:number:tolerance:42:±5}}")
        assert "(diferencia: 8.00, permitida: 5.00)" in run(50).error

    def test_booleans_are_not_numbers(self, parser):
        run = build_matcher(parser, NumberDirective(), "{{compare:number:range:0:1}}")
        result = run(True)
        assert not result.success
        assert "boolean" in result.error

    @pytest.mark.parametrize("text", [
        "{{compare:number}}",
        "{{compare:number:between:0:1}}",
        "{{compare:number:range:10:1}}",
        "{{compare:number:range:a:1}}",
        "{{compare:number:range:1}}",
        "{{compare:number:tolerance:42:±-5}}",
        "{{compare:number:tolerance:42:abc}}",
    ])
    def test_invalid_configuration(self, parser, text):
        with pytest.raises(DirectiveConfigurationError):
            build_matcher(parser, NumberDirective(), text)


class TestTime:

    def test_exact_with_offset(self, parser):
        run = build_matcher(parser, TimeDirective(), "{{compare:time:exact:630:seconds}}")
        assert run("2025-11-05T15:40:30+01:00").success

    def test_exact_compares_milliseconds(self, parser):
        run = build_matcher(parser, TimeDirective(), "{{compare:time:exact}}")
        assert run("2025-11-05T14:30:00.000400Z").success

        result = run("2025-11-05T14:30:00.001Z")
        assert not result.success
        assert "diferencia: 1 milisegundos" in result.error

    def test_exact_accepts_epoch_seconds(self, parser):
        epoch = int(datetime(2025, 11, 5, 14, 30, tzinfo=timezone.utc).timestamp())
        run = build_matcher(parser, TimeDirective(), "{{compare:time:exact}}")
        assert run(epoch).success
        assert run(epoch * 1000).success

    def test_combined_range(self, parser):
        run = build_matcher(parser, TimeDirective(), "{{compare:time:range:-300:+300:seconds}}")
        assert run("2025-11-05T15:34:59+01:00").success
        assert run("2025-11-05T15:25:00+01:00").success

        result = run("2025-11-05T15:35:01+01:00")
        assert not result.success
        assert result.error_type == CompareErrorType.RANGE_EXCEEDED

    def test_future_only_range(self, parser):
        run = build_matcher(parser, TimeDirective(), "{{compare:time:range:+60:minutes}}")
        assert run("2025-11-05T16:00:00+01:00").success
        assert not run("2025-11-05T15:29:00+01:00").success

    def test_past_only_range(self, parser):
        run = build_matcher(parser, TimeDirective(), "{{compare:time:range:-1:hours}}")
        assert run("2025-11-05T14:45:00+01:00").success
        assert not run("2025-11-05T15:31:00+01:00").success

    def test_naive_timestamp_is_utc(self, parser):
        run = build_matcher(parser, TimeDirective(), "{{compare:time:exact}}")
        assert run("2025-11-05T14:30:00").success

    def test_unparseable_actual_is_a_failure(self, parser):
        run = build_matcher(parser, TimeDirective(), "{{compare:time:exact}}")
        result = run("yesterday")
        assert not result.success
        assert "Error al interpretar tiempo" in result.error

    def test_base_time_falls_back_to_script_start(self, parser):
        context = CompareContext(start_time_script="2025-01-01T00:00:00Z")
        run = build_matcher(parser, TimeDirective(), "{{compare:time:exact:1:days}}", context)
        assert run("2025-01-02T00:00:00Z").success

    @pytest.mark.parametrize("text", [
        "{{compare:time}}",
        "{{compare:time:window:1:seconds}}",
        "{{compare:time:range:60}}",
        "{{compare:time:range:1:2:3:seconds}}",
        "{{compare:time:range:60:fortnights}}",
        "{{compare:time:exact:60}}",
        "{{compare:time:exact:abc:seconds}}",
    ])
    def test_invalid_configuration(self, parser, text):
        with pytest.raises(DirectiveConfigurationError):
            build_matcher(parser, TimeDirective(), text)


def test_match_context_fields():
    assert [field.name for field in fields(MatchContext)] == ["path", "actual", "expected", "compare_context"]
