"""Tests for wayfinder.routing.route and wayfinder.routing.pattern."""

import pytest

from wayfinder.routing.pattern import Dynamic, Literal, parse_pattern, parse_segment, split_path
from wayfinder.routing.route import Route


def _factory(params):
    return dict(params)


class TestParsePattern:
    def test_root(self) -> None:
        assert parse_pattern("/") == []

    def test_static(self) -> None:
        assert parse_pattern("/api/v2/users") == [Literal("api"), Literal("v2"), Literal("users")]

    def test_required_param(self) -> None:
        assert parse_pattern("/users/:id") == [Literal("users"), Dynamic("id")]

    def test_optional_param(self) -> None:
        segments = parse_pattern("/posts/:id?")
        assert segments[1] == Dynamic("id", optional=True)

    def test_extra_slashes_dropped(self) -> None:
        assert parse_pattern("//users///:id/") == parse_pattern("/users/:id")

    def test_question_mark_on_literal_is_text(self) -> None:
        assert parse_segment("what?") == Literal("what?")


class TestSplitPath:
    def test_drops_empty(self) -> None:
        assert split_path("/a//b/") == ["a", "b"]

    def test_root(self) -> None:
        assert split_path("/") == []


class TestRoute:
    def test_segments_parsed_once(self) -> None:
        route = Route("/users/:id/posts/:post?", _factory)
        assert route.segments == (
            Literal("users"),
            Dynamic("id"),
            Literal("posts"),
            Dynamic("post", optional=True),
        )
        assert route.param_names == ("id", "post")

    def test_identity_equality(self) -> None:
        a = Route("/users", _factory)
        b = Route("/users", _factory)
        assert a != b
        assert a == a
        assert len({a, b}) == 2

    def test_frozen(self) -> None:
        route = Route("/", _factory)
        with pytest.raises(AttributeError):
            route.path = "/other"  # type: ignore[misc]
