"""Tests for wayfinder.preload.params — placeholder substitution."""

from wayfinder.preload.params import has_unsubstituted_param, substitute_params


class TestSubstituteParams:
    def test_whole_value(self) -> None:
        assert substitute_params({"userId": ":id"}, {"id": "42"}) == {"userId": "42"}

    def test_embedded_token(self) -> None:
        assert substitute_params({"key": ":id-comments"}, {"id": "42"}) == {"key": "42-comments"}

    def test_multiple_tokens(self) -> None:
        result = substitute_params({"path": ":user/:post"}, {"user": "ann", "post": "9"})
        assert result == {"path": "ann/9"}

    def test_unknown_token_left_alone(self) -> None:
        result = substitute_params({"x": ":missing"}, {"id": "42"})
        assert result == {"x": ":missing"}
        assert has_unsubstituted_param(result)

    def test_longer_name_not_clobbered(self) -> None:
        result = substitute_params({"a": ":idx", "b": ":id"}, {"id": "1", "idx": "2"})
        assert result == {"a": "2", "b": "1"}

    def test_substituted_value_not_rescanned(self) -> None:
        # "/a/:slug/:id" matched against "/a/:id/7"
        result = substitute_params({"q": ":slug"}, {"slug": ":id", "id": "7"})
        assert result == {"q": ":id"}
        assert has_unsubstituted_param(result)

    def test_replacement_with_backslash_is_literal(self) -> None:
        assert substitute_params({"q": ":id"}, {"id": r"a\1b"}) == {"q": r"a\1b"}

    def test_no_route_params(self) -> None:
        assert substitute_params({"q": ":id"}, {}) == {"q": ":id"}

    def test_none_declared(self) -> None:
        assert substitute_params(None, {"id": "42"}) is None

    def test_input_not_mutated(self) -> None:
        declared = {"userId": ":id"}
        substitute_params(declared, {"id": "42"})
        assert declared == {"userId": ":id"}


class TestHasUnsubstitutedParam:
    def test_clean(self) -> None:
        assert not has_unsubstituted_param({"a": "1", "b": "two"})

    def test_none_and_empty(self) -> None:
        assert not has_unsubstituted_param(None)
        assert not has_unsubstituted_param({})

    def test_literal_colon_counts(self) -> None:
        # A time string trips the check just like a leftover token
        assert has_unsubstituted_param({"at": "10:30"})
