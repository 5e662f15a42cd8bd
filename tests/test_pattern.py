"""Tests for signpost.routing.pattern — pattern to regex compilation."""

from signpost.routing.pattern import compile_pattern, match_pattern, param_names


class TestCompilePattern:
    def test_static(self) -> None:
        assert compile_pattern("/users").pattern == "^/users$"

    def test_single_param(self) -> None:
        assert compile_pattern("/users/:id").pattern == "^/users/([^/]+)$"

    def test_literal_metacharacters_escaped(self) -> None:
        regex = compile_pattern("/files/v1.0")
        assert regex.match("/files/v1.0")
        assert regex.match("/files/v1x0") is None

    def test_cached(self) -> None:
        assert compile_pattern("/cached/:x") is compile_pattern("/cached/:x")


class TestMatchPattern:
    def test_one_param(self) -> None:
        assert match_pattern("/users/:id", "/users/42") == ("42",)

    def test_params_left_to_right(self) -> None:
        assert match_pattern("/a/:x/b/:y", "/a/1/b/2") == ("1", "2")

    def test_param_does_not_cross_slash(self) -> None:
        assert match_pattern("/users/:id", "/users/42/edit") is None

    def test_anchored_start(self) -> None:
        assert match_pattern("/users/:id", "/api/users/42") is None

    def test_param_needs_at_least_one_char(self) -> None:
        assert match_pattern("/users/:id", "/users/") is None

    def test_param_within_segment(self) -> None:
        assert match_pattern("/posts/:slug.html", "/posts/hello.html") == ("hello",)

    def test_token_stops_at_underscore(self) -> None:
        # ":user" is the token, "_id" is literal text
        assert match_pattern("/u/:user_id", "/u/bob_id") == ("bob",)
        assert match_pattern("/u/:user_id", "/u/bob") is None

    def test_plus_is_literal(self) -> None:
        assert match_pattern("/c++/:page", "/c++/intro") == ("intro",)
        assert match_pattern("/c++/:page", "/cc/intro") is None


class TestParamNames:
    def test_names(self) -> None:
        assert param_names("/a/:x/b/:y") == ["x", "y"]

    def test_none(self) -> None:
        assert param_names("/about") == []
