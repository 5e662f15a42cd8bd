"""Tests for signpost.routing — RouteTable and resolve()."""

import pytest

from signpost.options import OptionStore
from signpost.routing.matcher import resolve
from signpost.routing.route import Route, RouteMatch
from signpost.routing.table import ROUTES_KEY, RouteTable


def _first() -> str:
    return "first"


def _second() -> str:
    return "second"


class TestRouteTable:
    def test_define_and_list(self) -> None:
        table = RouteTable()
        table.define("/a", _first)
        table.define("/b", _second)
        assert table.list() == [("/a", _first), ("/b", _second)]

    def test_redefine_replaces_handler_keeps_position(self) -> None:
        table = RouteTable()
        table.define("/a", _first)
        table.define("/b", _second)
        table.define("/a", _second)
        assert table.list() == [("/a", _second), ("/b", _second)]

    def test_contains_and_len(self) -> None:
        table = RouteTable()
        table.define("/a", _first)
        assert "/a" in table
        assert "/b" not in table
        assert len(table) == 1

    def test_get(self) -> None:
        table = RouteTable()
        table.define("/a", _first)
        assert table.get("/a") == Route("/a", _first)
        assert table.get("/missing") is None

    def test_rejects_non_callable(self) -> None:
        table = RouteTable()
        with pytest.raises(TypeError, match="callable"):
            table.define("/a", "not a function")  # type: ignore[arg-type]

    def test_from_options_creates_and_stores(self) -> None:
        store = OptionStore()
        table = RouteTable.from_options(store)
        assert store.get(ROUTES_KEY) is table
        assert RouteTable.from_options(store) is table


class TestResolveExact:
    def test_exact_match_has_no_params(self) -> None:
        table = RouteTable()
        table.define("/about", _first)
        match = resolve("/about", table)
        assert match == RouteMatch(Route("/about", _first), ())
        assert match.handler is _first

    def test_every_exact_pattern_resolves_to_itself(self) -> None:
        table = RouteTable()
        patterns = ["/", "/a", "/a/b", "/users/:id"]
        for p in patterns:
            table.define(p, _first)
        for p in patterns:
            match = resolve(p, table)
            assert match is not None
            assert match.route.pattern == p
            assert match.params == ()

    def test_exact_beats_earlier_pattern(self) -> None:
        table = RouteTable()
        table.define("/users/:id", _first)
        table.define("/users/me", _second)
        match = resolve("/users/me", table)
        assert match is not None
        assert match.handler is _second
        assert match.params == ()


class TestResolvePatterns:
    def test_single_param(self) -> None:
        table = RouteTable()
        table.define("/users/:id", _first)
        match = resolve("/users/42", table)
        assert match is not None
        assert match.handler is _first
        assert match.params == ("42",)

    def test_two_params_in_order(self) -> None:
        table = RouteTable()
        table.define("/a/:x/b/:y", _first)
        match = resolve("/a/1/b/2", table)
        assert match is not None
        assert match.params == ("1", "2")

    def test_first_defined_wins(self) -> None:
        table = RouteTable()
        table.define("/items/:id", _first)
        table.define("/items/:slug", _second)
        match = resolve("/items/x", table)
        assert match is not None
        assert match.handler is _first

    def test_redefinition_does_not_move_to_end(self) -> None:
        table = RouteTable()
        table.define("/items/:id", _first)
        table.define("/items/:slug", _second)
        table.define("/items/:id", _second)
        match = resolve("/items/x", table)
        assert match is not None
        assert match.route.pattern == "/items/:id"

    def test_no_match(self) -> None:
        table = RouteTable()
        table.define("/users/:id", _first)
        assert resolve("/posts/1", table) is None

    def test_empty_table(self) -> None:
        assert resolve("/", RouteTable()) is None
