"""Tests for signpost.errors — exception hierarchy and messages."""

from signpost.errors import ConfigurationError, InvalidArgument, RouteNotFound, SignpostError


class TestHierarchy:
    def test_configuration_error(self) -> None:
        assert issubclass(ConfigurationError, SignpostError)

    def test_invalid_argument(self) -> None:
        assert issubclass(InvalidArgument, SignpostError)
        assert issubclass(InvalidArgument, ValueError)

    def test_route_not_found(self) -> None:
        assert issubclass(RouteNotFound, SignpostError)
        assert issubclass(RouteNotFound, LookupError)


class TestRouteNotFound:
    def test_carries_path(self) -> None:
        err = RouteNotFound("/missing")
        assert err.path == "/missing"

    def test_message(self) -> None:
        assert str(RouteNotFound("/missing")) == (
            "Route not found for '/missing'. "
            'Configure a fallback with app.options.set("error_404", handler).'
        )
