"""Tests for linkrouter.routing.handler — LinkHandler protocol and BaseLinkHandler."""

import pytest

from linkrouter.routing.handler import BaseLinkHandler, LinkHandler
from linkrouter.routing.link import Link, parse_link


class _PlainHandler:
    path_schemes = ("games",)

    def can_handle(self, link: Link) -> bool:
        return True

    def handle(self, link: Link) -> bool:
        return True


class _Games(BaseLinkHandler):
    path_schemes = ("games", "games/{username}", "games/{username}/reviews")

    def handle(self, link: Link) -> bool:
        return True


class TestProtocol:
    def test_plain_class_satisfies_protocol(self) -> None:
        assert isinstance(_PlainHandler(), LinkHandler)

    def test_base_handler_satisfies_protocol(self) -> None:
        assert isinstance(_Games(), LinkHandler)

    def test_missing_handle_does_not(self) -> None:
        class _NoHandle:
            path_schemes = ("games",)

            def can_handle(self, link: Link) -> bool:
                return True

        assert not isinstance(_NoHandle(), LinkHandler)

    def test_base_handler_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            BaseLinkHandler()  # type: ignore[abstract]


class TestBaseLinkHandler:
    def test_roots(self) -> None:
        assert _Games().roots == frozenset({"games"})

    def test_scheme_set_cached(self) -> None:
        handler = _Games()
        assert handler.scheme_set is handler.scheme_set

    def test_can_handle(self) -> None:
        handler = _Games()
        assert handler.can_handle(parse_link("https://x.com/games"))
        assert not handler.can_handle(parse_link("https://x.com/films"))

    def test_extract_params(self) -> None:
        result = _Games().extract_params(["games", "alice"], {"username": "bob"})
        assert result is not None
        assert result.params == {"username": "bob"}

    def test_result_for_path(self) -> None:
        result = _Games().result_for(parse_link("https://x.com/games/alice/reviews"))
        assert result is not None
        assert result.params == {"username": "alice"}
        assert result.trailing_components == ("reviews",)

    def test_result_for_query_only(self) -> None:
        result = _Games().result_for(parse_link("https://x.com/games?username=alice"))
        assert result is not None
        assert result.params == {"username": "alice"}
        assert result.trailing_components == ()

    def test_result_for_unresolved(self) -> None:
        assert _Games().result_for(parse_link("https://x.com/games")) is None

    def test_override_can_handle(self) -> None:
        class _Strict(_Games):
            def can_handle(self, link: Link) -> bool:
                return link.path_components[:1] == ("games",)

        assert not _Strict().can_handle(parse_link("https://x.com/en/games"))
        assert _Games().can_handle(parse_link("https://x.com/en/games"))
