"""Link handler protocol and a scheme-driven base class.

A handler is any object matching::

    class GamesLinkHandler:
        path_schemes = ["games", "games/{username}"]
        def can_handle(self, link: Link) -> bool: ...
        def handle(self, link: Link) -> bool: ...

No base class required. The router checks the shape, not the lineage.
``BaseLinkHandler`` supplies ``can_handle`` and parameter extraction
derived from ``path_schemes`` so subclasses only write ``handle``.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from functools import cached_property
from types import MappingProxyType
from typing import Protocol, runtime_checkable

from linkrouter.routing.link import Link
from linkrouter.routing.resolver import SchemeSet
from linkrouter.routing.scheme import PathResult


@runtime_checkable
class LinkHandler(Protocol):
    """Protocol for link handlers.

    ``path_schemes`` lists every path shape the handler understands, with
    dynamic segments written as ``{name}``. ``can_handle`` decides whether
    the handler claims a link; ``handle`` acts on it and reports whether
    anything was done.
    """

    @property
    def path_schemes(self) -> Sequence[str]: ...
    def can_handle(self, link: Link) -> bool: ...
    def handle(self, link: Link) -> bool: ...


class BaseLinkHandler(ABC):
    """Default claim and extraction logic built from ``path_schemes``.

    Subclass and implement ``handle``::

        class GamesLinkHandler(BaseLinkHandler):
            path_schemes = ("games", "games/{username}", "games/{username}/reviews")

            def handle(self, link: Link) -> bool:
                result = self.result_for(link)
                ...

    Claiming is coarse: a link is claimed when any root segment appears in
    its path. A claimed link may still fail to resolve, in which case
    ``result_for`` returns ``None`` and ``handle`` decides the fallback.
    """

    path_schemes: Sequence[str] = ()

    @cached_property
    def scheme_set(self) -> SchemeSet:
        return SchemeSet(self.path_schemes)

    @property
    def roots(self) -> frozenset[str]:
        return self.scheme_set.roots

    def can_handle(self, link: Link) -> bool:
        return self.scheme_set.claims(link)

    def extract_params(
        self,
        path_components: Sequence[str],
        existing_params: Mapping[str, str] | None = None,
    ) -> PathResult | None:
        """Resolve *path_components* against this handler's schemes.

        *existing_params* take precedence over path values with the same key.
        """
        return self.scheme_set.resolve(path_components, existing_params)

    def result_for(self, link: Link) -> PathResult | None:
        """Parameters for *link*, from its path or, failing that, its query.

        Falls back to the query parameters alone when no scheme matches the
        path, so ``/games?username=KeyMaster`` reads the same as
        ``/games/KeyMaster``. Returns ``None`` when there is nothing to use.
        """
        result = self.extract_params(link.path_components, link.params)
        if result is None and link.params:
            return PathResult(params=MappingProxyType(dict(link.params)))
        return result

    @abstractmethod
    def handle(self, link: Link) -> bool:
        """Inspect *link* and act on it. Return True if an action was performed."""
