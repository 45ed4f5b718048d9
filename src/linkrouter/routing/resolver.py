"""SchemeSet — one handler's path schemes, parsed once and matched together.

Any handler can compose a ``SchemeSet`` to get the coarse claim check
(does the link mention one of my roots?) and the fine-grained parameter
resolution (which scheme fits, and what does it bind?).
"""

from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType

from linkrouter.routing.link import Link
from linkrouter.routing.scheme import PathResult, PathSegment, match_scheme, parse_scheme


class SchemeSet:
    """Parsed path schemes for a single handler.

    Usage::

        schemes = SchemeSet(["games", "games/{username}", "games/{username}/reviews"])
        schemes.roots                      # frozenset({"games"})
        schemes.resolve(["games", "KeyMaster"])
        # PathResult(params={"username": "KeyMaster"}, trailing_components=())
    """

    __slots__ = ("_by_length", "_roots", "_schemes")

    def __init__(self, schemes: Iterable[str]) -> None:
        self._schemes: tuple[str, ...] = tuple(schemes)
        parsed = [parse_scheme(scheme) for scheme in self._schemes]
        # sorted() is stable: equal-length schemes keep declaration order
        self._by_length: tuple[tuple[PathSegment, ...], ...] = tuple(
            sorted(parsed, key=len, reverse=True)
        )
        self._roots: frozenset[str] = frozenset(
            segments[0].value for segments in parsed if segments
        )

    @property
    def schemes(self) -> tuple[str, ...]:
        """The scheme strings as declared."""
        return self._schemes

    @property
    def roots(self) -> frozenset[str]:
        """Unique first segments across all schemes."""
        return self._roots

    def claims(self, link: Link) -> bool:
        """True if any root appears anywhere in the link's path components."""
        return any(root in link.path_components for root in self._roots)

    def resolve(
        self,
        path_components: Sequence[str],
        existing_params: Mapping[str, str] | None = None,
    ) -> PathResult | None:
        """Find the longest scheme matching *path_components*.

        Values in *existing_params* (usually the query string) win over
        values bound from the path under the same key. Returns ``None``
        when no scheme matches.
        """
        for segments in self._by_length:
            result = match_scheme(path_components, segments)
            if result is None:
                continue
            params = dict(existing_params or {})
            for key, value in result.params.items():
                params.setdefault(key, value)
            return PathResult(
                params=MappingProxyType(params),
                trailing_components=result.trailing_components,
            )
        return None

    def __len__(self) -> int:
        return len(self._schemes)

    def __repr__(self) -> str:
        return f"SchemeSet({list(self._schemes)!r})"
