"""Path schemes — ``{param}`` templates and positional matching.

A path scheme is a slash-separated template such as
``"games/{username}/reviews"``. Each segment is either a literal that must
appear verbatim or a placeholder that binds exactly one path segment.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a path scheme.

    Literal:      ``games``       (is_param=False)
    Placeholder:  ``{username}``  (is_param=True, param_name="username")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None


@dataclass(frozen=True, slots=True)
class PathResult:
    """Parameters found in a link plus the path left after the last one.

    Attributes:
        params: Query parameters merged with values bound by placeholders.
        trailing_components: Path segments after the last bound placeholder.
    """

    params: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}), hash=False)
    trailing_components: tuple[str, ...] = ()


def is_placeholder(text: str) -> bool:
    return len(text) >= 2 and text.startswith("{") and text.endswith("}")


def parse_scheme(scheme: str) -> tuple[PathSegment, ...]:
    """Parse a path scheme string into segments.

    Examples::

        "games"                    -> (PathSegment("games"),)
        "games/{username}"         -> (PathSegment("games"), PathSegment("{username}", True, "username"))
        "/games/{username}/"       -> same as above; outer slashes are ignored
    """
    stripped = scheme.strip("/")
    if not stripped:
        return ()
    segments: list[PathSegment] = []
    for part in stripped.split("/"):
        if is_placeholder(part):
            segments.append(PathSegment(value=part, is_param=True, param_name=part[1:-1]))
        else:
            segments.append(PathSegment(value=part))
    return tuple(segments)


def match_scheme(
    path_components: Sequence[str],
    segments: Sequence[PathSegment],
) -> PathResult | None:
    """Match path components against one parsed scheme, position by position.

    Returns ``None`` unless both sequences have the same length, every
    literal equals its path segment exactly, and at least one placeholder
    was bound. A placeholder name repeated later in the same scheme keeps
    its first position; the later occurrence is compared as a literal.

    ``trailing_components`` holds the path segments after the highest
    bound placeholder index.
    """
    if len(path_components) != len(segments):
        return None

    index_to_name: dict[int, str] = {}
    seen: set[str] = set()
    for index, segment in enumerate(segments):
        if segment.is_param and segment.param_name not in seen:
            seen.add(segment.param_name)
            index_to_name[index] = segment.param_name
    if not index_to_name:
        return None

    params: dict[str, str] = {}
    for index, component in enumerate(path_components):
        name = index_to_name.get(index)
        if name is not None:
            params[name] = component
        elif component != segments[index].value:
            return None

    last_index = max(index_to_name)
    return PathResult(
        params=MappingProxyType(params),
        trailing_components=tuple(path_components[last_index + 1 :]),
    )
