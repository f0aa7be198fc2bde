"""Path pattern parser for route tables.

Converts colon-style route patterns into FastAPI path patterns:
- users -> users (static segment)
- :id -> {id} (named parameter)
- / -> / (root)
"""

import re
from dataclasses import dataclass
from enum import Enum

from acquasitions.exceptions import PathParseError


class SegmentType(Enum):
    """Type of a URL path segment."""

    STATIC = "static"
    DYNAMIC = "dynamic"


@dataclass(frozen=True)
class PathSegment:
    """A parsed URL path segment with type and name."""

    name: str
    segment_type: SegmentType
    original: str

    @property
    def is_parameter(self) -> bool:
        """Check if this segment represents a path parameter."""
        return self.segment_type is SegmentType.DYNAMIC

    def to_fastapi_segment(self) -> str:
        """Convert this segment to FastAPI path syntax.

        Examples:
            STATIC "users" -> "users"
            DYNAMIC "id" -> "{id}"
        """
        match self.segment_type:
            case SegmentType.STATIC:
                return self.name
            case SegmentType.DYNAMIC:
                return f"{{{self.name}}}"


_DYNAMIC_PATTERN = re.compile(r"^:([A-Za-z_][A-Za-z0-9_]*)$")
_STATIC_PATTERN = re.compile(r"^[A-Za-z0-9._~-]+$")


def parse_path_segment(segment: str) -> PathSegment:
    """Parse a single pattern segment into a PathSegment.

    Args:
        segment: One slash-separated piece of a route pattern.

    Returns:
        PathSegment with detected type and extracted name.

    Raises:
        PathParseError: If segment has invalid syntax.

    Examples:
        "users" -> PathSegment(name="users", segment_type=STATIC, ...)
        ":id" -> PathSegment(name="id", segment_type=DYNAMIC, ...)
    """
    if not segment:
        raise PathParseError("Empty segment")

    if match := _DYNAMIC_PATTERN.match(segment):
        return PathSegment(
            name=match.group(1),
            segment_type=SegmentType.DYNAMIC,
            original=segment,
        )

    if segment.startswith(":"):
        raise PathParseError(
            f"Invalid parameter segment '{segment}'. "
            f"Parameter names must match [A-Za-z_][A-Za-z0-9_]*."
        )

    if _STATIC_PATTERN.match(segment):
        return PathSegment(
            name=segment,
            segment_type=SegmentType.STATIC,
            original=segment,
        )

    raise PathParseError(
        f"Invalid path segment '{segment}'. Use :param or letters, digits and '._~-'."
    )


def parse_path_pattern(pattern: str) -> list[PathSegment]:
    """Parse a route pattern such as ``/:id`` into PathSegments.

    A single trailing slash is ignored and ``/`` parses to no segments.

    Args:
        pattern: Route pattern starting with ``/``.

    Returns:
        List of parsed PathSegment objects.

    Raises:
        PathParseError: If the pattern does not start with ``/``, contains an
            empty or invalid segment, or repeats a parameter name.

    Examples:
        "/" -> []
        "/:id" -> [PathSegment(DYNAMIC, "id")]
        "/users/:id" -> [PathSegment(STATIC, "users"), PathSegment(DYNAMIC, "id")]
    """
    if not pattern.startswith("/"):
        raise PathParseError(f"Route pattern '{pattern}' must start with '/'")

    body = pattern[1:]
    if body.endswith("/"):
        body = body[:-1]
    if not body:
        return []

    segments = []
    seen_params: set[str] = set()

    for part in body.split("/"):
        try:
            segment = parse_path_segment(part)
        except PathParseError as exc:
            raise PathParseError(f"{exc} (in pattern '{pattern}')") from exc

        if segment.is_parameter:
            if segment.name in seen_params:
                raise PathParseError(
                    f"Duplicate parameter ':{segment.name}' in pattern '{pattern}'"
                )
            seen_params.add(segment.name)

        segments.append(segment)

    return segments


def segments_to_fastapi_path(segments: list[PathSegment]) -> str:
    """Convert PathSegments to a FastAPI path string.

    Examples:
        [STATIC("users")] -> "/users"
        [STATIC("users"), DYNAMIC("id")] -> "/users/{id}"
        [] -> "/"
    """
    parts = [segment.to_fastapi_segment() for segment in segments]
    return "/" + "/".join(parts) if parts else "/"
