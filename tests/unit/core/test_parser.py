"""Tests for the core parser module."""

import pytest

from acquasitions.core.parser import (
    PathSegment,
    SegmentType,
    parse_path_pattern,
    parse_path_segment,
    segments_to_fastapi_path,
)
from acquasitions.exceptions import PathParseError


class TestPathSegment:
    def test_frozen_dataclass(self):
        segment = PathSegment("users", SegmentType.STATIC, "users")
        with pytest.raises(AttributeError):
            segment.name = "changed"

    def test_is_parameter_for_dynamic(self):
        segment = PathSegment("id", SegmentType.DYNAMIC, ":id")
        assert segment.is_parameter is True

    def test_is_parameter_for_static(self):
        segment = PathSegment("users", SegmentType.STATIC, "users")
        assert segment.is_parameter is False

    def test_to_fastapi_segment_static(self):
        segment = PathSegment("users", SegmentType.STATIC, "users")
        assert segment.to_fastapi_segment() == "users"

    def test_to_fastapi_segment_dynamic(self):
        segment = PathSegment("id", SegmentType.DYNAMIC, ":id")
        assert segment.to_fastapi_segment() == "{id}"


class TestParsePathSegment:
    def test_static_segment(self):
        segment = parse_path_segment("users")
        assert segment.name == "users"
        assert segment.segment_type == SegmentType.STATIC
        assert segment.original == "users"

    def test_static_segment_with_punctuation(self):
        segment = parse_path_segment("user-profiles.v2")
        assert segment.segment_type == SegmentType.STATIC

    def test_dynamic_segment(self):
        segment = parse_path_segment(":id")
        assert segment.name == "id"
        assert segment.segment_type == SegmentType.DYNAMIC
        assert segment.original == ":id"

    def test_dynamic_segment_with_underscore_and_caps(self):
        assert parse_path_segment(":user_Id").name == "user_Id"

    def test_empty_segment_rejected(self):
        with pytest.raises(PathParseError, match="Empty segment"):
            parse_path_segment("")

    def test_missing_parameter_name_rejected(self):
        with pytest.raises(PathParseError, match="Invalid parameter segment"):
            parse_path_segment(":")

    def test_numeric_parameter_name_rejected(self):
        with pytest.raises(PathParseError, match="Invalid parameter segment"):
            parse_path_segment(":123")

    def test_hyphenated_parameter_name_rejected(self):
        with pytest.raises(PathParseError):
            parse_path_segment(":not-valid")

    def test_brace_syntax_rejected(self):
        with pytest.raises(PathParseError, match="Invalid path segment"):
            parse_path_segment("{id}")


class TestParsePathPattern:
    def test_root(self):
        assert parse_path_pattern("/") == []

    def test_single_parameter(self):
        segments = parse_path_pattern("/:id")
        assert [s.segment_type for s in segments] == [SegmentType.DYNAMIC]
        assert segments[0].name == "id"

    def test_nested(self):
        segments = parse_path_pattern("/users/:id/posts")
        assert [s.name for s in segments] == ["users", "id", "posts"]

    def test_trailing_slash_ignored(self):
        assert parse_path_pattern("/users/") == parse_path_pattern("/users")

    def test_must_start_with_slash(self):
        with pytest.raises(PathParseError, match="must start with '/'"):
            parse_path_pattern(":id")

    def test_empty_inner_segment_rejected(self):
        with pytest.raises(PathParseError, match="users//posts"):
            parse_path_pattern("/users//posts")

    def test_duplicate_parameter_rejected(self):
        with pytest.raises(PathParseError, match="Duplicate parameter ':id'"):
            parse_path_pattern("/:id/friends/:id")


class TestSegmentsToFastapiPath:
    def test_empty_is_root(self):
        assert segments_to_fastapi_path([]) == "/"

    def test_parameter_rendered_with_braces(self):
        assert segments_to_fastapi_path(parse_path_pattern("/users/:id")) == "/users/{id}"

    def test_static_only(self):
        assert segments_to_fastapi_path(parse_path_pattern("/health")) == "/health"
