"""Tests for the aggregated index."""

from __future__ import annotations

import pytest
import yaml

from protoc_gen_slate.codegen_index import (
    INDEX_FILE_MODE,
    collect_includes,
    generate_index,
    render_front_matter,
)
from protoc_gen_slate.errors import SerializationError
from protoc_gen_slate.output import GeneratedDocument


def _documents(*paths: str) -> list[GeneratedDocument]:
    return [GeneratedDocument(path=path, text="") for path in paths]


def test_includes_are_sorted_lexicographically() -> None:
    assert collect_includes(_documents("b_pb.md", "a_pb.md", "_c_pb.md")) == [
        "_c_pb.md",
        "a_pb.md",
        "b_pb.md",
    ]


def test_includes_sort_is_case_sensitive() -> None:
    assert collect_includes(_documents("b_pb.md", "B_pb.md", "a_pb.md")) == [
        "B_pb.md",
        "a_pb.md",
        "b_pb.md",
    ]


def test_front_matter_layout() -> None:
    text = render_front_matter(["_shop.v1_pb.md"], ["ruby", "protobuf"])
    assert text == (
        "---\n"
        "Includes:\n"
        "- _shop.v1_pb.md\n"
        "language_tabs:\n"
        "- ruby\n"
        "- protobuf\n"
        "Search: true\n"
        "code_clipboard: true\n"
        "---\n"
    )
    assert yaml.safe_load(text.strip("-\n")) == {
        "Includes": ["_shop.v1_pb.md"],
        "language_tabs": ["ruby", "protobuf"],
        "Search": True,
        "code_clipboard": True,
    }


def test_generate_index_document() -> None:
    index = generate_index(_documents("_b_pb.md", "_a_pb.md"), "index.md", ["java"])
    assert index.path == "index.md"
    assert index.mode == INDEX_FILE_MODE
    assert "- _a_pb.md\n- _b_pb.md\n" in index.text


def test_unencodable_front_matter_is_fatal() -> None:
    with pytest.raises(SerializationError):
        render_front_matter(["a_pb.md"], [object()])  # type: ignore[list-item]
