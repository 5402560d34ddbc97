"""Tests for per-language code examples."""

from __future__ import annotations

from pathlib import Path

import pytest

from protoc_gen_slate.codegen_examples import (
    LanguageRegistry,
    LanguageTab,
    RawSchemaExample,
    default_registry,
    no_example,
)
from protoc_gen_slate.errors import SourceReadError, UnknownLanguageError
from protoc_gen_slate.model import Package
from protoc_gen_slate.sources import SourceTree


def test_ruby_example_uses_ruby_package(shop_packages: list[Package], source_dir: Path) -> None:
    item = shop_packages[0].files[0].messages[0]
    registry = default_registry(SourceTree(source_dir))

    [tab] = registry.tabs(item, ["ruby"])

    assert tab == LanguageTab(
        language="ruby",
        code=(
            "include Shop::V1\n"
            "\n"
            "message = Item.new(\n"
            "  sku: 'abcdef',\n"
            "  quantity: 'abcdef',\n"
            ")\n"
        ),
    )


def test_ruby_example_falls_back_to_package_and_skips_oneofs(
    shop_packages: list[Package], source_dir: Path
) -> None:
    order = shop_packages[0].files[1].messages[0]
    registry = default_registry(SourceTree(source_dir))

    code = registry.tabs(order, ["ruby"])[0].code

    assert code.startswith("include shop::v1\n")
    assert "placed_at: 'abcdef'," in code
    assert "card" not in code
    assert "cash" not in code


def test_raw_schema_example_embeds_source(shop_packages: list[Package], source_dir: Path) -> None:
    order = shop_packages[0].files[1].messages[0]
    expected = (source_dir / "shop" / "v1" / "order.proto").read_text()
    assert RawSchemaExample(SourceTree(source_dir))(order) == expected


def test_raw_schema_example_missing_source(shop_packages: list[Package], tmp_path: Path) -> None:
    order = shop_packages[0].files[1].messages[0]
    with pytest.raises(SourceReadError, match="order.proto"):
        RawSchemaExample(SourceTree(tmp_path))(order)


def test_tabs_follow_configured_order(shop_packages: list[Package], source_dir: Path) -> None:
    card = shop_packages[0].files[1].messages[1]
    registry = default_registry(SourceTree(source_dir))
    languages = ["python", "ruby", "protobuf", "java", "javascript"]

    tabs = registry.tabs(card, languages)

    assert [tab.language for tab in tabs] == languages
    assert tabs[0].code == ""
    assert tabs[3].code == ""


def test_unknown_language_is_fatal(shop_packages: list[Package]) -> None:
    registry = LanguageRegistry()
    registry.register("java", no_example)
    with pytest.raises(UnknownLanguageError, match="'cobol'"):
        registry.check(["java", "cobol"])
    with pytest.raises(UnknownLanguageError):
        registry.tabs(shop_packages[0].files[0].messages[0], ["cobol"])


def test_examples_are_deterministic(shop_packages: list[Package], source_dir: Path) -> None:
    order = shop_packages[0].files[1].messages[0]
    registry = default_registry(SourceTree(source_dir))
    assert registry.tabs(order, ["ruby", "protobuf"]) == registry.tabs(order, ["ruby", "protobuf"])


def test_registry_lists_builtin_languages(source_dir: Path) -> None:
    assert default_registry(SourceTree(source_dir)).languages() == [
        "java",
        "javascript",
        "protobuf",
        "python",
        "ruby",
    ]
