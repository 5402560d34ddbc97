"""Markdown documentation generation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from .codegen_examples import LanguageRegistry, LanguageTab
from .config import UNIT_FILE
from .labels import cardinality_label, type_label
from .links import PackageLink, is_well_known, package_links
from .log import get_logger
from .model import Message, OneOf, Package, ProtoFile
from .names import lower_snake_case, package_heading, upper_camel_case
from .output import GeneratedDocument
from .templating import TEMPLATE_ENV

LOGGER = get_logger("markdown")

ONEOF_SEPARATOR = "<br />"
FIELD_TABLE_HEADER = (
    "| Parameter | Type | Label | Comments |",
    "| --------- | ---- | ----- | -------- |",
)


@dataclass
class DocUnit:
    """A set of files rendered into one document."""

    name: str
    files: list[ProtoFile] = field(default_factory=list)

    def messages(self) -> list[Message]:
        """Every message of the unit, in declaration order."""
        return [message for proto_file in self.files for message in proto_file.all_messages()]


@dataclass
class MessageSection:
    """Template context for one message."""

    name: str
    blocks: list[str]


def build_units(packages: Sequence[Package], unit: str) -> list[DocUnit]:
    """Group *packages* into document units, skipping well-known types."""
    units: list[DocUnit] = []
    for package in packages:
        if is_well_known(package.name):
            LOGGER.debug("skipping well-known package '%s'", package.name)
            continue
        if unit == UNIT_FILE or not package.name:
            for proto_file in package.files:
                name = f"{package.name}.{proto_file.stem}" if package.name else proto_file.stem
                units.append(DocUnit(name=name, files=[proto_file]))
        else:
            units.append(DocUnit(name=package.name, files=list(package.files)))
    return units


def output_path(qualified_name: str, *, has_index: bool) -> str:
    """Return the document path for the unit named *qualified_name*."""
    prefix = "_" if has_index else ""
    return f"{prefix}{lower_snake_case(qualified_name)}_pb.md"


def render_language_tabs(tabs: Sequence[LanguageTab]) -> list[str]:
    """Render each tab as a fenced code block tagged with its language."""
    blocks: list[str] = []
    for tab in tabs:
        code = tab.code
        if code and not code.endswith("\n"):
            code += "\n"
        blocks.append(f"~~~{tab.language}\n{code}~~~")
    return blocks


def render_comment(comment: str) -> str:
    """Return the leading comment of a message, trailing newlines removed."""
    return comment.rstrip("\n")


def render_imports(links: Sequence[PackageLink]) -> str:
    """Render the dependency section, or ``""`` when there is nothing to link."""
    if not links:
        return ""
    lines = ["### Imports", ""]
    lines.extend(f"- [{link.name}]({link.url})" for link in links)
    return "\n".join(lines)


def field_rows(message: Message) -> list[str]:
    """Table rows: plain fields first, then one row per one-of group."""
    rows = [
        f"| {item.name} | {type_label(item.type)} | {cardinality_label(item.label)} "
        f"| {_table_cell(item.trailing_comment)} |"
        for item in message.non_oneof_fields
    ]
    rows.extend(_oneof_row(group) for group in message.real_oneofs)
    return rows


def render_field_table(message: Message) -> str:
    """Render the field table of *message*."""
    return "\n".join(["### Fields", "", *FIELD_TABLE_HEADER, *field_rows(message)])


def render_message(
    message: Message, registry: LanguageRegistry, languages: Sequence[str]
) -> MessageSection:
    """Collect the blocks documenting *message*."""
    blocks = render_language_tabs(registry.tabs(message, languages))
    comment = render_comment(message.leading_comment)
    if comment:
        blocks.append(comment)
    imports = render_imports(package_links(message.imports))
    if imports:
        blocks.append(imports)
    blocks.append(render_field_table(message))
    return MessageSection(name=message.name, blocks=blocks)


def render_document(
    unit: DocUnit,
    *,
    registry: LanguageRegistry,
    languages: Sequence[str],
    has_index: bool = False,
) -> GeneratedDocument:
    """Render *unit* into a Markdown document."""
    sections = [render_message(message, registry, languages) for message in unit.messages()]
    text = TEMPLATE_ENV.get_template("document.md.j2").render(
        heading=package_heading(unit.name),
        messages=sections,
    )
    path = output_path(unit.name, has_index=has_index)
    LOGGER.debug("rendered %s (%d message(s))", path, len(sections))
    return GeneratedDocument(path=path, text=text)


def _oneof_row(group: OneOf) -> str:
    alternatives = ONEOF_SEPARATOR.join(upper_camel_case(item.name) for item in group.fields)
    return f"| {group.name} | {alternatives} | |  |"


def _table_cell(text: str) -> str:
    return " ".join(text.split()).replace("|", "\\|")
