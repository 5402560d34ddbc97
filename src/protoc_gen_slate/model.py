"""Read-only descriptor model consumed by the documentation pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import Iterator


@dataclass
class Field:
    """A message field."""

    name: str
    number: int
    type: int
    label: int
    type_name: str = ""
    oneof_index: int | None = None
    proto3_optional: bool = False
    leading_comment: str = ""
    trailing_comment: str = ""


@dataclass
class OneOf:
    """A group of mutually exclusive fields."""

    name: str
    fields: list[Field] = field(default_factory=list)
    synthetic: bool = False
    leading_comment: str = ""


@dataclass
class EnumValue:
    """A single enum constant."""

    name: str
    number: int


@dataclass
class Enum:
    """An enum declared at file level or inside a message."""

    name: str
    full_name: str
    values: list[EnumValue] = field(default_factory=list)
    leading_comment: str = ""


@dataclass(eq=False)
class Message:
    """A message with its fields, one-of groups and nested declarations."""

    name: str
    full_name: str
    fields: list[Field] = field(default_factory=list)
    oneofs: list[OneOf] = field(default_factory=list)
    nested: list[Message] = field(default_factory=list)
    enums: list[Enum] = field(default_factory=list)
    is_map_entry: bool = False
    leading_comment: str = ""
    trailing_comment: str = ""
    file: ProtoFile | None = field(default=None, repr=False)
    imports: list[ProtoFile] = field(default_factory=list, repr=False)

    @property
    def non_oneof_fields(self) -> list[Field]:
        """Fields outside any real one-of group, in declaration order."""
        real = {index for index, group in enumerate(self.oneofs) if not group.synthetic}
        return [item for item in self.fields if item.oneof_index not in real]

    @property
    def real_oneofs(self) -> list[OneOf]:
        """One-of groups written in the schema (proto3 ``optional`` groups excluded)."""
        return [group for group in self.oneofs if not group.synthetic]

    def all_messages(self) -> Iterator[Message]:
        """Yield nested messages depth first, skipping map entries."""
        for child in self.nested:
            if child.is_map_entry:
                continue
            yield child
            yield from child.all_messages()


@dataclass(eq=False)
class ProtoFile:
    """A schema file as seen by the compiler."""

    name: str
    package: str
    messages: list[Message] = field(default_factory=list)
    enums: list[Enum] = field(default_factory=list)
    dependencies: list[str] = field(default_factory=list)
    options: dict[str, str] = field(default_factory=dict)
    syntax: str = "proto2"
    leading_comment: str = ""
    trailing_comment: str = ""

    @property
    def stem(self) -> str:
        """File base name without the ``.proto`` extension."""
        return PurePosixPath(self.name).name.removesuffix(".proto")

    def all_messages(self) -> Iterator[Message]:
        """Yield every message in declaration order, nested ones after their parent."""
        for message in self.messages:
            yield message
            yield from message.all_messages()


@dataclass(eq=False)
class Package:
    """A schema package and the files that declare it."""

    name: str
    files: list[ProtoFile] = field(default_factory=list)
