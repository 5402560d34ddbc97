"""Descriptor loading utilities.

Turns the ``FileDescriptorProto`` messages handed over by the compiler into
the read-only :mod:`protoc_gen_slate.model` graph.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence

from google.protobuf.compiler import plugin_pb2
from google.protobuf.descriptor_pb2 import (
    DescriptorProto,
    EnumDescriptorProto,
    FieldDescriptorProto,
    FileDescriptorProto,
    FileDescriptorSet,
    SourceCodeInfo,
)
from google.protobuf.message import DecodeError

from .errors import SchemaError
from .log import get_logger
from .model import Enum, EnumValue, Field, Message, OneOf, Package, ProtoFile

LOGGER = get_logger("schema")

# Field numbers used in SourceCodeInfo location paths.
_FILE_PACKAGE = 2
_FILE_MESSAGE_TYPE = 4
_FILE_ENUM_TYPE = 5
_MESSAGE_FIELD = 2
_MESSAGE_NESTED_TYPE = 3
_MESSAGE_ENUM_TYPE = 4
_MESSAGE_ONEOF_DECL = 8
_ENUM_VALUE = 2

_LANGUAGE_OPTIONS = (
    "ruby_package",
    "java_package",
    "go_package",
    "csharp_namespace",
    "php_namespace",
    "objc_class_prefix",
    "swift_prefix",
)

SourcePath = tuple[int, ...]
Comments = dict[SourcePath, SourceCodeInfo.Location]


def parse_request(data: bytes) -> plugin_pb2.CodeGeneratorRequest:
    """Decode a serialized ``CodeGeneratorRequest``."""
    try:
        return plugin_pb2.CodeGeneratorRequest.FromString(data)
    except DecodeError as err:
        raise SchemaError(f"cannot decode code generator request: {err}") from err


def load_descriptor_set(path: str | Path) -> list[FileDescriptorProto]:
    """Read a serialized ``FileDescriptorSet`` from *path*.

    Parameters
    ----------
    path:
        File written by ``protoc --include_source_info --descriptor_set_out``.
    """
    try:
        data = Path(path).read_bytes()
    except OSError as err:
        raise SchemaError(f"cannot read descriptor set '{path}': {err}") from err
    try:
        descriptor_set = FileDescriptorSet.FromString(data)
    except DecodeError as err:
        raise SchemaError(f"cannot decode descriptor set '{path}': {err}") from err
    return list(descriptor_set.file)


def build_packages(
    proto_files: Iterable[FileDescriptorProto],
    targets: Sequence[str] | None = None,
) -> list[Package]:
    """Build the package graph for *targets* out of *proto_files*.

    All files are used to resolve type references; only the target files
    (every file when *targets* is ``None``) end up in the returned packages.
    Packages are sorted by name, files keep the target order.
    """
    files: dict[str, ProtoFile] = {}
    symbols: dict[str, tuple[ProtoFile, Message | Enum]] = {}
    for proto in proto_files:
        proto_file = _build_file(proto)
        files[proto_file.name] = proto_file
        _register_symbols(proto_file, symbols)

    for proto_file in files.values():
        for message in proto_file.all_messages():
            message.imports = _message_imports(message, proto_file, symbols, files)

    wanted = list(targets) if targets is not None else list(files)
    packages: dict[str, Package] = {}
    for name in wanted:
        proto_file = files.get(name)
        if proto_file is None:
            raise SchemaError(f"file to generate '{name}' has no descriptor")
        package = packages.setdefault(proto_file.package, Package(name=proto_file.package))
        package.files.append(proto_file)

    LOGGER.debug("loaded %d file(s) in %d package(s)", len(wanted), len(packages))
    return [packages[name] for name in sorted(packages)]


def _build_file(proto: FileDescriptorProto) -> ProtoFile:
    comments: Comments = {
        tuple(location.path): location for location in proto.source_code_info.location
    }
    prefix = f".{proto.package}" if proto.package else ""
    options = {
        name: getattr(proto.options, name)
        for name in _LANGUAGE_OPTIONS
        if proto.options.HasField(name)
    }
    proto_file = ProtoFile(
        name=proto.name,
        package=proto.package,
        enums=[
            _build_enum(item, prefix, (_FILE_ENUM_TYPE, index), comments)
            for index, item in enumerate(proto.enum_type)
        ],
        dependencies=list(proto.dependency),
        options=options,
        syntax=proto.syntax or "proto2",
        leading_comment=_leading(comments, (_FILE_PACKAGE,)),
        trailing_comment=_trailing(comments, (_FILE_PACKAGE,)),
    )
    proto_file.messages = [
        _build_message(item, prefix, (_FILE_MESSAGE_TYPE, index), comments, proto_file)
        for index, item in enumerate(proto.message_type)
    ]
    return proto_file


def _build_message(
    proto: DescriptorProto,
    prefix: str,
    path: SourcePath,
    comments: Comments,
    proto_file: ProtoFile,
) -> Message:
    full_name = f"{prefix}.{proto.name}"
    fields = [
        Field(
            name=item.name,
            number=item.number,
            type=item.type,
            label=item.label,
            type_name=item.type_name,
            oneof_index=item.oneof_index if item.HasField("oneof_index") else None,
            proto3_optional=item.proto3_optional,
            leading_comment=_leading(comments, path + (_MESSAGE_FIELD, index)),
            trailing_comment=_trailing(comments, path + (_MESSAGE_FIELD, index)),
        )
        for index, item in enumerate(proto.field)
    ]
    oneofs = [
        OneOf(
            name=item.name,
            fields=[entry for entry in fields if entry.oneof_index == index],
            leading_comment=_leading(comments, path + (_MESSAGE_ONEOF_DECL, index)),
        )
        for index, item in enumerate(proto.oneof_decl)
    ]
    for group in oneofs:
        # protoc wraps each proto3 ``optional`` field in its own synthetic one-of.
        group.synthetic = len(group.fields) == 1 and group.fields[0].proto3_optional

    return Message(
        name=proto.name,
        full_name=full_name,
        fields=fields,
        oneofs=oneofs,
        nested=[
            _build_message(item, full_name, path + (_MESSAGE_NESTED_TYPE, index), comments, proto_file)
            for index, item in enumerate(proto.nested_type)
        ],
        enums=[
            _build_enum(item, full_name, path + (_MESSAGE_ENUM_TYPE, index), comments)
            for index, item in enumerate(proto.enum_type)
        ],
        is_map_entry=proto.options.map_entry,
        leading_comment=_leading(comments, path),
        trailing_comment=_trailing(comments, path),
        file=proto_file,
    )


def _build_enum(
    proto: EnumDescriptorProto, prefix: str, path: SourcePath, comments: Comments
) -> Enum:
    return Enum(
        name=proto.name,
        full_name=f"{prefix}.{proto.name}",
        values=[EnumValue(name=item.name, number=item.number) for item in proto.value],
        leading_comment=_leading(comments, path),
    )


def _register_symbols(
    proto_file: ProtoFile, symbols: dict[str, tuple[ProtoFile, Message | Enum]]
) -> None:
    pending: list[Message] = list(proto_file.messages)
    for enum in proto_file.enums:
        symbols[enum.full_name] = (proto_file, enum)
    while pending:
        message = pending.pop()
        symbols[message.full_name] = (proto_file, message)
        for enum in message.enums:
            symbols[enum.full_name] = (proto_file, enum)
        pending.extend(message.nested)


def _message_imports(
    message: Message,
    proto_file: ProtoFile,
    symbols: dict[str, tuple[ProtoFile, Message | Enum]],
    files: dict[str, ProtoFile],
) -> list[ProtoFile]:
    referenced: list[str] = []
    for item in message.fields:
        for owner in _field_type_files(item, symbols):
            if owner is not proto_file and owner.name not in referenced:
                referenced.append(owner.name)

    declared = proto_file.dependencies

    def declaration_order(name: str) -> int:
        return declared.index(name) if name in declared else len(declared)

    return [files[name] for name in sorted(referenced, key=declaration_order)]


def _field_type_files(
    item: Field, symbols: dict[str, tuple[ProtoFile, Message | Enum]]
) -> list[ProtoFile]:
    if item.type not in (FieldDescriptorProto.TYPE_MESSAGE, FieldDescriptorProto.TYPE_ENUM):
        return []
    entry = symbols.get(item.type_name)
    if entry is None:
        LOGGER.debug("unresolved type '%s' on field '%s'", item.type_name, item.name)
        return []
    owner, declaration = entry
    if isinstance(declaration, Message) and declaration.is_map_entry:
        return [
            found
            for value in declaration.fields
            for found in _field_type_files(value, symbols)
        ]
    return [owner]


def _leading(comments: Comments, path: SourcePath) -> str:
    location = comments.get(path)
    return location.leading_comments if location is not None else ""


def _trailing(comments: Comments, path: SourcePath) -> str:
    location = comments.get(path)
    return location.trailing_comments if location is not None else ""
