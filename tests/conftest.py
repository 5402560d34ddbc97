"""Shared fixtures: descriptors matching ``fixtures/01_shop``."""

from __future__ import annotations

from pathlib import Path

import pytest
from google.protobuf.descriptor_pb2 import FieldDescriptorProto, FileDescriptorProto

from protoc_gen_slate.model import Package
from protoc_gen_slate.schema import build_packages

SHOP_TARGETS = ["shop/v1/common.proto", "shop/v1/order.proto"]

OPTIONAL = FieldDescriptorProto.LABEL_OPTIONAL
REPEATED = FieldDescriptorProto.LABEL_REPEATED


def _comment(proto: FileDescriptorProto, path: list[int], *, leading: str = "", trailing: str = "") -> None:
    location = proto.source_code_info.location.add(path=path)
    if leading:
        location.leading_comments = leading
    if trailing:
        location.trailing_comments = trailing


def _timestamp_file() -> FileDescriptorProto:
    proto = FileDescriptorProto(
        name="google/protobuf/timestamp.proto", package="google.protobuf", syntax="proto3"
    )
    message = proto.message_type.add(name="Timestamp")
    message.field.add(name="seconds", number=1, type=FieldDescriptorProto.TYPE_INT64, label=OPTIONAL)
    message.field.add(name="nanos", number=2, type=FieldDescriptorProto.TYPE_INT32, label=OPTIONAL)
    return proto


def _common_file() -> FileDescriptorProto:
    proto = FileDescriptorProto(name="shop/v1/common.proto", package="shop.v1", syntax="proto3")
    proto.options.ruby_package = "Shop::V1"
    item = proto.message_type.add(name="Item")
    item.field.add(name="sku", number=1, type=FieldDescriptorProto.TYPE_STRING, label=OPTIONAL)
    item.field.add(name="quantity", number=2, type=FieldDescriptorProto.TYPE_UINT32, label=OPTIONAL)
    _comment(proto, [4, 0], leading=" A line item on an order.\n")
    _comment(proto, [4, 0, 2, 0], trailing=" Stock keeping unit.\n")
    return proto


def _order_file() -> FileDescriptorProto:
    proto = FileDescriptorProto(
        name="shop/v1/order.proto",
        package="shop.v1",
        syntax="proto3",
        dependency=["google/protobuf/timestamp.proto", "shop/v1/common.proto"],
    )
    order = proto.message_type.add(name="Order")
    order.field.add(name="id", number=1, type=FieldDescriptorProto.TYPE_INT32, label=OPTIONAL)
    order.field.add(
        name="items",
        number=2,
        type=FieldDescriptorProto.TYPE_MESSAGE,
        label=REPEATED,
        type_name=".shop.v1.Item",
    )
    order.field.add(
        name="placed_at",
        number=3,
        type=FieldDescriptorProto.TYPE_MESSAGE,
        label=OPTIONAL,
        type_name=".google.protobuf.Timestamp",
    )
    order.oneof_decl.add(name="payment")
    order.field.add(
        name="card",
        number=4,
        type=FieldDescriptorProto.TYPE_MESSAGE,
        label=OPTIONAL,
        type_name=".shop.v1.Card",
        oneof_index=0,
    )
    order.field.add(
        name="cash",
        number=5,
        type=FieldDescriptorProto.TYPE_MESSAGE,
        label=OPTIONAL,
        type_name=".shop.v1.Cash",
        oneof_index=0,
    )
    card = proto.message_type.add(name="Card")
    card.field.add(name="number", number=1, type=FieldDescriptorProto.TYPE_STRING, label=OPTIONAL)
    cash = proto.message_type.add(name="Cash")
    cash.field.add(name="amount", number=1, type=FieldDescriptorProto.TYPE_DOUBLE, label=OPTIONAL)
    _comment(proto, [4, 0], leading=" An order placed by a customer.\n")
    _comment(proto, [4, 0, 2, 0], trailing=" Unique order id.\n")
    return proto


@pytest.fixture
def fixture_root() -> Path:
    return Path(__file__).resolve().parent / "fixtures" / "01_shop"


@pytest.fixture
def source_dir(fixture_root: Path) -> Path:
    return fixture_root / "schemas"


@pytest.fixture
def shop_files() -> list[FileDescriptorProto]:
    return [_timestamp_file(), _common_file(), _order_file()]


@pytest.fixture
def shop_packages(shop_files: list[FileDescriptorProto]) -> list[Package]:
    return build_packages(shop_files, SHOP_TARGETS)
