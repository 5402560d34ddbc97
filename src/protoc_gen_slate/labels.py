"""Display labels for field types and cardinalities."""

from __future__ import annotations

from google.protobuf.descriptor_pb2 import FieldDescriptorProto

TYPE_LABELS: dict[object, str] = {
    FieldDescriptorProto.TYPE_DOUBLE: "double",
    FieldDescriptorProto.TYPE_FLOAT: "float",
    FieldDescriptorProto.TYPE_INT32: "int (32bit)",
    FieldDescriptorProto.TYPE_INT64: "int (64bit)",
    FieldDescriptorProto.TYPE_UINT32: "unsigned int (32bit)",
    FieldDescriptorProto.TYPE_UINT64: "unsigned int (64bit)",
    FieldDescriptorProto.TYPE_BOOL: "boolean",
    FieldDescriptorProto.TYPE_BYTES: "bytes",
    FieldDescriptorProto.TYPE_ENUM: "enum",
    FieldDescriptorProto.TYPE_MESSAGE: "message",
    FieldDescriptorProto.TYPE_STRING: "string",
}

CARDINALITY_LABELS: dict[object, str] = {
    FieldDescriptorProto.LABEL_OPTIONAL: "optional",
    FieldDescriptorProto.LABEL_REQUIRED: "required",
    FieldDescriptorProto.LABEL_REPEATED: "repeated",
}


def type_label(type_tag: object) -> str:
    """Return the display string for a field type tag, or ``""`` if unknown."""
    try:
        return TYPE_LABELS.get(type_tag, "")
    except TypeError:
        return ""


def cardinality_label(label_tag: object) -> str:
    """Return the display string for a field cardinality tag, or ``""`` if unknown."""
    try:
        return CARDINALITY_LABELS.get(label_tag, "")
    except TypeError:
        return ""
