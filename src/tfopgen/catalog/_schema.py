"""Protobuf schema for operation and documentation catalogs.

The message layout matches the runtime's ``op_def.proto``, ``attr_value.proto``
and ``api_def.proto`` for every field the generator reads. Descriptors are
assembled in code and registered in a private pool so that no ``protoc`` step
is needed. Fields the generator never reads (``AttrValue.tensor``,
``AttrValue.func``, ``ArgDef.handle_data``, ...) are left undeclared: binary
decoding keeps them as unknown fields and text parsing skips them.
"""

__docformat__ = "restructuredtext"
__all__ = [
    "ApiDef",
    "ApiDefs",
    "ArgDef",
    "AttrDef",
    "AttrValue",
    "DATA_TYPE_NAMES",
    "ListValue",
    "OpDef",
    "OpDeprecation",
    "OpList",
    "TensorShapeProto",
    "data_type_name",
]

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory

_PACKAGE = "tensorflow"

_FieldProto = descriptor_pb2.FieldDescriptorProto
_OPTIONAL = _FieldProto.LABEL_OPTIONAL
_REPEATED = _FieldProto.LABEL_REPEATED
_BOOL = _FieldProto.TYPE_BOOL
_BYTES = _FieldProto.TYPE_BYTES
_ENUM = _FieldProto.TYPE_ENUM
_FLOAT = _FieldProto.TYPE_FLOAT
_INT32 = _FieldProto.TYPE_INT32
_INT64 = _FieldProto.TYPE_INT64
_MESSAGE = _FieldProto.TYPE_MESSAGE
_STRING = _FieldProto.TYPE_STRING

# Element types known to the runtime; reference variants are value + 100.
_DATA_TYPES = (
    ("DT_INVALID", 0),
    ("DT_FLOAT", 1),
    ("DT_DOUBLE", 2),
    ("DT_INT32", 3),
    ("DT_UINT8", 4),
    ("DT_INT16", 5),
    ("DT_INT8", 6),
    ("DT_STRING", 7),
    ("DT_COMPLEX64", 8),
    ("DT_INT64", 9),
    ("DT_BOOL", 10),
    ("DT_QINT8", 11),
    ("DT_QUINT8", 12),
    ("DT_QINT32", 13),
    ("DT_BFLOAT16", 14),
    ("DT_QINT16", 15),
    ("DT_QUINT16", 16),
    ("DT_UINT16", 17),
    ("DT_COMPLEX128", 18),
    ("DT_HALF", 19),
    ("DT_RESOURCE", 20),
    ("DT_VARIANT", 21),
    ("DT_UINT32", 22),
    ("DT_UINT64", 23),
    ("DT_FLOAT8_E5M2", 24),
    ("DT_FLOAT8_E4M3FN", 25),
    ("DT_INT4", 29),
    ("DT_UINT4", 30),
)


def _ref(name: str) -> str:
    return f".{_PACKAGE}.{name}"


def _add_field(
    message: descriptor_pb2.DescriptorProto,
    name: str,
    number: int,
    field_type: int,
    label: int = _OPTIONAL,
    type_name: str | None = None,
    oneof_index: int | None = None,
) -> None:
    field = message.field.add()
    field.name = name
    field.number = number
    field.type = field_type
    field.label = label
    if type_name is not None:
        field.type_name = type_name
    if oneof_index is not None:
        field.oneof_index = oneof_index


def _add_data_type_enum(file_proto: descriptor_pb2.FileDescriptorProto) -> None:
    enum = file_proto.enum_type.add()
    enum.name = "DataType"
    for name, number in _DATA_TYPES:
        value = enum.value.add()
        value.name = name
        value.number = number
    for name, number in _DATA_TYPES[1:]:
        value = enum.value.add()
        value.name = f"{name}_REF"
        value.number = number + 100


def _add_tensor_shape(file_proto: descriptor_pb2.FileDescriptorProto) -> None:
    shape = file_proto.message_type.add()
    shape.name = "TensorShapeProto"
    dim = shape.nested_type.add()
    dim.name = "Dim"
    _add_field(dim, "size", 1, _INT64)
    _add_field(dim, "name", 2, _STRING)
    _add_field(shape, "dim", 2, _MESSAGE, _REPEATED, _ref("TensorShapeProto.Dim"))
    _add_field(shape, "unknown_rank", 3, _BOOL)


def _add_attr_value(file_proto: descriptor_pb2.FileDescriptorProto) -> None:
    attr_value = file_proto.message_type.add()
    attr_value.name = "AttrValue"

    list_value = attr_value.nested_type.add()
    list_value.name = "ListValue"
    _add_field(list_value, "s", 2, _BYTES, _REPEATED)
    _add_field(list_value, "i", 3, _INT64, _REPEATED)
    _add_field(list_value, "f", 4, _FLOAT, _REPEATED)
    _add_field(list_value, "b", 5, _BOOL, _REPEATED)
    _add_field(list_value, "type", 6, _ENUM, _REPEATED, _ref("DataType"))
    _add_field(list_value, "shape", 7, _MESSAGE, _REPEATED, _ref("TensorShapeProto"))

    attr_value.oneof_decl.add().name = "value"
    _add_field(attr_value, "list", 1, _MESSAGE, type_name=_ref("AttrValue.ListValue"), oneof_index=0)
    _add_field(attr_value, "s", 2, _BYTES, oneof_index=0)
    _add_field(attr_value, "i", 3, _INT64, oneof_index=0)
    _add_field(attr_value, "f", 4, _FLOAT, oneof_index=0)
    _add_field(attr_value, "b", 5, _BOOL, oneof_index=0)
    _add_field(attr_value, "type", 6, _ENUM, type_name=_ref("DataType"), oneof_index=0)
    _add_field(attr_value, "shape", 7, _MESSAGE, type_name=_ref("TensorShapeProto"), oneof_index=0)
    _add_field(attr_value, "placeholder", 9, _STRING, oneof_index=0)


def _add_op_def(file_proto: descriptor_pb2.FileDescriptorProto) -> None:
    deprecation = file_proto.message_type.add()
    deprecation.name = "OpDeprecation"
    _add_field(deprecation, "version", 1, _INT32)
    _add_field(deprecation, "explanation", 2, _STRING)

    op_def = file_proto.message_type.add()
    op_def.name = "OpDef"

    arg_def = op_def.nested_type.add()
    arg_def.name = "ArgDef"
    _add_field(arg_def, "name", 1, _STRING)
    _add_field(arg_def, "description", 2, _STRING)
    _add_field(arg_def, "type", 3, _ENUM, type_name=_ref("DataType"))
    _add_field(arg_def, "type_attr", 4, _STRING)
    _add_field(arg_def, "number_attr", 5, _STRING)
    _add_field(arg_def, "type_list_attr", 6, _STRING)
    _add_field(arg_def, "is_ref", 16, _BOOL)

    attr_def = op_def.nested_type.add()
    attr_def.name = "AttrDef"
    _add_field(attr_def, "name", 1, _STRING)
    _add_field(attr_def, "type", 2, _STRING)
    _add_field(attr_def, "default_value", 3, _MESSAGE, type_name=_ref("AttrValue"))
    _add_field(attr_def, "description", 4, _STRING)
    _add_field(attr_def, "has_minimum", 5, _BOOL)
    _add_field(attr_def, "minimum", 6, _INT64)
    _add_field(attr_def, "allowed_values", 7, _MESSAGE, type_name=_ref("AttrValue"))

    _add_field(op_def, "name", 1, _STRING)
    _add_field(op_def, "input_arg", 2, _MESSAGE, _REPEATED, _ref("OpDef.ArgDef"))
    _add_field(op_def, "output_arg", 3, _MESSAGE, _REPEATED, _ref("OpDef.ArgDef"))
    _add_field(op_def, "attr", 4, _MESSAGE, _REPEATED, _ref("OpDef.AttrDef"))
    _add_field(op_def, "summary", 5, _STRING)
    _add_field(op_def, "description", 6, _STRING)
    _add_field(op_def, "deprecation", 8, _MESSAGE, type_name=_ref("OpDeprecation"))
    _add_field(op_def, "is_aggregate", 16, _BOOL)
    _add_field(op_def, "is_stateful", 17, _BOOL)
    _add_field(op_def, "is_commutative", 18, _BOOL)
    _add_field(op_def, "allows_uninitialized_input", 19, _BOOL)
    _add_field(op_def, "control_output", 20, _STRING, _REPEATED)
    _add_field(op_def, "is_distributed_communication", 21, _BOOL)

    op_list = file_proto.message_type.add()
    op_list.name = "OpList"
    _add_field(op_list, "op", 1, _MESSAGE, _REPEATED, _ref("OpDef"))


def _add_api_def(file_proto: descriptor_pb2.FileDescriptorProto) -> None:
    api_def = file_proto.message_type.add()
    api_def.name = "ApiDef"

    visibility = api_def.enum_type.add()
    visibility.name = "Visibility"
    for number, name in enumerate(("DEFAULT_VISIBILITY", "VISIBLE", "SKIP", "HIDDEN")):
        value = visibility.value.add()
        value.name = name
        value.number = number

    endpoint = api_def.nested_type.add()
    endpoint.name = "Endpoint"
    _add_field(endpoint, "name", 1, _STRING)
    _add_field(endpoint, "deprecation_message", 2, _STRING)
    _add_field(endpoint, "deprecation_version", 3, _INT32)

    arg = api_def.nested_type.add()
    arg.name = "Arg"
    _add_field(arg, "name", 1, _STRING)
    _add_field(arg, "rename_to", 2, _STRING)
    _add_field(arg, "description", 3, _STRING)

    attr = api_def.nested_type.add()
    attr.name = "Attr"
    _add_field(attr, "name", 1, _STRING)
    _add_field(attr, "rename_to", 2, _STRING)
    _add_field(attr, "default_value", 3, _MESSAGE, type_name=_ref("AttrValue"))
    _add_field(attr, "description", 4, _STRING)

    _add_field(api_def, "graph_op_name", 1, _STRING)
    _add_field(api_def, "visibility", 2, _ENUM, type_name=_ref("ApiDef.Visibility"))
    _add_field(api_def, "endpoint", 3, _MESSAGE, _REPEATED, _ref("ApiDef.Endpoint"))
    _add_field(api_def, "in_arg", 4, _MESSAGE, _REPEATED, _ref("ApiDef.Arg"))
    _add_field(api_def, "out_arg", 5, _MESSAGE, _REPEATED, _ref("ApiDef.Arg"))
    _add_field(api_def, "attr", 6, _MESSAGE, _REPEATED, _ref("ApiDef.Attr"))
    _add_field(api_def, "summary", 7, _STRING)
    _add_field(api_def, "description", 8, _STRING)
    _add_field(api_def, "description_prefix", 9, _STRING)
    _add_field(api_def, "description_suffix", 10, _STRING)
    _add_field(api_def, "arg_order", 11, _STRING, _REPEATED)
    _add_field(api_def, "deprecation_message", 12, _STRING)
    _add_field(api_def, "deprecation_version", 13, _INT32)

    api_defs = file_proto.message_type.add()
    api_defs.name = "ApiDefs"
    _add_field(api_defs, "op", 1, _MESSAGE, _REPEATED, _ref("ApiDef"))


def _build_pool() -> descriptor_pool.DescriptorPool:
    file_proto = descriptor_pb2.FileDescriptorProto()
    file_proto.name = "tfopgen/op_catalog.proto"
    file_proto.package = _PACKAGE
    file_proto.syntax = "proto3"

    _add_data_type_enum(file_proto)
    _add_tensor_shape(file_proto)
    _add_attr_value(file_proto)
    _add_op_def(file_proto)
    _add_api_def(file_proto)

    pool = descriptor_pool.DescriptorPool()
    pool.AddSerializedFile(file_proto.SerializeToString())
    return pool


_POOL = _build_pool()


def _message_class(name: str) -> type:
    return message_factory.GetMessageClass(_POOL.FindMessageTypeByName(f"{_PACKAGE}.{name}"))


TensorShapeProto = _message_class("TensorShapeProto")
AttrValue = _message_class("AttrValue")
ListValue = _message_class("AttrValue.ListValue")
OpDeprecation = _message_class("OpDeprecation")
OpDef = _message_class("OpDef")
ArgDef = _message_class("OpDef.ArgDef")
AttrDef = _message_class("OpDef.AttrDef")
OpList = _message_class("OpList")
ApiDef = _message_class("ApiDef")
ApiDefs = _message_class("ApiDefs")

_DATA_TYPE_ENUM = _POOL.FindEnumTypeByName(f"{_PACKAGE}.DataType")

# Enum number -> enum name (e.g. 1 -> "DT_FLOAT")
DATA_TYPE_NAMES: dict[int, str] = {
    value.number: value.name for value in _DATA_TYPE_ENUM.values
}


def data_type_name(number: int) -> str:
    """Get the enum name of a runtime element type.

    :param number: DataType enum number
    :return: Enum name (e.g. "DT_FLOAT"), or the number as text if unknown
    """
    return DATA_TYPE_NAMES.get(number, str(number))
