"""Stage 2: IR Builder.

Builds immutable signature and documentation records from catalog messages.
"""

__docformat__ = "restructuredtext"
__all__ = ["attr_value_to_python", "build_op_doc_ir", "build_op_ir", "build_op_irs"]

from collections.abc import Iterable
from typing import Any

from tfopgen.build.types import ArgDocIR, ArgIR, AttrIR, OpDocIR, OpIR
from tfopgen.catalog._schema import data_type_name


def _shape_to_python(shape) -> tuple[int, ...] | None:
    """Convert a TensorShapeProto to a tuple of dims (None for unknown rank)."""
    if shape.unknown_rank:
        return None
    return tuple(dim.size for dim in shape.dim)


def _list_to_python(list_value) -> list:
    if list_value.s:
        return [item.decode("utf-8", errors="replace") for item in list_value.s]
    if list_value.i:
        return list(list_value.i)
    if list_value.f:
        return list(list_value.f)
    if list_value.b:
        return list(list_value.b)
    if list_value.type:
        return [data_type_name(item) for item in list_value.type]
    if list_value.shape:
        return [_shape_to_python(item) for item in list_value.shape]
    return []


def attr_value_to_python(attr_value) -> Any:
    """Convert an AttrValue to a plain Python value.

    Element types become their enum names ("DT_FLOAT"), shapes become tuples,
    strings are decoded as UTF-8. Values the schema does not model (tensors,
    functions) give None.

    :param attr_value: AttrValue message
    :return: Python value or None
    """
    kind = attr_value.WhichOneof("value")
    if kind is None:
        return None
    if kind == "s":
        return attr_value.s.decode("utf-8", errors="replace")
    if kind == "type":
        return data_type_name(attr_value.type)
    if kind == "shape":
        return _shape_to_python(attr_value.shape)
    if kind == "list":
        return _list_to_python(attr_value.list)
    return getattr(attr_value, kind)


def _build_arg_ir(arg) -> ArgIR:
    return ArgIR(
        name=arg.name,
        type_attr=arg.type_attr,
        type_list_attr=arg.type_list_attr,
        number_attr=arg.number_attr,
        description=arg.description,
    )


def _build_attr_ir(attr) -> AttrIR:
    has_default = attr.HasField("default_value")
    return AttrIR(
        name=attr.name,
        type=attr.type,
        has_default=has_default,
        default_value=attr_value_to_python(attr.default_value) if has_default else None,
        description=attr.description,
    )


def build_op_ir(op_def) -> OpIR:
    """Build the signature record of one operation.

    :param op_def: OpDef message
    :return: OpIR
    """
    deprecation_version = 0
    deprecation_explanation = ""
    if op_def.HasField("deprecation"):
        deprecation_version = op_def.deprecation.version
        deprecation_explanation = op_def.deprecation.explanation

    return OpIR(
        name=op_def.name,
        input_args=tuple(_build_arg_ir(arg) for arg in op_def.input_arg),
        output_args=tuple(_build_arg_ir(arg) for arg in op_def.output_arg),
        attrs=tuple(_build_attr_ir(attr) for attr in op_def.attr),
        summary=op_def.summary,
        description=op_def.description,
        deprecation_version=deprecation_version,
        deprecation_explanation=deprecation_explanation,
    )


def build_op_irs(op_defs: Iterable) -> list[OpIR]:
    """Build signature records for a whole catalog, keeping catalog order."""
    return [build_op_ir(op_def) for op_def in op_defs]


def build_op_doc_ir(api_def) -> OpDocIR:
    """Build the documentation record of one operation.

    :param api_def: ApiDef message
    :return: OpDocIR
    """
    return OpDocIR(
        name=api_def.graph_op_name,
        summary=api_def.summary,
        description=api_def.description,
        in_args=tuple(ArgDocIR(arg.name, arg.description) for arg in api_def.in_arg),
        out_args=tuple(ArgDocIR(arg.name, arg.description) for arg in api_def.out_arg),
        attrs=tuple(ArgDocIR(attr.name, attr.description) for attr in api_def.attr),
        deprecation_message=api_def.deprecation_message,
    )
