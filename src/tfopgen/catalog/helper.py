"""Helpers for constructing catalog messages by hand.

Mostly useful in tests and for small hand-written catalogs, in the same
spirit as ``onnx.helper``.
"""

__docformat__ = "restructuredtext"
__all__ = [
    "make_api_def_text",
    "make_arg",
    "make_attr",
    "make_attr_value",
    "make_op_def",
    "make_op_list",
]

from collections.abc import Iterable, Mapping
from typing import Any

from tfopgen.catalog._schema import DATA_TYPE_NAMES, ArgDef, AttrDef, AttrValue, OpDef, OpList

_DATA_TYPE_NUMBERS = {name: number for number, name in DATA_TYPE_NAMES.items()}


def _data_type(value: int | str) -> int:
    if isinstance(value, str):
        return _DATA_TYPE_NUMBERS[value]
    return value


def _fill_shape(shape_proto, dims: Iterable[int] | None) -> None:
    if dims is None:
        shape_proto.unknown_rank = True
        return
    for size in dims:
        shape_proto.dim.add().size = size


def make_attr_value(value: Any, attr_type: str):
    """Make an ``AttrValue`` holding ``value`` for an attribute of ``attr_type``.

    :param value: Python value; element types may be given as "DT_*" names,
        shapes as a list of dims (None for unknown rank)
    :param attr_type: Attribute type tag, e.g. "int" or "list(type)"
    :return: AttrValue message
    :raises ValueError: If the type tag has no simple Python form
    """
    attr_value = AttrValue()
    if attr_type.startswith("list("):
        inner = attr_type[5:-1]
        list_value = attr_value.list
        # Touch the oneof so that an empty list is still a set default
        list_value.SetInParent()
        for item in value:
            if inner == "int":
                list_value.i.append(item)
            elif inner == "float":
                list_value.f.append(item)
            elif inner == "bool":
                list_value.b.append(item)
            elif inner == "string":
                list_value.s.append(item.encode("utf-8") if isinstance(item, str) else item)
            elif inner == "type":
                list_value.type.append(_data_type(item))
            elif inner == "shape":
                _fill_shape(list_value.shape.add(), item)
            else:
                raise ValueError(f"Cannot build a default for attribute type {attr_type}")
        return attr_value

    if attr_type == "int":
        attr_value.i = value
    elif attr_type == "float":
        attr_value.f = value
    elif attr_type == "bool":
        attr_value.b = value
    elif attr_type == "string":
        attr_value.s = value.encode("utf-8") if isinstance(value, str) else value
    elif attr_type == "type":
        attr_value.type = _data_type(value)
    elif attr_type == "shape":
        _fill_shape(attr_value.shape, value)
        attr_value.shape.SetInParent()
    else:
        raise ValueError(f"Cannot build a default for attribute type {attr_type}")
    return attr_value


def make_arg(
    name: str,
    type_attr: str = "",
    type_list_attr: str = "",
    number_attr: str = "",
    description: str = "",
    data_type: int | str = 0,
):
    """Make an ``OpDef.ArgDef``.

    :param name: Argument name
    :param type_attr: Attribute fixing the element type
    :param type_list_attr: Attribute fixing a list of element types
    :param number_attr: Attribute giving the repetition count
    :param description: Argument description
    :param data_type: Fixed element type, if the argument has one
    :return: ArgDef message
    """
    arg = ArgDef()
    arg.name = name
    arg.type_attr = type_attr
    arg.type_list_attr = type_list_attr
    arg.number_attr = number_attr
    arg.description = description
    arg.type = _data_type(data_type)
    return arg


def make_attr(name: str, attr_type: str, default: Any = None, description: str = ""):
    """Make an ``OpDef.AttrDef``.

    :param name: Attribute name
    :param attr_type: Type tag (e.g. "int", "list(shape)", "func")
    :param default: Default value, or None for a required attribute; an
        ``AttrValue`` message is used as is
    :param description: Attribute description
    :return: AttrDef message
    """
    attr = AttrDef()
    attr.name = name
    attr.type = attr_type
    attr.description = description
    if default is not None:
        if isinstance(default, AttrValue):
            attr.default_value.CopyFrom(default)
        else:
            attr.default_value.CopyFrom(make_attr_value(default, attr_type))
    return attr


def make_op_def(
    name: str,
    inputs: Iterable = (),
    outputs: Iterable = (),
    attrs: Iterable = (),
    summary: str = "",
    description: str = "",
    deprecation: tuple[int, str] | None = None,
):
    """Make an ``OpDef``.

    :param name: Operation name
    :param inputs: Input ``ArgDef`` messages
    :param outputs: Output ``ArgDef`` messages
    :param attrs: ``AttrDef`` messages
    :param summary: One-line summary
    :param description: Long description
    :param deprecation: Optional ``(version, explanation)`` pair
    :return: OpDef message
    """
    op_def = OpDef()
    op_def.name = name
    op_def.input_arg.extend(inputs)
    op_def.output_arg.extend(outputs)
    op_def.attr.extend(attrs)
    op_def.summary = summary
    op_def.description = description
    if deprecation is not None:
        op_def.deprecation.version, op_def.deprecation.explanation = deprecation
    return op_def


def make_op_list(op_defs: Iterable):
    """Wrap operations into an ``OpList``."""
    op_list = OpList()
    op_list.op.extend(op_defs)
    return op_list


def _heredoc(key: str, text: str, indent: str) -> list[str]:
    return [f"{indent}{key}: <<END", *text.split("\n"), "END"]


def _arg_block(key: str, descriptions: Mapping[str, str], indent: str) -> list[str]:
    lines = []
    for arg_name, description in descriptions.items():
        lines.append(f"{indent}{key} {{")
        lines.append(f'{indent}  name: "{arg_name}"')
        lines.extend(_heredoc("description", description, indent + "  "))
        lines.append(f"{indent}}}")
    return lines


def make_api_def_text(
    op_name: str,
    summary: str = "",
    description: str = "",
    in_args: Mapping[str, str] | None = None,
    out_args: Mapping[str, str] | None = None,
    attrs: Mapping[str, str] | None = None,
) -> str:
    """Render an api definition override document for one operation.

    Descriptions are written as ``<<END`` heredocs, the way hand-written api
    definition files are.

    :param op_name: Operation name
    :param summary: Summary text
    :param description: Description text
    :param in_args: Input name -> description
    :param out_args: Output name -> description
    :param attrs: Attribute name -> description
    :return: Text-format ``ApiDefs`` document
    """
    lines = ["op {", f'  graph_op_name: "{op_name}"']
    lines.extend(_arg_block("in_arg", in_args or {}, "  "))
    lines.extend(_arg_block("out_arg", out_args or {}, "  "))
    lines.extend(_arg_block("attr", attrs or {}, "  "))
    if summary:
        lines.extend(_heredoc("summary", summary, "  "))
    if description:
        lines.extend(_heredoc("description", description, "  "))
    lines.append("}")
    return "\n".join(lines) + "\n"
