"""Utility functions for code generation.

Helper functions for naming methods and parameters and formatting literals.
"""

__docformat__ = "restructuredtext"
__all__ = [
    "RESERVED_NAMES",
    "format_argument",
    "format_default",
    "method_name",
    "param_name",
    "to_snake_case",
]

import keyword
from typing import Any

from tfopgen.analyze.type_mapping import split_list_tag

# Catalog argument names rewritten for readability
_PARAM_MAP = {
    "out": "output",
    "params": "parameters",
    "ref": "reference",
    "event": "event_",
}

# Locals of the generated method body
RESERVED_NAMES = frozenset({"self", "name", "desc", "op", "status", "control", "i"})


def to_snake_case(name: str) -> str:
    """Convert a CamelCase operation name to snake_case.

    A separator is placed before an uppercase letter that follows a lowercase
    one, or that starts a new word inside an acronym run.

    Examples:
        MatMul -> mat_mul
        AddV2 -> add_v2
        Conv2D -> conv2d
        LRN -> lrn
        BatchMatMulV2 -> batch_mat_mul_v2

    :param name: CamelCase name
    :return: snake_case name
    """
    result = []
    last = len(name) - 1
    for i, c in enumerate(name):
        if c.isupper() and i > 0:
            prev_lower = name[i - 1].islower()
            next_lower = i < last and name[i + 1].islower()
            if (prev_lower or next_lower) and name[i - 1] != "_":
                result.append("_")
        result.append(c.lower())
    return "".join(result)


def _avoid_clash(name: str) -> str:
    if keyword.iskeyword(name) or name in RESERVED_NAMES:
        return name + "_"
    return name


def method_name(op_name: str) -> str:
    """Get the generated method name of an operation.

    :param op_name: Operation name, e.g. "MatMul"
    :return: Method name, e.g. "mat_mul"
    """
    snake = to_snake_case(op_name)
    if keyword.iskeyword(snake):
        return snake + "_"
    return snake


def param_name(name: str) -> str:
    """Get the Python parameter name of an argument or attribute.

    :param name: Name in the catalog
    :return: Identifier safe to use in the generated method
    """
    mapped = _PARAM_MAP.get(name, name)
    if mapped != name:
        return mapped
    return _avoid_clash(mapped)


def format_argument(value: Any) -> str:
    """Format argument value as valid Python literal.

    Handles common types: None, bool, int, float, str, list, tuple.

    :param value: Argument value to format
    :return: Python literal string
    :raises TypeError: If value type is not supported
    """
    if value is None:
        return "None"
    # Handle bool before int (bool is subclass of int)
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, str):
        return repr(value)
    if isinstance(value, (list, tuple)):
        if len(value) == 0:
            return "[]" if isinstance(value, list) else "()"
        formatted = ", ".join(format_argument(v) for v in value)
        if isinstance(value, list):
            return f"[{formatted}]"
        if len(value) == 1:
            return f"({formatted},)"
        return f"({formatted})"
    raise TypeError(
        f"Cannot format argument of type {type(value).__name__}: {value!r}. "
        f"Supported types: None, bool, int, float, str, list, tuple"
    )


def format_default(value: Any, attr_type: str) -> str:
    """Format the default of an attribute for documentation.

    Element types are shown as their bare enum names (``DT_FLOAT``) and
    floats, stored in single precision, with their shortest round-trip form.

    :param value: Python rendering of the default
    :param attr_type: Attribute type tag
    :return: Text shown in "Defaults to ..."
    """
    inner, is_list = split_list_tag(attr_type)
    if inner == "type":
        if is_list:
            return "[" + ", ".join(value) + "]"
        return value
    if inner == "float":
        if is_list:
            value = [_single_precision(v) for v in value]
        else:
            value = _single_precision(value)
    return format_argument(value)


def _single_precision(value: float) -> float:
    return float(f"{value:.7g}")
