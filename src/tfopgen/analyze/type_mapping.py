"""Attribute type tag to Python type mapping."""

__docformat__ = "restructuredtext"
__all__ = [
    "AttrTag",
    "COERCIONS",
    "TYPE_TABLE",
    "coercion",
    "is_reference_type",
    "map_type",
    "python_type",
    "split_list_tag",
]

from enum import Enum


class AttrTag(Enum):
    """Attribute type tags with a Python counterpart.

    Tags outside this enumeration ("func", "placeholder", ...) have no
    mapping; operations using them are not surfaced.
    """

    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    TYPE = "type"
    SHAPE = "shape"
    TENSOR = "tensor"
    STRING = "string"


# Tag -> Python type name used in generated signatures
TYPE_TABLE: dict[AttrTag, str] = {
    AttrTag.INT: "int",
    AttrTag.FLOAT: "float",
    AttrTag.BOOL: "bool",
    AttrTag.TYPE: "DataType",
    AttrTag.SHAPE: "Shape",
    AttrTag.TENSOR: "Tensor",
    AttrTag.STRING: "str",
}

# Value-like scalars are normalized through their constructor before being
# handed to the runtime
COERCIONS: dict[AttrTag, str] = {
    AttrTag.INT: "int",
    AttrTag.FLOAT: "float",
    AttrTag.BOOL: "bool",
    AttrTag.TYPE: "DataType",
}

_REFERENCE_TAGS = frozenset({AttrTag.TENSOR, AttrTag.STRING, AttrTag.SHAPE})


def split_list_tag(tag: str) -> tuple[str, bool]:
    """Strip an optional ``list(...)`` wrapper.

    :param tag: Type tag, e.g. "list(int)"
    :return: Tuple of (inner tag, is_list)
    """
    if tag.startswith("list(") and tag.endswith(")"):
        return tag[5:-1], True
    return tag, False


def _lookup(inner: str) -> AttrTag | None:
    try:
        return AttrTag(inner)
    except ValueError:
        return None


def map_type(tag: str) -> tuple[str | None, bool]:
    """Map an attribute type tag to a Python type name.

    :param tag: Type tag, e.g. "float" or "list(shape)"
    :return: Tuple of (element type name or None if unmapped, is_list)
    """
    inner, is_list = split_list_tag(tag)
    attr_tag = _lookup(inner)
    if attr_tag is None:
        return None, is_list
    return TYPE_TABLE.get(attr_tag), is_list


def python_type(tag: str) -> str | None:
    """Render the Python annotation for an attribute type tag.

    :param tag: Type tag
    :return: Annotation text ("int", "list[Shape]", ...), or None if unmapped
    """
    target, is_list = map_type(tag)
    if target is None:
        return None
    return f"list[{target}]" if is_list else target


def is_reference_type(tag: str) -> bool:
    """Whether values of this tag are passed by identity.

    List-wrapped tags, tensors, strings and shapes are reference-like; the
    remaining scalars are value-like.

    :param tag: Type tag
    :return: True for reference-like tags
    """
    inner, is_list = split_list_tag(tag)
    return is_list or _lookup(inner) in _REFERENCE_TAGS


def coercion(tag: str) -> str | None:
    """Get the constructor normalizing a value-like attribute.

    :param tag: Type tag
    :return: Constructor name, or None for reference-like or unmapped tags
    """
    if is_reference_type(tag):
        return None
    attr_tag = _lookup(tag)
    if attr_tag is None:
        return None
    return COERCIONS.get(attr_tag)
