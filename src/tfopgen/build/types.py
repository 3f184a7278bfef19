"""Stage 2: Intermediate Representation (IR) Type Definitions.

Defines immutable signature and documentation records for one operation.
Stage 2 copies catalog messages into plain Python values only; no type
mapping or classification happens here.
"""

__docformat__ = "restructuredtext"
__all__ = ["INTERNAL_MARKER", "ArgDocIR", "ArgIR", "AttrIR", "OpDocIR", "OpIR"]

from dataclasses import dataclass
from typing import Any

# Operations whose name starts with this marker are runtime internals
INTERNAL_MARKER = "_"


@dataclass(frozen=True)
class ArgIR:
    """Input or output argument of an operation.

    :param name: Argument name
    :param type_attr: Attribute fixing the element type ("" if none)
    :param type_list_attr: Attribute fixing a list of element types ("" if none)
    :param number_attr: Attribute giving the repetition count ("" if none)
    :param description: Description carried by the signature itself
    """

    name: str
    type_attr: str = ""
    type_list_attr: str = ""
    number_attr: str = ""
    description: str = ""

    @property
    def is_list(self) -> bool:
        """Whether the argument is a variable-length sequence of handles."""
        return self.type_list_attr != "" or self.number_attr != ""


@dataclass(frozen=True)
class AttrIR:
    """Attribute declared by an operation.

    :param name: Attribute name
    :param type: Type tag ("int", "list(shape)", "func", ...)
    :param has_default: Whether the catalog declares a default value; an
        attribute without one is required
    :param default_value: Python rendering of the default (None when it has
        no simple form, e.g. tensors and functions)
    :param description: Description carried by the signature itself
    """

    name: str
    type: str
    has_default: bool = False
    default_value: Any = None
    description: str = ""


@dataclass(frozen=True)
class OpIR:
    """Signature of one operation.

    :param name: Unique operation name (may start with INTERNAL_MARKER)
    :param input_args: Inputs in declaration order
    :param output_args: Outputs in declaration order
    :param attrs: Attributes in declaration order
    :param summary: Summary from the signature
    :param description: Description from the signature
    :param deprecation_version: Graph version deprecating the op (0 if not deprecated)
    :param deprecation_explanation: Deprecation notice
    """

    name: str
    input_args: tuple[ArgIR, ...] = ()
    output_args: tuple[ArgIR, ...] = ()
    attrs: tuple[AttrIR, ...] = ()
    summary: str = ""
    description: str = ""
    deprecation_version: int = 0
    deprecation_explanation: str = ""

    @property
    def is_internal(self) -> bool:
        return self.name.startswith(INTERNAL_MARKER)


@dataclass(frozen=True)
class ArgDocIR:
    """Documentation of one argument or attribute."""

    name: str
    description: str = ""


@dataclass(frozen=True)
class OpDocIR:
    """Human-authored documentation of one operation.

    :param name: Operation name
    :param summary: One-line summary (empty means "not for public surface")
    :param description: Long description
    :param in_args: Input documentation
    :param out_args: Output documentation
    :param attrs: Attribute documentation
    :param deprecation_message: Deprecation notice from the documentation
    """

    name: str
    summary: str = ""
    description: str = ""
    in_args: tuple[ArgDocIR, ...] = ()
    out_args: tuple[ArgDocIR, ...] = ()
    attrs: tuple[ArgDocIR, ...] = ()
    deprecation_message: str = ""

    @staticmethod
    def _lookup(entries: tuple[ArgDocIR, ...], name: str) -> str:
        for entry in entries:
            if entry.name == name:
                return entry.description
        return ""

    def in_arg_description(self, name: str) -> str:
        return self._lookup(self.in_args, name)

    def out_arg_description(self, name: str) -> str:
        return self._lookup(self.out_args, name)

    def attr_description(self, name: str) -> str:
        return self._lookup(self.attrs, name)
