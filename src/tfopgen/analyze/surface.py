"""Stage 3: Public Surface Filter.

Decides which operations get a generated method.
"""

__docformat__ = "restructuredtext"
__all__ = ["SkipReason", "find_skip_reason", "first_unmapped_attr"]

import warnings
from enum import Enum

from tfopgen.analyze.type_mapping import map_type
from tfopgen.build.types import AttrIR, OpDocIR, OpIR
from tfopgen.errors import OpSkippedWarning


class SkipReason(Enum):
    """Why an operation was left out of the generated module."""

    INTERNAL = "internal"
    UNMAPPED_ATTRIBUTE = "unmapped_attribute"
    UNDOCUMENTED = "undocumented"


def first_unmapped_attr(op: OpIR) -> AttrIR | None:
    """Find the first attribute whose type has no Python mapping.

    :param op: Operation signature
    :return: Offending attribute, or None if every attribute maps
    """
    for attr in op.attrs:
        target, _ = map_type(attr.type)
        if target is None:
            return attr
    return None


def find_skip_reason(op: OpIR, doc: OpDocIR | None) -> SkipReason | None:
    """Run the surface checks in order: internal, unmapped, undocumented.

    Only the unmapped-attribute case is reported, with an
    ``OpSkippedWarning``; the other two are expected and silent.

    :param op: Operation signature
    :param doc: Documentation of the operation, None if it has none
    :return: Reason to skip, or None if the operation is surfaced
    """
    if op.is_internal:
        return SkipReason.INTERNAL

    attr = first_unmapped_attr(op)
    if attr is not None:
        warnings.warn(
            f"Skip op {op.name} due to attribute ({attr.type} {attr.name}) "
            f"lacking a mapping to Python",
            OpSkippedWarning,
            stacklevel=2,
        )
        return SkipReason.UNMAPPED_ATTRIBUTE

    if doc is None or not doc.summary:
        return SkipReason.UNDOCUMENTED

    return None
