"""Stage 2: IR Construction.

This module builds immutable records from catalog messages.
"""

__docformat__ = "restructuredtext"
__all__ = [
    "INTERNAL_MARKER",
    "ArgDocIR",
    "ArgIR",
    "AttrIR",
    "OpDocIR",
    "OpIR",
    "attr_value_to_python",
    "build_op_doc_ir",
    "build_op_ir",
    "build_op_irs",
]

from tfopgen.build.builder import attr_value_to_python, build_op_doc_ir, build_op_ir, build_op_irs
from tfopgen.build.types import INTERNAL_MARKER, ArgDocIR, ArgIR, AttrIR, OpDocIR, OpIR
