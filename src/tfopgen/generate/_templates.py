"""Code templates and constants for operation wrapper generation.

This module provides string templates and constants used throughout
the code generation process.
"""

__docformat__ = "restructuredtext"
__all__ = [
    "CONTAINER_DOCSTRING",
    "CONTAINER_NAME",
    "IMPORTS_TEMPLATE",
    "INDENT",
    "OUTPUTS_SUFFIX",
    "RUNTIME_NAMES",
]

INDENT = "    "

# Class holding one method per operation; the runtime Graph inherits from it
CONTAINER_NAME = "GraphOps"

# Suffix of the NamedTuple returned by multi-output operations
OUTPUTS_SUFFIX = "Outputs"

# Names every generated module imports from the runtime binding
RUNTIME_NAMES = (
    "DataType",
    "OpCreateError",
    "Operation",
    "OperationDescription",
    "Output",
    "Shape",
    "Status",
    "Tensor",
)

IMPORTS_TEMPLATE = """\
from __future__ import annotations

from typing import NamedTuple

from {runtime_module} import (
{names}
)
"""

CONTAINER_DOCSTRING = [
    "Graph operation constructors.",
    "",
    "The runtime graph class inherits from this container. It must provide",
    "``make_name(op_type, name)`` returning a unique operation name and a",
    "``control_dependencies`` sequence, read every time an operation is",
    "created.",
]
