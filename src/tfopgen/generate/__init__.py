"""Stage 4: Python Code Generation.

Generates the module of typed operation wrappers from signature and
documentation records.
"""

__docformat__ = "restructuredtext"
__all__ = [
    "BindingConvention",
    "CodeWriter",
    "GenerationReport",
    "GraphBinding",
    "TypedSetterBinding",
    "build_docstring",
    "emit_operation",
    "generate_ops_module",
    "get_binding",
    "method_name",
    "param_name",
    "register_binding",
    "render_comment",
    "to_snake_case",
]

from tfopgen.generate._bindings import (
    BindingConvention,
    GraphBinding,
    TypedSetterBinding,
    get_binding,
    register_binding,
)
from tfopgen.generate._docs import build_docstring, render_comment
from tfopgen.generate._utils import method_name, param_name, to_snake_case
from tfopgen.generate._writer import CodeWriter
from tfopgen.generate.code_generator import GenerationReport, generate_ops_module
from tfopgen.generate.emitter import emit_operation
