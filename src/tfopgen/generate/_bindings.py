"""Binding conventions for generated operation bodies.

A convention decides how the generated code talks to the runtime binding:
which module it imports from, how attributes are set and how an operation
is finalized. Everything else about a generated method is shared.
"""

__docformat__ = "restructuredtext"
__all__ = [
    "BINDINGS",
    "BindingConvention",
    "GraphBinding",
    "TypedSetterBinding",
    "get_binding",
    "register_binding",
]

from tfopgen.analyze.type_mapping import coercion, map_type
from tfopgen.build.types import AttrIR
from tfopgen.errors import UnmappedAttributeError
from tfopgen.generate._templates import IMPORTS_TEMPLATE, INDENT, RUNTIME_NAMES
from tfopgen.generate._writer import CodeWriter


class BindingConvention:
    """Base convention; subclasses provide the attribute setter call."""

    name = ""
    runtime_module = ""

    def imports(self) -> str:
        """Get the import section of the generated module."""
        names = "\n".join(f"{INDENT}{name}," for name in RUNTIME_NAMES)
        return IMPORTS_TEMPLATE.format(runtime_module=self.runtime_module, names=names)

    def new_description(self, writer: CodeWriter, op_name: str) -> None:
        writer.line(
            f'desc = OperationDescription(self, "{op_name}", '
            f'self.make_name("{op_name}", name))'
        )

    def add_input(self, writer: CodeWriter, expr: str, is_list: bool) -> None:
        if is_list:
            writer.line(f"desc.add_inputs({expr})")
        else:
            writer.line(f"desc.add_input({expr})")

    def add_control_inputs(self, writer: CodeWriter) -> None:
        """Attach the graph's pending control dependencies at call time."""
        writer.line("for control in self.control_dependencies:")
        with writer.indented():
            writer.line("desc.add_control_input(control)")

    def set_attribute(self, writer: CodeWriter, op_name: str, attr: AttrIR, expr: str) -> None:
        """Write the statement setting one attribute on the description.

        Value-like scalars are passed through their constructor first.

        :param writer: Code writer
        :param op_name: Operation being emitted
        :param attr: Attribute to set
        :param expr: Python expression holding the caller's value
        :raises UnmappedAttributeError: If the attribute type has no mapping
        """
        target, is_list = map_type(attr.type)
        if target is None:
            raise UnmappedAttributeError(op_name, attr.name, attr.type)

        constructor = coercion(attr.type)
        if constructor is not None:
            expr = f"{constructor}({expr})"
        writer.line(self.setter_call(op_name, attr, target, is_list, expr))

    def setter_call(
        self, op_name: str, attr: AttrIR, target: str, is_list: bool, expr: str
    ) -> str:
        raise NotImplementedError

    def finish_operation(self, writer: CodeWriter, op_name: str) -> None:
        """Finalize the description into ``op``, raising on failure."""
        raise NotImplementedError


class GraphBinding(BindingConvention):
    """Uniform ``set_attr`` setter; status checked through ``ok``."""

    name = "graph"
    runtime_module = "tfbinding"

    def setter_call(
        self, op_name: str, attr: AttrIR, target: str, is_list: bool, expr: str
    ) -> str:
        return f'desc.set_attr("{attr.name}", {expr})'

    def finish_operation(self, writer: CodeWriter, op_name: str) -> None:
        writer.line("status = Status()")
        writer.line("op = desc.finish_operation(status)")
        writer.line("if not status.ok:")
        with writer.indented():
            writer.line(f'raise OpCreateError("{op_name}", status.message)')


# Python type -> suffix of the typed setter
_TYPED_SETTERS = {
    "int": "int",
    "float": "float",
    "bool": "bool",
    "DataType": "type",
    "Shape": "shape",
    "Tensor": "tensor",
    "str": "string",
}


class TypedSetterBinding(BindingConvention):
    """One setter per attribute type; status used as a context manager."""

    name = "typed"
    runtime_module = "tfbinding.typed"

    def setter_call(
        self, op_name: str, attr: AttrIR, target: str, is_list: bool, expr: str
    ) -> str:
        suffix = _TYPED_SETTERS.get(target)
        if suffix is None:
            raise UnmappedAttributeError(op_name, attr.name, attr.type)
        if is_list:
            suffix += "_list"
        return f'desc.set_attr_{suffix}("{attr.name}", {expr})'

    def finish_operation(self, writer: CodeWriter, op_name: str) -> None:
        writer.line("with Status() as status:")
        with writer.indented():
            writer.line("op = desc.finish_operation(status)")
            writer.line("if status.error:")
            with writer.indented():
                writer.line(f'raise OpCreateError("{op_name}", status.message)')


# Global binding registry
BINDINGS: dict[str, BindingConvention] = {}


def register_binding(name: str, binding: BindingConvention) -> None:
    """Register a binding convention.

    :param name: Name used on the command line (e.g., "graph")
    :param binding: Convention instance
    """
    BINDINGS[name] = binding


def get_binding(name: str) -> BindingConvention | None:
    """Get a binding convention by name.

    :param name: Convention name
    :return: Convention or None if not registered
    """
    return BINDINGS.get(name)


register_binding(GraphBinding.name, GraphBinding())
register_binding(TypedSetterBinding.name, TypedSetterBinding())
