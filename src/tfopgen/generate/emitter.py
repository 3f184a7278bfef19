"""Signature and body emission for one operation.

Each surfaced operation becomes a method of the container class::

    def mat_mul(self, a: Output, b: Output, transpose_a: bool | None = None,
                name: str | None = None) -> Output:
        # docstring
        desc = OperationDescription(self, "MatMul", self.make_name("MatMul", name))
        desc.add_input(a)
        desc.add_input(b)
        for control in self.control_dependencies:
            desc.add_control_input(control)
        if transpose_a is not None:
            desc.set_attr("transpose_a", bool(transpose_a))
        status = Status()
        op = desc.finish_operation(status)
        if not status.ok:
            raise OpCreateError("MatMul", status.message)
        _idx = 0
        product = Output(op, _idx)
        _idx += 1
        return product

Operations with several outputs return a NamedTuple declared right before
the method.
"""

__docformat__ = "restructuredtext"
__all__ = ["emit_operation", "outputs_class_name", "return_annotation", "signature_params"]

from tfopgen.analyze.classifier import ArgumentClassification
from tfopgen.analyze.type_mapping import python_type
from tfopgen.build.types import ArgIR, AttrIR, OpDocIR, OpIR
from tfopgen.errors import UnmappedAttributeError
from tfopgen.generate._bindings import BindingConvention
from tfopgen.generate._docs import build_docstring, escape_docstring_line
from tfopgen.generate._templates import CONTAINER_NAME, OUTPUTS_SUFFIX
from tfopgen.generate._utils import method_name, param_name
from tfopgen.generate._writer import CodeWriter


def _handle_type(arg: ArgIR) -> str:
    return "list[Output]" if arg.is_list else "Output"


def _attr_type(op: OpIR, attr: AttrIR) -> str:
    annotation = python_type(attr.type)
    if annotation is None:
        raise UnmappedAttributeError(op.name, attr.name, attr.type)
    return annotation


def outputs_class_name(op: OpIR) -> str:
    """Name of the NamedTuple returned by a multi-output operation."""
    return f"{op.name}{OUTPUTS_SUFFIX}"


def signature_params(op: OpIR, classification: ArgumentClassification) -> list[str]:
    """Build the parameter list of the generated method.

    Order: ``self``, inputs, required attributes, optional attributes, then
    the operation name override.

    :param op: Operation signature
    :param classification: Attribute classification of the operation
    :return: Parameter declarations
    :raises UnmappedAttributeError: If an attribute type has no mapping
    """
    params = ["self"]
    for arg in op.input_args:
        params.append(f"{param_name(arg.name)}: {_handle_type(arg)}")
    for attr in classification.required:
        params.append(f"{param_name(attr.name)}: {_attr_type(op, attr)}")
    for attr in classification.optional:
        params.append(f"{param_name(attr.name)}: {_attr_type(op, attr)} | None = None")
    params.append("name: str | None = None")
    return params


def return_annotation(op: OpIR) -> str:
    """Select the return annotation: operation, single output or tuple."""
    if not op.output_args:
        return "Operation"
    if len(op.output_args) == 1:
        return _handle_type(op.output_args[0])
    return f"{CONTAINER_NAME}.{outputs_class_name(op)}"


def _write_docstring(writer: CodeWriter, lines: list[str]) -> None:
    first, *rest = lines or [""]
    writer.line(f'"""{escape_docstring_line(first)}')
    for line in rest:
        writer.line(escape_docstring_line(line))
    writer.line('"""')


def _write_outputs_class(writer: CodeWriter, op: OpIR) -> None:
    writer.line(f"class {outputs_class_name(op)}(NamedTuple):")
    with writer.indented():
        writer.line(f'"""Outputs of :meth:`{method_name(op.name)}`."""')
        for arg in op.output_args:
            writer.line(f"{param_name(arg.name)}: {_handle_type(arg)}")


def _write_outputs(writer: CodeWriter, op: OpIR) -> None:
    writer.line("_idx = 0")
    for arg in op.output_args:
        var = param_name(arg.name)
        if arg.is_list:
            writer.line(f'_n = op.get_output_list_length("{arg.name}")')
            writer.line(f"{var} = [Output(op, _idx + i) for i in range(_n)]")
            writer.line("_idx += _n")
        else:
            writer.line(f"{var} = Output(op, _idx)")
            writer.line("_idx += 1")


def _write_return(writer: CodeWriter, op: OpIR) -> None:
    if not op.output_args:
        writer.line("return op")
    elif len(op.output_args) == 1:
        writer.line(f"return {param_name(op.output_args[0].name)}")
    else:
        values = ", ".join(param_name(arg.name) for arg in op.output_args)
        writer.line(f"return self.{outputs_class_name(op)}({values})")


def emit_operation(
    writer: CodeWriter,
    op: OpIR,
    doc: OpDocIR,
    classification: ArgumentClassification,
    binding: BindingConvention,
) -> None:
    """Write the method wrapping one operation.

    The writer is expected to sit at the container's body level. Nothing is
    written if an attribute type turns out to be unmapped.

    :param writer: Code writer
    :param op: Operation signature
    :param doc: Operation documentation
    :param classification: Attribute classification of the operation
    :param binding: Binding convention of the generated code
    :raises UnmappedAttributeError: If an attribute type has no mapping
    """
    # Build into a scratch writer so a failure leaves the target untouched
    scratch = CodeWriter(writer.level)

    if len(op.output_args) > 1:
        _write_outputs_class(scratch, op)

    params = ", ".join(signature_params(op, classification))
    scratch.line(f"def {method_name(op.name)}({params}) -> {return_annotation(op)}:")

    with scratch.indented():
        _write_docstring(scratch, build_docstring(op, doc, classification))

        binding.new_description(scratch, op.name)
        for arg in op.input_args:
            binding.add_input(scratch, param_name(arg.name), arg.is_list)
        binding.add_control_inputs(scratch)

        for attr in classification.required:
            binding.set_attribute(scratch, op.name, attr, param_name(attr.name))
        for attr in classification.optional:
            var = param_name(attr.name)
            scratch.line(f"if {var} is not None:")
            with scratch.indented():
                binding.set_attribute(scratch, op.name, attr, var)

        binding.finish_operation(scratch, op.name)

        if op.output_args:
            _write_outputs(scratch, op)
        _write_return(scratch, op)

    writer.lines.extend(scratch.lines)
