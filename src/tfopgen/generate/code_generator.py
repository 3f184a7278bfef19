"""Main operation module generation orchestrator.

Assembles the Python module holding one method per surfaced operation.
"""

__docformat__ = "restructuredtext"
__all__ = ["GenerationReport", "generate_ops_module"]

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from tfopgen.analyze import SkipReason, classify_arguments, find_skip_reason
from tfopgen.build.types import OpDocIR, OpIR
from tfopgen.generate._bindings import BindingConvention, get_binding
from tfopgen.generate._templates import CONTAINER_DOCSTRING, CONTAINER_NAME
from tfopgen.generate._writer import CodeWriter
from tfopgen.generate.emitter import emit_operation


@dataclass
class GenerationReport:
    """Outcome of one generation run.

    :param emitted: Names of the operations that got a method, in order
    :param skipped: ``(name, reason)`` of the operations left out, in order
    """

    emitted: list[str] = field(default_factory=list)
    skipped: list[tuple[str, SkipReason]] = field(default_factory=list)


def _write_container_opening(writer: CodeWriter) -> None:
    writer.line(f"class {CONTAINER_NAME}:")
    writer.indent()
    first, *rest = CONTAINER_DOCSTRING
    writer.line(f'"""{first}')
    for line in rest:
        writer.line(line)
    writer.line('"""')


def _write_container_closing(writer: CodeWriter) -> None:
    writer.dedent()
    writer.line()
    writer.line()
    writer.line(f'__all__ = ["{CONTAINER_NAME}"]')


def generate_ops_module(
    ops: Iterable[OpIR],
    docs: Mapping[str, OpDocIR],
    binding: str | BindingConvention = "graph",
) -> tuple[str, GenerationReport]:
    """Generate the operation module.

    Operations are emitted in ascending name order whatever the catalog
    order, so the same inputs always give the same text.

    :param ops: Operation signatures
    :param docs: Operation name -> documentation
    :param binding: Binding convention or its registered name
    :return: Tuple of (module code without file header, report)
    :raises ValueError: If the binding name is not registered
    :raises UnmappedAttributeError: If an attribute type passes the surface
        filter but has no mapping at emission
    """
    convention = binding
    if isinstance(binding, str):
        convention = get_binding(binding)
        if convention is None:
            raise ValueError(f"Unknown binding convention: {binding}")

    report = GenerationReport()
    writer = CodeWriter()
    for line in convention.imports().rstrip("\n").split("\n"):
        writer.line(line)

    _write_container_opening(writer)

    for op in sorted(ops, key=lambda op: op.name):
        doc = docs.get(op.name)
        reason = find_skip_reason(op, doc)
        if reason is not None:
            report.skipped.append((op.name, reason))
            continue

        classification = classify_arguments(op)
        emit_operation(writer, op, doc, classification, convention)
        report.emitted.append(op.name)

    _write_container_closing(writer)

    return writer.getvalue(), report
