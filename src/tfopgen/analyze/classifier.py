"""Stage 3: Attribute Classification.

Partitions the attributes of an operation into inferred, required and
optional buckets. Inferred attributes are pinned by input arguments and never
become parameters of the generated method.
"""

__docformat__ = "restructuredtext"
__all__ = ["ArgumentClassification", "classify_arguments"]

from dataclasses import dataclass

from tfopgen.build.types import AttrIR, OpIR


@dataclass(frozen=True)
class ArgumentClassification:
    """Attribute buckets of one operation.

    :param inferred: Attribute names referenced by an input argument
    :param required: Attributes without a default, in declaration order
    :param optional: Attributes with a default, in declaration order
    :param has_outputs: Whether the operation declares outputs
    """

    inferred: frozenset[str]
    required: tuple[AttrIR, ...]
    optional: tuple[AttrIR, ...]
    has_outputs: bool


def _collect_inferred(op: OpIR) -> frozenset[str]:
    names = set()
    for arg in op.input_args:
        for ref in (arg.type_attr, arg.type_list_attr, arg.number_attr):
            if ref:
                names.add(ref)
    return frozenset(names)


def classify_arguments(op: OpIR) -> ArgumentClassification:
    """Classify the attributes of an operation.

    Output arguments do not make an attribute inferred: the caller has no
    input from which the runtime could derive it.

    :param op: Operation signature
    :return: ArgumentClassification
    """
    inferred = _collect_inferred(op)
    required = []
    optional = []

    for attr in op.attrs:
        if attr.name in inferred:
            continue
        if attr.has_default:
            optional.append(attr)
        else:
            required.append(attr)

    return ArgumentClassification(
        inferred=inferred,
        required=tuple(required),
        optional=tuple(optional),
        has_outputs=len(op.output_args) > 0,
    )
