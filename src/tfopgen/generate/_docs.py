"""Documentation rendering for generated methods.

Free-form catalog text uses Markdown-style fences and backticks. It is
turned into docstring lines where fenced blocks are delimited by ``<code>``
and ``</code>`` marker lines and inline spans by ``<c>...</c>``. The other
HTML-sensitive characters are escaped so the markers stay unambiguous.
"""

__docformat__ = "restructuredtext"
__all__ = [
    "CODE_CLOSE",
    "CODE_OPEN",
    "INLINE_CLOSE",
    "INLINE_OPEN",
    "LANGUAGE_HINTS",
    "build_docstring",
    "escape_docstring_line",
    "render_comment",
]

import html
import re

from tfopgen.analyze.classifier import ArgumentClassification
from tfopgen.build.types import OpDocIR, OpIR
from tfopgen.generate._templates import INDENT
from tfopgen.generate._utils import format_default, param_name

CODE_OPEN = "<code>"
CODE_CLOSE = "</code>"
INLINE_OPEN = "<c>"
INLINE_CLOSE = "</c>"

FENCE = "```"
LANGUAGE_HINTS = frozenset({"python", "c++"})

_NAME_DOC = (
    "If specified, the created operation in the graph will be this one, "
    "otherwise it will be named '{op_name}'."
)
_SINGLE_FETCH_NOTE = (
    "The Operation can be fetched from the resulting Output, by fetching the "
    "Operation property from the result."
)
_TUPLE_FETCH_NOTE = (
    "The Operation can be fetched from any of the Outputs returned in the "
    "tuple values, by fetching the Operation property."
)
_TUPLE_INTRO = "Returns a tuple with multiple values, as follows:"
_NO_OUTPUT_DOC = "Returns the description of the operation"

_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b-\x1f\x7f]")


def _quote(line: str) -> str:
    """Replace backticks by alternating inline-code markers."""
    if "`" not in line:
        return line

    parts = []
    is_open = True
    for c in line:
        if c == "`":
            parts.append(INLINE_OPEN if is_open else INLINE_CLOSE)
            is_open = not is_open
        else:
            parts.append(c)
    return "".join(parts)


def render_comment(text: str | None) -> list[str]:
    """Render free-form documentation text as docstring lines.

    Every physical line is trimmed and HTML-escaped. A line starting with a
    fence toggles the code-block state and emits the matching marker; a
    fence followed by nothing or by a language hint is consumed entirely. A
    block opening and closing on the same line emits both markers around
    its content. Other lines have their backticks turned into inline-code
    markers, starting over on each line.

    Unbalanced fences or backticks are rendered as they come and never
    raise.

    :param text: Documentation text
    :return: Rendered lines, empty for empty input
    """
    if not text:
        return []

    result = []
    block_open = True

    for raw_line in text.split("\n"):
        line = html.escape(raw_line.strip(), quote=False)

        if line.startswith(FENCE):
            result.append(CODE_OPEN if block_open else CODE_CLOSE)
            block_open = not block_open

            rest = line[len(FENCE) :]
            if rest == "" or rest in LANGUAGE_HINTS:
                continue

            line = rest
            if line.endswith(FENCE):
                result.append(_quote(line[: -len(FENCE)]))
                result.append(CODE_OPEN if block_open else CODE_CLOSE)
                block_open = not block_open
                continue

        result.append(_quote(line))

    return result


def escape_docstring_line(line: str) -> str:
    """Escape a line so it can sit inside a triple-quoted docstring.

    :param line: Rendered docstring line
    :return: Source text of the line
    """
    line = line.replace("\\", "\\\\").replace('"""', '\\"\\"\\"')
    return _CONTROL_CHARS.sub(lambda m: f"\\x{ord(m.group()):02x}", line)


def _field(head: str, lines: list[str]) -> list[str]:
    """Attach rendered lines to a reST field, continuation lines indented."""
    if not lines:
        return [head]
    result = [f"{head} {lines[0]}" if lines[0] else head]
    result.extend(INDENT + line if line else "" for line in lines[1:])
    return result


def _deprecation_lines(op: OpIR, doc: OpDocIR) -> list[str]:
    message = doc.deprecation_message or op.deprecation_explanation
    if op.deprecation_version:
        note = f"Deprecated at graph version {op.deprecation_version}."
    elif message:
        note = "Deprecated."
    else:
        return []
    if message:
        note = f"{note} {message}"
    return render_comment(note)


def _return_lines(op: OpIR, doc: OpDocIR) -> list[str]:
    if not op.output_args:
        return render_comment(_NO_OUTPUT_DOC)

    if len(op.output_args) == 1:
        arg = op.output_args[0]
        return [
            *render_comment(doc.out_arg_description(arg.name)),
            *render_comment(_SINGLE_FETCH_NOTE),
        ]

    lines = render_comment(_TUPLE_INTRO)
    for arg in op.output_args:
        description = doc.out_arg_description(arg.name)
        lines.extend(render_comment(f"{param_name(arg.name)}: {description}".rstrip()))
    lines.extend(render_comment(_TUPLE_FETCH_NOTE))
    return lines


def build_docstring(
    op: OpIR, doc: OpDocIR, classification: ArgumentClassification
) -> list[str]:
    """Assemble the docstring body of a generated method.

    Layout: summary, description, deprecation note, one ``:param:`` field
    per parameter in signature order, then ``:return:``.

    :param op: Operation signature
    :param doc: Operation documentation
    :param classification: Attribute classification of the operation
    :return: Unescaped docstring lines
    """
    lines = render_comment(doc.summary)

    description = render_comment(doc.description)
    if description:
        lines.extend(["", *description])

    deprecation = _deprecation_lines(op, doc)
    if deprecation:
        lines.extend(["", *deprecation])

    lines.append("")
    for arg in op.input_args:
        head = f":param {param_name(arg.name)}:"
        lines.extend(_field(head, render_comment(doc.in_arg_description(arg.name))))

    for attr in classification.required:
        head = f":param {param_name(attr.name)}:"
        lines.extend(_field(head, render_comment(doc.attr_description(attr.name))))

    for attr in classification.optional:
        head = f":param {param_name(attr.name)}:"
        body = render_comment("Optional argument.")
        body.extend(render_comment(doc.attr_description(attr.name)))
        if attr.default_value is not None:
            default = format_default(attr.default_value, attr.type)
            body.extend(render_comment(f"Defaults to `{default}`."))
        lines.extend(_field(head, body))

    lines.extend(_field(":param name:", render_comment(_NAME_DOC.format(op_name=op.name))))
    lines.extend(_field(":return:", _return_lines(op, doc)))

    return lines
