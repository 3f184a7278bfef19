"""Format generated code to follow Black rules."""

__docformat__ = "restructuredtext"
__all__ = ["MAX_LINE_LENGTH", "format_code"]

import re

MAX_LINE_LENGTH = 88

_DOCSTRING_QUOTES = '"""'


def format_code(code: str) -> str:
    """Apply Black-compatible formatting to generated code.

    Applies the following formatting rules:
    - Two blank lines before class/function definitions at module level
    - One blank line before methods and nested classes
    - Max line length of 88 characters, with trailing commas in wrapped
      signatures and calls

    Docstring contents are never touched.

    :param code: Generated module code
    :return: Formatted code
    """
    # Pass 1: Normalize blank lines first
    code = _normalize_blank_lines(code)

    # Pass 2: Wrap long lines
    result = []
    for line, in_docstring in _scan_docstrings(code.split("\n")):
        if not in_docstring and len(line) > MAX_LINE_LENGTH:
            result.extend(_wrap_long_line(line))
        else:
            result.append(line)

    return "\n".join(result)


def _scan_docstrings(lines: list[str]):
    """Yield each line with whether it lies inside a docstring.

    Lines opening or closing a docstring count as inside. Generated code
    escapes triple quotes in docstring text, so every occurrence is a
    delimiter.
    """
    inside = False
    for line in lines:
        count = line.count(_DOCSTRING_QUOTES)
        yield line, inside or count > 0
        if count % 2 == 1:
            inside = not inside


def _wrap_long_line(line: str) -> list[str]:
    """Wrap a long line into multiple lines with proper indentation.

    Handles patterns like:
    - def method(self, arg1: T, arg2: T, ...) -> R:
    - x = func(arg1, arg2, arg3, ...)

    :param line: Line to wrap
    :return: List of wrapped lines
    """
    indent_match = re.match(r"^(\s*)", line)
    base_indent = indent_match.group(1) if indent_match else ""
    continuation_indent = base_indent + "    "

    # Pattern: indent + def name(params) -> annotation:
    def_match = re.match(r"^(\s*)def\s+(\w+)\((.*)\)(\s*->\s*[^()]+)?:$", line)
    if def_match:
        indent, func_name, params_str, returns = def_match.groups()
        params = _split_args(params_str)
        result = [f"{indent}def {func_name}("]
        result.extend(f"{continuation_indent}{param}," for param in params)
        result.append(f"{indent}){returns or ''}:")
        return result

    # Pattern: indent + var = something(args)
    assignment_match = re.match(r"^(\s*)(\S+)\s*=\s*(.+?)\((.*)\)$", line, re.DOTALL)
    if assignment_match:
        indent, var_name, func_call, args_str = assignment_match.groups()
        args = _split_args(args_str)

        if len(args) > 1:
            result = [f"{indent}{var_name} = {func_call}("]
            result.extend(f"{continuation_indent}{arg}," for arg in args)
            result.append(f"{indent})")
            return result

    # If we can't parse it or wrapping won't help, return as-is
    return [line]


def _split_args(args_str: str) -> list[str]:
    """Split arguments by comma, respecting nesting and string literals.

    :param args_str: Arguments string (without outer parentheses)
    :return: List of argument strings
    """
    args = []
    current = []
    depth = 0
    quote = ""

    for char in args_str:
        if quote:
            if char == quote:
                quote = ""
            current.append(char)
        elif char in "\"'":
            quote = char
            current.append(char)
        elif char in "([{":
            depth += 1
            current.append(char)
        elif char in ")]}":
            depth -= 1
            current.append(char)
        elif char == "," and depth == 0:
            args.append("".join(current).strip())
            current = []
        else:
            current.append(char)

    if current:
        args.append("".join(current).strip())

    return [arg for arg in args if arg]


def _normalize_blank_lines(code: str) -> str:
    """Ensure proper blank lines between definitions.

    - Two blank lines before class/function definitions at module level
    - One blank line before a method or nested class

    :param code: Code to normalize
    :return: Code with normalized blank lines
    """
    result: list[str] = []
    prev_was_class_def = False

    for line, in_docstring in _scan_docstrings(code.split("\n")):
        if in_docstring:
            result.append(line)
            prev_was_class_def = False
            continue

        stripped = line.strip()
        is_definition = re.match(r"^(class|def)\s+\w+", stripped) is not None

        if is_definition and not line.startswith(" "):
            # Module-level class or function
            _ensure_blank_lines_before(result, 2)
        elif is_definition and not prev_was_class_def:
            # Nested definition; none right after its enclosing class line
            _ensure_blank_lines_before(result, 1)
        elif prev_was_class_def and stripped == "":
            # Skip blank lines immediately after class definition
            continue

        result.append(line)
        prev_was_class_def = stripped.startswith("class ")

    return "\n".join(result)


def _ensure_blank_lines_before(lines: list[str], count: int) -> None:
    """Ensure exactly `count` blank lines at end of lines list.

    Modifies the list in place.

    :param lines: List of lines to modify
    :param count: Number of blank lines to ensure
    """
    if not lines:
        return

    # Count existing trailing blank lines
    existing_blanks = 0
    for line in reversed(lines):
        if line.strip() == "":
            existing_blanks += 1
        else:
            break

    if existing_blanks < count:
        lines.extend([""] * (count - existing_blanks))
    elif existing_blanks > count:
        for _ in range(existing_blanks - count):
            lines.pop()
