"""Line writer with explicit indentation."""

__docformat__ = "restructuredtext"
__all__ = ["CodeWriter"]

from collections.abc import Iterator
from contextlib import contextmanager

from tfopgen.generate._templates import INDENT


class CodeWriter:
    """Accumulate source lines at a tracked indentation level.

    The level is a plain counter owned by the writer; content producers only
    ask for one more or one less level.
    """

    def __init__(self, level: int = 0):
        self.level = level
        self.lines: list[str] = []

    def line(self, text: str = "") -> None:
        """Write one line at the current level; empty lines carry no indent."""
        if text:
            self.lines.append(INDENT * self.level + text)
        else:
            self.lines.append("")

    def indent(self) -> None:
        self.level += 1

    def dedent(self) -> None:
        if self.level == 0:
            raise ValueError("Cannot dedent below level 0")
        self.level -= 1

    @contextmanager
    def indented(self) -> Iterator["CodeWriter"]:
        """Write the enclosed lines one level deeper."""
        self.indent()
        try:
            yield self
        finally:
            self.dedent()

    def getvalue(self) -> str:
        """Get the accumulated text, newline-terminated."""
        if not self.lines:
            return ""
        return "\n".join(self.lines) + "\n"
