"""File header for the generated module."""

__docformat__ = "restructuredtext"
__all__ = ["LICENSE_TEXT", "MODULE_DOCSTRING", "add_file_header"]

LICENSE_TEXT = """\
MIT License

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.
"""

MODULE_DOCSTRING = '''\
"""Typed wrappers for graph operations.

Generated by tfopgen from the operation catalog and its api definitions.
Do not edit by hand; regenerate instead.
"""
'''


def _comment_block(text: str) -> str:
    lines = text.rstrip("\n").split("\n")
    return "\n".join(f"# {line}" if line else "#" for line in lines) + "\n"


def add_file_header(code: str, license_text: str | None = None) -> str:
    """Prepend the license comment block and module docstring.

    The header holds no timestamp or path, so regenerating from the same
    inputs gives identical files.

    :param code: Generated module code
    :param license_text: License to embed, the bundled MIT notice if None
    :return: Code with header
    """
    if license_text is None:
        license_text = LICENSE_TEXT
    return f"{_comment_block(license_text)}\n{MODULE_DOCSTRING}\n{code}"
