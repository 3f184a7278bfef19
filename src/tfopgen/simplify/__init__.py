"""Stage 5: Code-level formatting and decoration.

Post-processes the generated module to:
- Normalize blank lines and wrap long signatures and calls
- Add the license header and module docstring
"""

__docformat__ = "restructuredtext"
__all__ = ["add_file_header", "format_code"]

from tfopgen.simplify._decorations import add_file_header
from tfopgen.simplify._formatter import format_code
