__docformat__ = "restructuredtext"
__version__ = "2026.1.0"
__all__ = [
    "DEFAULT_API_DEF_DIR",
    "DEFAULT_CATALOG_PATH",
    "DEFAULT_OUTPUT_PATH",
    "OpGenerator",
]

from tfopgen._opgen import (
    DEFAULT_API_DEF_DIR,
    DEFAULT_CATALOG_PATH,
    DEFAULT_OUTPUT_PATH,
    OpGenerator,
)
