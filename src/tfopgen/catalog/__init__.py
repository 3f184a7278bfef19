"""Stage 1: Catalog Loading.

This module decodes the operation catalog and builds the documentation
catalog, including text-format overrides.
"""

__docformat__ = "restructuredtext"
__all__ = [
    "ApiDefMap",
    "decode_op_list",
    "list_files",
    "load_op_list",
    "parse_op_list_text",
    "pbtxt_from_multiline",
    "read_all_text",
    "update_api_defs",
]

from tfopgen.catalog.api_defs import ApiDefMap, pbtxt_from_multiline
from tfopgen.catalog.decode import decode_op_list, load_op_list, parse_op_list_text
from tfopgen.catalog.loader import list_files, read_all_text, update_api_defs
