"""Operation catalog decoding."""

__docformat__ = "restructuredtext"
__all__ = ["decode_op_list", "load_op_list", "parse_op_list_text"]

from pathlib import Path

from google.protobuf import text_format
from google.protobuf.message import DecodeError

from tfopgen.catalog._schema import OpList
from tfopgen.errors import CatalogDecodeError

TEXT_SUFFIXES = (".pbtxt", ".txt")


def decode_op_list(data: bytes) -> list:
    """Decode a serialized ``OpList`` into its operation signatures.

    :param data: Binary ``OpList`` bytes (as returned by the runtime registry)
    :return: Operations in catalog order
    :raises CatalogDecodeError: If the bytes are not a valid ``OpList``
    """
    op_list = OpList()
    try:
        op_list.ParseFromString(data)
    except (DecodeError, TypeError) as error:
        raise CatalogDecodeError(f"Invalid operation catalog: {error}") from error
    return list(op_list.op)


def parse_op_list_text(text: str) -> list:
    """Parse a text-format ``OpList`` (the registry's ``ops.pbtxt`` dump).

    Fields the generator does not model (full type info, tensor defaults) are
    skipped.

    :param text: Text-format ``OpList``
    :return: Operations in catalog order
    :raises CatalogDecodeError: If the text does not parse
    """
    op_list = OpList()
    try:
        text_format.Parse(text, op_list, allow_unknown_field=True)
    except text_format.ParseError as error:
        raise CatalogDecodeError(f"Invalid operation catalog: {error}") from error
    return list(op_list.op)


def load_op_list(catalog_path: str | Path) -> list:
    """Load the operation catalog from file.

    Files ending in ``.pbtxt`` or ``.txt`` are read as text format, anything
    else as binary.

    :param catalog_path: Path to the catalog
    :return: Operations in catalog order
    :raises FileNotFoundError: If the catalog does not exist
    :raises CatalogDecodeError: If the catalog does not parse
    """
    path = Path(catalog_path)
    if path.suffix in TEXT_SUFFIXES:
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as error:
            raise CatalogDecodeError(f"Invalid operation catalog {path}: {error}") from error
        return parse_op_list_text(text)
    return decode_op_list(path.read_bytes())
