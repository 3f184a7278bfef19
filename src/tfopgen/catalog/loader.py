"""Loading of documentation override directories."""

__docformat__ = "restructuredtext"
__all__ = ["list_files", "read_all_text", "update_api_defs"]

import warnings
from collections.abc import Iterable
from pathlib import Path

from tfopgen.catalog.api_defs import ApiDefMap
from tfopgen.errors import OverrideParseWarning


def list_files(directory: str | Path) -> list[Path]:
    """List the regular files of a directory, sorted by name.

    :param directory: Directory to scan (not recursive)
    :return: File paths
    :raises FileNotFoundError: If the directory does not exist
    """
    path = Path(directory)
    if not path.is_dir():
        raise FileNotFoundError(f"Api definition directory not found: {path}")
    return sorted(entry for entry in path.iterdir() if entry.is_file())


def read_all_text(path: str | Path) -> str:
    """Read a whole file as UTF-8 text."""
    return Path(path).read_text(encoding="utf-8")


def update_api_defs(
    api_map: ApiDefMap, api_def_dirs: Iterable[str | Path], verbose: bool = False
) -> list[Path]:
    """Merge every file of every override directory into the documentation map.

    Directories are applied in the given order, so a file in a later
    directory overwrites entries of an earlier one. Files that do not parse
    are reported with a warning and skipped.

    :param api_map: Documentation map to update in place
    :param api_def_dirs: Override directories
    :param verbose: Print every merged file
    :return: Files merged successfully
    """
    merged = []
    for directory in api_def_dirs:
        for path in list_files(directory):
            try:
                text = read_all_text(path)
            except UnicodeDecodeError:
                text = None
            if text is None or not api_map.put(text):
                warnings.warn(
                    f"Could not merge api definitions from {path}",
                    OverrideParseWarning,
                    stacklevel=2,
                )
                continue
            merged.append(path)
            if verbose:
                print(f"Merged api definitions: {path}")
    return merged
