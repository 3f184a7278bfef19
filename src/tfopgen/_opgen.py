__docformat__ = "restructuredtext"
__all__ = [
    "DEFAULT_API_DEF_DIR",
    "DEFAULT_CATALOG_PATH",
    "DEFAULT_OUTPUT_PATH",
    "OpGenerator",
    "check_environment",
]

import os
import struct
import tempfile
from collections.abc import Iterable
from pathlib import Path

from tfopgen.errors import EnvironmentPreconditionError

DEFAULT_CATALOG_PATH = "ops.pbtxt"
DEFAULT_API_DEF_DIR = "api_def/base_api"
DEFAULT_OUTPUT_PATH = "tfbinding/generated_ops.py"


def _pointer_width() -> int:
    return struct.calcsize("P") * 8


def check_environment() -> None:
    """Refuse to run on anything but a 64-bit interpreter.

    :raises EnvironmentPreconditionError: If pointers are not 64 bits wide
    """
    width = _pointer_width()
    if width != 64:
        raise EnvironmentPreconditionError(
            f"This program only supports 64-bit interpreters (got {width}-bit)"
        )


def _write_atomic(path: Path, text: str) -> None:
    """Write ``text`` to a temporary sibling of ``path`` and rename it over."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
        os.chmod(tmp_path, 0o644)
        tmp_path.replace(path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise


class OpGenerator:
    def __init__(self, verbose: bool = False, binding: str = "graph"):
        self.verbose = verbose
        self.binding = binding

    def load_catalog(
        self, catalog_path: str | Path, api_def_dirs: Iterable[str | Path] = ()
    ):
        """Load the operation catalog and its merged documentation.

        :param catalog_path: Path to the operation catalog (text or binary)
        :param api_def_dirs: Override directories, applied in order
        :return: Tuple of (operation signatures, documentation map)
        """
        from tfopgen.catalog import ApiDefMap, load_op_list, update_api_defs

        op_defs = load_op_list(catalog_path)
        if self.verbose:
            print(f"Loaded {len(op_defs)} operations from {catalog_path}")

        api_map = ApiDefMap.from_op_list(op_defs)
        update_api_defs(api_map, api_def_dirs, verbose=self.verbose)

        from tfopgen.build import build_op_irs

        return build_op_irs(op_defs), api_map

    def generate(
        self,
        catalog_path: str | Path,
        api_def_dirs: Iterable[str | Path] = (),
        target_py_path: str | Path = DEFAULT_OUTPUT_PATH,
        license_text: str | None = None,
    ):
        """Generate the operation module.

        The module is fully built in memory and only then written, through a
        temporary file renamed onto the target, so a failed run leaves any
        previous module in place.

        :param catalog_path: Path to the operation catalog
        :param api_def_dirs: Documentation override directories
        :param target_py_path: Path of the generated Python module
        :param license_text: License for the file header, MIT if None
        :return: GenerationReport
        """
        check_environment()

        # Stage 1-2: Load catalog and build records
        ops, api_map = self.load_catalog(catalog_path, api_def_dirs)

        from tfopgen.build import build_op_doc_ir

        docs = {}
        for op in ops:
            api_def = api_map.get(op.name)
            if api_def is not None:
                docs[op.name] = build_op_doc_ir(api_def)

        # Stage 3-4: Filter, classify and emit
        from tfopgen.generate import generate_ops_module

        code, report = generate_ops_module(ops, docs, binding=self.binding)

        # Stage 5: Formatting and header
        from tfopgen.simplify import add_file_header, format_code

        final_code = add_file_header(format_code(code), license_text)

        target = Path(target_py_path)
        _write_atomic(target, final_code)

        if self.verbose:
            print(f"Generated {len(report.emitted)} operations, skipped {len(report.skipped)}")
            print(f"Generated: {target}")

        return report
