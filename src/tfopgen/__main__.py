"""Command line entry point: ``python -m tfopgen [api_def_dir ...]``."""

__docformat__ = "restructuredtext"
__all__ = ["main"]

import argparse
import sys

from tfopgen._opgen import (
    DEFAULT_API_DEF_DIR,
    DEFAULT_CATALOG_PATH,
    DEFAULT_OUTPUT_PATH,
    OpGenerator,
)
from tfopgen.errors import TfOpGenError
from tfopgen.generate._bindings import BINDINGS


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tfopgen",
        description="Generate typed Python wrappers for graph operations.",
    )
    parser.add_argument(
        "api_def_dirs",
        nargs="*",
        metavar="api_def_dir",
        help=f"api definition override directory (default: {DEFAULT_API_DEF_DIR})",
    )
    parser.add_argument(
        "--catalog",
        default=DEFAULT_CATALOG_PATH,
        help=f"operation catalog, text or binary OpList (default: {DEFAULT_CATALOG_PATH})",
    )
    parser.add_argument(
        "--output",
        default=DEFAULT_OUTPUT_PATH,
        help=f"generated module path (default: {DEFAULT_OUTPUT_PATH})",
    )
    parser.add_argument(
        "--binding",
        default="graph",
        choices=sorted(BINDINGS),
        help="runtime binding convention of the generated code",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="print progress")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the generator.

    :param argv: Command line arguments, ``sys.argv[1:]`` if None
    :return: Process exit status; skipped operations do not count as errors
    """
    args = _build_parser().parse_args(argv)
    api_def_dirs = args.api_def_dirs or [DEFAULT_API_DEF_DIR]

    generator = OpGenerator(verbose=args.verbose, binding=args.binding)
    try:
        generator.generate(args.catalog, api_def_dirs, target_py_path=args.output)
    except (TfOpGenError, OSError) as error:
        print(f"tfopgen: error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
