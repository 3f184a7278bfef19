"""Shared pytest configuration and fixtures for tfopgen unit tests.

This module provides:
- Operation signature fixtures (single ops and a full catalog)
- Catalog files written in text and binary form
- Api definition override directories
"""

import pytest
from google.protobuf import text_format

from tests.test_units.test_tfopgen.fixtures.synthetic_ops import SyntheticOpCatalogs
from tfopgen.build import build_op_doc_ir, build_op_ir
from tfopgen.catalog import ApiDefMap

# ===== Signature Fixtures =====


@pytest.fixture
def mat_mul_op():
    """MatMul signature record."""
    return build_op_ir(SyntheticOpCatalogs.create_mat_mul_op())


@pytest.fixture
def surfaced_op_defs():
    """Every OpDef expected to appear in the generated module."""
    return SyntheticOpCatalogs.create_surfaced_ops()


@pytest.fixture
def catalog():
    """Full OpList, including skipped operations, in non-sorted order."""
    return SyntheticOpCatalogs.create_catalog()


@pytest.fixture
def docs_for():
    """Build the documentation record of an OpDef as seeded from the catalog."""

    def _docs_for(*op_defs):
        api_map = ApiDefMap.from_op_list(op_defs)
        return {op_def.name: build_op_doc_ir(api_map.get(op_def.name)) for op_def in op_defs}

    return _docs_for


# ===== Catalog Files =====


@pytest.fixture
def text_catalog_path(tmp_path, catalog):
    """Write the full catalog in text format."""
    path = tmp_path / "ops.pbtxt"
    path.write_text(text_format.MessageToString(catalog), encoding="utf-8")
    return path


@pytest.fixture
def binary_catalog_path(tmp_path, catalog):
    """Write the full catalog in binary form."""
    path = tmp_path / "ops.pb"
    path.write_bytes(catalog.SerializeToString())
    return path


# ===== Override Directories =====


@pytest.fixture
def api_def_dir(tmp_path):
    """Override directory documenting MatMul anew and Undocumented."""
    directory = tmp_path / "base_api"
    directory.mkdir()
    (directory / "api_def_MatMul.pbtxt").write_text(
        SyntheticOpCatalogs.create_mat_mul_override(), encoding="utf-8"
    )
    (directory / "api_def_Undocumented.pbtxt").write_text(
        SyntheticOpCatalogs.create_undocumented_override(), encoding="utf-8"
    )
    return directory


@pytest.fixture
def empty_api_def_dir(tmp_path):
    """Override directory without files."""
    directory = tmp_path / "empty_api"
    directory.mkdir()
    return directory
