"""End-to-End Pipeline Tests - Catalog to Generated Module.

This module tests the complete generation pipeline:
- Loading the catalog and merging override directories
- Writing a parseable, deterministic module
- Atomic replacement of the target
- Fatal preconditions

Test Coverage:
- TestLoadCatalog: 3 tests - Catalog and documentation loading
- TestGenerate: 9 tests - Generated module content
- TestGenerateFailures: 4 tests - Fatal errors leave the target alone
"""

import ast

import pytest

from tfopgen import OpGenerator
from tfopgen.analyze import SkipReason
from tfopgen.errors import (
    EnvironmentPreconditionError,
    OpSkippedWarning,
    UnmappedAttributeError,
)

EXPECTED_EMITTED = [
    "AddN",
    "Assign",
    "BatchNormWithGlobalNormalization",
    "Const",
    "MatMul",
    "NoOp",
    "Placeholder",
    "Split",
    "Undocumented",
    "Unique",
]


def _generate(catalog_path, api_def_dirs, target, **kwargs):
    with pytest.warns(OpSkippedWarning, match="PartitionedCall"):
        return OpGenerator(**kwargs).generate(catalog_path, api_def_dirs, target_py_path=target)


class TestLoadCatalog:
    """Test loading of signatures and documentation."""

    def test_load_binary_catalog(self, binary_catalog_path, catalog):
        """Every operation of the catalog is built."""
        ops, _ = OpGenerator().load_catalog(binary_catalog_path)
        assert [op.name for op in ops] == [op.name for op in catalog.op]

    def test_overrides_applied(self, text_catalog_path, api_def_dir):
        """Override directories are merged into the documentation."""
        _, api_map = OpGenerator().load_catalog(text_catalog_path, [api_def_dir])
        assert api_map.get("MatMul").summary == "Multiply two matrices."
        assert api_map.get("Undocumented").summary == "Now documented."

    def test_verbose_reports_count(self, text_catalog_path, capsys):
        """Verbose mode reports how many operations were loaded."""
        OpGenerator(verbose=True).load_catalog(text_catalog_path)
        assert "Loaded 12 operations from" in capsys.readouterr().out


class TestGenerate:
    """Test the generated module."""

    def test_report(self, text_catalog_path, api_def_dir, tmp_path):
        """Surfaced operations in name order; skips with their reason."""
        report = _generate(text_catalog_path, [api_def_dir], tmp_path / "ops.py")
        assert report.emitted == EXPECTED_EMITTED
        assert report.skipped == [
            ("PartitionedCall", SkipReason.UNMAPPED_ATTRIBUTE),
            ("_Send", SkipReason.INTERNAL),
        ]

    def test_module_parses(self, text_catalog_path, api_def_dir, tmp_path):
        """The written module is valid Python with one method per operation."""
        target = tmp_path / "ops.py"
        _generate(text_catalog_path, [api_def_dir], target)

        tree = ast.parse(target.read_text(encoding="utf-8"))
        container = next(node for node in tree.body if isinstance(node, ast.ClassDef))
        methods = [node.name for node in container.body if isinstance(node, ast.FunctionDef)]
        assert container.name == "GraphOps"
        assert methods == [
            "add_n",
            "assign",
            "batch_norm_with_global_normalization",
            "const",
            "mat_mul",
            "no_op",
            "placeholder",
            "split",
            "undocumented",
            "unique",
        ]

    def test_header_and_layout(self, text_catalog_path, api_def_dir, tmp_path):
        """License, docstring, imports, container, then __all__."""
        target = tmp_path / "ops.py"
        _generate(text_catalog_path, [api_def_dir], target)
        text = target.read_text(encoding="utf-8")

        assert text.startswith("# MIT License\n")
        assert '"""Typed wrappers for graph operations.' in text
        assert "\n)\n\n\nclass GraphOps:\n" in text
        assert text.endswith('\n\n\n__all__ = ["GraphOps"]\n')

    def test_long_signatures_wrapped(self, text_catalog_path, api_def_dir, tmp_path):
        """Long method signatures are split one parameter per line."""
        target = tmp_path / "ops.py"
        _generate(text_catalog_path, [api_def_dir], target)
        text = target.read_text(encoding="utf-8")
        assert "    def mat_mul(\n        self,\n        a: Output,\n" in text
        assert "    ) -> Output:\n" in text

    def test_overrides_in_docstrings(self, text_catalog_path, api_def_dir, tmp_path):
        """Override documentation is rendered into the docstrings."""
        target = tmp_path / "ops.py"
        _generate(text_catalog_path, [api_def_dir], target)
        text = target.read_text(encoding="utf-8")
        assert '"""Multiply two matrices.' in text
        assert ":param a: The left <c>matrix</c>." in text
        assert "<code>\n        c = a @ b\n        </code>" in text
        assert '"""Now documented.' in text

    def test_deterministic(self, text_catalog_path, binary_catalog_path, api_def_dir, tmp_path):
        """Same inputs give byte-identical files, whatever the catalog format."""
        first = tmp_path / "first.py"
        second = tmp_path / "second.py"
        _generate(text_catalog_path, [api_def_dir], first)
        _generate(binary_catalog_path, [api_def_dir], second)
        assert first.read_bytes() == second.read_bytes()

    def test_overwrites_without_leftovers(self, text_catalog_path, api_def_dir, tmp_path):
        """The target is replaced and no temporary file is left behind."""
        out_dir = tmp_path / "out"
        out_dir.mkdir()
        target = out_dir / "ops.py"
        target.write_text("old", encoding="utf-8")

        _generate(text_catalog_path, [api_def_dir], target)

        assert target.read_text(encoding="utf-8") != "old"
        assert list(out_dir.iterdir()) == [target]

    def test_typed_binding(self, text_catalog_path, api_def_dir, tmp_path):
        """The binding convention selects imports and setters."""
        target = tmp_path / "ops.py"
        _generate(text_catalog_path, [api_def_dir], target, binding="typed")
        text = target.read_text(encoding="utf-8")
        assert "from tfbinding.typed import (" in text
        assert 'desc.set_attr_bool("transpose_a", bool(transpose_a))' in text
        ast.parse(text)

    def test_verbose_summary(self, text_catalog_path, api_def_dir, tmp_path, capsys):
        """Verbose mode prints the emitted and skipped counts."""
        target = tmp_path / "ops.py"
        _generate(text_catalog_path, [api_def_dir], target, verbose=True)
        out = capsys.readouterr().out
        assert "Generated 10 operations, skipped 2" in out
        assert f"Generated: {target}" in out


class TestGenerateFailures:
    """Test that fatal errors never touch the target."""

    def test_unmapped_attribute_at_emission(self, text_catalog_path, tmp_path, monkeypatch):
        """An operation slipping past the filter aborts the whole run."""
        monkeypatch.setattr(
            "tfopgen.generate.code_generator.find_skip_reason", lambda op, doc: None
        )
        target = tmp_path / "ops.py"
        target.write_text("old", encoding="utf-8")

        with pytest.raises(UnmappedAttributeError, match="'func'"):
            OpGenerator().generate(text_catalog_path, target_py_path=target)

        assert target.read_text(encoding="utf-8") == "old"
        assert not [path for path in tmp_path.iterdir() if path.suffix == ".tmp"]

    def test_not_64_bit(self, text_catalog_path, tmp_path, monkeypatch):
        """Non 64-bit interpreters are refused before anything is read."""
        monkeypatch.setattr("tfopgen._opgen._pointer_width", lambda: 32)
        target = tmp_path / "ops.py"

        with pytest.raises(EnvironmentPreconditionError, match="64-bit"):
            OpGenerator().generate(text_catalog_path, target_py_path=target)

        assert not target.exists()

    def test_missing_override_dir(self, text_catalog_path, tmp_path):
        """A missing override directory is fatal."""
        target = tmp_path / "ops.py"
        with pytest.raises(FileNotFoundError, match="Api definition directory not found"):
            OpGenerator().generate(text_catalog_path, [tmp_path / "missing"], target)
        assert not target.exists()

    def test_missing_catalog(self, tmp_path):
        """A missing catalog is fatal."""
        target = tmp_path / "ops.py"
        with pytest.raises(FileNotFoundError):
            OpGenerator().generate(tmp_path / "missing.pbtxt", target_py_path=target)
        assert not target.exists()
