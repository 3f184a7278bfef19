"""Doc Renderer Tests - Comment Rendering and Docstring Assembly.

Test Coverage:
- TestRenderComment: 11 tests - Fences, inline code and escaping
- TestBuildDocstring: 8 tests - Docstring layout
- TestEscapeDocstringLine: 3 tests - Source escaping
"""

from tests.test_units.test_tfopgen.fixtures.synthetic_ops import SyntheticOpCatalogs
from tfopgen.analyze import classify_arguments
from tfopgen.build import OpDocIR, build_op_ir
from tfopgen.generate import build_docstring, render_comment
from tfopgen.generate._docs import escape_docstring_line


class TestRenderComment:
    """Test rendering of free-form documentation text."""

    def test_empty_input(self):
        """Empty or missing text gives no lines."""
        assert render_comment("") == []
        assert render_comment(None) == []

    def test_inline_and_fenced_block(self):
        """Inline span, then an opened and closed code block."""
        text = "Computes `y = x^2`.\n```\nexample\n```"
        assert render_comment(text) == [
            "Computes <c>y = x^2</c>.",
            "<code>",
            "example",
            "</code>",
        ]

    def test_lines_are_trimmed(self):
        """Surrounding whitespace is removed."""
        assert render_comment("  first  \n\tsecond") == ["first", "second"]

    def test_html_escaping(self):
        """<, > and & are escaped."""
        assert render_comment("a < b && c > d") == ["a &lt; b &amp;&amp; c &gt; d"]

    def test_escaping_is_single_pass(self):
        """An already escaped entity is escaped once more, never twice."""
        assert render_comment("&lt;") == ["&amp;lt;"]

    def test_language_hints_consumed(self):
        """Fences with a language hint emit only the marker."""
        text = "```python\nx = 1\n```\n```c++\nint x;\n```"
        assert render_comment(text) == ["<code>", "x = 1", "</code>", "<code>", "int x;", "</code>"]

    def test_unknown_hint_kept_as_code(self):
        """Text after a fence that is not a hint is kept."""
        assert render_comment("```sh\n```") == ["<code>", "sh", "</code>"]

    def test_single_line_block(self):
        """A block opened and closed on one line emits both markers."""
        assert render_comment("```x = 1```") == ["<code>", "x = 1", "</code>"]

    def test_inline_state_resets_per_line(self):
        """An unclosed backtick does not leak into the next line."""
        assert render_comment("a `b\nc` d") == ["a <c>b", "c<c> d"]

    def test_unbalanced_fence_does_not_raise(self):
        """An unclosed block still renders."""
        assert render_comment("```\ncode") == ["<code>", "code"]

    def test_blank_lines_kept(self):
        """Paragraph breaks survive as empty lines."""
        assert render_comment("one\n\ntwo") == ["one", "", "two"]


class TestBuildDocstring:
    """Test docstring assembly of generated methods."""

    @staticmethod
    def _docstring(op_def, doc):
        op = build_op_ir(op_def)
        return build_docstring(op, doc, classify_arguments(op))

    def test_summary_then_description(self):
        """Summary comes first, description after a blank line."""
        doc = OpDocIR("MatMul", summary="Multiply.", description="Details.")
        lines = self._docstring(SyntheticOpCatalogs.create_mat_mul_op(), doc)
        assert lines[:3] == ["Multiply.", "", "Details."]

    def test_params_in_signature_order(self):
        """Inputs, required, optional, then name."""
        doc = OpDocIR("Split", summary="Split.")
        lines = self._docstring(SyntheticOpCatalogs.create_split_op(), doc)
        heads = [line.split(":")[1] for line in lines if line.startswith(":param")]
        assert heads == ["param axis", "param value", "param num_split", "param name"]

    def test_optional_attribute_notes(self):
        """Optional attributes say so and show their default."""
        doc = OpDocIR("MatMul", summary="Multiply.")
        lines = self._docstring(SyntheticOpCatalogs.create_mat_mul_op(), doc)
        index = lines.index(":param transpose_a: Optional argument.")
        assert lines[index + 1] == "    Defaults to <c>False</c>."

    def test_name_parameter(self):
        """The name override names the default operation name."""
        doc = OpDocIR("NoOp", summary="Does nothing.")
        lines = self._docstring(SyntheticOpCatalogs.create_no_op(), doc)
        assert (
            ":param name: If specified, the created operation in the graph will be this "
            "one, otherwise it will be named 'NoOp'."
        ) in lines

    def test_no_outputs_return(self):
        """Operations without outputs return their description."""
        doc = OpDocIR("NoOp", summary="Does nothing.")
        lines = self._docstring(SyntheticOpCatalogs.create_no_op(), doc)
        assert lines[-1] == ":return: Returns the description of the operation"

    def test_single_output_return(self):
        """A single output is described then followed by the fetch note."""
        doc = OpDocIR("MatMul", summary="Multiply.", out_args=())
        op_def = SyntheticOpCatalogs.create_mat_mul_op()
        lines = self._docstring(op_def, doc)
        assert lines[-1].startswith(":return: The Operation can be fetched")

    def test_multiple_outputs_return(self, docs_for):
        """Several outputs are listed in declaration order."""
        op_def = SyntheticOpCatalogs.create_unique_op()
        lines = self._docstring(op_def, docs_for(op_def)["Unique"])
        index = lines.index(":return: Returns a tuple with multiple values, as follows:")
        assert lines[index + 1] == "    y: Unique elements."
        assert lines[index + 2] == "    idx: Index of each input."
        assert lines[index + 3].startswith("    The Operation can be fetched from any")

    def test_deprecation_note(self):
        """Deprecated operations carry a note after the description."""
        doc = OpDocIR("BatchNormWithGlobalNormalization", summary="Batch normalization.")
        lines = self._docstring(SyntheticOpCatalogs.create_deprecated_op(), doc)
        assert lines[2] == (
            "Deprecated at graph version 9. Use tf.nn.batch_normalization()"
        )


class TestEscapeDocstringLine:
    """Test escaping of docstring lines into source text."""

    def test_plain_line_unchanged(self):
        """Ordinary text is kept."""
        assert escape_docstring_line("Adds x and y.") == "Adds x and y."

    def test_backslash_and_triple_quotes(self):
        """Backslashes and triple quotes cannot end the docstring."""
        assert escape_docstring_line('a\\b """c"""') == 'a\\\\b \\"\\"\\"c\\"\\"\\"'

    def test_control_characters(self):
        """Control characters are written as escapes."""
        assert escape_docstring_line("a\x00b") == "a\\x00b"
