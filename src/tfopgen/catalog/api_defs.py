"""Documentation catalog (ApiDef map) with text-format overrides."""

__docformat__ = "restructuredtext"
__all__ = ["ApiDefMap", "pbtxt_from_multiline"]

import re

from google.protobuf import text_encoding, text_format

from tfopgen.catalog._schema import ApiDef, ApiDefs

# `description: <<END` opens a heredoc value closed by a line holding only END
_MULTILINE_START = re.compile(r"^(\s*\w+\s*:\s*)<<(\w+)\s*$")


def pbtxt_from_multiline(text: str) -> str:
    """Convert heredoc-style multiline values into quoted text-format strings.

    Api definition files write long values as::

        description: <<END
        Free text, `code` and "quotes".
        END

    which is not valid protobuf text format. Each such block becomes a single
    escaped string literal.

    :param text: Api definition text
    :return: Plain protobuf text format
    :raises ValueError: If a multiline value is never terminated
    """
    lines = text.split("\n")
    result = []
    index = 0

    while index < len(lines):
        match = _MULTILINE_START.match(lines[index])
        index += 1
        if match is None:
            result.append(lines[index - 1])
            continue

        prefix, terminator = match.groups()
        body = []
        while index < len(lines) and lines[index].strip() != terminator:
            body.append(lines[index])
            index += 1
        if index == len(lines):
            raise ValueError(f"Multiline value not terminated by {terminator}")
        index += 1

        escaped = text_encoding.CEscape("\n".join(body), as_utf8=True)
        result.append(f'{prefix}"{escaped}"')

    return "\n".join(result)


def _merge_args(base_args, new_args) -> None:
    by_name = {arg.name: arg for arg in base_args}
    for new_arg in new_args:
        base_arg = by_name.get(new_arg.name)
        if base_arg is None:
            base_args.add().CopyFrom(new_arg)
            continue
        if new_arg.rename_to:
            base_arg.rename_to = new_arg.rename_to
        if new_arg.description:
            base_arg.description = new_arg.description


def _merge_attrs(base_attrs, new_attrs) -> None:
    by_name = {attr.name: attr for attr in base_attrs}
    for new_attr in new_attrs:
        base_attr = by_name.get(new_attr.name)
        if base_attr is None:
            base_attrs.add().CopyFrom(new_attr)
            continue
        if new_attr.rename_to:
            base_attr.rename_to = new_attr.rename_to
        if new_attr.HasField("default_value"):
            base_attr.default_value.CopyFrom(new_attr.default_value)
        if new_attr.description:
            base_attr.description = new_attr.description


def _merge_api_def(base, new) -> None:
    """Merge ``new`` into ``base``; every non-empty field of ``new`` wins."""
    if new.visibility:
        base.visibility = new.visibility
    if new.endpoint:
        del base.endpoint[:]
        base.endpoint.extend(new.endpoint)

    _merge_args(base.in_arg, new.in_arg)
    _merge_args(base.out_arg, new.out_arg)
    _merge_attrs(base.attr, new.attr)

    if new.arg_order:
        del base.arg_order[:]
        base.arg_order.extend(new.arg_order)
    if new.summary:
        base.summary = new.summary
    if new.description:
        base.description = new.description
    if new.description_prefix:
        base.description = f"{new.description_prefix}\n{base.description}"
    if new.description_suffix:
        base.description = f"{base.description}\n{new.description_suffix}"
    if new.deprecation_message:
        base.deprecation_message = new.deprecation_message
    if new.deprecation_version:
        base.deprecation_version = new.deprecation_version


class ApiDefMap:
    """Documentation entries keyed by operation name.

    Seeded from the operation catalog itself and refined by any number of
    override documents. Later documents overwrite earlier ones field by
    field.
    """

    def __init__(self):
        self._api_defs: dict[str, ApiDef] = {}

    @classmethod
    def from_op_list(cls, op_defs) -> "ApiDefMap":
        """Build the primary documentation catalog from operation signatures.

        :param op_defs: ``OpDef`` messages
        :return: Map holding one entry per operation
        """
        api_map = cls()
        for op_def in op_defs:
            api_def = ApiDef()
            api_def.graph_op_name = op_def.name
            api_def.summary = op_def.summary
            api_def.description = op_def.description

            for arg in op_def.input_arg:
                api_arg = api_def.in_arg.add()
                api_arg.name = arg.name
                api_arg.description = arg.description
            for arg in op_def.output_arg:
                api_arg = api_def.out_arg.add()
                api_arg.name = arg.name
                api_arg.description = arg.description
            for attr in op_def.attr:
                api_attr = api_def.attr.add()
                api_attr.name = attr.name
                api_attr.description = attr.description
                if attr.HasField("default_value"):
                    api_attr.default_value.CopyFrom(attr.default_value)

            api_map._api_defs[op_def.name] = api_def
        return api_map

    def __contains__(self, name: str) -> bool:
        return name in self._api_defs

    def __len__(self) -> int:
        return len(self._api_defs)

    def get(self, name: str):
        """Look up the documentation of an operation.

        :param name: Operation name
        :return: ``ApiDef`` message, or None if the operation is unknown
        """
        return self._api_defs.get(name)

    def put(self, text: str) -> bool:
        """Merge a text-format ``ApiDefs`` document into the map.

        :param text: Override document (multiline heredocs allowed)
        :return: True on success, False if the document does not parse
        """
        api_defs = ApiDefs()
        try:
            text_format.Parse(pbtxt_from_multiline(text), api_defs, allow_unknown_field=True)
        except (text_format.ParseError, ValueError):
            return False

        for new in api_defs.op:
            base = self._api_defs.get(new.graph_op_name)
            if base is None:
                base = ApiDef()
                base.graph_op_name = new.graph_op_name
                self._api_defs[new.graph_op_name] = base
            _merge_api_def(base, new)
        return True
