"""Exception and warning types raised by the generator."""

__docformat__ = "restructuredtext"
__all__ = [
    "CatalogDecodeError",
    "EnvironmentPreconditionError",
    "OpSkippedWarning",
    "OverrideParseWarning",
    "TfOpGenError",
    "UnmappedAttributeError",
]


class TfOpGenError(Exception):
    """Base class for fatal generator errors."""


class CatalogDecodeError(TfOpGenError, ValueError):
    """Operation catalog could not be decoded."""


class UnmappedAttributeError(TfOpGenError, TypeError):
    """Attribute type reached emission without a Python mapping.

    The skip filter should have rejected the operation before emission, so
    this signals the filter and the emitter disagree about the type table.

    :param op_name: Operation being emitted
    :param attr_name: Offending attribute
    :param attr_type: Attribute type tag
    """

    def __init__(self, op_name: str, attr_name: str, attr_type: str):
        self.op_name = op_name
        self.attr_name = attr_name
        self.attr_type = attr_type
        super().__init__(
            f"Unexpected type {attr_type!r} for attribute {attr_name!r} of op {op_name}"
        )


class EnvironmentPreconditionError(TfOpGenError, RuntimeError):
    """The running interpreter cannot produce bindings (e.g. not 64-bit)."""


class OpSkippedWarning(UserWarning):
    """An operation was left out of the generated module."""


class OverrideParseWarning(UserWarning):
    """A documentation override file could not be merged."""
