"""Stage 3: Semantic Analysis.

This module maps attribute types to Python, classifies attributes into
inferred/required/optional buckets and filters the public surface.
"""

__docformat__ = "restructuredtext"
__all__ = [
    "COERCIONS",
    "TYPE_TABLE",
    "ArgumentClassification",
    "AttrTag",
    "SkipReason",
    "classify_arguments",
    "coercion",
    "find_skip_reason",
    "first_unmapped_attr",
    "is_reference_type",
    "map_type",
    "python_type",
    "split_list_tag",
]

from tfopgen.analyze.classifier import ArgumentClassification, classify_arguments
from tfopgen.analyze.surface import SkipReason, find_skip_reason, first_unmapped_attr
from tfopgen.analyze.type_mapping import (
    COERCIONS,
    TYPE_TABLE,
    AttrTag,
    coercion,
    is_reference_type,
    map_type,
    python_type,
    split_list_tag,
)
