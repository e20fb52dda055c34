"""
Formatting module for diagnostics.

Provides the signature formatter and the message composer.
"""

from .messages import (
    format_export_message,
    format_import_message,
    format_member_message,
    format_missing_name_message,
    format_module_message,
    format_suggestion_list,
    format_suggestion_message,
)
from .signatures import (
    DepthState,
    extract_generic_clause,
    format_overload_label,
    format_signature_lines,
    format_single_signature,
    split_top_level_segments,
)

__all__ = [
    "DepthState",
    "extract_generic_clause",
    "format_export_message",
    "format_import_message",
    "format_member_message",
    "format_missing_name_message",
    "format_module_message",
    "format_overload_label",
    "format_signature_lines",
    "format_single_signature",
    "format_suggestion_list",
    "format_suggestion_message",
    "split_top_level_segments",
]
