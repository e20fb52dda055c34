"""
Diagnostic Message Composition

Pure functions assembling the final diagnostic text from a suggestion list
and its context (member access, export/import, missing name, module path).
"""

from collections.abc import Sequence

from suggest_members.core.constants import (
    DID_YOU_MEAN,
    MAX_SUGGESTIONS,
    NO_SUGGESTIONS_MESSAGE,
    SUGGESTION_LINE_PREFIX,
)
from suggest_members.suggestions.models import ScoredCandidate

from .signatures import format_signature_lines

__all__ = [
    "format_export_message",
    "format_import_message",
    "format_member_message",
    "format_missing_name_message",
    "format_module_message",
    "format_suggestion_list",
    "format_suggestion_message",
]


def _suggestion_lines(
    suggestion: ScoredCandidate,
    include_signatures: bool,
) -> list[str]:
    if include_signatures and suggestion.signature is not None:
        return format_signature_lines(suggestion.name, suggestion.signature)
    return [suggestion.name]


def format_suggestion_list(
    suggestions: Sequence[ScoredCandidate],
    include_signatures: bool,
    max_suggestions: int = MAX_SUGGESTIONS,
) -> str:
    """
    Render suggestions as ``"  - "`` prefixed lines.

    Only the first ``max_suggestions`` entries are rendered. Lines with identical
    text (e.g. overloads of the same name without generics) appear once, in
    rank order.
    """
    seen: set[str] = set()
    unique: list[str] = []
    for suggestion in suggestions[:max_suggestions]:
        for line in _suggestion_lines(suggestion, include_signatures):
            rendered = f"{SUGGESTION_LINE_PREFIX}{line}"
            if rendered in seen:
                continue
            seen.add(rendered)
            unique.append(rendered)
    return "\n".join(unique)


def _with_suggestions(
    header: str,
    suggestions: Sequence[ScoredCandidate],
    include_signatures: bool,
    max_suggestions: int = MAX_SUGGESTIONS,
) -> str:
    if not suggestions:
        return header
    rendered = format_suggestion_list(suggestions, include_signatures, max_suggestions)
    return f"{header}{DID_YOU_MEAN}{rendered}"


def _export_context_message(
    label: str,
    name: str,
    module_path: str,
    type_name: str | None,
    suggestions: Sequence[ScoredCandidate],
    max_suggestions: int,
) -> str:
    if type_name:
        type_context = f" on type '{type_name}'"
    else:
        type_context = f" in module '{module_path}'"
    header = f"{label} '{name}' does not exist{type_context}."
    return _with_suggestions(header, suggestions, True, max_suggestions)


def format_suggestion_message(
    suggestions: Sequence[ScoredCandidate],
    max_suggestions: int = MAX_SUGGESTIONS,
) -> str:
    """Render a bare "Did you mean" list with no diagnostic header."""
    if not suggestions:
        return NO_SUGGESTIONS_MESSAGE
    return f"Did you mean:\n{format_suggestion_list(suggestions, False, max_suggestions)}"


def format_member_message(
    property_name: str,
    type_name: str | None,
    suggestions: Sequence[ScoredCandidate],
    max_suggestions: int = MAX_SUGGESTIONS,
) -> str:
    """Message for a property that does not exist on an object's type."""
    type_context = f" on type '{type_name}'" if type_name else ""
    header = f"Property '{property_name}' does not exist{type_context}."
    return _with_suggestions(header, suggestions, True, max_suggestions)


def format_import_message(
    import_name: str,
    module_path: str,
    type_name: str | None,
    suggestions: Sequence[ScoredCandidate],
    max_suggestions: int = MAX_SUGGESTIONS,
) -> str:
    """Message for a named import the target module does not export."""
    return _export_context_message(
        "Export", import_name, module_path, type_name, suggestions, max_suggestions,
    )


def format_export_message(
    export_name: str,
    module_path: str,
    type_name: str | None,
    suggestions: Sequence[ScoredCandidate],
    max_suggestions: int = MAX_SUGGESTIONS,
) -> str:
    """Message for a re-export of a name the source module does not export."""
    return _export_context_message(
        "Export", export_name, module_path, type_name, suggestions, max_suggestions,
    )


def format_module_message(
    requested_path: str,
    suggestions: Sequence[ScoredCandidate],
    include_type_declarations: bool = False,
    max_suggestions: int = MAX_SUGGESTIONS,
) -> str:
    """
    Message for an unresolvable module specifier.

    Local paths are double-quoted; package specifiers are single-quoted and
    mention type declarations, matching the type checker's own wording.
    """
    if include_type_declarations:
        header = (
            f"Cannot find module '{requested_path}' "
            "or its corresponding type declarations."
        )
    else:
        header = f'Cannot find module "{requested_path}".'
    return _with_suggestions(header, suggestions, False, max_suggestions)


def format_missing_name_message(
    name: str,
    suggestions: Sequence[ScoredCandidate],
    max_suggestions: int = MAX_SUGGESTIONS,
) -> str:
    """Message for an identifier that resolves to nothing in scope."""
    return _with_suggestions(
        f"Cannot find name '{name}'.", suggestions, True, max_suggestions,
    )
