"""Render a ValidationResult as diagnostic text."""

from suggest_members.formatting.messages import (
    format_export_message,
    format_import_message,
    format_member_message,
    format_missing_name_message,
    format_module_message,
)

from .models import ContextKind, ValidationResult


def format_validation_message(
    result: ValidationResult,
    max_suggestions: int | None = None,
) -> str:
    """
    Diagnostic text for ``result``; empty for Valid results.

    Without ``max_suggestions`` every suggestion carried by the result is
    rendered, since the ranker has already applied the configured cap.
    """
    if result.is_valid or result.context is None:
        return ""

    if max_suggestions is None:
        max_suggestions = len(result.suggestions)

    context = result.context
    if context.kind is ContextKind.MEMBER:
        return format_member_message(
            result.query, context.type_name, result.suggestions, max_suggestions,
        )
    if context.kind is ContextKind.IMPORT:
        return format_import_message(
            result.query,
            context.module_path or "",
            context.type_name,
            result.suggestions,
            max_suggestions,
        )
    if context.kind is ContextKind.EXPORT:
        return format_export_message(
            result.query,
            context.module_path or "",
            context.type_name,
            result.suggestions,
            max_suggestions,
        )
    if context.kind is ContextKind.MISSING_NAME:
        return format_missing_name_message(result.query, result.suggestions, max_suggestions)
    return format_module_message(
        context.module_path or result.query,
        result.suggestions,
        include_type_declarations=context.include_type_declarations,
        max_suggestions=max_suggestions,
    )
