"""
Module Path Validator

Validates import specifiers against a ModulePathIndex. Runs entirely in
memory once the index exists, so it is a plain function.

Stages: classify the specifier, resolve it, and only when resolution fails
rank candidates from the index. An empty ranking is Valid: without a
plausible alternative the validator has no opinion.
"""

import logging
import posixpath

from suggest_members.core.constants import (
    INDEX_FILE_STEM,
    MAX_SUGGESTIONS,
    MIN_SIMILARITY_SCORE,
    SUPPORTED_EXTENSIONS,
)
from suggest_members.core.decorators import track_validation
from suggest_members.suggestions import rank_candidates
from suggest_members.workspace.filesystem import normalize_path
from suggest_members.workspace.module_path_index import ModulePathIndex

from .candidates import is_test_file, is_valid_module_candidate
from .models import ContextKind, ValidationContext, ValidationResult
from .specifiers import (
    SpecifierKind,
    classify_specifier,
    extract_package_name,
    resolve_relative,
    strip_known_extension,
    to_relative_specifier,
)

logger = logging.getLogger(__name__)


__all__ = ["local_module_exists", "module_candidates_for", "validate_module_path"]


def local_module_exists(index: ModulePathIndex, resolved_path: str) -> bool:
    """
    Check a resolved path against the index's local files.

    Tries the path itself, the path with each supported extension, then an
    ``index.<ext>`` file inside it.
    """
    if index.has_local_file(resolved_path):
        return True

    base = strip_known_extension(resolved_path)
    if any(index.has_local_file(base + ext) for ext in SUPPORTED_EXTENSIONS):
        return True

    return any(
        index.has_local_file(posixpath.join(base, INDEX_FILE_STEM + ext))
        for ext in SUPPORTED_EXTENSIONS
    )


def module_candidates_for(
    index: ModulePathIndex,
    resolved_path: str,
    requested_path: str,
    containing_file: str,
) -> list[str]:
    """Specifiers for local files in the directory the request points into."""
    target_directory = posixpath.dirname(resolved_path)
    containing_dir = posixpath.dirname(normalize_path(containing_file))

    candidates: dict[str, None] = {}
    for file_path in index.files_in_directory(target_directory):
        if is_test_file(posixpath.basename(file_path)):
            continue
        specifier = to_relative_specifier(containing_dir, strip_known_extension(file_path))
        if is_valid_module_candidate(specifier, requested_path):
            candidates[specifier] = None
    return list(candidates)


def _validate_relative(
    requested_path: str,
    containing_file: str,
    index: ModulePathIndex,
    max_suggestions: int,
    min_score: float,
) -> ValidationResult:
    resolved_path = resolve_relative(containing_file, requested_path)
    if local_module_exists(index, resolved_path):
        return ValidationResult.valid()
    if index.resolves(requested_path, containing_file):
        return ValidationResult.valid()

    normalized_request = normalize_path(requested_path)
    candidates = module_candidates_for(index, resolved_path, normalized_request, containing_file)
    suggestions = rank_candidates(
        normalized_request, candidates, max_suggestions=max_suggestions, min_score=min_score,
    )
    if not suggestions:
        logger.debug("No local candidates for '%s'", requested_path)
        return ValidationResult.valid()

    return ValidationResult.invalid(
        query=requested_path,
        context=ValidationContext(kind=ContextKind.MODULE_PATH, module_path=requested_path),
        suggestions=suggestions,
    )


def _validate_package(
    requested_path: str,
    containing_file: str,
    index: ModulePathIndex,
    max_suggestions: int,
    min_score: float,
) -> ValidationResult:
    package_name = extract_package_name(requested_path)
    if not package_name:
        return ValidationResult.valid()
    if index.has_package(package_name):
        return ValidationResult.valid()
    if index.resolves(requested_path, containing_file):
        return ValidationResult.valid()

    candidates = [name for name in index.package_names if name != package_name]
    suggestions = rank_candidates(
        package_name, candidates, max_suggestions=max_suggestions, min_score=min_score,
    )
    if not suggestions:
        logger.debug("No package candidates for '%s'", requested_path)
        return ValidationResult.valid()

    return ValidationResult.invalid(
        query=requested_path,
        context=ValidationContext(
            kind=ContextKind.MODULE_PATH,
            module_path=requested_path,
            include_type_declarations=True,
        ),
        suggestions=suggestions,
    )


@track_validation("module-path")
def validate_module_path(
    requested_path: str,
    containing_file: str,
    index: ModulePathIndex,
    *,
    max_suggestions: int = MAX_SUGGESTIONS,
    min_score: float = MIN_SIMILARITY_SCORE,
) -> ValidationResult:
    """
    Validate one module specifier.

    Builtin and protocol-qualified specifiers are always Valid. Relative
    specifiers are checked against the index's local files, packages
    against its package names; both fall back to the unit's own resolver
    before any suggestion is made.

    Args:
        requested_path: The specifier as written in the import
        containing_file: The importing file
        index: The compilation unit's module path index
        max_suggestions: Suggestion cap
        min_score: Minimum similarity score

    Returns:
        Valid, or Invalid with suggestions
    """
    kind = classify_specifier(requested_path)

    if kind is SpecifierKind.RELATIVE:
        return _validate_relative(
            requested_path, containing_file, index, max_suggestions, min_score,
        )
    if kind is SpecifierKind.PACKAGE:
        return _validate_package(
            requested_path, containing_file, index, max_suggestions, min_score,
        )
    return ValidationResult.valid()
