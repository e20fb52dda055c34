"""
Validation module for suggestion diagnostics.

Provides the validators for member accesses, named imports/exports,
missing names and module paths, plus the result types they share.
"""

from .candidates import (
    is_test_file,
    is_valid_export_candidate,
    is_valid_identifier_candidate,
    is_valid_import_candidate,
    is_valid_module_candidate,
    is_valid_named_candidate,
)
from .enrichment import enrich_with_signatures
from .export_validator import validate_export, validate_import
from .member_validator import MemberAccess, validate_member_access, validate_member_accesses
from .models import ContextKind, ValidationContext, ValidationResult, ValidationStatus
from .module_validator import local_module_exists, module_candidates_for, validate_module_path
from .name_validator import validate_missing_name
from .oracle import SymbolKind, SymbolRef, TypeOracle
from .reporting import format_validation_message
from .specifiers import (
    BUILTIN_MODULES,
    SpecifierKind,
    classify_specifier,
    extract_package_name,
    is_builtin_module,
    is_protocol_specifier,
    is_relative_specifier,
)

__all__ = [
    "BUILTIN_MODULES",
    "ContextKind",
    "MemberAccess",
    "SpecifierKind",
    "SymbolKind",
    "SymbolRef",
    "TypeOracle",
    "ValidationContext",
    "ValidationResult",
    "ValidationStatus",
    "classify_specifier",
    "enrich_with_signatures",
    "extract_package_name",
    "format_validation_message",
    "is_test_file",
    "is_builtin_module",
    "is_protocol_specifier",
    "is_relative_specifier",
    "is_valid_export_candidate",
    "is_valid_identifier_candidate",
    "is_valid_import_candidate",
    "is_valid_module_candidate",
    "is_valid_named_candidate",
    "local_module_exists",
    "module_candidates_for",
    "validate_export",
    "validate_import",
    "validate_member_access",
    "validate_member_accesses",
    "validate_missing_name",
    "validate_module_path",
]
