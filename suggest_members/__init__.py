"""Did-you-mean diagnostics for unknown members, exports, names and module paths."""

from .engine import SuggestionEngine
from .formatting import format_signature_lines
from .suggestions import Candidate, ScoredCandidate, rank_candidates, similarity_score
from .validation import (
    ContextKind,
    SymbolKind,
    SymbolRef,
    TypeOracle,
    ValidationContext,
    ValidationResult,
    ValidationStatus,
    format_validation_message,
)
from .workspace import (
    CompilationUnit,
    ModulePathIndex,
    SourceFile,
    StaticCompilationUnit,
    build_module_path_index,
)

__version__ = "0.1.0"

__all__ = [
    "Candidate",
    "CompilationUnit",
    "ContextKind",
    "ModulePathIndex",
    "ScoredCandidate",
    "SourceFile",
    "StaticCompilationUnit",
    "SuggestionEngine",
    "SymbolKind",
    "SymbolRef",
    "TypeOracle",
    "ValidationContext",
    "ValidationResult",
    "ValidationStatus",
    "build_module_path_index",
    "format_signature_lines",
    "format_validation_message",
    "rank_candidates",
    "similarity_score",
]
