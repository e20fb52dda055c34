"""Core functionality for the suggestion engine."""

from .constants import (
    MAX_SUGGESTIONS,
    MIN_SIMILARITY_SCORE,
    SCRIPT_EXTENSIONS,
    SUPPORTED_EXTENSIONS,
)
from .decorators import track_validation
from .exceptions import (
    ConfigurationError,
    FileReadError,
    ManifestParseError,
    OracleError,
    OracleUnavailableError,
    SignatureEnrichmentError,
    SuggestMembersError,
    WorkspaceError,
)
from .logging import configure_logging, lint_file_ctx, logger

__all__ = [
    # Core
    "configure_logging",
    "lint_file_ctx",
    "logger",
    "track_validation",
    # Exceptions
    "ConfigurationError",
    "FileReadError",
    "ManifestParseError",
    "OracleError",
    "OracleUnavailableError",
    "SignatureEnrichmentError",
    "SuggestMembersError",
    "WorkspaceError",
    # Constants - most commonly used
    "MAX_SUGGESTIONS",
    "MIN_SIMILARITY_SCORE",
    "SCRIPT_EXTENSIONS",
    "SUPPORTED_EXTENSIONS",
]
