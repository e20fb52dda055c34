"""Custom exceptions for the suggestion engine.

None of these are fatal to a lint run: they are raised by collaborators
(oracles, filesystem, manifest parsing) and caught at the validation
boundaries, where they degrade to "no diagnostic" or "no enrichment".
"""


# ========================================
# Base Exceptions
# ========================================


class SuggestMembersError(Exception):
    """Base exception for all suggestion engine errors."""


# ========================================
# Oracle Exceptions
# ========================================


class OracleError(SuggestMembersError):
    """Base exception for type oracle failures."""


class OracleUnavailableError(OracleError):
    """Type information is missing or the oracle could not answer."""


class SignatureEnrichmentError(OracleError):
    """A type signature could not be fetched for one suggestion."""


# ========================================
# Workspace Exceptions
# ========================================


class WorkspaceError(SuggestMembersError):
    """Base exception for workspace discovery errors."""


class ManifestParseError(WorkspaceError):
    """A package manifest is not valid JSON or not a JSON object."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot parse manifest {path}: {reason}")


class FileReadError(WorkspaceError):
    """A file could not be read from the filesystem."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read {path}: {reason}")


# ========================================
# Configuration Exceptions
# ========================================


class ConfigurationError(SuggestMembersError):
    """Configuration validation failed."""
