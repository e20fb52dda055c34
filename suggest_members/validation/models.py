"""Validation result types shared by every validator."""

from dataclasses import dataclass, field
from enum import Enum

from suggest_members.suggestions.models import ScoredCandidate


class ValidationStatus(Enum):
    """Terminal state of a validation."""
    VALID = "VALID"
    INVALID = "INVALID"


class ContextKind(Enum):
    """What kind of reference was validated; selects the message wording."""
    MEMBER = "MEMBER"
    EXPORT = "EXPORT"
    IMPORT = "IMPORT"
    MISSING_NAME = "MISSING_NAME"
    MODULE_PATH = "MODULE_PATH"


@dataclass(frozen=True)
class ValidationContext:
    """Framing for an invalid reference."""
    kind: ContextKind
    type_name: str | None = None
    module_path: str | None = None
    include_type_declarations: bool = False


@dataclass
class ValidationResult:
    """Outcome of one validation: Valid, or Invalid with suggestions."""
    status: ValidationStatus
    query: str = ""
    context: ValidationContext | None = None
    suggestions: list[ScoredCandidate] = field(default_factory=list)

    @classmethod
    def valid(cls) -> "ValidationResult":
        return cls(status=ValidationStatus.VALID)

    @classmethod
    def invalid(
        cls,
        query: str,
        context: ValidationContext,
        suggestions: list[ScoredCandidate],
    ) -> "ValidationResult":
        return cls(
            status=ValidationStatus.INVALID,
            query=query,
            context=context,
            suggestions=list(suggestions),
        )

    @property
    def is_valid(self) -> bool:
        return self.status == ValidationStatus.VALID
