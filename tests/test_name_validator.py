"""Tests for missing name validation."""

import pytest

from suggest_members.validation import (
    ContextKind,
    SymbolKind,
    format_validation_message,
    validate_missing_name,
)

LOCATION = ("/repo/src/main.ts", 12)


class TestValidateMissingName:
    """Test suggestions for unresolved identifiers."""

    @pytest.mark.asyncio
    async def test_typo_suggests_in_scope_name(self, fake_oracle):
        result = await validate_missing_name("formatGree1ting", LOCATION, fake_oracle)

        assert result.context.kind == ContextKind.MISSING_NAME
        assert format_validation_message(result) == (
            "Cannot find name 'formatGree1ting'. Did you mean:\n"
            "  - formatGreeting"
        )

    @pytest.mark.asyncio
    async def test_signature_rendered(self, fake_oracle):
        fake_oracle.signatures[(SymbolKind.NAME, "formatGreeting")] = "(name: string) => string"

        result = await validate_missing_name("formatGree1ting", LOCATION, fake_oracle)

        assert format_validation_message(result).endswith("  - formatGreeting(name: string): string")

    @pytest.mark.asyncio
    async def test_name_in_scope_is_valid(self, fake_oracle):
        assert (await validate_missing_name("console", LOCATION, fake_oracle)).is_valid

    @pytest.mark.asyncio
    async def test_scope_failure_is_valid(self, oracle_factory):
        oracle = oracle_factory()

        assert (await validate_missing_name("formatGree1ting", LOCATION, oracle)).is_valid

    @pytest.mark.asyncio
    async def test_no_similar_name_is_valid(self, fake_oracle):
        assert (await validate_missing_name("qqqqqqqqqq", LOCATION, fake_oracle)).is_valid

    @pytest.mark.asyncio
    async def test_signature_request_describes_name(self, fake_oracle):
        await validate_missing_name(
            "formatGree1ting", LOCATION, fake_oracle, containing_file="/repo/src/main.ts",
        )

        request = fake_oracle.signature_requests[0]
        assert request.kind == SymbolKind.NAME
        assert request.owner == LOCATION
        assert request.containing_file == "/repo/src/main.ts"
