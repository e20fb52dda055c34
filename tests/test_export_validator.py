"""Tests for named import and re-export validation."""

from unittest.mock import AsyncMock

import pytest

from suggest_members.core.exceptions import OracleUnavailableError
from suggest_members.validation import (
    ContextKind,
    SymbolKind,
    format_validation_message,
    validate_export,
    validate_import,
)

CONSUMER = "/repo/src/consumer.ts"


class TestValidateImport:
    """Test ``import { x } from "m"``."""

    @pytest.mark.asyncio
    async def test_typo_in_named_import(self, fake_oracle):
        result = await validate_import("useStae", "react", CONSUMER, fake_oracle)

        assert not result.is_valid
        assert result.suggestions[0].name == "useState"
        assert result.context.kind == ContextKind.IMPORT
        assert result.context.module_path == "react"
        message = format_validation_message(result)
        assert message.startswith("Export 'useStae' does not exist in module 'react'. Did you mean:\n")
        assert "  - useState<S>(initialState: S) => [S, Dispatch<S>]" in message

    @pytest.mark.asyncio
    async def test_overloads_with_module_type(self, fake_oracle):
        result = await validate_import("p1ipe", "effect", CONSUMER, fake_oracle)

        assert format_validation_message(result) == (
            "Export 'p1ipe' does not exist on type 'typeof import(\"effect\")'. Did you mean:\n"
            "  - pipe<A>\n"
            "  - pipe<A, B = never>"
        )

    @pytest.mark.asyncio
    async def test_existing_export_is_valid(self, fake_oracle):
        assert (await validate_import("useState", "react", CONSUMER, fake_oracle)).is_valid

    @pytest.mark.asyncio
    async def test_unresolved_module_is_valid(self, fake_oracle):
        assert (await validate_import("useStae", "./missing", CONSUMER, fake_oracle)).is_valid

    @pytest.mark.asyncio
    async def test_exports_failure_is_valid(self, fake_oracle):
        fake_oracle.get_exports_of_module = AsyncMock(side_effect=OracleUnavailableError("down"))

        assert (await validate_import("useStae", "react", CONSUMER, fake_oracle)).is_valid

    @pytest.mark.asyncio
    async def test_default_can_be_suggested(self, oracle_factory):
        oracle = oracle_factory(exports={"./mod": ["default", "named"]})

        result = await validate_import("defautl", "./mod", CONSUMER, oracle)

        assert [s.name for s in result.suggestions] == ["default"]

    @pytest.mark.asyncio
    async def test_private_exports_never_suggested(self, oracle_factory):
        oracle = oracle_factory(exports={"./mod": ["_helper", "helper"]})

        result = await validate_import("_helpr", "./mod", CONSUMER, oracle)

        assert [s.name for s in result.suggestions] == ["helper"]

    @pytest.mark.asyncio
    async def test_signature_request_describes_export(self, fake_oracle):
        await validate_import("useStae", "react", CONSUMER, fake_oracle)

        request = fake_oracle.signature_requests[0]
        assert request.kind == SymbolKind.EXPORT
        assert request.owner == "react"
        assert request.containing_file == CONSUMER

    @pytest.mark.asyncio
    async def test_empty_inputs_are_valid(self, fake_oracle):
        assert (await validate_import("", "react", CONSUMER, fake_oracle)).is_valid
        assert (await validate_import("useStae", "", CONSUMER, fake_oracle)).is_valid


class TestValidateExport:
    """Test ``export { x } from "m"``."""

    @pytest.mark.asyncio
    async def test_typo_in_reexport(self, oracle_factory):
        oracle = oracle_factory(
            exports={"./hooks": ["saveRef", "loadRef"]},
            module_type_names={"./hooks": 'typeof import("./hooks")'},
        )

        result = await validate_export("saveRe1f", "./hooks", CONSUMER, oracle)

        assert result.context.kind == ContextKind.EXPORT
        assert format_validation_message(result).startswith(
            "Export 'saveRe1f' does not exist on type 'typeof import(\"./hooks\")'. Did you mean:\n"
            "  - saveRef",
        )

    @pytest.mark.asyncio
    async def test_default_never_suggested(self, oracle_factory):
        oracle = oracle_factory(exports={"./mod": ["default", "named"]})

        assert (await validate_export("defautl", "./mod", CONSUMER, oracle)).is_valid

    @pytest.mark.asyncio
    async def test_module_type_name_failure(self, fake_oracle):
        fake_oracle.get_module_type_name = AsyncMock(side_effect=OracleUnavailableError("down"))

        result = await validate_export("p1ipe", "effect", CONSUMER, fake_oracle)

        assert result.context.type_name is None
        assert format_validation_message(result).startswith(
            "Export 'p1ipe' does not exist in module 'effect'.",
        )
