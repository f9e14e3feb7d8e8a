"""End-to-end tests for extract_token_info."""

from __future__ import annotations

import pytest

from token_intel import ExtractionResult, TokenInfoExtractor, extract_token_info
from token_intel.config import ExtractorConfig


class TestExtractTokenInfo:
    def test_chain_only(self) -> None:
        result = extract_token_info("swap tokens on Polygon")
        assert result.chain == "polygon"
        assert result.token_address is None

    def test_evm_address_defaults_to_eth(self) -> None:
        addr = "0x1234567890123456789012345678901234567890"
        result = extract_token_info(f"check {addr}")
        assert result.token_address == addr
        assert result.chain == "eth"

    def test_stated_chain_beats_address_shape(self) -> None:
        addr = "0xabcdefabcdefabcdefabcdefabcdefabcdefabcd"
        result = extract_token_info(f"bsc token: {addr}")
        assert result.chain == "bsc"
        assert result.token_address == addr

    def test_stated_chain_beats_solana_shape(self, solana_address: str) -> None:
        result = extract_token_info(f"{solana_address} on base")
        assert result.chain == "base"
        assert result.token_address == solana_address

    def test_solana_address(self, solana_address: str) -> None:
        result = extract_token_info(f"CA: {solana_address}")
        assert result == ExtractionResult(
            chain="solana", token_address=solana_address
        )

    def test_tron_address(self, tron_address: str) -> None:
        result = extract_token_info(f"send to {tron_address}")
        assert result.chain == "tron"
        assert result.token_address == tron_address

    def test_sui_address(self, sui_address: str) -> None:
        result = extract_token_info(f"object {sui_address}")
        assert result.chain == "sui"
        assert result.token_address == sui_address

    def test_last_family_wins(
        self, evm_address: str, solana_address: str
    ) -> None:
        result = extract_token_info(f"{evm_address} {solana_address}")
        assert result.chain == "solana"
        assert result.token_address == solana_address

    def test_unknown_chain_passes_through(self) -> None:
        result = extract_token_info("on zyx999")
        assert result.chain == "zyx999"
        assert result.token_address is None

    def test_nothing_found(self) -> None:
        result = extract_token_info("gm frens wagmi")
        assert result.is_empty
        assert result == ExtractionResult()

    def test_sui_scanned_after_evm(
        self, evm_address: str, sui_address: str
    ) -> None:
        result = extract_token_info(f"{evm_address} {sui_address}")
        assert result.chain == "sui"
        assert result.token_address == sui_address

    def test_idempotent(self, evm_address: str) -> None:
        msg = f"ape {evm_address} on arb"
        assert extract_token_info(msg) == extract_token_info(msg)


class TestUntrustedInput:
    @pytest.mark.parametrize("msg", ["", "   ", "\n\t", "0x", "0x" * 500])
    def test_blank_and_noise(self, msg: str) -> None:
        assert extract_token_info(msg).is_empty

    @pytest.mark.parametrize("msg", [None, b"on bsc", 12345, ["on eth"]])
    def test_non_text(self, msg: object) -> None:
        assert extract_token_info(msg) == ExtractionResult()  # type: ignore[arg-type]

    def test_long_input(self) -> None:
        result = extract_token_info("a" * 10_000)
        assert result.is_empty


class TestExtractionResult:
    def test_to_dict(self, evm_address: str) -> None:
        result = ExtractionResult(chain="bsc", token_address=evm_address)
        assert result.to_dict() == {"chain": "bsc", "tokenAddress": evm_address}

    def test_to_dict_empty(self) -> None:
        assert ExtractionResult().to_dict() == {
            "chain": None,
            "tokenAddress": None,
        }

    def test_frozen(self) -> None:
        result = ExtractionResult()
        with pytest.raises(AttributeError):
            result.chain = "eth"  # type: ignore[misc]


class TestTokenInfoExtractor:
    def test_custom_evm_default(self, evm_address: str) -> None:
        extractor = TokenInfoExtractor(
            ExtractorConfig(evm_default_chain="base", log_preview_chars=10)
        )
        result = extractor.extract(f"check {evm_address}")
        assert result.chain == "base"

    def test_custom_default_does_not_override_stated_chain(
        self, evm_address: str
    ) -> None:
        extractor = TokenInfoExtractor(ExtractorConfig(evm_default_chain="base"))
        assert extractor.extract(f"{evm_address} on bsc").chain == "bsc"

    def test_logs_result_at_debug(
        self, caplog: pytest.LogCaptureFixture, evm_address: str
    ) -> None:
        extractor = TokenInfoExtractor(ExtractorConfig(log_preview_chars=5))
        with caplog.at_level("DEBUG", logger="token_intel.extractor"):
            extractor.extract(f"check {evm_address}")
        assert "chain=eth" in caplog.text
        assert "'check...'" in caplog.text
