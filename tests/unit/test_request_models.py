"""
Tests for Pydantic request models

Покрывает:
- Нормализацию адресов
- uint256 диапазон количеств (strict int)
- Immutability (frozen=True)
- Discriminated union approval запросов
- Нулевые адреса пропускаются моделью (их отклоняют pipelines)
"""

import pytest
from pydantic import ValidationError

from src.core.domain import (
    APPROVAL_REQUEST_ADAPTER,
    MAX_UINT256,
    ZERO_ADDRESS,
    BundleApproval,
    SaveViaMintRequest,
    SingleApproval,
    TokenListApproval,
    WithdrawAndUnwrapRequest,
)


A = "0x00000000000000000000000000000000000000aa"
B = "0x00000000000000000000000000000000000000bb"
C = "0x00000000000000000000000000000000000000cc"
D = "0x00000000000000000000000000000000000000dd"


@pytest.fixture
def save_via_mint_data():
    return {
        "base_asset": A,
        "minter": B,
        "savings": C,
        "vault": D,
        "amount": 1000,
        "min_out": 990,
        "stake": True,
    }


# =============================================================================
# SAVE VIA MINT
# =============================================================================


class TestSaveViaMintRequest:
    def test_valid_request(self, save_via_mint_data):
        request = SaveViaMintRequest(**save_via_mint_data)

        assert request.amount == 1000
        assert request.min_out == 990
        assert request.stake is True
        assert request.referrer is None

    def test_addresses_lowercased(self, save_via_mint_data):
        save_via_mint_data["vault"] = "0x00000000000000000000000000000000000000DD"
        request = SaveViaMintRequest(**save_via_mint_data)
        assert request.vault == D

    def test_zero_addresses_allowed_by_model(self, save_via_mint_data):
        """Нулевой адрес — семантическая ошибка pipeline, не ошибка формы."""
        save_via_mint_data["minter"] = ZERO_ADDRESS
        request = SaveViaMintRequest(**save_via_mint_data)
        assert request.minter == ZERO_ADDRESS

    def test_malformed_address_rejected(self, save_via_mint_data):
        save_via_mint_data["savings"] = "0x1234"
        with pytest.raises(ValidationError):
            SaveViaMintRequest(**save_via_mint_data)

    def test_negative_amount_rejected(self, save_via_mint_data):
        save_via_mint_data["amount"] = -1
        with pytest.raises(ValidationError):
            SaveViaMintRequest(**save_via_mint_data)

    def test_amount_above_uint256_rejected(self, save_via_mint_data):
        save_via_mint_data["amount"] = MAX_UINT256 + 1
        with pytest.raises(ValidationError):
            SaveViaMintRequest(**save_via_mint_data)

    def test_string_amount_rejected(self, save_via_mint_data):
        save_via_mint_data["amount"] = "1000"
        with pytest.raises(ValidationError):
            SaveViaMintRequest(**save_via_mint_data)

    def test_frozen(self, save_via_mint_data):
        request = SaveViaMintRequest(**save_via_mint_data)
        with pytest.raises(ValidationError):
            request.amount = 1

    def test_missing_field_rejected(self, save_via_mint_data):
        del save_via_mint_data["stake"]
        with pytest.raises(ValidationError):
            SaveViaMintRequest(**save_via_mint_data)


class TestWithdrawAndUnwrapRequest:
    def test_valid_request(self):
        request = WithdrawAndUnwrapRequest(
            vault=A,
            amount=500,
            min_out=1,
            output_asset=B,
            beneficiary=C,
            router=D,
            is_base_asset_out=True,
        )
        assert request.amount == 500
        assert request.is_base_asset_out is True

    def test_json_roundtrip(self):
        request = WithdrawAndUnwrapRequest(
            vault=A,
            amount=500,
            min_out=0,
            output_asset=B,
            beneficiary=C,
            router=D,
            is_base_asset_out=False,
        )
        restored = WithdrawAndUnwrapRequest.model_validate_json(request.model_dump_json())
        assert restored == request


# =============================================================================
# APPROVAL REQUESTS
# =============================================================================


class TestApprovalRequests:
    def test_single_discriminated(self):
        request = APPROVAL_REQUEST_ADAPTER.validate_python(
            {"kind": "single", "token": A, "spender": B}
        )
        assert isinstance(request, SingleApproval)

    def test_token_list_discriminated(self):
        request = APPROVAL_REQUEST_ADAPTER.validate_python(
            {"kind": "token_list", "tokens": [A, B], "spender": C}
        )
        assert isinstance(request, TokenListApproval)
        assert request.tokens == (A, B)

    def test_bundle_discriminated(self):
        request = APPROVAL_REQUEST_ADAPTER.validate_python(
            {
                "kind": "bundle",
                "derivative_asset": A,
                "savings": B,
                "vault": C,
                "base_assets": [D],
            }
        )
        assert isinstance(request, BundleApproval)
        assert request.feeder_pools == ()
        assert request.feeder_assets == ()

    def test_bundle_length_mismatch_not_rejected_by_model(self):
        """LengthMismatch — ошибка ApprovalManager, модель ее пропускает."""
        request = BundleApproval(
            derivative_asset=A,
            savings=B,
            vault=C,
            feeder_pools=(A, B),
            feeder_assets=(C,),
        )
        assert len(request.feeder_pools) == 2

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            APPROVAL_REQUEST_ADAPTER.validate_python({"kind": "all", "token": A, "spender": B})
