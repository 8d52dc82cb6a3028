"""
Requests — Модели параметров операций SaveWrapper

Immutable Pydantic модели (frozen=True) с транзиентными параметрами
одного вызова: адреса коллабораторов, количества, min-output bounds,
stake flag и опциональный referrer. Persisted lifecycle у них нет.

Модели проверяют только форму данных (формат адреса, диапазон uint256).
Семантические проверки (нулевые адреса, длины списков) выполняют
pipelines, чтобы ошибки были из таксономии SaveWrapper.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import AfterValidator, BaseModel, Field, TypeAdapter

from .units import ADDRESS_PATTERN, MAX_UINT256


# =============================================================================
# FIELD TYPES
# =============================================================================

# Адрес: 0x + 40 hex, нормализуется к lowercase
Address = Annotated[str, Field(pattern=ADDRESS_PATTERN), AfterValidator(str.lower)]

# Количество: uint256, bool и строки не принимаются
Amount = Annotated[int, Field(strict=True, ge=0, le=MAX_UINT256)]


# =============================================================================
# DEPOSIT REQUESTS
# =============================================================================


class SaveViaMintRequest(BaseModel):
    """
    Параметры saveViaMint: base asset → mint → savings → (stake).

    `minter` одновременно является derivative asset (mAsset), который
    затем депонируется в savings wrapper.
    """

    base_asset: Address = Field(..., description="Base asset, который вносит caller")
    minter: Address = Field(..., description="Minter / derivative asset")
    savings: Address = Field(..., description="Interest-bearing savings wrapper")
    vault: Address = Field(..., description="Rewards vault")
    amount: Amount = Field(..., description="Количество base asset")
    min_out: Amount = Field(..., description="Минимум derivative asset после mint")
    stake: bool = Field(..., description="Stake credits в vault")
    referrer: Optional[Address] = Field(
        None, description="Referrer (None → default referrer из конфигурации)"
    )

    model_config = {"frozen": True}


class SaveAndStakeRequest(BaseModel):
    """Параметры saveAndStake: caller уже держит derivative asset."""

    derivative_asset: Address = Field(..., description="Derivative asset (mAsset)")
    savings: Address = Field(..., description="Interest-bearing savings wrapper")
    vault: Address = Field(..., description="Rewards vault")
    amount: Amount = Field(..., description="Количество derivative asset")
    stake: bool = Field(..., description="Stake credits в vault")
    referrer: Optional[Address] = Field(None, description="Referrer (nullable)")

    model_config = {"frozen": True}


class SaveViaSwapRequest(BaseModel):
    """Параметры saveViaSwap: feeder asset → feeder pool swap → savings → (stake)."""

    input_asset: Address = Field(..., description="Feeder asset, который вносит caller")
    feeder_pool: Address = Field(..., description="Feeder pool для swap")
    derivative_asset: Address = Field(..., description="Derivative asset (mAsset)")
    savings: Address = Field(..., description="Interest-bearing savings wrapper")
    vault: Address = Field(..., description="Rewards vault")
    amount: Amount = Field(..., description="Количество feeder asset")
    min_out: Amount = Field(..., description="Минимум derivative asset после swap")
    stake: bool = Field(..., description="Stake credits в vault")
    referrer: Optional[Address] = Field(None, description="Referrer (nullable)")

    model_config = {"frozen": True}


# =============================================================================
# WITHDRAW REQUEST
# =============================================================================


class WithdrawAndUnwrapRequest(BaseModel):
    """
    Параметры withdrawAndUnwrap.

    `router` — minter (для bAsset) или feeder pool (для fAsset),
    выбор пути определяет `is_base_asset_out`.
    """

    vault: Address = Field(..., description="Rewards vault")
    amount: Amount = Field(..., description="Количество accounting units")
    min_out: Amount = Field(..., description="Минимум output asset")
    output_asset: Address = Field(..., description="Output asset")
    beneficiary: Address = Field(..., description="Получатель output asset")
    router: Address = Field(..., description="Minter или feeder pool")
    is_base_asset_out: bool = Field(..., description="True → bAsset path, False → fAsset path")

    model_config = {"frozen": True}


# =============================================================================
# APPROVAL REQUESTS
# =============================================================================


class SingleApproval(BaseModel):
    """Один token → один spender."""

    kind: Literal["single"] = "single"
    token: Address
    spender: Address

    model_config = {"frozen": True}


class TokenListApproval(BaseModel):
    """Список tokens → один spender."""

    kind: Literal["token_list"] = "token_list"
    tokens: tuple[Address, ...] = Field(default_factory=tuple)
    spender: Address

    model_config = {"frozen": True}


class BundleApproval(BaseModel):
    """
    Канонический набор approvals для mint/save/vault/feeder pools.

    - derivative_asset → savings
    - savings → vault
    - каждый base asset → derivative_asset (minter)
    - feeder_assets[i] → feeder_pools[i]
    """

    kind: Literal["bundle"] = "bundle"
    derivative_asset: Address
    savings: Address
    vault: Address
    base_assets: tuple[Address, ...] = Field(default_factory=tuple)
    feeder_pools: tuple[Address, ...] = Field(default_factory=tuple)
    feeder_assets: tuple[Address, ...] = Field(default_factory=tuple)

    model_config = {"frozen": True}


ApprovalRequest = Annotated[
    Union[SingleApproval, TokenListApproval, BundleApproval],
    Field(discriminator="kind"),
]

APPROVAL_REQUEST_ADAPTER: TypeAdapter = TypeAdapter(ApprovalRequest)
