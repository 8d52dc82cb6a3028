"""
Collaborator interfaces — внешние контракты, которые потребляет SaveWrapper

Ядро не реализует mint/yield/reward math, только вызывает коллабораторов
через эти Protocols. Каждый state-changing вызов получает явный `caller`:
идентичность вызывающего контракта (аналог msg.sender).

Все вызовы синхронны и либо завершаются успешно, либо бросают исключение.
"""

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class FungibleToken(Protocol):
    """Fungible token primitive. False означает отказ токена."""

    def balance_of(self, account: str) -> int: ...

    def transfer(self, caller: str, recipient: str, amount: int) -> bool: ...

    def transfer_from(self, caller: str, owner: str, recipient: str, amount: int) -> bool: ...

    def approve(self, caller: str, spender: str, amount: int) -> bool: ...


@runtime_checkable
class Minter(Protocol):
    """Derivative-asset minting engine (mAsset)."""

    def mint(
        self,
        caller: str,
        input_asset: str,
        input_amount: int,
        min_output: int,
        recipient: str,
    ) -> int: ...


@runtime_checkable
class SavingsWrapper(Protocol):
    """Interest-bearing savings wrapper: derivative asset → credits."""

    def deposit_savings(
        self,
        caller: str,
        amount: int,
        recipient: str,
        referrer: Optional[str] = None,
    ) -> int: ...


@runtime_checkable
class FeederPool(Protocol):
    """Feeder pool: swap feeder asset ↔ derivative asset."""

    def swap(
        self,
        caller: str,
        input_asset: str,
        output_asset: str,
        input_amount: int,
        min_output: int,
        recipient: str,
    ) -> int: ...


@runtime_checkable
class Vault(Protocol):
    """Rewards/staking vault."""

    def stake(self, caller: str, on_behalf_of: str, credits: int) -> None: ...

    def withdraw_and_unwrap(
        self,
        caller: str,
        amount: int,
        min_out: int,
        output_asset: str,
        beneficiary: str,
        router: str,
        is_base_asset_out: bool,
    ) -> int: ...

    def claim_reward(self, caller: str) -> None: ...

    def get_reward_token(self) -> str: ...

    def get_platform_token(self) -> str: ...


@runtime_checkable
class AccountingToken(Protocol):
    """Receipt token, учитывающий staked credits по пользователям."""

    def deposit(self, caller: str, beneficiary: str, amount: int) -> None: ...

    def withdraw(self, caller: str, account: str, amount: int) -> None: ...


@runtime_checkable
class Transactional(Protocol):
    """
    Коллаборатор с поддержкой отката.

    snapshot() возвращает непрозрачное состояние, restore() возвращает
    коллаборатора в него. Коллабораторы без этого протокола считаются
    атомарными сами по себе.
    """

    def snapshot(self) -> Any: ...

    def restore(self, state: Any) -> None: ...
