"""Unit тесты для WithdrawPipeline (withdrawAndUnwrap).

Coverage:
- Burn accounting token и возврат output vault без изменений
- TransferFailed при недостатке accounting units
- WithdrawSlippage от vault и от собственной проверки pipeline
- Pause guard до любых вызовов коллабораторов
- Reentrancy: повторный вход из vault callback → ReentrantCall
- Pause проверяется раньше reentrancy lock
- Без accounting token withdraw отклоняется (Unauthorized)
- Lock свободен до и после каждого вызова
"""

import pytest

from src.core.domain import MAX_UINT256, SaveViaMintRequest, WithdrawAndUnwrapRequest
from src.core.errors import Paused, ReentrantCall, TransferFailed, Unauthorized, WithdrawSlippage
from src.wrapper import SaveWrapperConfig, StakeOfRecord
from tests.fakes import OTHER_USER, OWNER, USER, WRAPPER, addr, build_environment, fund

BENEFICIARY = addr(0xBE4E)


def deposit(env, amount=5_000, stake=True):
    return env.wrapper.save_via_mint(
        USER,
        SaveViaMintRequest(
            base_asset=env.base_asset.address,
            minter=env.masset.address,
            savings=env.savings.address,
            vault=env.vault.address,
            amount=amount,
            min_out=0,
            stake=stake,
        ),
    )


def withdraw_request(env, **overrides):
    data = dict(
        vault=env.vault.address,
        amount=500,
        min_out=1,
        output_asset=env.output_asset.address,
        beneficiary=BENEFICIARY,
        router=env.masset.address,
        is_base_asset_out=True,
    )
    data.update(overrides)
    return WithdrawAndUnwrapRequest(**data)


@pytest.fixture
def env():
    env = build_environment()
    fund(env.base_asset, USER, 10_000)
    deposit(env)
    env.accounting_token.approve(USER, WRAPPER, MAX_UINT256)
    return env


# =============================================================================
# SUCCESS PATH
# =============================================================================


class TestWithdrawAndUnwrap:
    def test_burns_and_returns_vault_output(self, env):
        assert env.accounting_token.balance_of(USER) == 500

        output = env.wrapper.withdraw_and_unwrap(USER, withdraw_request(env))

        assert output == 5_000
        assert env.accounting_token.balance_of(USER) == 0
        assert env.accounting_token.balance_of(WRAPPER) == 0
        assert env.output_asset.balance_of(BENEFICIARY) == 5_000
        assert env.vault.staked(WRAPPER) == 0

    def test_vault_receives_all_parameters(self, env):
        env.wrapper.withdraw_and_unwrap(
            USER, withdraw_request(env, amount=200, is_base_asset_out=False, router=env.feeder_pool.address)
        )

        assert env.vault.calls[-1] == (
            "withdraw_and_unwrap",
            WRAPPER,
            200,
            1,
            env.output_asset.address,
            BENEFICIARY,
            env.feeder_pool.address,
            False,
        )

    def test_partial_withdraw(self, env):
        env.wrapper.withdraw_and_unwrap(USER, withdraw_request(env, amount=200))

        assert env.accounting_token.balance_of(USER) == 300
        assert env.vault.staked(WRAPPER) == 300

    def test_lock_released_after_success(self, env):
        assert env.wrapper.locked is False
        env.wrapper.withdraw_and_unwrap(USER, withdraw_request(env))
        assert env.wrapper.locked is False

    def test_without_accounting_token_rejects_any_caller(self):
        """Без accounting token нельзя доказать долю в stake wrapper."""
        env = build_environment(use_accounting_token=False)
        fund(env.base_asset, USER, 10_000)

        with pytest.raises(Unauthorized):
            deposit(env, amount=1_000)

        calls_before = env.total_calls()
        for caller in (USER, OTHER_USER):
            with pytest.raises(Unauthorized):
                env.wrapper.withdraw_and_unwrap(
                    caller, withdraw_request(env, amount=100, beneficiary=OTHER_USER)
                )

        assert env.total_calls() == calls_before
        assert env.output_asset.balance_of(OTHER_USER) == 0
        assert env.wrapper.locked is False

    def test_depositor_stake_not_reachable_through_wrapper(self):
        env = build_environment(
            use_accounting_token=False,
            config=SaveWrapperConfig(stake_of_record=StakeOfRecord.DEPOSITOR),
        )
        fund(env.base_asset, USER, 10_000)
        deposit(env, amount=1_000)
        assert env.vault.staked(USER) == 100

        with pytest.raises(Unauthorized):
            env.wrapper.withdraw_and_unwrap(
                OTHER_USER, withdraw_request(env, amount=100, beneficiary=OTHER_USER)
            )

        assert env.vault.staked(USER) == 100
        assert env.output_asset.balance_of(OTHER_USER) == 0


# =============================================================================
# FAILURES
# =============================================================================


class TestWithdrawFailures:
    def test_insufficient_accounting_units(self, env):
        with pytest.raises(TransferFailed):
            env.wrapper.withdraw_and_unwrap(USER, withdraw_request(env, amount=501))

        assert env.accounting_token.balance_of(USER) == 500
        assert not [call for call in env.vault.calls if call[0] == "withdraw_and_unwrap"]
        assert env.wrapper.locked is False

    def test_missing_allowance(self, env):
        env.accounting_token.approve(USER, WRAPPER, 0)

        with pytest.raises(TransferFailed):
            env.wrapper.withdraw_and_unwrap(USER, withdraw_request(env))

        assert env.accounting_token.balance_of(USER) == 500

    def test_vault_slippage_rolls_back_burn(self, env):
        with pytest.raises(WithdrawSlippage):
            env.wrapper.withdraw_and_unwrap(USER, withdraw_request(env, min_out=5_001))

        assert env.accounting_token.balance_of(USER) == 500
        assert env.vault.staked(WRAPPER) == 500
        assert env.wrapper.locked is False

    def test_short_output_detected_by_pipeline(self, env):
        """Vault вернул меньше min_out без собственной ошибки."""
        env.vault.withdraw_and_unwrap = lambda *args: 0

        with pytest.raises(WithdrawSlippage):
            env.wrapper.withdraw_and_unwrap(USER, withdraw_request(env))

        assert env.accounting_token.balance_of(USER) == 500

    def test_paused_rejects_without_calls(self, env):
        env.wrapper.toggle_contract_active(OWNER)
        calls_before = env.total_calls()

        with pytest.raises(Paused):
            env.wrapper.withdraw_and_unwrap(USER, withdraw_request(env))

        assert env.total_calls() == calls_before
        assert env.wrapper.locked is False


# =============================================================================
# REENTRANCY
# =============================================================================


class TestWithdrawReentrancy:
    def test_reentry_from_vault_callback_rejected(self, env):
        seen = []

        def hook():
            seen.append(env.wrapper.locked)
            env.wrapper.withdraw_and_unwrap(USER, withdraw_request(env, amount=100))

        env.vault.on_withdraw = hook

        with pytest.raises(ReentrantCall):
            env.wrapper.withdraw_and_unwrap(USER, withdraw_request(env, amount=100))

        assert seen == [True]
        assert env.wrapper.locked is False
        assert env.accounting_token.balance_of(USER) == 500
        assert env.vault.staked(WRAPPER) == 500

    def test_pause_checked_before_lock(self, env):
        """Re-entrant вызов на паузе отклоняется как Paused, а не ReentrantCall."""

        def hook():
            env.wrapper.toggle_contract_active(OWNER)
            env.wrapper.withdraw_and_unwrap(USER, withdraw_request(env, amount=100))

        env.vault.on_withdraw = hook

        with pytest.raises(Paused):
            env.wrapper.withdraw_and_unwrap(USER, withdraw_request(env, amount=100))

        assert env.wrapper.paused is False
        assert env.wrapper.locked is False
        assert env.accounting_token.balance_of(USER) == 500

    def test_reentry_into_deposit_from_withdraw_allowed_by_default(self, env):
        """Deposit path без guard_deposits не проверяет lock."""

        def hook():
            env.vault.on_withdraw = None
            deposit(env, amount=1_000)

        env.vault.on_withdraw = hook

        env.wrapper.withdraw_and_unwrap(USER, withdraw_request(env, amount=100))

        assert env.accounting_token.balance_of(USER) == 500 - 100 + 100
        assert env.wrapper.locked is False

    def test_usable_after_failed_call(self, env):
        with pytest.raises(TransferFailed):
            env.wrapper.withdraw_and_unwrap(USER, withdraw_request(env, amount=10_000))

        output = env.wrapper.withdraw_and_unwrap(USER, withdraw_request(env, amount=100))
        assert output == 1_000
