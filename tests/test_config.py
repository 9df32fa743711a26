"""
Test suite for configuration module

Tests environment-driven settings and their use as account defaults.
"""

import pytest

from atm_banking.atm import ATM
from atm_banking.accounts import SavingsAccount
from atm_banking.banking_system import BankingSystem
from atm_banking.config import AtmConfig, get_config, reload_config
from atm_banking.interest import CompoundInterest, InterestType


@pytest.fixture
def restore_config(monkeypatch):
    yield
    monkeypatch.undo()
    reload_config()


class TestAtmConfig:
    """Test AtmConfig loading"""

    def test_defaults(self, monkeypatch):
        """Test default values without environment overrides"""
        for name in ["ATM_LOG_LEVEL", "ATM_LOG_FORMAT", "ATM_DEFAULT_MINIMUM_BALANCE",
                     "ATM_CONSOLE_OUTPUT", "ATM_ENABLE_EVENTS"]:
            monkeypatch.delenv(name, raising=False)

        settings = AtmConfig(_env_file=None)

        assert settings.log_level == "INFO"
        assert settings.log_format == "json"
        assert settings.log_file is None
        assert settings.default_minimum_balance == 0.0
        assert settings.default_compound_frequency == 12
        assert settings.console_output is True
        assert settings.enable_events is True

    def test_environment_overrides(self, monkeypatch):
        """Test ATM_ prefixed variables override defaults"""
        monkeypatch.setenv("ATM_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("ATM_DEFAULT_OVERDRAFT_LIMIT", "250.5")
        monkeypatch.setenv("atm_console_output", "false")

        settings = AtmConfig(_env_file=None)

        assert settings.log_level == "DEBUG"
        assert settings.default_overdraft_limit == 250.5
        assert settings.console_output is False

    def test_reload_replaces_global(self, monkeypatch, restore_config):
        """Test reload_config picks up new environment"""
        monkeypatch.setenv("ATM_DEFAULT_INTEREST_RATE", "3.5")

        reloaded = reload_config()

        assert reloaded is get_config()
        assert get_config().default_interest_rate == 3.5


class TestConfigDefaults:
    """Test configuration flows into the banking system and ATM"""

    def test_factory_defaults_from_config(self, monkeypatch, restore_config):
        """Test unspecified factory parameters come from configuration"""
        monkeypatch.setenv("ATM_DEFAULT_MINIMUM_BALANCE", "100")
        monkeypatch.setenv("ATM_DEFAULT_OVERDRAFT_LIMIT", "300")
        monkeypatch.setenv("ATM_DEFAULT_COMPOUND_FREQUENCY", "4")
        reload_config()

        system = BankingSystem()
        savings = system.open_savings_account("S1", 500.0)
        current = system.open_current_account("C1", 0.0)

        assert savings.minimum_balance == 100.0
        assert current.overdraft_limit == 300.0
        compound = system.open_savings_account("S2", 500.0, interest_type=InterestType.COMPOUND)
        assert compound.interest_strategy == CompoundInterest(4)

    def test_console_output_disabled(self, monkeypatch, restore_config, capsys):
        """Test the ATM stays silent when console output is off"""
        monkeypatch.setenv("ATM_CONSOLE_OUTPUT", "false")
        reload_config()

        atm = ATM(SavingsAccount("S3", 10.0))
        atm.add_amount(5.0).withdraw_amount(100.0)

        captured = capsys.readouterr()
        assert "Deposited" not in captured.out
        assert "ERROR:" not in captured.err
        assert atm.last_error is not None
