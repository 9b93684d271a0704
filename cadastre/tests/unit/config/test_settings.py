"""
Unit tests for Settings, configuration loading and the DI container.

Usage:
    python cadastre/tests/unit/config/test_settings.py
    laborant cadastre --unit
"""

import os
from unittest.mock import patch

from pydantic import ValidationError
from solders.keypair import Keypair  # type: ignore

from cadastre import config as config_package
from cadastre.application.address_graph import AddressGraph
from cadastre.application.use_cases import DeriveLaunchAddresses
from cadastre.config import (
    Settings,
    get_settings,
    load_config,
    override_settings,
    reset_settings,
)
from cadastre.di import DIContainer
from cadastre.domain.value_objects import Address, ProgramRegistry
from cadastre.infrastructure.auth import WalletSession
from shared.tests import LaborantTest

CONFIG_KEYS = ("ENV", "LOG_LEVEL", "VERBOSE", "XYBER_PROGRAM_ID", "LOG_DIR")


class TestSettings(LaborantTest):
    """Unit tests for configuration."""

    component_name = "cadastre"
    test_category = "unit"

    def setup_test(self):
        """Start every test from a clean settings singleton."""
        reset_settings()
        self._saved_env = {k: os.environ.pop(k) for k in CONFIG_KEYS if k in os.environ}

    def teardown_test(self):
        reset_settings()
        os.environ.update(self._saved_env)

    # ================================================================
    # Settings model
    # ================================================================

    def test_defaults_match_registry_constants(self):
        """Test default settings build the default registry."""
        settings = Settings()

        assert ProgramRegistry.from_settings(settings) == ProgramRegistry.default()
        assert settings.LOG_LEVEL == "INFO"
        assert settings.LOG_DIR is None

    def test_log_level_normalized(self):
        """Test LOG_LEVEL is upper-cased and validated."""
        assert Settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"

        try:
            Settings(LOG_LEVEL="chatty")
            assert False, "Should have raised ValidationError"
        except ValidationError as e:
            assert "LOG_LEVEL" in str(e)

    def test_reject_invalid_program_id(self):
        """Test malformed program ids are rejected at load time."""
        try:
            Settings(XYBER_PROGRAM_ID="not-a-program")
            assert False, "Should have raised ValidationError"
        except ValidationError as e:
            assert "Invalid program id" in str(e)

    def test_reject_out_of_range_verbose(self):
        """Test VERBOSE is bounded to 0-3."""
        try:
            Settings(VERBOSE=7)
            assert False, "Should have raised ValidationError"
        except ValidationError:
            pass

    def test_config_package_is_the_settings_module(self):
        """Test cadastre.config resolves to source, not the YAML directory."""
        package_file = config_package.__file__

        assert package_file is not None
        assert package_file.endswith(
            os.path.join("src", "cadastre", "config", "__init__.py")
        )
        assert config_package.Settings is Settings

    # ================================================================
    # YAML + environment layering
    # ================================================================

    def test_load_config_test_environment(self):
        """Test test.yaml overrides default.yaml."""
        settings = load_config(env="test")

        assert settings.ENV == "test"
        assert settings.LOG_LEVEL == "DEBUG"
        assert settings.VERBOSE == 3
        assert str(ProgramRegistry.from_settings(settings).payment_mint) == (
            "6WQQPDXsBxkgMwuApkXbV2bUf3CZAJmGBDqk62aMpmKR"
        )

    def test_environment_variable_wins(self):
        """Test environment variables override YAML values."""
        test_program = str(Address(bytes(range(32))))

        with patch.dict(os.environ, {"XYBER_PROGRAM_ID": test_program}):
            settings = load_config(env="test")

        assert settings.XYBER_PROGRAM_ID == test_program

    def test_settings_singleton(self):
        """Test get/override/reset of the global settings."""
        custom = Settings(VERBOSE=0)

        override_settings(custom)
        assert get_settings() is custom

        reset_settings()
        with patch.dict(os.environ, {"ENV": "test"}):
            assert get_settings() is not custom

    # ================================================================
    # DI container
    # ================================================================

    def test_container_wires_graph(self):
        """Test the container builds the graph from settings."""
        test_program = str(Address(bytes(range(32))))
        container = DIContainer(Settings(XYBER_PROGRAM_ID=test_program, VERBOSE=0))

        graph = container.address_graph

        assert isinstance(graph, AddressGraph)
        assert graph is container.address_graph
        assert str(graph.registry.application_program) == test_program
        assert graph.reporter is container.reporter

    async def test_container_use_case(self):
        """Test the container creates a working use case."""
        container = DIContainer(Settings(VERBOSE=0))
        creator = Keypair.from_seed(bytes([8] * 32))

        use_case = container.derive_launch_addresses(WalletSession(creator.pubkey()))
        result = await use_case.execute(Keypair.from_seed(bytes([9] * 32)))

        assert isinstance(use_case, DeriveLaunchAddresses)
        assert len(result.as_dict()) == 8


if __name__ == "__main__":
    TestSettings.run_as_main()
