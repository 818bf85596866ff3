"""
Pytest configuration and shared fixtures for the proclaunch test suite.

This module provides common fixtures and configuration for all test modules.
"""

import sys
from pathlib import Path
from unittest.mock import patch

import pytest

# Add src to Python path for testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


# ============================================================================
# Test Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def sample_profiles_data():
    """Sample [[profiles]] tables for testing."""
    return [
        {
            "id": "STABILITY",
            "name": "Stability Mode",
            "command": 'wine "C:\\Program Files\\app.exe" --safe-mode',
            "cpu_list": "0,1",
            "setup_command": "",
        },
        {
            "id": "CUSTOM-1",
            "name": "Big cores",
            "command": "wine /games/app\\ dir/app.exe",
            "cpu_list": "4, 5, 6, 7",
            "setup_command": "source /opt/wine/env.sh",
        },
    ]


@pytest.fixture
def sample_config_data(sample_profiles_data):
    """Sample parsed config.toml contents for testing."""
    return {
        "launcher": {
            "default_profile": "STABILITY",
            "use_taskset": False,
        },
        "profiles": sample_profiles_data,
    }


@pytest.fixture
def config_file(tmp_path, sample_config_data):
    """Write the sample configuration to a temporary config.toml."""
    import toml

    path = tmp_path / "config.toml"
    with open(path, "w") as f:
        toml.dump(sample_config_data, f)
    return path


@pytest.fixture
def reset_config():
    """Make sure no cached configuration leaks between tests."""
    from proclaunch.config import clear_config_cache, manager

    saved_path = manager._CONFIG_FILE_PATH
    clear_config_cache()
    yield
    manager._CONFIG_FILE_PATH = saved_path
    clear_config_cache()


# ============================================================================
# Mock Fixtures
# ============================================================================


@pytest.fixture
def mock_cpu_count():
    """Mock psutil.cpu_count to report an 8-CPU machine."""
    with patch("psutil.cpu_count") as mocked:
        mocked.return_value = 8
        yield mocked
