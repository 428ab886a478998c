import pytest

from gatecore.config import GateCoreConfig, set_config, reset_config


@pytest.fixture(autouse=True)
def default_config():
    """Pin code defaults so a user's ~/.gatecore/config.yml never leaks in"""
    set_config(GateCoreConfig.default())
    yield
    reset_config()
