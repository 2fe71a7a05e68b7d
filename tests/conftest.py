"""
Pytest configuration and fixtures
"""

import pytest

from cloudkit_sdk import AzureConfig, RackspaceConfig

from helpers import ACCESS_KEY, DummyAdapter


@pytest.fixture
def adapter():
    """In-memory HTTP adapter"""
    return DummyAdapter()


@pytest.fixture
def azure_config():
    """Azure configuration fixture"""
    return AzureConfig(storage_account="myaccount", storage_access_key=ACCESS_KEY)


@pytest.fixture
def rackspace_config():
    """Rackspace configuration fixture"""
    return RackspaceConfig(username="demo", api_key="rax_key_123", region="DFW")
