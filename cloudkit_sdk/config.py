"""
Provider configuration for CloudKit SDK.

Configurations are immutable once built and are shared by every request
an adapter issues.
"""

import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

AZURE_TABLES_ENDPOINT = "table.core.windows.net"
AZURE_TABLES_API_VERSION = "2012-02-12"

RACKSPACE_AUTH_URL = "https://identity.api.rackspacecloud.com/v2.0"
RACKSPACE_DEFAULT_REGION = "DFW"


class AzureConfig(BaseModel):
    """
    Azure Table storage configuration.

    Supports environment variables through ``AzureConfig.from_env()``:
    - AZURE_STORAGE_ACCOUNT: Storage account name (required)
    - AZURE_STORAGE_ACCESS_KEY: Base64 storage access key (required)
    - AZURE_TABLES_ENDPOINT: Table service endpoint (default: table.core.windows.net)
    """

    model_config = ConfigDict(frozen=True)

    storage_account: str = Field(..., min_length=1, description="Storage account name")
    storage_access_key: str = Field(
        ..., min_length=1, repr=False, description="Base64 encoded storage access key"
    )
    servers_url: str = Field(AZURE_TABLES_ENDPOINT, description="Table service endpoint")
    timeout: float = Field(30.0, gt=0, description="Request timeout in seconds")
    debug: bool = Field(False, description="Enable debug logging")

    @field_validator("servers_url")
    @classmethod
    def default_servers_url(cls, v):
        return v or AZURE_TABLES_ENDPOINT

    @classmethod
    def from_env(cls, **overrides) -> "AzureConfig":
        values = {
            "storage_account": os.getenv("AZURE_STORAGE_ACCOUNT", ""),
            "storage_access_key": os.getenv("AZURE_STORAGE_ACCESS_KEY", ""),
            "servers_url": os.getenv("AZURE_TABLES_ENDPOINT", AZURE_TABLES_ENDPOINT),
        }
        values.update(overrides)
        return cls(**values)


class RackspaceConfig(BaseModel):
    """
    Rackspace Cloud configuration.

    Supports environment variables through ``RackspaceConfig.from_env()``:
    - RACKSPACE_USERNAME: Account username (required)
    - RACKSPACE_API_KEY: API key (required)
    - RACKSPACE_REGION: Region (default: DFW)
    - RACKSPACE_AUTH_URL: Identity endpoint
    """

    model_config = ConfigDict(frozen=True)

    username: str = Field(..., min_length=1, description="Account username")
    api_key: str = Field(..., min_length=1, repr=False, description="Account API key")
    region: str = Field(RACKSPACE_DEFAULT_REGION, description="Service region")
    auth_url: str = Field(RACKSPACE_AUTH_URL, description="Identity service endpoint")
    service_url: Optional[str] = Field(
        None, description="Block storage endpoint override (skips catalog lookup)"
    )
    timeout: float = Field(30.0, gt=0, description="Request timeout in seconds")
    debug: bool = Field(False, description="Enable debug logging")

    @field_validator("region")
    @classmethod
    def normalize_region(cls, v):
        return v.upper()

    @field_validator("auth_url", "service_url")
    @classmethod
    def strip_trailing_slash(cls, v):
        return v.rstrip("/") if v else v

    @classmethod
    def from_env(cls, **overrides) -> "RackspaceConfig":
        values = {
            "username": os.getenv("RACKSPACE_USERNAME", ""),
            "api_key": os.getenv("RACKSPACE_API_KEY", ""),
            "region": os.getenv("RACKSPACE_REGION", RACKSPACE_DEFAULT_REGION),
            "auth_url": os.getenv("RACKSPACE_AUTH_URL", RACKSPACE_AUTH_URL),
        }
        values.update(overrides)
        return cls(**values)
