"""
CloudKit Python SDK

Provider adapters exposing uniform create/list/get/remove verbs over
cloud vendors' REST APIs.
"""

from cloudkit_sdk.__version__ import __version__
from cloudkit_sdk.config import AzureConfig, RackspaceConfig
from cloudkit_sdk.models import Database, TableCreate, VolumeType, VolumeTypeRef
from cloudkit_sdk.providers.azure import AzureTableClient, encode_table_uri_component
from cloudkit_sdk.providers.rackspace import BlockStorageClient
from cloudkit_sdk.exceptions import (
    CloudKitError,
    ValidationError,
    ConfigurationError,
    TemplateError,
    TransportError,
    ApiError,
    NetworkError,
    TimeoutError,
    ResponseParseError,
    AuthenticationError,
)

__all__ = [
    "AzureConfig",
    "RackspaceConfig",
    "Database",
    "TableCreate",
    "VolumeType",
    "VolumeTypeRef",
    "AzureTableClient",
    "BlockStorageClient",
    "encode_table_uri_component",
    "CloudKitError",
    "ValidationError",
    "ConfigurationError",
    "TemplateError",
    "TransportError",
    "ApiError",
    "NetworkError",
    "TimeoutError",
    "ResponseParseError",
    "AuthenticationError",
    "__version__",
]
