"""
Azure provider adapters.
"""

from .database import AzureTableClient, encode_table_uri_component

__all__ = ["AzureTableClient", "encode_table_uri_component"]
