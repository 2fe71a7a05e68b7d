"""
HTTP adapters for CloudKit SDK.
"""

from .adapter import HTTPAdapter, RawResponse
from .requests_adapter import RequestsAdapter

__all__ = ["HTTPAdapter", "RawResponse", "RequestsAdapter"]
