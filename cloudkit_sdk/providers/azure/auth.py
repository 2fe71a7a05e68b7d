"""
Azure Table service request signing (SharedKeyLite).
"""

import base64
import binascii
import hashlib
import hmac
from email.utils import formatdate

from ...exceptions import ConfigurationError
from ...transport import Request


def sign(key: bytes, string_to_sign: str) -> str:
    """
    Compute the base64 HMAC-SHA256 signature of a string.

    Args:
        key: Decoded storage access key
        string_to_sign: Canonical string

    Returns:
        Base64 encoded signature
    """
    digest = hmac.new(key, string_to_sign.encode("utf-8"), hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii")


class TableSignature:
    """
    Before hook that signs Azure Table requests.

    The canonical string is the request date and the canonicalized
    resource: ``"{x-ms-date}\\n/{account}/{encoded path}"``.
    """

    def __init__(self, storage_account: str, storage_access_key: str, version: str):
        self.storage_account = storage_account
        self.version = version
        try:
            self._key = base64.b64decode(storage_access_key, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ConfigurationError("storage_access_key must be base64 encoded") from e

    def __call__(self, request: Request) -> None:
        headers = request.headers
        date = formatdate(usegmt=True)

        headers["x-ms-date"] = date
        headers["x-ms-version"] = self.version
        headers.setdefault("DataServiceVersion", "1.0;NetFx")
        headers.setdefault("MaxDataServiceVersion", "2.0;NetFx")
        headers.setdefault("Accept", "application/atom+xml,application/xml")
        if request.body is not None:
            headers.setdefault("Content-Type", "application/atom+xml")

        resource = request.path.split("?", 1)[0]
        string_to_sign = f"{date}\n/{self.storage_account}/{resource}"
        headers["Authorization"] = (
            f"SharedKeyLite {self.storage_account}:{sign(self._key, string_to_sign)}"
        )
