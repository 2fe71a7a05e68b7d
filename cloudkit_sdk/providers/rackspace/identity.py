"""
Rackspace Cloud Identity (v2.0) authentication.
"""

import json
import logging
import threading
from typing import Any, Dict, List, Optional

from ...config import RackspaceConfig
from ...exceptions import ApiError, AuthenticationError
from ...http.adapter import HTTPAdapter
from ...transport import Request, Transport

logger = logging.getLogger("cloudkit_sdk.rackspace.identity")


class RackspaceIdentity:
    """
    Token provider and before hook for Rackspace services.

    The first request authenticates with the account API key; the token
    and the service endpoint from the catalog are reused afterwards.
    """

    def __init__(
        self,
        config: RackspaceConfig,
        service_name: str,
        http_adapter: Optional[HTTPAdapter] = None,
    ):
        """
        Initialize identity client.

        Args:
            config: Rackspace configuration
            service_name: Catalog service name (e.g. 'cloudBlockStorage')
            http_adapter: Optional custom HTTP adapter
        """
        self.config = config
        self.service_name = service_name
        self.transport = Transport(
            base_url=lambda path: f"{config.auth_url}/{path}",
            http_adapter=http_adapter,
            timeout=config.timeout,
            name="rackspace.identity",
            default_headers={
                "Accept": "application/json",
                "Content-Type": "application/json",
            },
        )
        self._lock = threading.Lock()
        self._token: Optional[str] = None
        self._endpoint: Optional[str] = config.service_url

    @property
    def token(self) -> str:
        self.authenticate()
        return self._token

    @property
    def endpoint(self) -> str:
        self.authenticate()
        return self._endpoint

    def authenticate(self) -> None:
        """
        Obtain a token unless one is already cached.

        Raises:
            AuthenticationError: If the identity service rejects the key
                or the service is missing from the catalog
        """
        if self._token:
            return
        with self._lock:
            if self._token:
                return

            payload = {
                "auth": {
                    "RAX-KSKEY:apiKeyCredentials": {
                        "username": self.config.username,
                        "apiKey": self.config.api_key,
                    }
                }
            }
            try:
                response = self.transport.request("POST", "tokens", body=json.dumps(payload))
            except ApiError as e:
                raise AuthenticationError(
                    f"Authentication failed for {self.config.username}: {e}"
                ) from e

            access = response.body.get("access", {}) if isinstance(response.body, dict) else {}
            token = access.get("token", {}).get("id")
            if not token:
                raise AuthenticationError("Identity response did not include a token")

            if not self._endpoint:
                self._endpoint = self._find_endpoint(access.get("serviceCatalog", []))
            self._token = token
            logger.info("Authenticated %s in %s", self.config.username, self.config.region)

    def _find_endpoint(self, catalog: List[Dict[str, Any]]) -> str:
        for service in catalog:
            if service.get("name") != self.service_name:
                continue
            for endpoint in service.get("endpoints", []):
                if endpoint.get("region", "").upper() == self.config.region:
                    return endpoint["publicURL"].rstrip("/")
        raise AuthenticationError(
            f"No {self.service_name} endpoint for region {self.config.region}"
        )

    def __call__(self, request: Request) -> None:
        request.headers["X-Auth-Token"] = self.token
