"""
Rackspace Cloud Block Storage client.
"""

import logging
from typing import List, Optional, Tuple

from ...config import RackspaceConfig
from ...http.adapter import HTTPAdapter
from ...logging_setup import setup_logging
from ...models import VolumeType, VolumeTypeRef, volume_type_id
from ...transport import Response, Transport
from .identity import RackspaceIdentity

logger = logging.getLogger("cloudkit_sdk.rackspace.blockstorage")

SERVICE_NAME = "cloudBlockStorage"


class BlockStorageClient:
    """
    Block storage client.

    Examples:
        >>> client = BlockStorageClient(RackspaceConfig.from_env())
        >>> types, _ = client.get_volume_types()
        >>> client.get_volume_type(types[0]).name
        'SATA'
    """

    def __init__(self, config: RackspaceConfig, http_adapter: Optional[HTTPAdapter] = None):
        """
        Initialize block storage client.

        Args:
            config: Rackspace configuration
            http_adapter: Optional custom HTTP adapter, shared with identity
        """
        self.config = config
        if config.debug:
            setup_logging(debug=True)

        self.identity = RackspaceIdentity(config, SERVICE_NAME, http_adapter=http_adapter)
        self.transport = Transport(
            base_url=self.url,
            http_adapter=http_adapter,
            timeout=config.timeout,
            name="rackspace.blockstorage",
            default_headers={"Accept": "application/json"},
        )
        self.transport.before.append(self.identity)

    def url(self, path: str = "") -> str:
        return f"{self.identity.endpoint}/{path}"

    def get_volume_types(self) -> Tuple[List[VolumeType], Response]:
        """
        List volume types.

        Returns:
            Tuple of (volume types in service order, raw response)
        """
        response = self.transport.request("GET", "types")
        volume_types = [VolumeType(**data) for data in response.body.get("volume_types", [])]
        return volume_types, response

    def get_volume_type(self, volume_type: VolumeTypeRef) -> VolumeType:
        """
        Get a volume type.

        Args:
            volume_type: VolumeType record or its id

        Returns:
            Volume type
        """
        response = self.transport.request("GET", f"types/{volume_type_id(volume_type)}")
        return VolumeType(**response.body["volume_type"])
