"""
Azure Table storage database client.

Each Azure table is exposed as a Database record.
"""

import logging
import os
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional, Union
from urllib.parse import quote

from pydantic import ValidationError as PydanticValidationError

from ...config import AZURE_TABLES_API_VERSION, AzureConfig
from ...exceptions import ValidationError
from ...http.adapter import HTTPAdapter
from ...logging_setup import setup_logging
from ...models import Database, TableCreate
from ...transport import Transport
from ...utils import templates
from .auth import TableSignature

logger = logging.getLogger("cloudkit_sdk.azure.database")

TEMPLATES_DIR = os.path.join(os.path.dirname(__file__), "templates")

# left unescaped by component encoding, but significant in table addressing
TABLE_URI_ESCAPES = (
    ("!", "%21"),
    ("'", "%27"),
    ("(", "%28"),
    (")", "%29"),
    ("*", "%2A"),
)


def encode_table_uri_component(uri: str) -> str:
    """
    Percent-encode a table resource path.

    Table names are addressed with ``! ' ( ) *`` escaped as well as the
    usual reserved characters.

    Examples:
        >>> encode_table_uri_component("Tables('a!b')")
        'Tables%28%27a%21b%27%29'
    """
    encoded = quote(uri, safe="!~*'()")
    for char, escaped in TABLE_URI_ESCAPES:
        encoded = encoded.replace(char, escaped)
    return encoded


def _iso_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class AzureTableClient:
    """
    Database client backed by Azure Table storage.

    Examples:
        >>> client = AzureTableClient(AzureConfig.from_env())
        >>> db = client.create({"name": "orders"})
        >>> [d.id for d in client.list()]
        ['orders']
        >>> client.remove("orders")
        True
    """

    def __init__(self, config: AzureConfig, http_adapter: Optional[HTTPAdapter] = None):
        """
        Initialize Azure Table client.

        Args:
            config: Azure configuration
            http_adapter: Optional custom HTTP adapter

        Raises:
            ConfigurationError: If the access key is not base64
        """
        self.config = config
        if config.debug:
            setup_logging(debug=True)

        self.servers_url = config.servers_url
        self.version = AZURE_TABLES_API_VERSION
        self.azure_keys = {
            "storage_account": config.storage_account,
            "storage_access_key": config.storage_access_key,
        }

        self.transport = Transport(
            base_url=self.url,
            http_adapter=http_adapter,
            timeout=config.timeout,
            name="azure.tables",
        )
        self.transport.before.append(
            TableSignature(config.storage_account, config.storage_access_key, self.version)
        )

    def create(self, options: Optional[Union[Mapping[str, Any], TableCreate]]) -> Database:
        """
        Create a new table.

        Args:
            options: Table create options; ``name`` is required

        Returns:
            Created database record

        Raises:
            ValidationError: If options or name are missing
            TransportError: If the request fails
        """
        if isinstance(options, TableCreate):
            params = options
        else:
            if not isinstance(options, Mapping):
                raise ValidationError("Options required to create a database.")
            if not options.get("name"):
                raise ValidationError(
                    "options.name is a required option", errors={"name": "required"}
                )
            try:
                params = TableCreate(name=options["name"])
            except PydanticValidationError as e:
                raise ValidationError(
                    "options.name must be a string", errors={"name": str(e)}
                ) from e

        body = templates.render(
            os.path.join(TEMPLATES_DIR, "create_table.xml"),
            {"name": params.name, "date": _iso_now()},
        )
        headers = {"content-length": str(len(body.encode("utf-8")))}

        response = self.transport.request("POST", ["Tables"], body=body, headers=headers)
        logger.info("Created table %s", params.name)
        return self.format_response(response.body)

    def list(self) -> List[Database]:
        """
        List the tables in the storage account.

        Returns:
            Database records in service order
        """
        response = self.transport.request("GET", ["Tables"])
        body = response.body if isinstance(response.body, dict) else {}

        entries = body.get("entry")
        if not entries:
            return []
        if not isinstance(entries, list):
            entries = [entries]
        return [self.format_response(entry) for entry in entries]

    def remove(self, id: str) -> bool:
        """
        Delete a table.

        Args:
            id: Table name

        Returns:
            True only when the service answers 204 No Content

        Raises:
            ValidationError: If id is missing
            TransportError: On network failure
        """
        if not id or not isinstance(id, str):
            raise ValidationError("id is a required argument", errors={"id": "required"})

        path = encode_table_uri_component(f"Tables('{id}')")
        response = self.transport.request(
            "DELETE", [path], raise_on_status=False, parse=False
        )

        if response.status_code != 204:
            logger.warning("Delete of table %s returned %d", id, response.status_code)
        return response.status_code == 204

    def format_response(self, response: Dict[str, Any]) -> Database:
        """
        Map a table entry onto a Database record.

        Args:
            response: Parsed table entry

        Returns:
            Database record
        """
        return Database(
            id=response["content"]["m:properties"]["d:TableName"],
            host=self.url(),
            uri=response["id"],
            username="",
            password="",
        )

    def url(self, *args: str) -> str:
        """Build a table service URL from up to two path segments."""
        url = f"http://{self.azure_keys['storage_account']}.{self.servers_url}/"
        if len(args) > 0 and args[0]:
            url += args[0]
        if len(args) > 1 and args[1]:
            url += args[1]
        return url
