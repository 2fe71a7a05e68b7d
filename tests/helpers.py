"""
Shared test doubles and canned provider payloads.
"""

from typing import Any, Dict, List, Optional, Tuple, Union

from cloudkit_sdk.http.adapter import HTTPAdapter

ATOM_HEADERS = {"Content-Type": "application/atom+xml;type=entry;charset=utf-8"}
JSON_HEADERS = {"Content-Type": "application/json"}

# base64("secretkey")
ACCESS_KEY = "c2VjcmV0a2V5"

BLOCKSTORAGE_URL = "https://dfw.blockstorage.api.rackspacecloud.com/v1/123456"


class DummyAdapter(HTTPAdapter):
    """Records requests and replays queued responses in order."""

    def __init__(self):
        self.requests: List[Dict[str, Any]] = []
        self.responses: List[Union[Tuple[int, str, Dict[str, str]], Exception]] = []

    def queue(self, status: int = 200, text: str = "", headers: Optional[Dict[str, str]] = None):
        self.responses.append((status, text, headers or {}))
        return self

    def queue_error(self, error: Exception):
        self.responses.append(error)
        return self

    @property
    def last_request(self) -> Dict[str, Any]:
        return self.requests[-1]

    def send(self, method, url, headers, data=None, timeout=10):
        self.requests.append(
            {
                "method": method,
                "url": url,
                "headers": dict(headers),
                "data": data,
                "timeout": timeout,
            }
        )
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def table_entry(name: str, account: str = "myaccount", namespaces: bool = False) -> str:
    xmlns = ""
    if namespaces:
        xmlns = (
            ' xmlns:d="http://schemas.microsoft.com/ado/2007/08/dataservices"'
            ' xmlns:m="http://schemas.microsoft.com/ado/2007/08/dataservices/metadata"'
            ' xmlns="http://www.w3.org/2005/Atom"'
        )
    return f"""<entry{xmlns}>
  <id>https://{account}.table.core.windows.net/Tables('{name}')</id>
  <title type="text"></title>
  <updated>2013-10-09T22:23:23Z</updated>
  <author><name /></author>
  <link rel="edit" title="Tables" href="Tables('{name}')" />
  <content type="application/xml">
    <m:properties>
      <d:TableName>{name}</d:TableName>
    </m:properties>
  </content>
</entry>"""


def table_feed(*names: str) -> str:
    entries = "\n".join(table_entry(name) for name in names)
    return f"""<?xml version="1.0" encoding="utf-8" standalone="yes"?>
<feed xml:base="https://myaccount.table.core.windows.net/"
      xmlns:d="http://schemas.microsoft.com/ado/2007/08/dataservices"
      xmlns:m="http://schemas.microsoft.com/ado/2007/08/dataservices/metadata"
      xmlns="http://www.w3.org/2005/Atom">
  <title type="text">Tables</title>
  <id>https://myaccount.table.core.windows.net/Tables</id>
  <updated>2013-10-09T22:23:23Z</updated>
  <link rel="self" title="Tables" href="Tables" />
{entries}
</feed>"""


def identity_response(token: str = "tok_123") -> Dict[str, Any]:
    return {
        "access": {
            "token": {"id": token, "expires": "2030-01-01T00:00:00Z"},
            "serviceCatalog": [
                {
                    "name": "cloudServersOpenStack",
                    "type": "compute",
                    "endpoints": [
                        {"region": "DFW", "publicURL": "https://dfw.servers.api.rackspacecloud.com/v2/123456"}
                    ],
                },
                {
                    "name": "cloudBlockStorage",
                    "type": "volume",
                    "endpoints": [
                        {"region": "ORD", "publicURL": "https://ord.blockstorage.api.rackspacecloud.com/v1/123456"},
                        {"region": "DFW", "publicURL": BLOCKSTORAGE_URL},
                    ],
                },
            ],
        }
    }

