"""
List, create and remove Azure tables.

Usage:
    export AZURE_STORAGE_ACCOUNT=myaccount
    export AZURE_STORAGE_ACCESS_KEY=...
    python examples/list_tables.py orders
"""

import logging
import sys

from cloudkit_sdk import AzureConfig, AzureTableClient, ApiError
from cloudkit_sdk.logging_setup import setup_structured_logger


def main():
    setup_structured_logger(logging.INFO)
    client = AzureTableClient(AzureConfig.from_env())
    name = sys.argv[1] if len(sys.argv) > 1 else "cloudkitdemo"

    try:
        table = client.create({"name": name})
        print(f"Created {table.id} at {table.host}")
    except ApiError as e:
        print(f"Create failed ({e.status_code}): {e}")

    for table in client.list():
        print(f"  {table.id}  {table.uri}")

    print(f"Removed: {client.remove(name)}")


if __name__ == "__main__":
    main()
