"""
Show Rackspace block storage volume types.

Usage:
    export RACKSPACE_USERNAME=...
    export RACKSPACE_API_KEY=...
    python examples/volume_types.py
"""

from cloudkit_sdk import BlockStorageClient, RackspaceConfig


def main():
    client = BlockStorageClient(RackspaceConfig.from_env())
    volume_types, response = client.get_volume_types()
    print(f"{len(volume_types)} volume types (HTTP {response.status_code})")

    for volume_type in volume_types:
        details = client.get_volume_type(volume_type)
        print(f"  {details.id}: {details.name} {details.extra_specs}")


if __name__ == "__main__":
    main()
