"""Client entrypoints."""

from computeengine.client.async_client import AsyncComputeClient, connect
from computeengine.client.sync_client import ComputeClient

__all__ = [
    "AsyncComputeClient",
    "ComputeClient",
    "connect",
]
