"""
Per-request GraphQL context
"""

from typing import Any

from fastapi import Request

from ..database import DataClient, Database
from .loaders import Loaders


def build_context(database: Database, request: Request | None = None) -> dict[str, Any]:
    """Build the context handed to every resolver of one request.

    The data client wraps the process-wide database handle; loaders are fresh
    per request so batching never leaks results between requests.
    """
    client = DataClient(database)
    return {
        "request": request,
        "client": client,
        "loaders": Loaders(client),
    }


def get_client(info_context: dict[str, Any]) -> DataClient:
    client = info_context.get("client")
    if client is None:
        raise RuntimeError("Data client not found in GraphQL context")
    return client
