"""Foreign-key resolution from orders to clients."""

from collections.abc import Iterable, Mapping

from bizdesk.domain.constants import UNKNOWN_CLIENT_NAME
from bizdesk.domain.models import Client, Order


def find_client(clients: Iterable[Client], client_id: str) -> Client | None:
    """Return the client with ``client_id`` or None when absent."""
    for client in clients:
        if client.id == client_id:
            return client
    return None


def index_clients(clients: Iterable[Client]) -> dict[str, Client]:
    """Return clients keyed by id."""
    return {client.id: client for client in clients}


def resolve_client_name(
    clients_by_id: Mapping[str, Client],
    client_id: str,
) -> str:
    """Return the client's name, or the placeholder for dangling ids."""
    client = clients_by_id.get(client_id)
    return client.name if client is not None else UNKNOWN_CLIENT_NAME


def build_client_names(
    clients: Iterable[Client],
    orders: Iterable[Order],
) -> dict[str, str]:
    """Map every client id referenced by ``orders`` to a display name.

    Args:
        clients: Client collection snapshot.
        orders: Orders whose ``client_id`` values need display names.

    Returns:
        dict[str, str]: ``client_id -> name``; ids missing from the client
        collection map to ``"Unknown Client"``.
    """
    clients_by_id = index_clients(clients)
    names: dict[str, str] = {}
    for order in orders:
        if order.client_id not in names:
            names[order.client_id] = resolve_client_name(
                clients_by_id,
                order.client_id,
            )
    return names


__all__ = [
    "find_client",
    "index_clients",
    "resolve_client_name",
    "build_client_names",
]
