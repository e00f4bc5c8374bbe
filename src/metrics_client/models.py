"""
Wire models for the traffic metrics endpoint.

Contains:
- ProtocolStats: Inbound/outbound byte volume for one protocol
- ClientStats: Traffic volume of one client with its protocol breakdown
- Snapshot: One polled dataset, client id -> ClientStats
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional


class SnapshotFormatError(ValueError):
    """Raised when a decoded payload does not have the snapshot shape."""
    pass


def _parse_volume(value: Any, where: str) -> int:
    """Validate a byte counter: a non-negative integer (bools rejected)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise SnapshotFormatError(f"{where}: expected an integer byte count, got {value!r}")
    if value < 0:
        raise SnapshotFormatError(f"{where}: byte count must not be negative, got {value}")
    return value


def _expect_mapping(value: Any, where: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise SnapshotFormatError(f"{where}: expected an object, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class ProtocolStats:
    """Byte volume of a single protocol for one client."""
    inbound: int = 0
    outbound: int = 0

    @classmethod
    def from_dict(cls, data: Any, where: str = "protocol") -> "ProtocolStats":
        data = _expect_mapping(data, where)
        return cls(
            inbound=_parse_volume(data.get('inbound'), f"{where}.inbound"),
            outbound=_parse_volume(data.get('outbound'), f"{where}.outbound"),
        )


@dataclass(frozen=True)
class ClientStats:
    """Traffic volume for one client.

    ``protocols`` is empty when the backend sent no breakdown for the client.
    """
    inbound: int = 0
    outbound: int = 0
    protocols: Dict[str, ProtocolStats] = field(default_factory=dict)

    @property
    def has_breakdown(self) -> bool:
        return len(self.protocols) > 0

    @classmethod
    def from_dict(cls, data: Any, where: str = "client") -> "ClientStats":
        data = _expect_mapping(data, where)

        raw_protocols = data.get('protocols')
        protocols: Dict[str, ProtocolStats] = {}
        if raw_protocols is not None:
            raw_protocols = _expect_mapping(raw_protocols, f"{where}.protocols")
            for name, proto in raw_protocols.items():
                protocols[str(name)] = ProtocolStats.from_dict(proto, f"{where}.protocols.{name}")

        return cls(
            inbound=_parse_volume(data.get('inbound'), f"{where}.inbound"),
            outbound=_parse_volume(data.get('outbound'), f"{where}.outbound"),
            protocols=protocols,
        )


@dataclass(frozen=True)
class Snapshot:
    """One polled dataset: client id -> ClientStats, in the order received."""
    clients: Dict[str, ClientStats] = field(default_factory=dict)

    def __contains__(self, client_id: object) -> bool:
        return client_id in self.clients

    def __len__(self) -> int:
        return len(self.clients)

    def __iter__(self) -> Iterator[str]:
        return iter(self.clients)

    def get(self, client_id: str) -> Optional[ClientStats]:
        return self.clients.get(client_id)

    def client_ids(self) -> List[str]:
        return list(self.clients)

    @classmethod
    def from_dict(cls, data: Any) -> "Snapshot":
        """Build a snapshot from a decoded JSON payload.

        Raises:
            SnapshotFormatError: if the payload is not an object keyed by
                client id with inbound/outbound counters per entry.
        """
        data = _expect_mapping(data, "snapshot")
        clients = {
            str(client_id): ClientStats.from_dict(stats, f"snapshot[{client_id!r}]")
            for client_id, stats in data.items()
        }
        return cls(clients=clients)
