"""
Projection of snapshots into the flat series the bar chart draws.

Both projections are pure: the same snapshot always yields the same series,
with labels in the snapshot's key order and the two value lists aligned to
the labels index by index.
"""

from typing import List, NamedTuple, Optional

from .models import Snapshot


class ChartSeries(NamedTuple):
    """Labels plus one inbound and one outbound value per label."""
    labels: List[str]
    inbound: List[int]
    outbound: List[int]

    @property
    def is_empty(self) -> bool:
        return not self.labels


EMPTY_SERIES = ChartSeries([], [], [])


def project_aggregate(snapshot: Snapshot) -> ChartSeries:
    """One bar pair per client."""
    labels = snapshot.client_ids()
    return ChartSeries(
        labels=labels,
        inbound=[snapshot.clients[client_id].inbound for client_id in labels],
        outbound=[snapshot.clients[client_id].outbound for client_id in labels],
    )


def project_drilldown(snapshot: Snapshot, client_id: str) -> Optional[ChartSeries]:
    """One bar pair per protocol of ``client_id``.

    Returns None when the client is not in the snapshot or has no protocol
    breakdown.
    """
    client = snapshot.get(client_id)
    if client is None or not client.has_breakdown:
        return None

    labels = list(client.protocols)
    return ChartSeries(
        labels=labels,
        inbound=[client.protocols[name].inbound for name in labels],
        outbound=[client.protocols[name].outbound for name in labels],
    )
