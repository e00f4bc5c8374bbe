"""Tests for the chart projections."""

import pytest

from src.metrics_client.models import Snapshot
from src.dashboard.projector import EMPTY_SERIES, ChartSeries, project_aggregate, project_drilldown


class TestProjectAggregate:
    """Test cases for project_aggregate."""

    @pytest.mark.unit
    def test_one_entry_per_client_in_key_order(self, multi_client_snapshot):
        series = project_aggregate(multi_client_snapshot)

        assert series.labels == ['192.168.1.10', '192.168.1.20', '192.168.1.30']
        assert series.inbound == [5000, 300, 42]
        assert series.outbound == [1200, 700, 0]

    @pytest.mark.unit
    def test_series_are_aligned(self, multi_client_snapshot):
        series = project_aggregate(multi_client_snapshot)

        assert len(series.labels) == len(series.inbound) == len(series.outbound) == len(multi_client_snapshot)
        for i, label in enumerate(series.labels):
            assert series.inbound[i] == multi_client_snapshot.get(label).inbound
            assert series.outbound[i] == multi_client_snapshot.get(label).outbound

    @pytest.mark.unit
    def test_empty_snapshot_gives_empty_series(self):
        series = project_aggregate(Snapshot())
        assert series == EMPTY_SERIES
        assert series.is_empty

    @pytest.mark.unit
    def test_same_input_same_output(self, multi_client_snapshot):
        assert project_aggregate(multi_client_snapshot) == project_aggregate(multi_client_snapshot)


class TestProjectDrilldown:
    """Test cases for project_drilldown."""

    @pytest.mark.unit
    def test_one_entry_per_protocol(self, multi_client_snapshot):
        series = project_drilldown(multi_client_snapshot, '192.168.1.10')

        assert series == ChartSeries(
            labels=['TCP', 'UDP', 'ICMP'],
            inbound=[4000, 900, 100],
            outbound=[1000, 150, 50],
        )

    @pytest.mark.unit
    def test_unknown_client_not_available(self, multi_client_snapshot):
        assert project_drilldown(multi_client_snapshot, '10.9.9.9') is None

    @pytest.mark.unit
    def test_client_without_protocols_not_available(self, multi_client_snapshot):
        assert project_drilldown(multi_client_snapshot, '192.168.1.30') is None

    @pytest.mark.unit
    def test_empty_protocols_not_available(self):
        snapshot = Snapshot.from_dict({'a': {'inbound': 1, 'outbound': 1, 'protocols': {}}})
        assert project_drilldown(snapshot, 'a') is None

    @pytest.mark.unit
    def test_empty_snapshot_not_available(self):
        assert project_drilldown(Snapshot(), 'a') is None

    @pytest.mark.unit
    def test_same_input_same_output(self, multi_client_snapshot):
        first = project_drilldown(multi_client_snapshot, '192.168.1.20')
        second = project_drilldown(multi_client_snapshot, '192.168.1.20')
        assert first == second == ChartSeries(['UDP'], [300], [700])
