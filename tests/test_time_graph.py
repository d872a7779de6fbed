"""
Tests de integración: motor, caché y gráfica en memoria juntos.
"""

from config import MIN_Y, MIN_Y_OFFSET
from models import DataPoint, WiFiDetail
from time_graph import TimeGraph


def make_detail(ssid: str, level: int = -50) -> WiFiDetail:
    return WiFiDetail(ssid=ssid, bssid="AA:BB:CC:DD:EE:FF", level=level)


class TestTimeGraph:

    def test_first_tick_creates_series(self):
        graph = TimeGraph()
        details = {make_detail("A"), make_detail("B")}

        result = graph.update(details)

        assert result.tick == 0
        assert result.scan_count == 1
        assert result.created == details
        assert result.updated == set()
        assert graph.chart.drawn() == details
        assert not graph.chart.horizontal_labels_visible

    def test_second_tick_appends_and_shows_labels(self):
        graph = TimeGraph()
        graph.update({make_detail("A", -50)})

        result = graph.update({make_detail("A", -60)})

        assert result.updated == {make_detail("A")}
        series = graph.chart.series(make_detail("A"))
        assert series.points == [DataPoint(0, -50), DataPoint(1, -60)]
        assert graph.chart.horizontal_labels_visible

    def test_vanished_detail_trails_to_floor(self):
        graph = TimeGraph(max_not_seen=5)
        a, b = make_detail("A"), make_detail("B")
        graph.update({a, b})

        result = graph.update({a})

        assert result.vanishing == {b}
        assert result.removed == set()
        assert graph.chart.series(b).points[-1] == DataPoint(1, MIN_Y + MIN_Y_OFFSET)
        assert graph.cache.active() == {b}

    def test_vanished_detail_removed_after_grace(self):
        graph = TimeGraph(max_not_seen=2)
        a, b = make_detail("A"), make_detail("B")
        graph.update({a, b})

        removed = [graph.update({a}).removed for _ in range(3)]

        assert removed == [set(), set(), {b}]
        assert graph.chart.drawn() == {a}
        assert graph.cache.active() == set()

    def test_zero_grace_removes_immediately(self):
        graph = TimeGraph(max_not_seen=0)
        a = make_detail("A")
        graph.update({a})

        result = graph.update(set())

        assert result.removed == {a}
        assert graph.chart.size() == 0

    def test_reappearing_detail_leaves_grace(self):
        graph = TimeGraph(max_not_seen=5)
        a = make_detail("A")
        graph.update({a})
        graph.update(set())

        result = graph.update({make_detail("A", -70)})

        assert result.updated == {a}
        assert graph.cache.active() == set()
        assert graph.chart.series(a).points[-1] == DataPoint(2, -70)

    def test_removed_detail_returns_as_new_series(self):
        graph = TimeGraph(max_not_seen=0)
        a = make_detail("A")
        graph.update({a})
        graph.update(set())

        result = graph.update({a})

        assert result.created == {a}
        assert graph.chart.series(a).points == [DataPoint(2, -50)]

    def test_empty_ticks_advance_axis(self):
        graph = TimeGraph()
        for _ in range(3):
            graph.update(None)
        assert graph.data_manager.get_x_value() == 3
        assert graph.data_manager.get_scan_count() == 3

    def test_updated_holds_current_levels(self):
        graph = TimeGraph()
        graph.update({make_detail("A", -50)})

        result = graph.update({make_detail("A", -60), make_detail("B", -70), make_detail("C", -80)})

        assert [d.level for d in result.updated] == [-60]
