# time_graph.py
"""
Gráfica temporal completa: une el motor, la caché de gracia y la gráfica en
memoria, y retira las series que ya agotaron su periodo de gracia.
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional, Set

from cache import TimeGraphCache
from chart import SeriesChart
from config import MAX_NOT_SEEN_COUNT
from data_manager import DataManager
from models import SeriesState, WiFiDetail


@dataclass
class TickResult:
    tick: int                                              # valor de X usado en el tick
    scan_count: int                                        # contador tras el tick
    created: Set[WiFiDetail] = field(default_factory=set)
    updated: Set[WiFiDetail] = field(default_factory=set)
    vanishing: Set[WiFiDetail] = field(default_factory=set)
    removed: Set[WiFiDetail] = field(default_factory=set)


class TimeGraph:
    """Orquesta un tick completo sobre una SeriesChart."""

    def __init__(self, max_not_seen: int = MAX_NOT_SEEN_COUNT, chart: Optional[SeriesChart] = None):
        self.chart = chart if chart is not None else SeriesChart()
        self.cache = TimeGraphCache(max_not_seen)
        self.data_manager = DataManager(self.chart, self.cache)

    def update(self, details: Optional[Iterable[WiFiDetail]]) -> TickResult:
        current = set(details or ())
        tick = self.data_manager.get_x_value()
        drawn_before = self.chart.drawn()

        self.data_manager.process_tick(current)
        new_series = self.data_manager.get_new_series(current)
        removed = self.chart.remove_series(new_series)

        return TickResult(
            tick=tick,
            scan_count=self.data_manager.get_scan_count(),
            created=current - drawn_before,
            # detalles de este tick, con su nivel actual
            updated={d for d in current if d in drawn_before},
            vanishing={d for d in self.chart.drawn() if self.cache.state(d) is SeriesState.VANISHING},
            removed=removed,
        )
