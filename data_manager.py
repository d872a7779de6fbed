# -*- coding: utf-8 -*-
"""
Motor de reconciliación de la gráfica temporal.

En cada tick compara los detalles del escaneo actual con las series ya
dibujadas: las que desaparecen reciben un punto cerca del suelo y entran en
el periodo de gracia; las que siguen visibles reciben su nivel actual; las
nuevas crean su serie. Después avanza el eje X y el contador de escaneos.
"""

from typing import Iterable, Optional, Set

from cache import TimeGraphCache
from chart import ChartSurface
from config import MAX_SCAN_COUNT, MIN_Y, MIN_Y_OFFSET
from models import DataPoint, WiFiDetail


class DataManager:
    """Reconciliación por tick entre escaneos y series de la gráfica."""

    def __init__(self, chart: ChartSurface, time_graph_cache: Optional[TimeGraphCache] = None):
        self.chart = chart
        self.time_graph_cache = time_graph_cache if time_graph_cache is not None else TimeGraphCache()
        self._x_value = 0
        self._scan_count = 0

    def get_x_value(self) -> int:
        return self._x_value

    def get_scan_count(self) -> int:
        return self._scan_count

    def set_scan_count(self, scan_count: int) -> None:
        """Restaura el contador (acotado a [0, MAX_SCAN_COUNT])."""
        self._scan_count = max(0, min(scan_count, MAX_SCAN_COUNT))

    def process_tick(self, details: Optional[Iterable[WiFiDetail]]) -> None:
        """
        Procesa un escaneo completo sobre la gráfica.

        Los fallos de la gráfica o de la caché se propagan al llamador.
        """
        current: Set[WiFiDetail] = set(details or ())
        self.adjust_data(current)
        for detail in sorted(current):
            self.add_data(detail)

        self._x_value += 1
        if self._scan_count < MAX_SCAN_COUNT:
            self._scan_count += 1
        # con un solo punto no hay rango temporal que mostrar
        if self._scan_count > 1:
            self.chart.set_horizontal_labels_visible(True)

    def adjust_data(self, current: Set[WiFiDetail]) -> None:
        """Añade el punto de suelo a las series que ya no aparecen."""
        point = DataPoint(self._x_value, MIN_Y + MIN_Y_OFFSET)
        for detail in self.chart.difference_series(current):
            self.chart.append_to_series(detail, point, self._scan_count, False)
            self.time_graph_cache.add(detail)
        self.time_graph_cache.clear()

    def get_new_series(self, current: Iterable[WiFiDetail]) -> Set[WiFiDetail]:
        """Series que deben seguir en pantalla: visibles más las que están en gracia."""
        result = set(current or ())
        result.update(self.time_graph_cache.active())
        return result

    def add_data(self, detail: WiFiDetail) -> None:
        point = DataPoint(self._x_value, detail.level)
        if self.chart.is_new_series(detail):
            self.chart.add_series(detail, point, True)
        else:
            self.chart.append_to_series(detail, point, self._scan_count, False)
        self.time_graph_cache.reset(detail)
