# chart.py
"""
Superficie de la gráfica.

`ChartSurface` es el contrato que usa el motor de reconciliación: consultas
sobre las series dibujadas y órdenes de mutación. `SeriesChart` lo
implementa en memoria, con las series indexadas por identidad.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from itertools import cycle
from typing import Dict, Iterable, List, Optional, Set

from config import AP_MAP, SERIES_COLORS
from models import DataPoint, WiFiDetail


class ChartSurface(ABC):
    """Contrato de la gráfica consumido por DataManager."""

    @abstractmethod
    def is_new_series(self, detail: WiFiDetail) -> bool:
        raise NotImplementedError

    @abstractmethod
    def difference_series(self, details: Iterable[WiFiDetail]) -> Set[WiFiDetail]:
        """Series dibujadas que no están en `details`."""
        raise NotImplementedError

    @abstractmethod
    def append_to_series(self, detail: WiFiDetail, point: DataPoint, count: int, is_new_series: bool) -> None:
        raise NotImplementedError

    @abstractmethod
    def add_series(self, detail: WiFiDetail, point: DataPoint, is_new_series: bool) -> bool:
        raise NotImplementedError

    @abstractmethod
    def set_horizontal_labels_visible(self, visible: bool) -> None:
        raise NotImplementedError


@dataclass
class Series:
    label: str
    color: str
    points: List[DataPoint] = field(default_factory=list)
    highlighted: bool = False

    def append(self, point: DataPoint, max_points: Optional[int] = None) -> None:
        """Añade un punto y, si hay límite, conserva solo los últimos `max_points`."""
        self.points.append(point)
        if max_points is not None and max_points > 0 and len(self.points) > max_points:
            del self.points[:len(self.points) - max_points]


class SeriesChart(ChartSurface):
    """Gráfica en memoria: identidad -> Series."""

    def __init__(self):
        self._series: Dict[WiFiDetail, Series] = {}
        self._colors = cycle(SERIES_COLORS)
        self.horizontal_labels_visible = False

    # --- Consultas ---

    def is_new_series(self, detail: WiFiDetail) -> bool:
        return detail not in self._series

    def difference_series(self, details: Iterable[WiFiDetail]) -> Set[WiFiDetail]:
        return set(self._series) - set(details or ())

    def series(self, detail: WiFiDetail) -> Optional[Series]:
        return self._series.get(detail)

    def drawn(self) -> Set[WiFiDetail]:
        return set(self._series)

    def size(self) -> int:
        return len(self._series)

    # --- Órdenes ---

    def add_series(self, detail: WiFiDetail, point: DataPoint, is_new_series: bool) -> bool:
        if detail in self._series:
            return False
        cfg = AP_MAP.get(detail.bssid, {})
        series = Series(
            label=cfg.get("name", detail.title),
            color=cfg.get("color") or next(self._colors),
            highlighted=is_new_series,
        )
        series.append(point)
        self._series[detail] = series
        return True

    def append_to_series(self, detail: WiFiDetail, point: DataPoint, count: int, is_new_series: bool) -> None:
        series = self._series.get(detail)
        if series is None:
            return
        # ventana deslizante: count + 1 puntos visibles
        series.append(point, count + 1)
        series.highlighted = is_new_series

    def remove_series(self, keep: Iterable[WiFiDetail]) -> Set[WiFiDetail]:
        """Elimina las series que no están en `keep` y devuelve las eliminadas."""
        removed = self.difference_series(keep)
        for detail in removed:
            del self._series[detail]
        return removed

    def set_horizontal_labels_visible(self, visible: bool) -> None:
        self.horizontal_labels_visible = visible
