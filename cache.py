# cache.py
"""
Caché del periodo de gracia.

Guarda, por cada identidad (SSID, BSSID), si la serie está activa o
desapareciendo. Una serie que deja de verse sigue dibujándose hacia el
suelo durante `max_not_seen` ticks antes de expirar.
"""

from typing import Dict, Set

from config import MAX_NOT_SEEN_COUNT
from models import GraceEntry, SeriesState, WiFiDetail


class TimeGraphCache:
    """Estado ACTIVE/VANISHING por identidad con cuenta atrás acotada."""

    def __init__(self, max_not_seen: int = MAX_NOT_SEEN_COUNT):
        if max_not_seen < 0:
            raise ValueError("max_not_seen no puede ser negativo")
        self.max_not_seen = max_not_seen
        self._entries: Dict[WiFiDetail, GraceEntry] = {}

    def active(self) -> Set[WiFiDetail]:
        """Devuelve una copia de las identidades que están desapareciendo."""
        return {
            detail for detail, entry in self._entries.items()
            if entry.state is SeriesState.VANISHING
        }

    def add(self, detail: WiFiDetail) -> None:
        """Marca la identidad como desapareciendo y suma un tick sin verse."""
        entry = self._entries.setdefault(detail, GraceEntry())
        entry.state = SeriesState.VANISHING
        entry.not_seen += 1

    def reset(self, detail: WiFiDetail) -> None:
        """La identidad vuelve a verse: sale del periodo de gracia."""
        entry = self._entries.setdefault(detail, GraceEntry())
        entry.state = SeriesState.ACTIVE
        entry.not_seen = 0

    def clear(self) -> None:
        """Confirma el lote del tick: elimina las entradas ya expiradas."""
        expired = [
            detail for detail, entry in self._entries.items()
            if entry.state is SeriesState.VANISHING and entry.not_seen > self.max_not_seen
        ]
        for detail in expired:
            del self._entries[detail]

    def state(self, detail: WiFiDetail) -> SeriesState:
        entry = self._entries.get(detail)
        return entry.state if entry else SeriesState.ACTIVE
