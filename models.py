# models.py
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


@dataclass(frozen=True, order=True)
class WiFiDetail:
    ssid: str                                              # nombre de la red ("" si está oculta)
    bssid: str                                             # MAC del AP
    level: int = field(default=0, compare=False)           # dBm
    frequency: Optional[int] = field(default=None, compare=False)  # MHz
    capabilities: str = field(default="", compare=False)

    @property
    def title(self) -> str:
        """Nombre legible de la serie: 'SSID (BSSID)'."""
        ssid = self.ssid or "***"
        return f"{ssid} ({self.bssid})"


@dataclass(frozen=True)
class DataPoint:
    x: float
    y: float


class SeriesState(Enum):
    ACTIVE = "active"
    VANISHING = "vanishing"


@dataclass
class GraceEntry:
    state: SeriesState = SeriesState.ACTIVE
    not_seen: int = 0      # ticks seguidos sin aparecer en el escaneo
