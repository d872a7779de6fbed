# config.py
"""
Módulo de configuración.

Almacena las constantes de la gráfica temporal y configuraciones globales
para la aplicación, como el mapa de puntos de acceso conocidos.
"""

from typing import Dict, List


# Suelo de la gráfica (dBm)
MIN_Y = -100
# Desplazamiento sobre el suelo para el último punto de una serie que desaparece
MIN_Y_OFFSET = 1

# Tope del contador de escaneos
MAX_SCAN_COUNT = 400
# Ticks de gracia antes de retirar una serie que ya no se ve
MAX_NOT_SEEN_COUNT = 20

DEFAULT_INTERVAL = 1.0

AP_MAP: Dict[str, Dict[str, str]] = {
    "30:DE:4B:D2:69:7B": {"name": "Nodo 1", "color": "cyan"},
    "30:DE:4B:D2:61:47": {"name": "Nodo 2", "color": "lime"},
    "30:DE:4B:D2:63:67": {"name": "Nodo 3", "color": "fuchsia"},
}

# Paleta para series de APs desconocidos
SERIES_COLORS: List[str] = [
    "gold",
    "deepskyblue",
    "deeppink",
    "blueviolet",
    "orange",
    "springgreen",
    "tomato",
    "khaki",
]
