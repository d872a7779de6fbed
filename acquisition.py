# -*- coding: utf-8 -*-
"""
Reproducción de escaneos grabados.

Sustituye a la capa de adquisición: cada línea del fichero (JSON Lines) es
un escaneo completo, una lista de objetos con 'ssid', 'bssid' y 'level'
(y opcionalmente 'frequency' y 'capabilities'). Una línea vacía es un
escaneo sin redes.
"""

import json
from typing import Any, Iterator, Set

from models import WiFiDetail


class ScanFormatError(ValueError):
    """Línea de escaneo mal formada."""

    def __init__(self, line_number: int, reason: str):
        super().__init__(f"línea {line_number}: {reason}")
        self.line_number = line_number
        self.reason = reason


def parse_detail(item: Any) -> WiFiDetail:
    if not isinstance(item, dict):
        raise ValueError("cada red debe ser un objeto JSON")
    try:
        ssid = item["ssid"]
        bssid = item["bssid"]
        level = item["level"]
    except KeyError as e:
        raise ValueError(f"falta el campo {e}") from e

    if not isinstance(ssid, str) or not isinstance(bssid, str) or not bssid:
        raise ValueError("'ssid' y 'bssid' deben ser texto")
    # bool es subclase de int
    if isinstance(level, bool) or not isinstance(level, int):
        raise ValueError(f"nivel no entero para {bssid}: {level!r}")

    frequency = item.get("frequency")
    if frequency is not None and not isinstance(frequency, int):
        raise ValueError(f"frecuencia no entera para {bssid}: {frequency!r}")

    capabilities = item.get("capabilities")
    if capabilities is not None and not isinstance(capabilities, str):
        raise ValueError(f"capacidades no textuales para {bssid}: {capabilities!r}")

    return WiFiDetail(
        ssid=ssid,
        bssid=bssid.upper(),
        level=level,
        frequency=frequency,
        capabilities=capabilities or "",
    )


def parse_snapshot(line: str, line_number: int = 1) -> Set[WiFiDetail]:
    """Convierte una línea JSON en el conjunto de detalles del escaneo."""
    line = line.strip()
    if not line:
        return set()
    try:
        items = json.loads(line)
    except json.JSONDecodeError as e:
        raise ScanFormatError(line_number, f"JSON inválido ({e.msg})") from e
    if not isinstance(items, list):
        raise ScanFormatError(line_number, "se esperaba una lista de redes")

    details: Set[WiFiDetail] = set()
    for item in items:
        try:
            details.add(parse_detail(item))
        except ValueError as e:
            raise ScanFormatError(line_number, str(e)) from e
    return details


class ScanReplay:
    """Itera los escaneos de un fichero JSON Lines, uno por tick."""

    def __init__(self, path: str):
        self.path = path

    def __iter__(self) -> Iterator[Set[WiFiDetail]]:
        # se decodifica línea a línea para poder señalar la línea con bytes inválidos
        with open(self.path, 'rb') as f:
            for number, raw in enumerate(f, start=1):
                try:
                    line = raw.decode('utf-8')
                except UnicodeDecodeError as e:
                    raise ScanFormatError(number, f"texto no UTF-8 ({e.reason})") from e
                yield parse_snapshot(line, number)
