# utils.py
from typing import Iterable, Optional
from models import WiFiDetail
from time_graph import TickResult


def format_stat(value: Optional[float], fmt: str, unit: str, color: str, width: int) -> str:
    """
    - value: el valor numérico, o None.
    - fmt: formato estilo '{:.2f}' antes de la unidad.
    - unit: sufijo (p.ej. ' ms', ' dBm', '%').
    - color: nombre de color Rich.
    - width: ancho fijo de caracteres del texto visible.
    """
    raw = "N/A" if value is None else fmt.format(value) + unit
    padded = raw.ljust(width)
    return f"[{color}]{padded}[/{color}]"


def format_details(details: Iterable[WiFiDetail]) -> str:
    """Lista ordenada de SSIDs separada por comas, o '-' si no hay ninguno."""
    names = [d.ssid or d.bssid for d in sorted(details)]
    return ", ".join(names) if names else "-"


def csv_field(text: str) -> str:
    """Campo CSV entre comillas: sin saltos de línea y con las comillas dobladas."""
    text = "".join(" " if not ch.isprintable() else ch for ch in text)
    return '"' + text.replace('"', '""') + '"'


def build_tick_output(result: TickResult, series_count: int) -> str:
    """
    Construye una línea de estado a partir de un TickResult, con los contadores alineados.
    """
    # ancho fijo para cada contador
    W = 6

    base = (
        f"[cyan]x={result.tick:<5}[/cyan] "
        f"Escaneos: [magenta]{result.scan_count:<5}[/magenta] "
        f"Series: {format_stat(series_count, '{:d}', '', 'level', W)}"
        f"Nuevas: {format_stat(len(result.created), '{:d}', '', 'new', W)}"
        f"Gracia: {format_stat(len(result.vanishing), '{:d}', '', 'vanish', W)}"
        f"Retiradas: {format_stat(len(result.removed), '{:d}', '', 'removed', W)}"
    )

    return base


def write_log_line(log_file, result: TickResult) -> None:
    """
    Escribe una línea de datos en el archivo de log CSV a partir de un TickResult.
    """
    line = (
        f"{result.tick},{result.scan_count},"
        f"{len(result.created)},{len(result.updated)},"
        f"{len(result.vanishing)},{len(result.removed)},"
        f"{csv_field(format_details(result.created))},{csv_field(format_details(result.removed))}\n"
    )
    log_file.write(line)
    log_file.flush()
