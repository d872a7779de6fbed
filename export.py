# export.py
"""
Exportación y resumen de las series de la gráfica.
"""

import os
from typing import Dict, Optional

import pandas as pd
from rich.markup import escape
from rich.table import Table

from chart import SeriesChart
from theme import console


COLUMNS = ['SSID', 'BSSID', 'Etiqueta', 'X', 'Nivel(dBm)']


def series_dataframe(chart: SeriesChart) -> pd.DataFrame:
    """Una fila por punto dibujado, ordenadas por identidad y X."""
    rows = []
    for detail in sorted(chart.drawn()):
        series = chart.series(detail)
        rows.extend({
            'SSID': detail.ssid,
            'BSSID': detail.bssid,
            'Etiqueta': series.label,
            'X': point.x,
            'Nivel(dBm)': point.y,
        } for point in series.points)
    return pd.DataFrame(rows, columns=COLUMNS)


def save_series_csv(chart: SeriesChart, filename: str, metadata: Optional[Dict[str, str]] = None) -> bool:
    """Guarda las series en un CSV con una cabecera de metadatos."""
    df = series_dataframe(chart)
    if df.empty:
        console.print("[warn]No hay series para guardar en CSV.[/warn]")
        return False

    directory = os.path.dirname(filename)
    if directory:
        os.makedirs(directory, exist_ok=True)

    try:
        with open(filename, 'w', newline='', encoding='utf-8') as f:
            f.write("#METADATA_START\n")
            for key, val in (metadata or {}).items():
                f.write(f"#{key},{val}\n")
            f.write("#METADATA_END\n")
            df.to_csv(f, index=False)
    except OSError as e:
        console.print(f"[error]Error guardando CSV: {e}[/]")
        return False

    console.print(f"[success]CSV guardado en:[/] [filename]{os.path.abspath(filename)}[/filename]")
    return True


def print_summary(chart: SeriesChart) -> None:
    """Muestra un resumen por serie: puntos, último nivel y media."""
    df = series_dataframe(chart)
    if df.empty:
        console.print("[invalid]No hay series que resumir.[/]")
        return

    table = Table(title="Resumen de la sesión")
    table.add_column("Serie", style="bold")
    table.add_column("BSSID")
    table.add_column("Puntos", justify="right")
    table.add_column("Último (dBm)", justify="right")
    table.add_column("Media (dBm)", justify="right")

    for (ssid, bssid, label), group in df.groupby(['SSID', 'BSSID', 'Etiqueta'], sort=True):
        levels = group['Nivel(dBm)']
        table.add_row(
            escape(label),
            escape(bssid),
            str(len(group)),
            f"{levels.iloc[-1]:.0f}",
            f"[level_mean]{levels.mean():.1f}[/]",
        )

    console.print(table)
