#!/usr/bin/env python3
# main.py
"""
Script principal para reproducir escaneos Wi-Fi sobre la gráfica temporal.

Cada línea del fichero de escaneos es un tick: las series se crean, se
actualizan o entran en su periodo de gracia, y al final se muestra un
resumen y, opcionalmente, se exportan los datos a CSV.
"""

import os
import time
from datetime import datetime
from typing import Optional
import typer
from rich.markup import escape

from acquisition import ScanFormatError, ScanReplay
from config import DEFAULT_INTERVAL, MAX_NOT_SEEN_COUNT
from export import print_summary, save_series_csv
from theme import console
from time_graph import TimeGraph
from utils import build_tick_output, write_log_line

app = typer.Typer(add_completion=False)


def setup_logging(name: Optional[str], base_dir: str = "logs") -> Optional[object]:
    """Configura y abre el archivo de log si es necesario."""
    os.makedirs(base_dir, exist_ok=True)

    timestamp = datetime.now().strftime('%Y-%m-%d_%H-%M-%S')
    suffix = name or ""

    log_filename = os.path.join(base_dir, f"timegraph_{suffix}_{timestamp}.log")
    try:
        log_file = open(log_filename, 'w', encoding='utf-8')
        log_file.write("x,escaneos,nuevas,actualizadas,gracia,retiradas,ssid_nuevas,ssid_retiradas\n")
        console.print(f"Guardando log en: [filename]{log_filename}[/filename]")
        return log_file
    except OSError as e:
        console.print(f"[error]Error al abrir el archivo de log: {e}[/error]")
        return None


@app.command()
def replay(
    scans_file: str = typer.Argument(
        ...,
        help='Fichero JSON Lines con un escaneo por línea.'
    ),
    interval: float = typer.Option(
        DEFAULT_INTERVAL, '-i', '--interval',
        help='Segundos entre ticks (0 para no esperar).'
    ),
    grace: int = typer.Option(
        MAX_NOT_SEEN_COUNT, '-g', '--grace',
        help='Ticks que una serie sigue dibujada tras dejar de verse.'
    ),
    log: bool = typer.Option(
        False, '-l', '--log',
        help='Guardar cada tick en un archivo de log.'
    ),
    csv: str = typer.Option(
        None, '-c', '--csv',
        help='Ruta del CSV donde exportar las series al terminar.'
    ),
    name: str = typer.Option(
        None, '-n', '--name',
        help='Etiqueta a añadir antes del timestamp en los ficheros.'
    )
):
    """Reproduce los escaneos del fichero sobre la gráfica temporal."""
    if not os.path.isfile(scans_file):
        console.print(f"[error]No existe el fichero de escaneos: {scans_file}[/error]")
        raise typer.Exit(code=1)
    if interval < 0 or grace < 0:
        console.print("[error]El intervalo y los ticks de gracia no pueden ser negativos.[/error]")
        raise typer.Exit(code=1)

    graph = TimeGraph(max_not_seen=grace)
    start_time = datetime.now()
    log_file = setup_logging(name) if log else None

    console.print(f"\nReproduciendo [filename]'{scans_file}'[/filename] (gracia: [info]{grace}[/info] ticks)\n")

    failed = False
    try:
        for details in ScanReplay(scans_file):
            result = graph.update(details)
            console.print(build_tick_output(result, graph.chart.size()))
            if log_file:
                write_log_line(log_file, result)
            if interval:
                time.sleep(interval)

    except ScanFormatError as e:
        console.print(f"[error]Escaneo mal formado en {scans_file}, {escape(str(e))}[/error]")
        failed = True

    except OSError as e:
        console.print(f"[error]No se pudo leer el fichero de escaneos: {escape(str(e))}[/error]")
        failed = True

    except KeyboardInterrupt:
        console.print("\n\n[warn]Reproducción detenida por el usuario.[/warn]")

    finally:
        if log_file:
            log_file.close()
            console.print("[success]Log cerrado.[/success]")

    print_summary(graph.chart)

    if csv:
        save_series_csv(graph.chart, csv, {
            'Scans_File': scans_file,
            'Start_Time': start_time.strftime("%Y-%m-%d %H:%M:%S"),
            'Ticks': str(graph.data_manager.get_x_value()),
            'Grace_Ticks': str(grace),
        })

    if failed:
        raise typer.Exit(code=1)

    console.print("\n[success]Script finalizado.[/success]")


if __name__ == "__main__":
    app()
