"""
Tests de la exportación de series.
"""

import pandas as pd

from chart import SeriesChart
from export import COLUMNS, print_summary, save_series_csv, series_dataframe
from models import DataPoint, WiFiDetail


def make_chart() -> SeriesChart:
    chart = SeriesChart()
    b = WiFiDetail('B', 'BB', level=-60)
    a = WiFiDetail('A', 'AA', level=-40)
    chart.add_series(b, DataPoint(0, -60), True)
    chart.add_series(a, DataPoint(0, -40), True)
    chart.append_to_series(a, DataPoint(1, -50), 1, False)
    return chart


def test_series_dataframe():
    df = series_dataframe(make_chart())
    assert list(df.columns) == COLUMNS
    assert list(df['SSID']) == ['A', 'A', 'B']
    assert list(df['X']) == [0, 1, 0]
    assert list(df['Nivel(dBm)']) == [-40, -50, -60]


def test_series_dataframe_empty_chart():
    df = series_dataframe(SeriesChart())
    assert df.empty
    assert list(df.columns) == COLUMNS


def test_save_series_csv(tmp_path):
    filename = tmp_path / 'out' / 'series.csv'

    assert save_series_csv(make_chart(), str(filename), {'Ticks': '2'})

    lines = filename.read_text(encoding='utf-8').splitlines()
    assert lines[:3] == ['#METADATA_START', '#Ticks,2', '#METADATA_END']
    df = pd.read_csv(filename, comment='#')
    assert len(df) == 3
    assert list(df.columns) == COLUMNS


def test_save_empty_chart_writes_nothing(tmp_path):
    filename = tmp_path / 'series.csv'
    assert not save_series_csv(SeriesChart(), str(filename))
    assert not filename.exists()


def test_print_summary(capsys):
    print_summary(make_chart())
    out = capsys.readouterr().out
    assert 'Resumen de la sesión' in out
    assert 'AA' in out and 'BB' in out
