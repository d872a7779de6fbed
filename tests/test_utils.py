"""
Tests de las utilidades de salida y log.
"""

import io

from models import WiFiDetail
from time_graph import TickResult
from utils import csv_field, format_details, write_log_line


def test_format_details_sorted():
    details = {WiFiDetail('B', 'BB'), WiFiDetail('', 'AA'), WiFiDetail('A', 'CC')}
    assert format_details(details) == 'AA, A, B'


def test_format_details_empty():
    assert format_details(set()) == '-'


def test_csv_field_doubles_quotes():
    assert csv_field('Bar "Pepe"') == '"Bar ""Pepe"""'


def test_csv_field_strips_control_characters():
    assert csv_field('Casa\nWiFi\r\t1') == '"Casa WiFi  1"'


def test_write_log_line_keeps_one_row():
    log_file = io.StringIO()
    result = TickResult(
        tick=3,
        scan_count=4,
        created={WiFiDetail('Bar "Pepe"\n', 'AA')},
        removed={WiFiDetail('B', 'BB')},
    )

    write_log_line(log_file, result)

    lines = log_file.getvalue().splitlines()
    assert lines == ['3,4,1,0,0,1,"Bar ""Pepe"" ","B"']
