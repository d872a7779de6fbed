import pytest


@pytest.fixture
def scans_file(tmp_path):
    """Escribe un fichero JSON Lines y devuelve su ruta."""
    def _write(*lines: str) -> str:
        path = tmp_path / "scans.jsonl"
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return str(path)
    return _write
