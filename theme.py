# theme.py
from dataclasses import dataclass
from rich.theme import Theme
from rich.console import Console

@dataclass(frozen=True)
class AppTheme:
    # Colores semánticos
    info: str = "cyan"
    warn: str = "yellow"
    error: str = "bold red"
    invalid: str = "red"
    filename: str = "blue"
    success: str = "green"

    # Estados de las series
    level: str = "green1"
    new: str = "cornflower_blue"
    vanish: str = "dark_orange3"
    removed: str = "deep_pink4"

    def rich_theme(self) -> Theme:
        return Theme({
            "info":        self.info,
            "warn":        self.warn,
            "error":       self.error,
            "invalid":     self.invalid,
            "filename":    self.filename,
            "success":     self.success,
            "level":       self.level,
            "new":         self.new,
            "vanish":      self.vanish,
            "removed":     self.removed,
            "level_mean":  f"bold underline {self.level}",
        })

APP_THEME = AppTheme()
console = Console(theme=APP_THEME.rich_theme())
