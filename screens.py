"""
Loading of the text screens shown outside of play
"""
from pathlib import Path

SCREENS_DIR = Path(__file__).resolve().parent / "screens"
START_SCREEN = "start.txt"
SETTINGS_SCREEN = "settings.txt"


class ScreenNotFoundError(FileNotFoundError):
    def __init__(self, path):
        super().__init__(f"cannot open screen file {path}")
        self.path = path


def load_screen(name, directory=SCREENS_DIR):
    path = Path(directory) / name
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ScreenNotFoundError(path) from exc


def load_screens(directory=SCREENS_DIR):
    """Both screens keyed 'start' and 'settings'; fails on the first missing file"""
    return {
        "start": load_screen(START_SCREEN, directory),
        "settings": load_screen(SETTINGS_SCREEN, directory),
    }
