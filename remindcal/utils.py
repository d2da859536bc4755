import yaml
from pathlib import Path
from typing import Iterator, List, Optional, Tuple
from .models import Settings

CONFIG_DIR = Path("config")
DEFAULT_SETTINGS = CONFIG_DIR / "settings.yaml"

def load_settings(path: Optional[Path] = None) -> Settings:
    """Loads settings from YAML file, falling back to defaults when no file is given or found."""
    if path is None:
        if not DEFAULT_SETTINGS.exists():
            return Settings()
        path = DEFAULT_SETTINGS
    elif not path.exists():
        raise FileNotFoundError(f"Settings file not found at {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    return Settings(**(data or {}))

def find_record_files(directory: Path, extension: str = ".rce") -> List[Path]:
    """Returns the record files directly inside `directory`, sorted by name."""
    if not directory.is_dir():
        raise FileNotFoundError(f"could not read data folder: {directory}")
    suffix = "." + extension.lstrip(".")
    return sorted(p for p in directory.iterdir() if p.is_file() and p.suffix == suffix)

def strip_comment(line: str) -> str:
    # everything from the first '#' is a comment
    return line.split("#", 1)[0]

def read_record_lines(path: Path) -> Iterator[Tuple[int, str]]:
    """Yields (line number, text) for every line that still holds a record once comments are removed."""
    with open(path, "r", encoding="utf-8") as f:
        for line_no, line in enumerate(f, start=1):
            text = strip_comment(line.rstrip("\n"))
            if not text.strip():
                continue
            yield line_no, text
