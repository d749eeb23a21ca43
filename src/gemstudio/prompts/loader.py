"""Prompt template files.

Each template is a `<name>.txt` file shipped next to this module. A file
with the same name under `./prompts/` in the working directory replaces
the packaged one.
"""

from functools import lru_cache
from pathlib import Path

TEMPLATE_DIR = Path(__file__).parent
OVERRIDE_DIR = "prompts"


def template_paths(name: str) -> tuple[Path, Path]:
    """Return the override path and the packaged path for `name`, in lookup order."""
    filename = f"{name}.txt"
    return Path.cwd() / OVERRIDE_DIR / filename, TEMPLATE_DIR / filename


@lru_cache(maxsize=None)
def load_prompt(name: str) -> str:
    """Return the text of template `name` with surrounding whitespace removed.

    Raises:
        FileNotFoundError: If neither the override nor the packaged file exists
    """
    paths = template_paths(name)
    for path in paths:
        if path.is_file():
            return path.read_text(encoding="utf-8").strip()

    searched = ", ".join(str(path) for path in paths)
    raise FileNotFoundError(f"Prompt '{name}' not found (searched {searched})")


def clear_cache() -> None:
    load_prompt.cache_clear()
