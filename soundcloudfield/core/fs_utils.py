import json
from pathlib import Path
from typing import Any, Callable, Optional


def read_json(
    path: str | Path,
    default: Any = None,
    *,
    on_error: Optional[Callable[[Exception], None]] = None,
) -> Any:
    """
    Read a JSON file safely.

    - returns `default` if the file does not exist
    - returns `default` if JSON is invalid (optionally calling on_error)

    Used for the formatter settings file, which is owned by the CMS and may be
    missing on a fresh install.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        return default
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        if on_error:
            on_error(e)
        return default
