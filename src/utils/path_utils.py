from pathlib import Path
from typing import Iterable


def find_repo_root(
    start: Path | None = None,
    markers: Iterable[str] = ("pyproject.toml", ".env"),
) -> Path:
    """Walk upwards from ``start`` until a folder containing one of ``markers`` is found.

    Args:
        start: Optional starting path. Defaults to the location of this file.
        markers: Filenames used to identify the repository root, in priority order.

    Returns:
        The repository root as a :class:`Path`.
    """
    p = (start or Path(__file__).resolve()).parent
    for marker in markers:
        for candidate in [p, *p.parents]:
            if (candidate / marker).exists():
                return candidate
    return p  # fallback if no marker is found
