"""Theme colours injected into the scene builders."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    name: str
    text_primary: str
    text_muted: str
    bg_primary: str
    bg_secondary: str
    bg_tertiary: str


LIGHT_THEME = Theme(
    name="light",
    text_primary="#111827",
    text_muted="#6b7280",
    bg_primary="#f9fafb",
    bg_secondary="#ffffff",
    bg_tertiary="#f3f4f6",
)

DARK_THEME = Theme(
    name="dark",
    text_primary="#f3f4f6",
    text_muted="#9ca3af",
    bg_primary="#111827",
    bg_secondary="#1f2937",
    bg_tertiary="#374151",
)

THEMES = {t.name: t for t in (LIGHT_THEME, DARK_THEME)}


def get_theme(name: str) -> Theme:
    """Look up a theme by name, falling back to the light theme."""
    return THEMES.get((name or "").lower(), LIGHT_THEME)
