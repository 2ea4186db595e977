"""
Screen configuration.

Controllers receive their branding and colour palette explicitly instead
of reading a process-wide theme.
"""

from dataclasses import dataclass, replace
from typing import Dict

LIGHT_THEME: Dict[str, object] = {
    "background": "#f5f5f5",
    "text": "#333",
    "border": "#ddd",
    "card": "#fff",
    "button": "#007bff",
    "accent": "#ffd700",
    "popupBackground": "#007bff",
    "placeholder": "#888",
    "link": "#007bff",
    "gradient": ["#e6f0ff", "#f5f5f5"],
    "inputBackground": "rgba(255, 255, 255, 0.9)",
}

DARK_THEME: Dict[str, object] = {
    "background": "#0d0d0d",
    "text": "#e0e0e0",
    "border": "#ff4d4d",
    "card": "rgba(40, 40, 40, 0.85)",
    "button": "#ff4d4d",
    "accent": "#ffd700",
    "popupBackground": "#ff4d4d",
    "placeholder": "#999",
    "link": "#ff6666",
    "gradient": ["#2a2a2a", "#0d0d0d"],
    "inputBackground": "rgba(50, 50, 50, 0.85)",
}


@dataclass(frozen=True)
class ScreenConfig:
    """Per-screen presentation settings."""

    brand: str = "JobSeeker Luxe"
    dark_mode: bool = False
    notice_seconds: float = 1.0
    banner: str = "New Luxe Opportunities Await!"

    @property
    def theme(self) -> Dict[str, object]:
        return DARK_THEME if self.dark_mode else LIGHT_THEME

    def with_dark_mode(self, enabled: bool) -> "ScreenConfig":
        return replace(self, dark_mode=enabled)
