"""Where: src/turncue/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to feature layers without file I/O.
Trade-offs: - Invalid values fall back to detection rather than failing startup.
"""

from __future__ import annotations

from typing import Final

from turncue.config.config import config as app_config

# Display scale ----------------------------------------------------------------

# Environment variable that pins the display scale for the current process.
DISPLAY_SCALE_ENV: Final[str] = "TURNCUE_DISPLAY_SCALE"

_display_scale = getattr(app_config, "display_scale", None)
DISPLAY_SCALE_OVERRIDE: int | None = (
    _display_scale
    if isinstance(_display_scale, int)
    and not isinstance(_display_scale, bool)
    and _display_scale > 0
    else None
)


__all__ = [
    "DISPLAY_SCALE_ENV",
    "DISPLAY_SCALE_OVERRIDE",
]
