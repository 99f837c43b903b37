"""Display scale facade exports."""

from __future__ import annotations

from .scale import (
    DisplayScaleProvider,
    FixedScaleProvider,
    FreedesktopScaleProvider,
    MacScaleProvider,
    WindowsScaleProvider,
    configure_scale_provider,
    current_scale_provider,
    platform_scale_provider,
    resolve_scale_provider,
    screen_scale,
)

__all__ = [
    "DisplayScaleProvider",
    "FixedScaleProvider",
    "FreedesktopScaleProvider",
    "MacScaleProvider",
    "WindowsScaleProvider",
    "configure_scale_provider",
    "current_scale_provider",
    "platform_scale_provider",
    "resolve_scale_provider",
    "screen_scale",
]
