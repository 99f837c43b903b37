"""Where: src/turncue/platform/display/scale.py
What: Pixel scale factor providers for the running display.
Why: Keep per-OS scale lookups behind one injectable capability.
Assumptions: - A missing or unreadable platform source means a 1x display.
"""

from __future__ import annotations

import ctypes
import math
import os
import subprocess
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final, Protocol, runtime_checkable

from turncue.platform.logging import logger

_FREEDESKTOP_SCALE_VARS: Final[tuple[str, ...]] = ("GDK_SCALE", "QT_SCALE_FACTOR")
_SYSTEM_PROFILER_TIMEOUT: Final[float] = 5.0


@runtime_checkable
class DisplayScaleProvider(Protocol):
    """Source of the display's pixel scale factor."""

    def scale_factor(self) -> float:
        """Return the device pixel scale factor (1.0 for a standard display)."""
        ...


@dataclass(frozen=True, slots=True)
class FixedScaleProvider:
    """Provider returning a configured factor."""

    scale: float = 1.0

    def scale_factor(self) -> float:
        return self.scale


class WindowsScaleProvider:
    """Query the primary monitor scale through ``shcore``."""

    def scale_factor(self) -> float:
        try:
            windll = getattr(ctypes, "windll")
            percent = int(windll.shcore.GetScaleFactorForDevice(0))
        except (AttributeError, OSError) as exc:
            logger.debug("Windows scale query unavailable: %s", exc)
            return 1.0
        return percent / 100 if percent > 0 else 1.0


class MacScaleProvider:
    """Detect Retina panels from ``system_profiler`` output."""

    def scale_factor(self) -> float:
        try:
            completed = subprocess.run(
                ["system_profiler", "SPDisplaysDataType"],
                capture_output=True,
                text=True,
                check=True,
                timeout=_SYSTEM_PROFILER_TIMEOUT,
            )
        except (OSError, subprocess.SubprocessError) as exc:
            logger.debug("system_profiler unavailable: %s", exc)
            return 1.0
        return 2.0 if "Retina" in completed.stdout else 1.0


@dataclass(slots=True)
class FreedesktopScaleProvider:
    """Read toolkit scale variables exported by X11/Wayland sessions."""

    env: Mapping[str, str] | None = None

    def scale_factor(self) -> float:
        mapping = self.env if self.env is not None else os.environ
        for name in _FREEDESKTOP_SCALE_VARS:
            value = _parse_positive_float(mapping.get(name))
            if value is not None:
                return value
        return 1.0


def _parse_positive_float(raw: str | None) -> float | None:
    if raw is None:
        return None
    try:
        value = float(raw.strip())
    except ValueError:
        return None
    return value if math.isfinite(value) and value > 0 else None


def platform_scale_provider(platform: str | None = None) -> DisplayScaleProvider:
    """Select the provider matching ``platform`` (defaults to ``sys.platform``)."""

    name = platform if platform is not None else sys.platform
    if name.startswith("win"):
        return WindowsScaleProvider()
    if name == "darwin":
        return MacScaleProvider()
    return FreedesktopScaleProvider()


def resolve_scale_provider(
    explicit: float | None = None,
    env: Mapping[str, str] | None = None,
) -> DisplayScaleProvider:
    """Resolve the provider to use at startup.

    Precedence: ``explicit`` > ``TURNCUE_DISPLAY_SCALE`` > config
    ``display_scale`` > platform detection.
    """
    from turncue.config.settings import DISPLAY_SCALE_ENV, DISPLAY_SCALE_OVERRIDE

    if explicit is not None and explicit > 0:
        return FixedScaleProvider(float(explicit))

    mapping = env if env is not None else os.environ
    from_env = _parse_positive_float(mapping.get(DISPLAY_SCALE_ENV))
    if from_env is not None:
        return FixedScaleProvider(from_env)

    if DISPLAY_SCALE_OVERRIDE is not None:
        return FixedScaleProvider(float(DISPLAY_SCALE_OVERRIDE))

    return platform_scale_provider()


_provider: DisplayScaleProvider | None = None


def configure_scale_provider(provider: DisplayScaleProvider | None) -> None:
    """Install the process-wide provider; None re-enables lazy resolution."""

    global _provider
    _provider = provider


def current_scale_provider() -> DisplayScaleProvider:
    """Return the process-wide provider, resolving it on first use."""

    global _provider
    if _provider is None:
        _provider = resolve_scale_provider()
    return _provider


def screen_scale(provider: DisplayScaleProvider | None = None) -> int:
    """Integer scale used in image file names; truncates, never below 1."""

    source = provider if provider is not None else current_scale_provider()
    factor = source.scale_factor()
    if not math.isfinite(factor):
        return 1
    return max(1, int(factor))


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
