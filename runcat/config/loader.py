from __future__ import annotations

from .defaults import from_legacy_config
from .schema import Settings


def load_settings(
    *,
    autoplay: bool | None = None,
    seed: int | None = None,
    theme: str | None = None,
    ensure_dirs: bool = True,
) -> Settings:
    """Load runtime settings, defaulting to values from the legacy config module."""
    settings = from_legacy_config()
    if autoplay is not None:
        settings = settings.with_overrides(autoplay=autoplay)
    if seed is not None:
        settings = settings.with_overrides(seed=seed)
    if theme is not None:
        settings = settings.with_overrides(theme=theme)
    if ensure_dirs:
        settings.paths.ensure_dirs()
    return settings
