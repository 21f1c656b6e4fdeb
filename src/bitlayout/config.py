from __future__ import annotations

import os
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional

BACKEND_NAMES = ("gate", "index")
DEFAULT_BACKEND = "gate"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


@dataclass
class Settings:
    backend: str = DEFAULT_BACKEND
    custom_message: bool = True
    report_dir: Optional[Path] = None   # When set, `check` writes its JSON report here

    def __post_init__(self) -> None:
        if self.backend not in BACKEND_NAMES:
            raise ValueError(
                f"Unknown validation backend: {self.backend!r} (expected one of {', '.join(BACKEND_NAMES)})"
            )

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from BITLAYOUT_* environment variables."""
        backend = os.getenv("BITLAYOUT_BACKEND", DEFAULT_BACKEND).strip().lower()
        custom_message = _parse_flag(os.getenv("BITLAYOUT_CUSTOM_MESSAGE"), default=True)
        raw_report_dir = os.getenv("BITLAYOUT_REPORT_DIR", "").strip()
        report_dir = Path(raw_report_dir) if raw_report_dir else None
        return cls(backend=backend, custom_message=custom_message, report_dir=report_dir)


def _parse_flag(raw: Optional[str], default: bool) -> bool:
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ValueError(f"Invalid boolean flag value: {raw!r}")


_active: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the scoped override if one is active, otherwise settings from the environment."""
    if _active is not None:
        return _active
    return Settings.from_env()


@contextmanager
def use_settings(settings: Settings) -> Iterator[Settings]:
    global _active
    previous = _active
    _active = settings
    try:
        yield settings
    finally:
        _active = previous
