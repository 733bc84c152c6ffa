from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict

DEFAULT_PATTERN = "EEEE dd 'de' MMMM 'de' yyyy"
DEFAULT_LOCALE = "es_ES"


@dataclass(frozen=True)
class ReportSettings:
    pattern: str = DEFAULT_PATTERN
    locale: str = DEFAULT_LOCALE

    def override(self, *, pattern: str | None = None, locale: str | None = None) -> ReportSettings:
        return replace(
            self,
            pattern=pattern if pattern else self.pattern,
            locale=locale if locale else self.locale,
        )


def _project_root() -> Path:
    # roster/config.py -> project root is parents[1]
    return Path(__file__).resolve().parents[1]


def load_settings(project_root: Path | str | None = None) -> ReportSettings:
    """Load date formatting settings from configs/report.toml if present, else defaults.

    Expected keys (top-level or under [format]):
      - pattern: CLDR date pattern, e.g. "EEEE dd 'de' MMMM 'de' yyyy"
      - locale: locale identifier, e.g. "es_ES"
    """
    logger = logging.getLogger(__name__)
    base = ReportSettings()
    root: Path = _project_root() if project_root is None else Path(project_root)
    cfg = root / "configs" / "report.toml"
    if not cfg.exists():
        return base
    try:
        data: Dict[str, Any] = tomllib.loads(cfg.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        logger.warning(f"Ignoring unreadable {cfg}: {exc}")
        return base
    f = data.get("format") if isinstance(data.get("format"), dict) else data

    def get_str(name: str, default: str) -> str:
        v = f.get(name, default)
        if not isinstance(v, str) or not v.strip():
            logger.warning(f"Ignoring {name}={v!r} in {cfg}")
            return default
        return v

    return ReportSettings(
        pattern=get_str("pattern", base.pattern),
        locale=get_str("locale", base.locale),
    )
