"""Runtime settings read from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

ENV_PREFIX = "INVOICEDOC_"


@dataclass(frozen=True)
class RenderSettings:
    """Settings shared by the renderer and the command line tools."""

    default_currency: str = "USD"
    fallback_due_label: str = "Upon receipt"
    default_company_name: str = "Your Company"
    log_dir: Path = Path("work") / "logs"


def _env(environ: Mapping[str, str], name: str) -> str | None:
    value = environ.get(ENV_PREFIX + name, "").strip()
    return value or None


def load_settings(environ: Mapping[str, str] | None = None) -> RenderSettings:
    """Build :class:`RenderSettings` from ``environ`` (defaults to ``os.environ``).

    Recognised variables: ``INVOICEDOC_DEFAULT_CURRENCY``,
    ``INVOICEDOC_FALLBACK_DUE_LABEL``, ``INVOICEDOC_DEFAULT_COMPANY`` and
    ``INVOICEDOC_LOG_DIR``. Unset or blank variables keep the default.
    """

    env = os.environ if environ is None else environ
    defaults = RenderSettings()

    currency = _env(env, "DEFAULT_CURRENCY")
    log_dir = _env(env, "LOG_DIR")
    return RenderSettings(
        default_currency=currency.upper() if currency else defaults.default_currency,
        fallback_due_label=_env(env, "FALLBACK_DUE_LABEL") or defaults.fallback_due_label,
        default_company_name=_env(env, "DEFAULT_COMPANY") or defaults.default_company_name,
        log_dir=Path(log_dir) if log_dir else defaults.log_dir,
    )


__all__ = ["ENV_PREFIX", "RenderSettings", "load_settings"]
