"""
multical.core.config
--------------------
Engine configuration. Pure data: the bootstrap turns it into providers and a
leap-month cache.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Literal, Mapping, Optional

ProviderPreference = Literal["auto", "icu", "arithmetic"]

PROVIDER_PREFERENCES = ("auto", "icu", "arithmetic")
HIJRI_VARIANTS = ("islamic-civil", "islamic", "islamic-umalqura", "islamic-tbla")

ENV_PREFIX = "MULTICAL_"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineConfig:
    """
    prefer:
      - "auto":       ICU first when PyICU is importable, arithmetic otherwise.
      - "arithmetic": arithmetic first; ICU only for calendars that need it.
      - "icu":        ICU only.
    hijri_variant: the ICU Islamic calendar used for "hijri". The arithmetic
      provider implements "islamic-civil" only.
    """
    prefer: ProviderPreference = "auto"
    hijri_variant: str = "islamic-civil"
    icu_locale: str = "en_US"
    leap_cache_size: int = 4096

    def __post_init__(self) -> None:
        if self.prefer not in PROVIDER_PREFERENCES:
            raise ValueError(f"prefer must be one of {PROVIDER_PREFERENCES}, got {self.prefer!r}")
        if self.hijri_variant not in HIJRI_VARIANTS:
            raise ValueError(f"hijri_variant must be one of {HIJRI_VARIANTS}, got {self.hijri_variant!r}")
        if not self.icu_locale:
            raise ValueError("icu_locale must not be empty")
        if self.leap_cache_size <= 0:
            raise ValueError("leap_cache_size must be positive")

    def tweak(self, **kwargs) -> "EngineConfig":
        return replace(self, **kwargs)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EngineConfig":
        """
        Read MULTICAL_PROVIDER, MULTICAL_HIJRI_VARIANT, MULTICAL_ICU_LOCALE, MULTICAL_LEAP_CACHE_SIZE.
        The default engine is built from this at import time, so an invalid value is
        logged and replaced by its default instead of raising.
        """
        env = os.environ if environ is None else environ
        base = cls()
        values = {
            "prefer": env.get(ENV_PREFIX + "PROVIDER", base.prefer).strip().lower(),
            "hijri_variant": env.get(ENV_PREFIX + "HIJRI_VARIANT", base.hijri_variant).strip().lower(),
            "icu_locale": env.get(ENV_PREFIX + "ICU_LOCALE", base.icu_locale).strip(),
        }

        size = env.get(ENV_PREFIX + "LEAP_CACHE_SIZE", "").strip()
        try:
            values["leap_cache_size"] = int(size) if size else base.leap_cache_size
        except ValueError:
            logger.warning("%sLEAP_CACHE_SIZE=%r is not an integer; using %d",
                           ENV_PREFIX, size, base.leap_cache_size)
            values["leap_cache_size"] = base.leap_cache_size

        checked = {}
        for name, value in values.items():
            try:
                base.tweak(**{name: value})
            except ValueError as e:
                logger.warning("ignoring environment value for %s: %s", name, e)
                value = getattr(base, name)
            checked[name] = value
        return cls(**checked)
