from __future__ import annotations
from typing import Optional

from multical.core.config import EngineConfig
from multical.core.engine import ProviderRegistry
from multical.engines.arithmetic import ArithmeticProvider
from multical.engines.chinese import LeapMonthCache
from multical.engines.converter import DateConverter
from multical.engines.icu_provider import build_icu_provider

def build_registry(config: EngineConfig) -> ProviderRegistry:
    arithmetic = ArithmeticProvider(hijri_variant=config.hijri_variant)
    icu = build_icu_provider(locale=config.icu_locale, hijri_variant=config.hijri_variant)
    icu_list = [icu] if icu is not None else []

    if config.prefer == "icu":
        return ProviderRegistry(icu_list)
    if config.prefer == "arithmetic":
        return ProviderRegistry([arithmetic] + icu_list)
    return ProviderRegistry(icu_list + [arithmetic])

def build_engine(config: Optional[EngineConfig] = None) -> DateConverter:
    if config is None:
        config = EngineConfig.from_env()
    return DateConverter(
        build_registry(config),
        leap_cache=LeapMonthCache(config.leap_cache_size),
        config=config,
    )
