from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Dict, List

from .errors import MissingCapability
from .types import CalendarSystem
from ..engines.interfaces import CalendarProvider
from ..engines.specs import spec_for

logger = logging.getLogger(__name__)

@dataclass
class ProviderRegistry:
    """Ordered providers. The first one that supports a calendar serves it."""
    _providers: List[CalendarProvider] = field(default_factory=list)

    def get(self, name: str) -> CalendarProvider:
        for p in self._providers:
            if p.name == name:
                return p
        raise KeyError(f"Unknown provider '{name}'. Available: {self.list()}")

    def list(self) -> List[str]:
        return [p.name for p in self._providers]

    def register(self, provider: CalendarProvider, *, overwrite: bool = False, first: bool = False) -> None:
        names = self.list()
        if provider.name in names:
            if not overwrite:
                raise KeyError(f"Provider '{provider.name}' already exists. Use overwrite=True to replace.")
            del self._providers[names.index(provider.name)]
        if first:
            self._providers.insert(0, provider)
        else:
            self._providers.append(provider)

    def for_calendar(self, system: CalendarSystem) -> CalendarProvider:
        for p in self._providers:
            if p.supports(system):
                logger.debug("calendar %s served by provider %s", system.value, p.name)
                return p
        if spec_for(system).requires_icu:
            raise MissingCapability(
                f"Calendar '{system.value}' requires ICU. Install: pip install \"multical[icu]\""
            )
        raise MissingCapability(f"No provider available for calendar '{system.value}' (have: {self.list()})")

    def coverage(self) -> Dict[CalendarSystem, str]:
        """Calendar -> name of the provider that would serve it (unservable calendars omitted)."""
        out: Dict[CalendarSystem, str] = {}
        for system in CalendarSystem:
            for p in self._providers:
                if p.supports(system):
                    out[system] = p.name
                    break
        return out
