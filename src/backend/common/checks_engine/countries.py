"""Country admission for checks.

A check may be limited to a set of countries (`countries.whitelist`, or the
older `countries` key) or excluded from some (`countries.blacklist`). A
non-empty whitelist decides on its own; the blacklist only applies when no
whitelist is in effect. Codes are compared exactly as configured.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet

from .config import ConfigurationLookup


WHITELIST_KEY = "countries.whitelist"
LEGACY_WHITELIST_KEY = "countries"
BLACKLIST_KEY = "countries.blacklist"


@dataclass(frozen=True)
class CountryFilter:
    whitelist: FrozenSet[str] = frozenset()
    blacklist: FrozenSet[str] = frozenset()

    @classmethod
    def from_config(cls, config: ConfigurationLookup) -> "CountryFilter":
        whitelist = config.get_list(WHITELIST_KEY, None)
        if whitelist is None:
            whitelist = config.get_list(LEGACY_WHITELIST_KEY, [])
        if whitelist:
            # Blacklist is never consulted while a whitelist is in effect.
            return cls(whitelist=frozenset(whitelist))
        blacklist = config.get_list(BLACKLIST_KEY, [])
        return cls(blacklist=frozenset(blacklist))

    @property
    def is_unrestricted(self) -> bool:
        return not self.whitelist and not self.blacklist

    def is_admitted(self, country_code: str) -> bool:
        if self.whitelist:
            return country_code in self.whitelist
        return country_code not in self.blacklist


def is_admitted(config: ConfigurationLookup, country_code: str) -> bool:
    return CountryFilter.from_config(config).is_admitted(country_code)
