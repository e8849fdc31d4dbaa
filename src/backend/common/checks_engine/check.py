from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional, Type

from pydantic import BaseModel

from .config import CheckConfiguration, ChecksConfiguration, CheckSettings
from .countries import CountryFilter
from .models import CheckResult, CountryData

logger = logging.getLogger(__name__)


class Check(ABC):
    check_name: str
    check_title: str = ""
    config_model: Type[BaseModel] = CheckSettings

    def __init__(self, configuration: Optional[ChecksConfiguration] = None):
        if not getattr(self, "check_name", None):
            raise ValueError("Check must define check_name")
        self.config: CheckConfiguration = (configuration or ChecksConfiguration()).for_check(self.check_name)
        # Resolved once; every admission query for this instance reuses it.
        self.country_filter = CountryFilter.from_config(self.config)
        self._enabled = self.config.enabled
        if logger.isEnabledFor(logging.DEBUG):
            if self.country_filter.is_unrestricted:
                logger.debug("%s runs for every country", self.check_name)
            else:
                logger.debug(
                    "%s country filter: whitelist=%s blacklist=%s",
                    self.check_name,
                    sorted(self.country_filter.whitelist),
                    sorted(self.country_filter.blacklist),
                )

    @property
    def enabled(self) -> bool:
        return self._enabled

    def valid_check_for_country(self, country_code: str) -> bool:
        return self.country_filter.is_admitted(country_code)

    @abstractmethod
    def evaluate(self, data: CountryData) -> CheckResult:  # pragma: no cover
        raise NotImplementedError
