from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Iterable, Optional

from .check import Check
from .config import ChecksConfiguration
from .models import CheckResult, CheckRunReport, CheckStatus, CountryData
from .registry import registry

logger = logging.getLogger(__name__)


class ChecksRunner:
    def __init__(
        self,
        checks: Optional[Iterable[Check]] = None,
        *,
        configuration: Optional[ChecksConfiguration] = None,
    ):
        self._checks = list(checks) if checks is not None else registry.create_all(configuration)

    def run(
        self,
        datasets: Iterable[CountryData],
        *,
        check_names: Optional[set[str]] = None,
    ) -> CheckRunReport:
        datasets = list(datasets)
        results: list[CheckResult] = []
        for check in self._checks:
            if check_names is not None and check.check_name not in check_names:
                continue
            for data in datasets:
                skip_reason = self._skip_reason(check, data.country_code)
                if skip_reason:
                    logger.debug("Skipping %s for %s: %s", check.check_name, data.country_code, skip_reason)
                    results.append(
                        CheckResult(
                            check_name=check.check_name,
                            check_title=check.check_title,
                            country_code=data.country_code,
                            status=CheckStatus.SKIPPED,
                            summary=skip_reason,
                        )
                    )
                    continue
                results.append(check.evaluate(data))

        totals: dict[CheckStatus, int] = {}
        for res in results:
            totals[res.status] = totals.get(res.status, 0) + 1

        return CheckRunReport(
            run_id=str(uuid.uuid4()),
            generated_at=datetime.now(timezone.utc),
            results=results,
            totals=totals,
        )

    @staticmethod
    def _skip_reason(check: Check, country_code: str) -> str:
        if not check.enabled:
            return "Check disabled by configuration."
        if not check.valid_check_for_country(country_code):
            return f"Country {country_code!r} not admitted by country filter."
        return ""
