from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, Field


class CheckStatus(str, Enum):
    PASS = "PASS"
    FLAGGED = "FLAGGED"
    SKIPPED = "SKIPPED"


class CountryData(BaseModel):
    """A batch of items belonging to one country, as handed to each check."""

    country_code: str
    items: List[Dict[str, Any]] = Field(default_factory=list)


class CheckResult(BaseModel):
    check_name: str
    check_title: str = ""
    country_code: str

    status: CheckStatus
    summary: str = ""
    flagged_items: List[Dict[str, Any]] = Field(default_factory=list)


class CheckRunReport(BaseModel):
    run_id: str
    generated_at: datetime

    results: List[CheckResult] = Field(default_factory=list)
    totals: Dict[CheckStatus, int] = Field(default_factory=dict)

    def for_country(self, country_code: str) -> List[CheckResult]:
        return [res for res in self.results if res.country_code == country_code]
