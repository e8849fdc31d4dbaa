from __future__ import annotations

from typing import Any, List

from pydantic import Field

from ..check import Check
from ..config import CheckSettings
from ..models import CheckResult, CheckStatus, CountryData
from ..registry import register_check

REQUIRED_FIELDS_KEY = "fields.required"


class RequiredFieldsSettings(CheckSettings):
    required_fields: List[str] = Field(
        default_factory=list,
        alias=REQUIRED_FIELDS_KEY,
        description="Item fields that must be present and non-empty.",
    )


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


@register_check
class RequiredFieldsCheck(Check):
    check_name = "RequiredFieldsCheck"
    check_title = "Items carry every configured required field"
    config_model = RequiredFieldsSettings

    def __init__(self, configuration=None):
        super().__init__(configuration)
        self.required_fields = tuple(self.config.get_list(REQUIRED_FIELDS_KEY, []))

    def evaluate(self, data: CountryData) -> CheckResult:
        if not self.required_fields:
            return CheckResult(
                check_name=self.check_name,
                check_title=self.check_title,
                country_code=data.country_code,
                status=CheckStatus.PASS,
                summary="No required fields configured.",
            )

        flagged = []
        for item in data.items:
            missing = [name for name in self.required_fields if _is_missing(item.get(name))]
            if missing:
                flagged.append({**item, "missing_fields": missing})

        if flagged:
            status = CheckStatus.FLAGGED
            summary = f"{len(flagged)} of {len(data.items)} item(s) missing required fields in {data.country_code}."
        else:
            status = CheckStatus.PASS
            summary = f"All {len(data.items)} item(s) carry the required fields."

        return CheckResult(
            check_name=self.check_name,
            check_title=self.check_title,
            country_code=data.country_code,
            status=status,
            summary=summary,
            flagged_items=flagged,
        )
