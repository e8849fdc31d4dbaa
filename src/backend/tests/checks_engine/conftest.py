import os
import sys


# Ensure `src/backend` is on sys.path so imports like `import common...` work.
BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

import pytest

from common.checks_engine.check import Check
from common.checks_engine.config import ChecksConfiguration
from common.checks_engine.models import CheckResult, CheckStatus, CountryData


class AlwaysFlagCheck(Check):
    """Flags every item it is given, so admission is the only thing that decides the outcome."""

    check_name = "AlwaysFlagCheck"
    check_title = "Flags every item"

    def evaluate(self, data: CountryData) -> CheckResult:
        return CheckResult(
            check_name=self.check_name,
            check_title=self.check_title,
            country_code=data.country_code,
            status=CheckStatus.FLAGGED if data.items else CheckStatus.PASS,
            summary=f"{len(data.items)} item(s) flagged.",
            flagged_items=list(data.items),
        )


@pytest.fixture
def make_config():
    def _make(check_cfg: dict | None = None, *, check_name: str = "AlwaysFlagCheck") -> ChecksConfiguration:
        if check_cfg is None:
            return ChecksConfiguration()
        return ChecksConfiguration.from_mapping({check_name: check_cfg})

    return _make


@pytest.fixture
def make_check(make_config):
    def _make(check_cfg: dict | None = None) -> AlwaysFlagCheck:
        return AlwaysFlagCheck(make_config(check_cfg))

    return _make


@pytest.fixture
def make_data():
    def _make(country_code: str, *, items=None) -> CountryData:
        return CountryData(country_code=country_code, items=items if items is not None else [{"id": 1}])

    return _make


@pytest.fixture
def check_cls():
    return AlwaysFlagCheck
