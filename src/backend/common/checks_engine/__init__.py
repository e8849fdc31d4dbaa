"""Check execution with per-check country admission.

Checks receive data one country at a time. Each check's configuration may
restrict the countries it runs for; the runner consults that filter before
calling the check.
"""

from .check import Check
from .config import (
    CheckConfiguration,
    ChecksConfiguration,
    CheckSettings,
    ConfigurationError,
    ConfigurationLookup,
)
from .countries import CountryFilter, is_admitted
from .models import CheckResult, CheckRunReport, CheckStatus, CountryData
from .registry import CheckRegistry, register_check
from .runner import ChecksRunner

# Import built-in checks so they self-register with the global registry.
from . import checks as _builtin_checks  # noqa: F401
