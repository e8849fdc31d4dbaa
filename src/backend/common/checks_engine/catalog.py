"""Describe registered checks and where they will run.

`python -m common.checks_engine.catalog --config '{"RequiredFieldsCheck": {"countries": ["DOM"]}}' --country DOM --country IRN`
prints, per check, the resolved country filter and whether each requested
country is admitted.
"""

from __future__ import annotations

import argparse
import json
from typing import Any, Dict, Iterable, List, Literal, Optional

import yaml
from pydantic import BaseModel, Field

from .config import ChecksConfiguration
from .registry import CheckRegistry, registry

# Ensure built-in checks are imported/registered when describing the registry.
from . import checks as _builtin_checks  # noqa: F401


class CountryScope(BaseModel):
    mode: Literal["all", "whitelist", "blacklist"]
    countries: List[str] = Field(default_factory=list)


class CheckCatalogEntry(BaseModel):
    check_name: str
    check_title: str = ""
    enabled: bool = True
    scope: CountryScope
    admitted: Dict[str, bool] = Field(default_factory=dict)
    config_schema: Dict[str, Any] = Field(default_factory=dict)


def build_catalog(
    configuration: Optional[ChecksConfiguration] = None,
    *,
    countries: Iterable[str] = (),
    source: Optional[CheckRegistry] = None,
) -> List[CheckCatalogEntry]:
    countries = list(countries)
    entries = []
    for check in (source or registry).create_all(configuration):
        country_filter = check.country_filter
        if country_filter.whitelist:
            scope = CountryScope(mode="whitelist", countries=sorted(country_filter.whitelist))
        elif country_filter.is_unrestricted:
            scope = CountryScope(mode="all")
        else:
            scope = CountryScope(mode="blacklist", countries=sorted(country_filter.blacklist))
        entries.append(
            CheckCatalogEntry(
                check_name=check.check_name,
                check_title=check.check_title,
                enabled=check.enabled,
                scope=scope,
                admitted={code: check.valid_check_for_country(code) for code in countries},
                config_schema=check.config_model.model_json_schema(by_alias=True),
            )
        )
    return sorted(entries, key=lambda e: e.check_name)


def render(entries: List[CheckCatalogEntry], fmt: str = "yaml", *, with_schema: bool = False) -> str:
    exclude = None if with_schema else {"config_schema"}
    payload = [e.model_dump(mode="json", exclude=exclude) for e in entries]
    if fmt == "json":
        return json.dumps(payload, indent=2, sort_keys=True)
    return yaml.safe_dump(payload, sort_keys=True)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Show registered checks and the countries they run for.")
    parser.add_argument("--config", default="", help="Inline JSON checks configuration.")
    parser.add_argument(
        "--country",
        action="append",
        default=[],
        help="Country code to test for admission (repeatable).",
    )
    parser.add_argument("--format", choices=("yaml", "json"), default="yaml")
    parser.add_argument("--schema", action="store_true", help="Include each check's config JSON schema.")
    args = parser.parse_args(argv)

    configuration = ChecksConfiguration.from_json(args.config) if args.config else None
    entries = build_catalog(configuration, countries=args.country)
    print(render(entries, args.format, with_schema=args.schema))


if __name__ == "__main__":
    main()
