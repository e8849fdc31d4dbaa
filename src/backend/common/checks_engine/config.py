from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Protocol

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

_STRING_LIST = TypeAdapter(List[str])
_BOOL = TypeAdapter(bool)


class ConfigurationError(ValueError):
    """Raised when a configured value cannot be read as the requested type."""


class ConfigurationLookup(Protocol):
    def get_list(self, key: str, default: Optional[List[str]]) -> Optional[List[str]]:
        """Return the list stored under `key`, or `default` when the key is absent."""
        ...


class CheckSettings(BaseModel):
    """Keys every check understands; used for catalog schemas only."""

    model_config = ConfigDict(populate_by_name=True)

    enabled: bool = True
    whitelist: List[str] = Field(
        default_factory=list,
        alias="countries.whitelist",
        description="If non-empty, the check only runs for these country codes.",
    )
    # Back-compat: older configs used `countries` as the whitelist key.
    legacy_whitelist: List[str] = Field(
        default_factory=list,
        alias="countries",
        description="Legacy alias for countries.whitelist, read only when that key is absent.",
    )
    blacklist: List[str] = Field(
        default_factory=list,
        alias="countries.blacklist",
        description="When no whitelist is in effect, the check never runs for these country codes.",
    )


class CheckConfiguration(BaseModel):
    """Configuration subtree for a single named check.

    Keys are dotted strings matched exactly (`countries.whitelist` is one key,
    not a nested lookup).
    """

    check_name: str = ""
    values: Dict[str, Any] = Field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, default)

    def get_list(self, key: str, default: Optional[List[str]]) -> Optional[List[str]]:
        if key not in self.values:
            return default
        try:
            return _STRING_LIST.validate_python(self.values[key])
        except ValidationError as exc:
            raise ConfigurationError(
                f"{self.check_name or '<check>'}: '{key}' must be a list of strings"
            ) from exc

    @property
    def enabled(self) -> bool:
        if "enabled" not in self.values:
            return True
        try:
            return _BOOL.validate_python(self.values["enabled"])
        except ValidationError as exc:
            raise ConfigurationError(f"{self.check_name or '<check>'}: 'enabled' must be a boolean") from exc


class ChecksConfiguration(BaseModel):
    """Configuration for all checks, keyed by check name.

    Checks pull their scoped view via `for_check`.
    """

    checks: Dict[str, Dict[str, Any]] = Field(default_factory=dict)

    def for_check(self, check_name: str) -> CheckConfiguration:
        return CheckConfiguration(check_name=check_name, values=dict(self.checks.get(check_name, {})))

    @classmethod
    def from_mapping(cls, mapping: Optional[Mapping[str, Any]]) -> "ChecksConfiguration":
        # Top-level keys are check names; use `model_validate` for the `{"checks": {...}}` form.
        raw = dict(mapping or {})
        try:
            return cls.model_validate({"checks": raw})
        except ValidationError as exc:
            raise ConfigurationError("Each check configuration must be a mapping of keys to values") from exc

    @classmethod
    def from_json(cls, text: str) -> "ChecksConfiguration":
        try:
            raw = TypeAdapter(Dict[str, Any]).validate_json(text)
        except ValidationError as exc:
            raise ConfigurationError("Inline checks configuration is not a JSON object") from exc
        return cls.from_mapping(raw)
