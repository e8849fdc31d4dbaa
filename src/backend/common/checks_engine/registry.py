from __future__ import annotations

from typing import Dict, Iterable, Optional, Type

from .check import Check
from .config import ChecksConfiguration


class CheckRegistry:
    def __init__(self):
        self._checks: Dict[str, Type[Check]] = {}

    def register(self, check_cls: Type[Check]) -> None:
        check_name = getattr(check_cls, "check_name", None)
        if not check_name:
            raise ValueError("Check class missing check_name")
        if check_name in self._checks:
            raise ValueError(f"Duplicate check_name registered: {check_name}")
        self._checks[check_name] = check_cls

    def create_all(self, configuration: Optional[ChecksConfiguration] = None) -> list[Check]:
        return [cls(configuration) for cls in self._checks.values()]

    def get(self, check_name: str) -> Type[Check]:
        return self._checks[check_name]

    def ids(self) -> Iterable[str]:
        return self._checks.keys()


registry = CheckRegistry()


def register_check(check_cls: Type[Check]) -> Type[Check]:
    registry.register(check_cls)
    return check_cls
