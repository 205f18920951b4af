# Xcode build settings file (.xcconfig) model.
#
# An xcconfig is an ordered list of `KEY = value` assignments plus the names of
# other xcconfigs it includes. Keys may carry conditions, e.g. `KEY[sdk=iphoneos*]`.

import re

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List, Mapping, Union

from podxcconfig.generators.xcconfig.formatter import format_xcconfig

# Setting name followed by any number of bracketed conditions
SETTING_KEY_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*(?:\[[^\[\]]*\])*")


def _check_value(key: str, value: str) -> None:
    if not isinstance(value, str):
        raise TypeError(f"value of {key} must be str, got {type(value).__name__}")


def _merge_values(current_value: str, value: str) -> str:
    current_value = current_value.strip()
    value = value.strip()
    if not value:
        return current_value
    if not current_value:
        return value
    current_entries = current_value.split()
    if all(entry in current_entries for entry in value.split()):
        return current_value
    return f"{current_value} {value}"


@dataclass
class XCConfig:
    attributes: Dict[str, str] = field(default_factory=dict)
    includes: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        # Never share storage with the mapping we were built from
        self.attributes = dict(self.attributes)
        self.includes = list(self.includes)

    def __getitem__(self, key: str) -> str:
        return self.attributes[key]

    def __contains__(self, key: object) -> bool:
        return key in self.attributes

    def __iter__(self) -> Iterator[str]:
        return iter(self.attributes)

    def __len__(self) -> int:
        return len(self.attributes)

    def to_hash(self) -> Dict[str, str]:
        return dict(self.attributes)

    def merge(self, settings: Mapping[str, str]) -> None:
        """
        Merge settings into this xcconfig.

        New keys are appended in the given order. For a key that already has a
        value the new value is appended to it, unless one of the two is empty or
        every entry of the new value is already present.
        """
        for key, value in settings.items():
            _check_value(key, value)
            current_value = self.attributes.get(key)
            if current_value is None:
                self.attributes[key] = value
            else:
                self.attributes[key] = _merge_values(current_value, value)

    def update(self, settings: Mapping[str, str]) -> None:
        """Add or replace settings, appending new keys in the given order."""
        for key, value in settings.items():
            _check_value(key, value)
            self.attributes[key] = value

    def to_s(self) -> str:
        return format_xcconfig(self.attributes, self.includes)

    def save_as(self, path: Union[str, Path]) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            f.write(self.to_s())
