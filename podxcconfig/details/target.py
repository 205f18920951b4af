import json
import posixpath
import re

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Tuple, Union

from podxcconfig.config import Config
from podxcconfig.details.as_iterator import unique

# Framework products of every pod land next to each other unless a target says otherwise
DEFAULT_CONFIGURATION_BUILD_DIR = (
    "$(BUILD_DIR)/$(CONFIGURATION)$(EFFECTIVE_PLATFORM_NAME)/Pods"
)


class Platform(Enum):
    IOS = "ios"
    OSX = "osx"
    TVOS = "tvos"
    WATCHOS = "watchos"

    @staticmethod
    def from_name(name: str) -> "Platform":
        try:
            return Platform(name.lower())
        except ValueError:
            choices = ", ".join(p.value for p in Platform)
            raise ValueError(f"unsupported platform '{name}', expected one of: {choices}")


@dataclass(frozen=True)
class HeaderSearchPath:
    platform: Platform
    path: str  # Relative to the parent of the store root, e.g. "Private/Foo"


# A directory of headers inside the sandbox (e.g. Headers/Private or Headers/Public)
# along with the per-platform sub directories that were linked into it.
@dataclass(frozen=True)
class HeadersStore:
    relative_path: str
    entries: Tuple[HeaderSearchPath, ...] = ()

    def search_paths(self, platform: Platform) -> List[str]:
        headers_dir = posixpath.dirname(self.relative_path)
        root = posixpath.join("${PODS_ROOT}", self.relative_path)
        platform_paths = [
            posixpath.join("${PODS_ROOT}", headers_dir, entry.path)
            for entry in self.entries
            if entry.platform == platform
        ]
        return [root] + unique(platform_paths)


def default_xcconfig_prefix(name: str) -> str:
    return "PODS_" + re.sub(r"[^A-Z]", "_", name.upper()) + "_"


@dataclass(frozen=True)
class PodTarget:
    name: str
    platform: Platform
    build_headers: HeadersStore = HeadersStore("Headers/Private")
    sandbox_public_headers: HeadersStore = HeadersStore("Headers/Public")
    requires_frameworks: bool = False
    configuration_build_dir: str = DEFAULT_CONFIGURATION_BUILD_DIR
    xcconfig_prefix: str = ""
    uses_swift: bool = False
    inhibit_warnings: bool = False
    requires_arc: bool = True
    config: Config = field(default_factory=Config, compare=False)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("pod target requires a non-empty name")
        if not self.xcconfig_prefix:
            object.__setattr__(self, "xcconfig_prefix", default_xcconfig_prefix(self.name))


def _field(data: dict, key: str, expected_type: type, default, context: str = "target"):
    value = data.get(key, default)
    if not isinstance(value, expected_type):
        raise ValueError(
            f"{context} field '{key}' must be {expected_type.__name__}, got {type(value).__name__}"
        )
    return value


def _headers_store_from_json(data: dict, key: str, default_path: str) -> HeadersStore:
    store = _field(data, key, dict, {})
    entries = []
    for entry in _field(store, "search_paths", list, [], key):
        if not isinstance(entry, dict):
            raise ValueError(f"{key} field 'search_paths' must hold objects, got {type(entry).__name__}")
        entries.append(
            HeaderSearchPath(
                platform=Platform.from_name(_field(entry, "platform", str, None, key)),
                path=_field(entry, "path", str, None, key),
            )
        )
    return HeadersStore(
        relative_path=_field(store, "relative_path", str, default_path, key),
        entries=tuple(entries),
    )


def target_from_json(data: dict) -> PodTarget:
    for key in ("name", "platform"):
        if key not in data:
            raise ValueError(f"target description is missing required field '{key}'")
    return PodTarget(
        name=_field(data, "name", str, None),
        platform=Platform.from_name(_field(data, "platform", str, None)),
        build_headers=_headers_store_from_json(data, "build_headers", "Headers/Private"),
        sandbox_public_headers=_headers_store_from_json(
            data, "public_headers", "Headers/Public"
        ),
        requires_frameworks=_field(data, "requires_frameworks", bool, False),
        configuration_build_dir=_field(
            data, "configuration_build_dir", str, DEFAULT_CONFIGURATION_BUILD_DIR
        ),
        xcconfig_prefix=_field(data, "xcconfig_prefix", str, ""),
        uses_swift=_field(data, "uses_swift", bool, False),
        inhibit_warnings=_field(data, "inhibit_warnings", bool, False),
        requires_arc=_field(data, "requires_arc", bool, True),
        config=Config(**_field(data, "config", dict, {})),
    )


def load_target(path: Union[str, Path]) -> PodTarget:
    with open(path, "r") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"target description {path} must be a JSON object")
    return target_from_json(data)
