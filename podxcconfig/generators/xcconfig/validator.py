from typing import List

from podxcconfig.generators.xcconfig.model import SETTING_KEY_PATTERN, XCConfig


def validate_settings(xcconfig: XCConfig) -> List[str]:
    errors = []
    for key, value in xcconfig.attributes.items():
        if not isinstance(key, str) or not SETTING_KEY_PATTERN.fullmatch(key):
            errors.append(f"Invalid setting name: {key!r}")
            continue
        if not isinstance(value, str):
            errors.append(f"Invalid value type for {key}: {type(value).__name__}")
        elif "\n" in value or "\r" in value:
            errors.append(f"Multi-line value for {key}")
    return errors


def validate_includes(xcconfig: XCConfig) -> List[str]:
    errors = []
    for index, name in enumerate(xcconfig.includes):
        if not name:
            errors.append(f"Empty include at includes[{index}]")
        elif any(c in name for c in '"\n\r'):
            errors.append(f"Include '{name}' contains invalid characters")
    return errors


def validate_xcconfig(xcconfig: XCConfig) -> List[str]:
    return validate_settings(xcconfig) + validate_includes(xcconfig)
