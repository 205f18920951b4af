# Reader for the line-oriented xcconfig format written by the formatter.
#
# Supports blank lines, `//` comments, `#include "file.xcconfig"` directives and
# `KEY = value` assignments. Anything else is rejected.

import re

from pathlib import Path
from typing import Union

from podxcconfig.generators.xcconfig.formatter import XCCONFIG_EXTENSION
from podxcconfig.generators.xcconfig.model import SETTING_KEY_PATTERN, XCConfig

_INCLUDE_LINE = re.compile(r'#include\??\s+"(?P<path>[^"]+)"')
_SETTING_LINE = re.compile(
    r"(?P<key>" + SETTING_KEY_PATTERN.pattern + r")\s*=\s*(?P<value>.*)"
)


def _strip_comment(line: str) -> str:
    index = line.find("//")
    if index >= 0:
        line = line[:index]
    return line.strip()


def parse_xcconfig(text: str) -> XCConfig:
    xcconfig = XCConfig()
    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = _strip_comment(raw_line)
        if not line:
            continue
        if match := _INCLUDE_LINE.fullmatch(line):
            path = match.group("path")
            if path.endswith(XCCONFIG_EXTENSION):
                path = path[: -len(XCCONFIG_EXTENSION)]
            xcconfig.includes.append(path)
        elif match := _SETTING_LINE.fullmatch(line):
            xcconfig.attributes[match.group("key")] = match.group("value").strip()
        else:
            raise ValueError(f"line {line_number}: cannot parse '{raw_line.strip()}'")
    return xcconfig


def load_xcconfig(path: Union[str, Path]) -> XCConfig:
    with open(path, "r") as f:
        return parse_xcconfig(f.read())
