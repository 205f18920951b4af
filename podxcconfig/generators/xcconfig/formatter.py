"""
Xcode build settings file formatter.

Renders settings as one `KEY = value` assignment per line, in insertion order,
followed by an `#include` directive for every included xcconfig. The xcconfig
grammar has no escaping: `$`, quotes and condition brackets are written verbatim.
"""

from typing import List, Mapping

XCCONFIG_EXTENSION = ".xcconfig"


def format_setting(key: str, value: str) -> str:
    """
    Format a single assignment.

    Args:
        key: The setting name, including any condition suffix.
        value: The raw setting value.

    Returns:
        The assignment line, without trailing whitespace for empty values.
    """
    return f"{key} = {value}".rstrip()


def normalized_include_path(name: str) -> str:
    if name.endswith(XCCONFIG_EXTENSION):
        return name
    return name + XCCONFIG_EXTENSION


def format_include(name: str) -> str:
    return f'#include "{normalized_include_path(name)}"'


def format_xcconfig(attributes: Mapping[str, str], includes: List[str]) -> str:
    """
    Convert settings and includes to the contents of an xcconfig file.

    Args:
        attributes: Ordered mapping of setting name to value.
        includes: Names of the xcconfigs to include.

    Returns:
        The file contents, terminated by a newline unless empty.
    """
    lines = [format_setting(key, value) for key, value in attributes.items()]
    lines.extend(format_include(name) for name in includes)
    if not lines:
        return ""
    return "\n".join(lines) + "\n"
