from typing import Iterable

from podxcconfig.details.as_iterator import str_iter
from podxcconfig.details.target import Platform, PodTarget
from podxcconfig.generators.xcconfig.model import XCConfig


def quote(paths: Iterable[str]) -> str:
    """
    Render values for a setting that takes multiple space separated entries.

    Each value is wrapped in double quotes, with backslashes and quotes inside it
    escaped, and the results are joined with a single space. Order is preserved.
    """
    quoted = []
    for path in str_iter(paths if isinstance(paths, str) else tuple(paths)):
        escaped = path.replace("\\", "\\\\").replace('"', '\\"')
        quoted.append(f'"{escaped}"')
    return " ".join(quoted)


def default_ld_flags(target: PodTarget) -> str:
    ld_flags = "-ObjC"
    if target.config.set_arc_compatibility_flag and target.requires_arc:
        ld_flags += " -fobjc-arc"
    return ld_flags


def add_code_signing_settings(target: PodTarget, xcconfig: XCConfig) -> None:
    # Frameworks built for macOS are signed when embedded, not when built
    if target.platform == Platform.OSX:
        xcconfig.merge({"CODE_SIGN_IDENTITY": ""})


def add_language_specific_settings(target: PodTarget, xcconfig: XCConfig) -> None:
    if not target.uses_swift:
        return
    other_swift_flags = ["$(inherited)", quote(["-D", "COCOAPODS"])]
    if target.inhibit_warnings:
        other_swift_flags.append(quote(["-suppress-warnings"]))
    xcconfig.merge({"OTHER_SWIFT_FLAGS": " ".join(other_swift_flags)})


def add_target_specific_settings(target: PodTarget, xcconfig: XCConfig) -> None:
    if target.requires_frameworks:
        add_code_signing_settings(target, xcconfig)
    add_language_specific_settings(target, xcconfig)
