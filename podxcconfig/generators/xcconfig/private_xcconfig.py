# Private xcconfig builder.
#
# The private xcconfig of a pod target merges the values of its public, namespaced
# xcconfig with the default private build settings every pod target needs.

import logging

from typing import Callable, Dict, List

from podxcconfig.details.as_iterator import unique
from podxcconfig.details.target import PodTarget
from podxcconfig.generators.xcconfig.model import XCConfig
from podxcconfig.generators.xcconfig.namespacing import add_xcconfig_namespaced_keys
from podxcconfig.generators.xcconfig.utils import (
    add_target_specific_settings,
    default_ld_flags,
    quote,
)

logger = logging.getLogger(__name__)

LinkFlagsResolver = Callable[[PodTarget], str]
TargetSettingsOverrides = Callable[[PodTarget, XCConfig], None]


def get_target_search_paths(target: PodTarget) -> List[str]:
    target_search_paths = target.build_headers.search_paths(target.platform)
    sandbox_search_paths = target.sandbox_public_headers.search_paths(target.platform)
    assert target_search_paths is not None, f"no build header search paths for {target.name}"
    assert sandbox_search_paths is not None, f"no public header search paths for {target.name}"
    return unique([*target_search_paths, *sandbox_search_paths])


def get_baseline_settings(
    target: PodTarget, link_flags: LinkFlagsResolver = default_ld_flags
) -> Dict[str, str]:
    settings = {
        "OTHER_LDFLAGS": link_flags(target),
        "PODS_ROOT": target.config.pods_root,
        "HEADER_SEARCH_PATHS": quote(get_target_search_paths(target)),
        "GCC_PREPROCESSOR_DEFINITIONS": "$(inherited) COCOAPODS=1",
        "SKIP_INSTALL": "YES",
    }
    if target.requires_frameworks:
        # Only FRAMEWORK_SEARCH_PATHS is quoted since it takes multiple values,
        # a quoted CONFIGURATION_BUILD_DIR would be read as a relative path.
        settings.update(
            {
                "PODS_FRAMEWORK_BUILD_PATH": target.configuration_build_dir,
                "CONFIGURATION_BUILD_DIR": "$PODS_FRAMEWORK_BUILD_PATH",
                "FRAMEWORK_SEARCH_PATHS": '"$PODS_FRAMEWORK_BUILD_PATH"',
            }
        )
    return settings


def generate_private_xcconfig(
    target: PodTarget,
    public_xcconfig: XCConfig,
    *,
    link_flags: LinkFlagsResolver = default_ld_flags,
    overrides: TargetSettingsOverrides = add_target_specific_settings,
) -> XCConfig:
    """
    Generate the private xcconfig of a pod target.

    Args:
        target: The pod target the xcconfig is generated for.
        public_xcconfig: The public xcconfig of the target, its keys are inherited
            through their namespaced form.
        link_flags: Computes OTHER_LDFLAGS for the target.
        overrides: Applies the final, target specific settings in place.

    Returns:
        A new xcconfig including the target's public xcconfig.
    """
    baseline = get_baseline_settings(target, link_flags)
    logger.debug("baseline settings for %s: %s", target.name, ", ".join(baseline))

    merged = add_xcconfig_namespaced_keys(
        public_xcconfig.to_hash(), baseline, target.xcconfig_prefix
    )
    logger.debug(
        "inherited %d public settings of %s under %s",
        len(public_xcconfig),
        target.name,
        target.xcconfig_prefix,
    )

    xcconfig = XCConfig(merged)
    overrides(target, xcconfig)
    xcconfig.includes = [target.name]
    return xcconfig
