import logging

from pathlib import Path
from typing import Union

from podxcconfig.details.target import PodTarget
from podxcconfig.generators.xcconfig.model import XCConfig
from podxcconfig.generators.xcconfig.private_xcconfig import generate_private_xcconfig
from podxcconfig.generators.xcconfig.validator import validate_xcconfig

logger = logging.getLogger(__name__)


def save_private_xcconfig(
    target: PodTarget, public_xcconfig: XCConfig, path: Union[str, Path]
) -> XCConfig:
    """Generate the private xcconfig of a pod target and write it to path."""
    xcconfig = generate_private_xcconfig(target, public_xcconfig)

    if errors := validate_xcconfig(xcconfig):
        raise ValueError(f"Invalid xcconfig: {errors}")

    xcconfig.save_as(path)
    logger.info("wrote private xcconfig for %s to %s", target.name, path)
    return xcconfig
