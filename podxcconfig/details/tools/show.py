from typing import Optional

from podxcconfig.details.target import PodTarget
from podxcconfig.generators.xcconfig import XCConfig, generate_private_xcconfig


def show_main(target: PodTarget, public_xcconfig: XCConfig, output: Optional[str]):
    # output is ignored, show always writes to stdout
    xcconfig = generate_private_xcconfig(target, public_xcconfig)
    print(xcconfig.to_s(), end="")
