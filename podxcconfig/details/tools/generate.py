from podxcconfig.details.target import PodTarget
from podxcconfig.generators.xcconfig import XCConfig, save_private_xcconfig


def generate_main(target: PodTarget, public_xcconfig: XCConfig, output: str):
    assert output
    save_private_xcconfig(target, public_xcconfig, output)
