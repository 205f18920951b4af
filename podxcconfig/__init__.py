from podxcconfig.config import Config
from podxcconfig.details.target import HeadersStore, HeaderSearchPath, Platform, PodTarget
from podxcconfig.generators.xcconfig import (
    XCConfig,
    generate_private_xcconfig,
    save_private_xcconfig,
)
