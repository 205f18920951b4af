import pytest

from podxcconfig import Config, HeadersStore, HeaderSearchPath, Platform, PodTarget, XCConfig


@pytest.fixture
def make_target():
    def factory(**kwargs) -> PodTarget:
        kwargs.setdefault("name", "AFNetworking")
        kwargs.setdefault("platform", Platform.IOS)
        kwargs.setdefault(
            "build_headers",
            HeadersStore(
                "Headers/Private",
                (HeaderSearchPath(Platform.IOS, "Private/AFNetworking"),),
            ),
        )
        kwargs.setdefault(
            "sandbox_public_headers",
            HeadersStore(
                "Headers/Public",
                (HeaderSearchPath(Platform.IOS, "Public/AFNetworking"),),
            ),
        )
        kwargs.setdefault("config", Config())
        return PodTarget(**kwargs)

    return factory


@pytest.fixture
def public_xcconfig() -> XCConfig:
    return XCConfig(
        {
            "OTHER_LDFLAGS": "-framework SystemConfiguration",
            "GCC_PREPROCESSOR_DEFINITIONS": "AF_DEBUG=1",
            "HEADER_SEARCH_PATHS[sdk=iphoneos*]": '"${PODS_ROOT}/Vendor"',
        }
    )
