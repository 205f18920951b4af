from pathlib import Path

import pytest

from podxcconfig import Config, HeadersStore, HeaderSearchPath, Platform, XCConfig
from podxcconfig.generators.xcconfig import generate_private_xcconfig, save_private_xcconfig
from podxcconfig.generators.xcconfig.private_xcconfig import (
    get_baseline_settings,
    get_target_search_paths,
)

SEARCH_PATHS = (
    '"${PODS_ROOT}/Headers/Private" "${PODS_ROOT}/Headers/Private/AFNetworking" '
    '"${PODS_ROOT}/Headers/Public" "${PODS_ROOT}/Headers/Public/AFNetworking"'
)


def test_baseline_settings(make_target) -> None:
    settings = get_baseline_settings(make_target())
    assert settings == {
        "OTHER_LDFLAGS": "-ObjC",
        "PODS_ROOT": "${SRCROOT}",
        "HEADER_SEARCH_PATHS": SEARCH_PATHS,
        "GCC_PREPROCESSOR_DEFINITIONS": "$(inherited) COCOAPODS=1",
        "SKIP_INSTALL": "YES",
    }


def test_search_paths_are_deduplicated_in_order(make_target) -> None:
    target = make_target(
        build_headers=HeadersStore(
            "Headers/Private",
            (
                HeaderSearchPath(Platform.IOS, "Private/A"),
                HeaderSearchPath(Platform.OSX, "Private/MacOnly"),
                HeaderSearchPath(Platform.IOS, "Private/A"),
            ),
        ),
        sandbox_public_headers=HeadersStore(
            "Headers/Private", (HeaderSearchPath(Platform.IOS, "Public/B"),)
        ),
    )
    assert get_target_search_paths(target) == [
        "${PODS_ROOT}/Headers/Private",
        "${PODS_ROOT}/Headers/Private/A",
        "${PODS_ROOT}/Headers/Public/B",
    ]


def test_missing_search_paths_fail_fast(make_target) -> None:
    class BrokenStore:
        def search_paths(self, platform):
            return None

    target = make_target(build_headers=BrokenStore())
    with pytest.raises(AssertionError):
        generate_private_xcconfig(target, XCConfig())


def test_framework_settings(make_target) -> None:
    target = make_target(requires_frameworks=True, configuration_build_dir="/build/Foo")
    settings = get_baseline_settings(target)
    assert settings["PODS_FRAMEWORK_BUILD_PATH"] == "/build/Foo"
    assert settings["CONFIGURATION_BUILD_DIR"] == "$PODS_FRAMEWORK_BUILD_PATH"
    assert settings["FRAMEWORK_SEARCH_PATHS"] == '"$PODS_FRAMEWORK_BUILD_PATH"'


def test_static_library_has_no_framework_settings(make_target) -> None:
    settings = get_baseline_settings(make_target())
    assert "PODS_FRAMEWORK_BUILD_PATH" not in settings
    assert "CONFIGURATION_BUILD_DIR" not in settings
    assert "FRAMEWORK_SEARCH_PATHS" not in settings


def test_generate_merges_public_settings(make_target, public_xcconfig) -> None:
    xcconfig = generate_private_xcconfig(make_target(), public_xcconfig)
    assert xcconfig.to_hash() == {
        "OTHER_LDFLAGS": "-ObjC ${PODS_AFNETWORKING_OTHER_LDFLAGS}",
        "PODS_ROOT": "${SRCROOT}",
        "HEADER_SEARCH_PATHS": SEARCH_PATHS,
        "GCC_PREPROCESSOR_DEFINITIONS": (
            "$(inherited) COCOAPODS=1 ${PODS_AFNETWORKING_GCC_PREPROCESSOR_DEFINITIONS}"
        ),
        "SKIP_INSTALL": "YES",
        "HEADER_SEARCH_PATHS[sdk=iphoneos*]": "${PODS_AFNETWORKING_HEADER_SEARCH_PATHS}",
    }
    assert xcconfig.includes == ["AFNetworking"]


def test_generate_does_not_touch_public_xcconfig(make_target, public_xcconfig) -> None:
    before = public_xcconfig.to_hash()
    xcconfig = generate_private_xcconfig(make_target(), public_xcconfig)
    xcconfig.merge({"OTHER_LDFLAGS": "changed"})
    assert public_xcconfig.to_hash() == before
    assert public_xcconfig.includes == []


def test_includes_only_the_target(make_target) -> None:
    public = XCConfig({"FOO": "1"}, includes=["Other"])
    xcconfig = generate_private_xcconfig(make_target(name="Alamofire"), public)
    assert xcconfig.includes == ["Alamofire"]


def test_explicit_prefix_is_used(make_target) -> None:
    target = make_target(xcconfig_prefix="AF_")
    xcconfig = generate_private_xcconfig(target, XCConfig({"WARNING_CFLAGS": "-Wall"}))
    assert xcconfig["WARNING_CFLAGS"] == "${AF_WARNING_CFLAGS}"


def test_overrides_take_final_precedence(make_target, public_xcconfig) -> None:
    def overrides(target, xcconfig):
        xcconfig.update({"OTHER_LDFLAGS": "-lz", "ENABLE_BITCODE": "NO"})

    xcconfig = generate_private_xcconfig(
        make_target(), public_xcconfig, overrides=overrides
    )
    assert xcconfig["OTHER_LDFLAGS"] == "-lz"
    assert xcconfig["ENABLE_BITCODE"] == "NO"
    assert xcconfig.includes == ["AFNetworking"]


def test_custom_link_flags(make_target) -> None:
    xcconfig = generate_private_xcconfig(
        make_target(), XCConfig(), link_flags=lambda target: f"-l{target.name}"
    )
    assert xcconfig["OTHER_LDFLAGS"] == "-lAFNetworking"


def test_arc_compatibility_flag(make_target) -> None:
    target = make_target(config=Config(set_arc_compatibility_flag=True))
    xcconfig = generate_private_xcconfig(target, XCConfig())
    assert xcconfig["OTHER_LDFLAGS"] == "-ObjC -fobjc-arc"


def test_pods_root_from_config(make_target) -> None:
    target = make_target(config=Config(pods_root="${SRCROOT}/../Pods"))
    xcconfig = generate_private_xcconfig(target, XCConfig())
    assert xcconfig["PODS_ROOT"] == "${SRCROOT}/../Pods"


def test_swift_framework_on_osx(make_target) -> None:
    target = make_target(
        platform=Platform.OSX,
        requires_frameworks=True,
        uses_swift=True,
        inhibit_warnings=True,
    )
    xcconfig = generate_private_xcconfig(target, XCConfig())
    assert xcconfig["CODE_SIGN_IDENTITY"] == ""
    assert xcconfig["OTHER_SWIFT_FLAGS"] == '$(inherited) "-D" "COCOAPODS" "-suppress-warnings"'
    assert list(xcconfig)[-2:] == ["CODE_SIGN_IDENTITY", "OTHER_SWIFT_FLAGS"]


def test_save_private_xcconfig(tmp_path: Path, make_target, public_xcconfig) -> None:
    path = tmp_path / "Pods" / "Target Support Files" / "AFNetworking-Private.xcconfig"
    xcconfig = save_private_xcconfig(make_target(), public_xcconfig, path)
    assert path.read_text() == xcconfig.to_s()
    lines = path.read_text().splitlines()
    assert lines[0] == "OTHER_LDFLAGS = -ObjC ${PODS_AFNETWORKING_OTHER_LDFLAGS}"
    assert lines[-1] == '#include "AFNetworking.xcconfig"'


def test_save_overwrites_existing_file(tmp_path: Path, make_target) -> None:
    path = tmp_path / "AFNetworking-Private.xcconfig"
    path.write_text("STALE = 1\n")
    save_private_xcconfig(make_target(), XCConfig(), path)
    assert "STALE" not in path.read_text()


def test_save_rejects_invalid_includes(tmp_path: Path, make_target) -> None:
    path = tmp_path / "out.xcconfig"
    with pytest.raises(ValueError, match="Invalid xcconfig"):
        save_private_xcconfig(make_target(name="bad\"name"), XCConfig(), path)
    assert not path.exists()


def test_dotted_target_name_includes_its_xcconfig(tmp_path: Path, make_target) -> None:
    target = make_target(name="Socket.IO-Client-Swift")
    xcconfig = generate_private_xcconfig(target, XCConfig())
    assert xcconfig.to_s().endswith('#include "Socket.IO-Client-Swift.xcconfig"\n')

    path = tmp_path / "Socket.IO-Client-Swift-Private.xcconfig"
    save_private_xcconfig(target, XCConfig(), path)
    assert path.read_text().splitlines()[-1] == '#include "Socket.IO-Client-Swift.xcconfig"'


def test_public_swift_flags_stay_reachable(make_target) -> None:
    target = make_target(uses_swift=True)
    xcconfig = generate_private_xcconfig(target, XCConfig({"OTHER_SWIFT_FLAGS": "-DFOO"}))
    assert xcconfig["OTHER_SWIFT_FLAGS"] == (
        '${PODS_AFNETWORKING_OTHER_SWIFT_FLAGS} $(inherited) "-D" "COCOAPODS"'
    )
