"""Shared test fixtures for sonic-pi-paths."""

import pytest

from sonic_pi_paths.host import Host

ROOT = "/opt/sonic-pi"
WINDOWS_ROOT = "C:/Program Files/Sonic Pi"


@pytest.fixture
def linux_host():
    return Host(
        platform_id="x86_64-linux-gnu",
        native_home="/home/ada",
        root=ROOT,
    )


@pytest.fixture
def macos_host():
    return Host(
        platform_id="arm64-darwin22",
        native_home="/Users/ada",
        root=ROOT,
    )


@pytest.fixture
def windows_host():
    return Host(
        platform_id="x64-mingw32",
        native_home="C:\\Users\\ada",
        root=WINDOWS_ROOT,
    )


@pytest.fixture(params=["linux_host", "macos_host", "windows_host"])
def any_host(request):
    """Each supported OS family in turn."""
    return request.getfixturevalue(request.param)
