"""Host snapshot: platform identifier, environment and home lookups.

Every accessor in this package is a pure function of a ``Host``. Callers
that pass nothing get ``Host.current()``, a fresh snapshot of the running
process, so changes to ``os.environ`` show up on the next call.
"""

from __future__ import annotations

import enum
import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field

from sonic_pi_paths.errors import UnsupportedPlatformError

# Installation root: three levels above this package directory.
ROOT_ANCHOR = os.path.abspath(
    os.path.join(os.path.dirname(__file__), "..", "..", ".."),
)

_WINDOWS_MARKERS = ("mingw", "win32")


class OSFamily(enum.Enum):
    LINUX = "linux"
    MACOS = "macos"
    WINDOWS = "windows"


def detect_os(platform_id: str) -> OSFamily:
    """Classify a platform identifier into one of the supported families.

    Args:
        platform_id: Identifier such as ``sys.platform`` or a target triple
            (``x86_64-linux-gnu``, ``arm64-darwin22``, ``x64-mingw32``).

    Returns:
        The matching OSFamily.

    Raises:
        UnsupportedPlatformError: If no family matches.
    """
    lowered = platform_id.lower()
    if "linux" in lowered:
        return OSFamily.LINUX
    if "darwin" in lowered:
        return OSFamily.MACOS
    if any(marker in lowered for marker in _WINDOWS_MARKERS):
        return OSFamily.WINDOWS
    raise UnsupportedPlatformError(platform_id)


def lookup_native_home() -> str:
    """Return the OS account's home directory without consulting ``HOME``."""
    if os.name == "nt":
        return os.environ.get("USERPROFILE") or os.path.expanduser("~")
    import pwd

    return pwd.getpwuid(os.getuid()).pw_dir


@dataclass(frozen=True)
class Host:
    platform_id: str
    env: Mapping[str, str] = field(default_factory=dict)
    native_home: str = field(default_factory=lookup_native_home)
    executable: str = ""
    root: str = ROOT_ANCHOR

    @classmethod
    def current(cls) -> Host:
        """Snapshot the running process."""
        return cls(
            platform_id=sys.platform,
            env=dict(os.environ),
            native_home=lookup_native_home(),
            executable=sys.executable,
        )

    @property
    def family(self) -> OSFamily:
        return detect_os(self.platform_id)

    def getenv(self, name: str) -> str | None:
        """Return an environment value, treating empty strings as unset."""
        return self.env.get(name) or None


def resolve_host(host: Host | None) -> Host:
    return host if host is not None else Host.current()
