"""Native tool locations.

macOS and Windows ship their native tools inside the installation tree;
Linux expects them on the system PATH and gets bare command names back.
``scsynth_path`` and ``interpreter_path`` are the only lookups that stat the
filesystem, and only ``scsynth_path`` can fail.
"""

from __future__ import annotations

import logging
import os

from sonic_pi_paths.errors import ToolNotFoundError
from sonic_pi_paths.host import Host, OSFamily, resolve_host
from sonic_pi_paths.paths import native_path, server_path

logger = logging.getLogger(__name__)

EMBEDDED_RUNTIME = "ruby"

_BOOT_SCRIPTS = {
    OSFamily.WINDOWS: "boot-win.bat",
    OSFamily.MACOS: "boot-mac.sh",
    OSFamily.LINUX: "boot-lin.sh",
}


def _exe(name: str, family: OSFamily) -> str:
    return f"{name}.exe" if family is OSFamily.WINDOWS else name


def aubio_onset_path(host: Host | None = None) -> str:
    host = resolve_host(host)
    family = host.family
    if family is OSFamily.LINUX:
        return "aubio_onset"
    return f"{native_path(host)}/{_exe('aubio_onset', family)}"


def sox_path(host: Host | None = None) -> str:
    host = resolve_host(host)
    family = host.family
    if family is OSFamily.LINUX:
        return "sox"
    return f"{native_path(host)}/sox/{_exe('sox', family)}"


def scsynth_path(host: Host | None = None) -> str:
    """Return the SuperCollider server binary.

    Returns:
        ``"scsynth"`` on Linux, otherwise the bundled binary path.

    Raises:
        ToolNotFoundError: If the bundled binary is missing on macOS/Windows.
    """
    host = resolve_host(host)
    family = host.family
    if family is OSFamily.LINUX:
        return "scsynth"

    path = f"{native_path(host)}/{_exe('scsynth', family)}"
    if not os.path.isfile(path):
        raise ToolNotFoundError(path)
    return path


def mix_release_boot_path(host: Host | None = None) -> str:
    """Return the boot script of the Tau release for this OS."""
    host = resolve_host(host)
    return f"{server_path(host)}/erlang/tau/{_BOOT_SCRIPTS[host.family]}"


def interpreter_path(host: Host | None = None) -> str:
    """Return the interpreter used to run the language server.

    Tries the runtime bundled under native/ (macOS and Windows only), then
    the interpreter running this process, then a bare command name for a
    PATH search. Never raises for a missing runtime.
    """
    host = resolve_host(host)
    family = host.family

    if family is not OSFamily.LINUX:
        bundled = (
            f"{native_path(host)}/{EMBEDDED_RUNTIME}/bin/"
            f"{_exe(EMBEDDED_RUNTIME, family)}"
        )
        if os.path.isfile(bundled):
            return bundled
        logger.debug("No bundled runtime at %s", bundled)

    if host.executable and os.path.isfile(host.executable):
        return host.executable
    logger.debug("Running interpreter %r not found, using PATH", host.executable)

    return EMBEDDED_RUNTIME
