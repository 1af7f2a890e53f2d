"""Sonic Pi path resolution.

Resolves the installation and per-user paths used by Sonic Pi. Installation
paths hang off the root anchor; user paths hang off the home directory.

Environment variables:
    SONIC_PI_HOME — parent of the .sonic-pi directory (default: user home)
    HOMEDRIVE, HOMEPATH — Windows user home, preferred over the profile dir

Every function takes an optional Host snapshot; omit it to read the live
process. Templates are plain "/" joins of their parent path, so results are
stable strings that differ only by the snapshot they were computed from.
"""

from __future__ import annotations

import ntpath
import os
import posixpath

from sonic_pi_paths.host import Host, OSFamily, resolve_host

RASPBERRY_PI_PLUGIN_DIR = "/usr/lib/SuperCollider/plugins"


def _normalize(path: str, family: OSFamily) -> str:
    """Make a path absolute and collapse dot segments and extra separators.

    Windows paths keep their drive and use forward slashes throughout.
    """
    if family is OSFamily.WINDOWS:
        drive, tail = ntpath.splitdrive(path.replace("\\", "/"))
    else:
        drive, tail = "", path
    if not tail.startswith("/"):
        cwd_drive, cwd_tail = ntpath.splitdrive(os.getcwd().replace("\\", "/"))
        drive = drive or cwd_drive
        tail = posixpath.join(cwd_tail, tail)
    return drive + posixpath.normpath(tail)


# ── Anchors ──────────────────────────────────────────────────────────


def root_path(host: Host | None = None) -> str:
    """Return the installation root."""
    return resolve_host(host).root


def user_dir(host: Host | None = None) -> str:
    """Return the user's home directory as the OS itself reports it.

    On Windows HOMEDRIVE + HOMEPATH win when both are set, matching what
    the GUI sees. HOME is never consulted.
    """
    host = resolve_host(host)
    if host.family is OSFamily.WINDOWS:
        home_drive = host.getenv("HOMEDRIVE")
        home_path = host.getenv("HOMEPATH")
        if home_drive and home_path:
            return home_drive + home_path
    return host.native_home


def home_dir_path(host: Host | None = None) -> str:
    """Return the .sonic-pi directory, honouring SONIC_PI_HOME."""
    host = resolve_host(host)
    base = host.getenv("SONIC_PI_HOME") or user_dir(host)
    return _normalize(base + "/.sonic-pi/", host.family)


# ── Installation tree ────────────────────────────────────────────────


def etc_path(host: Host | None = None) -> str:
    return f"{root_path(host)}/etc"


def snippets_path(host: Host | None = None) -> str:
    return f"{etc_path(host)}/snippets"


def doc_path(host: Host | None = None) -> str:
    return f"{etc_path(host)}/doc"


def cheatsheets_path(host: Host | None = None) -> str:
    return f"{doc_path(host)}/cheatsheets"


def tutorial_path(host: Host | None = None) -> str:
    return f"{doc_path(host)}/tutorial"


def tmp_path(host: Host | None = None) -> str:
    return f"{root_path(host)}/tmp"


def synthdef_path(host: Host | None = None) -> str:
    """Return the directory of compiled synthdefs loaded at boot."""
    return f"{etc_path(host)}/synthdefs/compiled"


def samples_path(host: Host | None = None) -> str:
    """Return the directory of built-in samples."""
    return f"{etc_path(host)}/samples"


def buffers_path(host: Host | None = None) -> str:
    return f"{etc_path(host)}/buffers"


def examples_path(host: Host | None = None) -> str:
    return f"{etc_path(host)}/examples"


def app_path(host: Host | None = None) -> str:
    return f"{root_path(host)}/app"


def html_public_path(host: Host | None = None) -> str:
    return f"{app_path(host)}/gui/html/public"


def qt_gui_path(host: Host | None = None) -> str:
    return f"{app_path(host)}/gui/qt"


def user_config_examples_path(host: Host | None = None) -> str:
    """Return the directory of example config files copied to new users."""
    return f"{app_path(host)}/config/user-examples"


def server_path(host: Host | None = None) -> str:
    return f"{app_path(host)}/server"


def server_bin_path(host: Host | None = None) -> str:
    return f"{server_path(host)}/ruby/bin"


def spider_server_path(host: Host | None = None) -> str:
    """Return the entry script of the language server."""
    return f"{server_bin_path(host)}/sonic-pi-server.rb"


def native_path(host: Host | None = None) -> str:
    """Return the directory of bundled native binaries."""
    return f"{server_path(host)}/native"


def tau_app_path(host: Host | None = None) -> str:
    return f"{server_path(host)}/erlang/tau/ebin"


def erlang_root_dir(host: Host | None = None) -> str:
    return f"{native_path(host)}/erlang/dist"


def erlang_bin_dir(host: Host | None = None) -> str:
    return f"{erlang_root_dir(host)}/bin"


def scsynth_windows_plugin_path(host: Host | None = None) -> str:
    return f"{native_path(host)}/plugins"


def scsynth_raspberry_plugin_path(host: Host | None = None) -> str:
    """Return the system-wide SuperCollider plugin dir on Raspberry Pi OS."""
    return RASPBERRY_PI_PLUGIN_DIR


# ── User tree ────────────────────────────────────────────────────────


def project_path(host: Host | None = None) -> str:
    """Return the default project store."""
    return f"{home_dir_path(host)}/store/default"


def cached_samples_path(host: Host | None = None) -> str:
    return f"{project_path(host)}/cached_samples"


def system_store_path(host: Host | None = None) -> str:
    return f"{home_dir_path(host)}/store/system"


def system_cache_store_path(host: Host | None = None) -> str:
    return f"{system_store_path(host)}/cache.json"


def config_path(host: Host | None = None) -> str:
    return f"{home_dir_path(host)}/config"


def init_path(host: Host | None = None) -> str:
    """Return the user's init.rb, run when the server starts."""
    return f"{config_path(host)}/init.rb"


def original_init_path(host: Host | None = None) -> str:
    """Return the pre-config-dir location of init.rb."""
    return f"{home_dir_path(host)}/init.rb"


def user_audio_settings_path(host: Host | None = None) -> str:
    return f"{config_path(host)}/audio-settings.toml"


def log_path(host: Host | None = None) -> str:
    return f"{home_dir_path(host)}/log"


def log_history_path(host: Host | None = None) -> str:
    return f"{log_path(host)}/history"


def scsynth_log_path(host: Host | None = None) -> str:
    return f"{log_path(host)}/scsynth.log"


def tau_log_path(host: Host | None = None) -> str:
    return f"{log_path(host)}/tau.log"


def jackd_log_path(host: Host | None = None) -> str:
    return f"{log_path(host)}/jackd.log"


def spider_log_path(host: Host | None = None) -> str:
    return f"{log_path(host)}/spider.log"


def daemon_log_path(host: Host | None = None) -> str:
    return f"{log_path(host)}/daemon.log"
