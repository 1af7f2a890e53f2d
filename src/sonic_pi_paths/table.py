"""Name-indexed view over every path accessor."""

from __future__ import annotations

import logging
from collections.abc import Callable

from sonic_pi_paths import paths, tools
from sonic_pi_paths.errors import ToolNotFoundError
from sonic_pi_paths.host import Host, resolve_host

logger = logging.getLogger(__name__)

Accessor = Callable[..., str]

# Display order: anchors, installation tree, user tree, native tools.
ACCESSORS: dict[str, Accessor] = {
    fn.__name__: fn
    for fn in (
        paths.root_path,
        paths.user_dir,
        paths.home_dir_path,
        paths.etc_path,
        paths.snippets_path,
        paths.doc_path,
        paths.cheatsheets_path,
        paths.tutorial_path,
        paths.tmp_path,
        paths.synthdef_path,
        paths.samples_path,
        paths.buffers_path,
        paths.examples_path,
        paths.app_path,
        paths.html_public_path,
        paths.qt_gui_path,
        paths.user_config_examples_path,
        paths.server_path,
        paths.server_bin_path,
        paths.spider_server_path,
        paths.native_path,
        paths.tau_app_path,
        paths.erlang_root_dir,
        paths.erlang_bin_dir,
        paths.scsynth_windows_plugin_path,
        paths.scsynth_raspberry_plugin_path,
        paths.project_path,
        paths.cached_samples_path,
        paths.system_store_path,
        paths.system_cache_store_path,
        paths.config_path,
        paths.init_path,
        paths.original_init_path,
        paths.user_audio_settings_path,
        paths.log_path,
        paths.log_history_path,
        paths.scsynth_log_path,
        paths.tau_log_path,
        paths.jackd_log_path,
        paths.spider_log_path,
        paths.daemon_log_path,
        tools.aubio_onset_path,
        tools.sox_path,
        tools.scsynth_path,
        tools.mix_release_boot_path,
        tools.interpreter_path,
    )
}

FALLIBLE = frozenset({"scsynth_path"})

# Accessors that stat the filesystem.
TOOL_LOOKUPS = frozenset({"scsynth_path", "interpreter_path"})


def resolve(name: str, host: Host | None = None) -> str:
    """Resolve a single accessor by name.

    Raises:
        KeyError: If no accessor has that name.
        ToolNotFoundError: If a fallible tool lookup fails.
    """
    try:
        accessor = ACCESSORS[name]
    except KeyError:
        raise KeyError(name) from None
    return accessor(host)


def path_table(
    host: Host | None = None,
    include_tools: bool = True,
) -> dict[str, str | None]:
    """Resolve every accessor against one host snapshot.

    Args:
        host: Snapshot to resolve against. Defaults to the live process.
        include_tools: Include the lookups that stat the filesystem.

    Returns:
        Ordered name → path mapping. A fallible tool that cannot be found
        maps to None; errors from any other accessor propagate.
    """
    host = resolve_host(host)
    table: dict[str, str | None] = {}
    for name, accessor in ACCESSORS.items():
        if name in TOOL_LOOKUPS and not include_tools:
            continue
        if name not in FALLIBLE:
            table[name] = accessor(host)
            continue
        try:
            table[name] = accessor(host)
        except ToolNotFoundError as exc:
            logger.warning("%s: %s", name, exc)
            table[name] = None
    return table
