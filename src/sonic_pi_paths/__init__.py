"""Sonic Pi path resolution: installation, user and native tool paths."""

from sonic_pi_paths.errors import PathsError, ToolNotFoundError, UnsupportedPlatformError
from sonic_pi_paths.host import Host, OSFamily, detect_os
from sonic_pi_paths.paths import (
    app_path,
    buffers_path,
    cached_samples_path,
    cheatsheets_path,
    config_path,
    daemon_log_path,
    doc_path,
    erlang_bin_dir,
    erlang_root_dir,
    etc_path,
    examples_path,
    home_dir_path,
    html_public_path,
    init_path,
    jackd_log_path,
    log_history_path,
    log_path,
    native_path,
    original_init_path,
    project_path,
    qt_gui_path,
    root_path,
    samples_path,
    scsynth_log_path,
    scsynth_raspberry_plugin_path,
    scsynth_windows_plugin_path,
    server_bin_path,
    server_path,
    snippets_path,
    spider_log_path,
    spider_server_path,
    synthdef_path,
    system_cache_store_path,
    system_store_path,
    tau_app_path,
    tau_log_path,
    tmp_path,
    tutorial_path,
    user_audio_settings_path,
    user_config_examples_path,
    user_dir,
)
from sonic_pi_paths.table import ACCESSORS, path_table, resolve
from sonic_pi_paths.tools import (
    aubio_onset_path,
    interpreter_path,
    mix_release_boot_path,
    scsynth_path,
    sox_path,
)

__version__ = "0.1.0"

__all__ = [
    "ACCESSORS",
    "Host",
    "OSFamily",
    "PathsError",
    "ToolNotFoundError",
    "UnsupportedPlatformError",
    "detect_os",
    "path_table",
    "resolve",
    *ACCESSORS,
]
