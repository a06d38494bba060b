import json
import os

from buffer_registry import DEFAULT_HEADERS, DEFAULT_URL

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
XDG_DATA_HOME = os.environ.get("XDG_DATA_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
DATA_HOME = XDG_DATA_HOME if XDG_DATA_HOME else os.path.join(HOME, ".local", "share")
CONFIG_DIR = os.path.join(CONFIG_HOME, "vreq")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")
HISTORY_PATH = os.path.join(CONFIG_DIR, "history.log")
LOG_PATH = os.path.join(CONFIG_DIR, "vreq.log")
DATA_DIR = os.path.join(DATA_HOME, "vreq", "collections")

# default settings
CLIPBOARD_INTERFACE_COMMAND_DEFAULT = None
LOG_LEVEL_DEFAULT = "INFO"
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def ensure_config_dirs():
    os.makedirs(CONFIG_DIR, exist_ok=True)
    os.makedirs(DATA_DIR, exist_ok=True)


def load_config():
    cfg = {
        "DEFAULT_URL": DEFAULT_URL,
        "DEFAULT_HEADERS": DEFAULT_HEADERS,
        "CLIPBOARD_INTERFACE_COMMAND": CLIPBOARD_INTERFACE_COMMAND_DEFAULT,
        "LOG_LEVEL": LOG_LEVEL_DEFAULT,
        "COLLECTIONS_DIR": DATA_DIR,
    }

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        return cfg
    if not isinstance(data, dict):
        return cfg

    url = data.get("default_url")
    if isinstance(url, str):
        cfg["DEFAULT_URL"] = url

    headers = data.get("default_headers")
    if isinstance(headers, dict) and all(
        isinstance(k, str) and isinstance(v, str) for k, v in headers.items()
    ):
        cfg["DEFAULT_HEADERS"] = "\n".join(f"{k}: {v}" for k, v in headers.items())

    clip_cmd = data.get("clipboard_interface_command")
    if isinstance(clip_cmd, list) and clip_cmd and all(
        isinstance(item, str) for item in clip_cmd
    ):
        cfg["CLIPBOARD_INTERFACE_COMMAND"] = clip_cmd

    level = data.get("log_level")
    if isinstance(level, str) and level.upper() in LOG_LEVELS:
        cfg["LOG_LEVEL"] = level.upper()

    collections_dir = data.get("collections_dir")
    if isinstance(collections_dir, str) and collections_dir.strip():
        cfg["COLLECTIONS_DIR"] = os.path.expanduser(collections_dir)

    return cfg
