import curses
import functools
import logging
import os
import sys

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")

import config_paths
from buffer_registry import BufferRegistry
from clipboard import copy_to_clipboard
from collections_store import CollectionError, CollectionStore
from editor import Editor
from editor_context import EditorContext
from history_manager import HistoryManager
from http_client import send_request

try:
    from _version import __version__
except ImportError:
    __version__ = "0.0.0"


logger = logging.getLogger(__name__)

USAGE = "vreq - modal terminal HTTP client\n\nUsage:\n  vreq\n  vreq -v\n  vreq -h\n"


def get_version() -> str:
    return __version__


def setup_logging(level: str) -> None:
    # curses owns the terminal, so logs only ever go to the file
    logging.basicConfig(
        filename=config_paths.LOG_PATH,
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def build_editor(cfg, history=None) -> Editor:
    store = CollectionStore(cfg["COLLECTIONS_DIR"])
    ctx = EditorContext(
        buffers=BufferRegistry(url=cfg["DEFAULT_URL"], headers=cfg["DEFAULT_HEADERS"]),
        send=send_request,
        store=store,
        copy=functools.partial(
            copy_to_clipboard, command=cfg["CLIPBOARD_INTERFACE_COMMAND"]
        ),
    )
    try:
        ctx.set_collections(store.list_names())
    except CollectionError as exc:
        logger.warning("Cannot list collections: %s", exc)
        ctx.set_status(str(exc), 4)
    return Editor(ctx, history=history)


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)

    if "-v" in args or "-V" in args:
        print(get_version())
        return 0

    if "-h" in args or "--help" in args:
        print(USAGE)
        return 0

    if args:
        print(USAGE, file=sys.stderr)
        return 2

    config_paths.ensure_config_dirs()
    cfg = config_paths.load_config()
    setup_logging(cfg["LOG_LEVEL"])
    logger.info("vreq %s starting", get_version())

    history = HistoryManager(config_paths.HISTORY_PATH, max_items=100)
    history.load()
    editor = build_editor(cfg, history=history)

    def curses_main(stdscr):
        from orchestrator import Orchestrator

        Orchestrator(stdscr, editor).run()

    try:
        curses.wrapper(curses_main)
    except KeyboardInterrupt:
        pass
    logger.info("vreq exiting")
    return 0


if __name__ == "__main__":
    sys.exit(main())
