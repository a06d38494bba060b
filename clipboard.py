import logging
import shutil
import subprocess
from typing import Optional


logger = logging.getLogger(__name__)

FALLBACK_COMMANDS = (
    ["wl-copy"],
    ["xclip", "-selection", "clipboard"],
    ["pbcopy"],
)


def resolve_command(command: Optional[list[str]] = None) -> Optional[list[str]]:
    if command:
        return list(command)
    for candidate in FALLBACK_COMMANDS:
        if shutil.which(candidate[0]):
            return list(candidate)
    return None


def copy_to_clipboard(text: str, command: Optional[list[str]] = None) -> bool:
    """Hand text to the system clipboard. Failures are logged and ignored."""
    argv = resolve_command(command)
    if argv is None:
        logger.debug("No clipboard command available")
        return False
    try:
        subprocess.run(argv, input=text, text=True, check=True)
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug("Clipboard copy via %s failed: %s", argv[0], exc)
        return False
    return True
