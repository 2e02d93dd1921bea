"""clipboard writes through platform commands."""

import logging
import shutil
import subprocess
from typing import Optional

logger = logging.getLogger(__name__)

# tried in order; the first one installed is used
CLIPBOARD_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("pbcopy",),
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
    ("clip",),
)


def find_clipboard_command() -> Optional[tuple[str, ...]]:
    """returns the first available clipboard command, or None."""
    for command in CLIPBOARD_COMMANDS:
        if shutil.which(command[0]):
            return command
    return None


def copy_to_clipboard(text: str) -> bool:
    """
    writes text to the system clipboard.

    Args:
        text: text to copy

    Returns:
        True if the write succeeded, False otherwise (never retried)
    """
    command = find_clipboard_command()
    if command is None:
        logger.warning("No clipboard command found")
        return False

    try:
        subprocess.run(
            list(command),
            input=text,
            check=True,
            capture_output=True,
            text=True,
        )
    except (subprocess.CalledProcessError, OSError) as e:
        logger.warning("Clipboard write failed: %s", e)
        return False
    return True
