"""System clipboard: implements ClipboardPort using subprocess."""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys

from cite_formatter.domain.errors import ClipboardError
from cite_formatter.domain.ports.clipboard_port import ClipboardPort

logger = logging.getLogger(__name__)

_LINUX_BACKENDS: tuple[list[str], ...] = (
    ["wl-copy"],
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
)


def _detect_backend() -> list[str]:
    """Return the clipboard command appropriate for this OS.

    Returns:
        CLI command tokens (e.g. ``['xclip', '-selection', 'clipboard']``).

    Raises:
        ClipboardError: No supported clipboard tool found.
    """
    if sys.platform == "darwin":
        return ["pbcopy"]

    if sys.platform.startswith("linux"):
        for cmd in _LINUX_BACKENDS:
            if shutil.which(cmd[0]):
                return cmd
        raise ClipboardError("No clipboard tool found. Install wl-clipboard, xclip or xsel.")

    if sys.platform == "win32":
        return ["clip"]

    raise ClipboardError(f"Unsupported platform: {sys.platform}")


class SystemClipboard(ClipboardPort):
    """Clipboard adapter using OS-level subprocess commands."""

    def copy(self, text: str) -> None:
        """Copy text to system clipboard via subprocess."""
        cmd = _detect_backend()
        logger.debug("Copying via %s", cmd[0])
        try:
            subprocess.run(
                cmd,
                input=text.encode("utf-8"),
                check=True,
                capture_output=True,
            )
        except (subprocess.CalledProcessError, OSError) as exc:
            raise ClipboardError(f"Clipboard copy failed: {exc}") from exc
