"""Open URLs in the system browser."""

import logging
import re
import subprocess
import sys
from pathlib import Path

from pr_opener.errors import BrowserLaunchError

logger = logging.getLogger(__name__)

OSRELEASE_PATH = Path("/proc/sys/kernel/osrelease")

# Characters cmd.exe treats as operators unless caret-escaped.
CMD_METACHARACTERS_RE = re.compile(r"([&|<>^])")

LINUX_OPENERS = ["xdg-open", "gnome-open", "kde-open", "wslview"]
UNIX_OPENERS = [
    "xdg-open",
    "open",
    "x-www-browser",
    "firefox",
    "chromium-browser",
    "google-chrome",
]


def read_osrelease() -> str:
    """Kernel release string, or "" where the kernel does not expose one."""
    if not OSRELEASE_PATH.exists():
        return ""
    try:
        return OSRELEASE_PATH.read_text(encoding="utf-8")
    except OSError as e:
        logger.debug("Could not read %s: %s", OSRELEASE_PATH, e)
        return ""


def escape_for_cmd(url: str) -> str:
    return CMD_METACHARACTERS_RE.sub(r"^\1", url)


def is_wsl(osrelease: str) -> bool:
    release = osrelease.lower()
    return "microsoft" in release or "wsl" in release


def launcher_candidates(url: str, platform: str, osrelease: str = "") -> list[list[str]]:
    """
    Commands that may open url on the given platform, in order of preference.

    Args:
        url: URL to open
        platform: Value of sys.platform
        osrelease: Kernel release string, used to detect WSL on Linux

    Returns:
        List of argv lists
    """
    if platform == "win32":
        return [["cmd", "/C", "start", "", escape_for_cmd(url)]]
    if platform == "darwin":
        return [["open", url]]
    if platform.startswith("linux"):
        candidates = [[opener, url] for opener in LINUX_OPENERS]
        if is_wsl(osrelease):
            candidates.append(["powershell.exe", "-Command", f"Start-Process '{url}'"])
        return candidates
    return [[opener, url] for opener in UNIX_OPENERS]


def open_url(url: str, platform: str | None = None) -> list[str]:
    """
    Spawn the first launcher that starts successfully.

    The launcher process is not waited on.

    Args:
        url: URL to open
        platform: Overrides sys.platform

    Returns:
        The argv that was spawned

    Raises:
        BrowserLaunchError: If no candidate could be started
    """
    platform = platform or sys.platform
    osrelease = read_osrelease() if platform.startswith("linux") else ""
    for cmd in launcher_candidates(url, platform, osrelease):
        try:
            subprocess.Popen(
                cmd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError as e:
            logger.debug("Could not start %s: %s", cmd[0], e)
            continue
        logger.debug("Opened URL with %s", cmd[0])
        return cmd

    raise BrowserLaunchError("Could not find a suitable program to open the URL")
