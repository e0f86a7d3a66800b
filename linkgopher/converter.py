"""
Handles:
1) Detecting whether a string is a Windows link, a Mac (smb) link, or neither,
2) Rewriting Mac links into Windows links and back,
3) Building the message shown to the user.

Everything here is pure string work, no clipboard or config access.
"""

import enum
import logging
from typing import Tuple

logger = logging.getLogger(__name__)

APP_TITLE = "LinkGopher"

WINDOWS_PREFIXES = ("file:\\\\", "\\\\")
MAC_PREFIXES = ("smb://", "//")

# ASCII whitespace plus the Unicode space separators. Unlike str.strip(),
# the \x1c-\x1f control characters are not trimmed.
WHITESPACE = (
    " \t\n\v\f\r\x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

QUOTING_HINT = (
    "\nNote: When passing a windows (file:) path as an argument, please either "
    "use single quotes for the entire path ('file:\\\\example.corp\\folder') "
    "or escape each backslash with a second one (\\\\)."
)


class LinkType(enum.Enum):
    WINDOWS = "windows"
    MAC = "mac"
    UNRECOGNIZED = "unrecognized"


def classify(possible_link: str) -> Tuple[LinkType, str]:
    """
    Returns the link type and the cleaned (trimmed) link.
    For an unrecognized link the original, untrimmed string is handed back.
    """
    trimmed = possible_link.strip(WHITESPACE)

    # Both separators present: can't tell which side it came from
    if "/" in trimmed and "\\\\" in trimmed:
        return LinkType.UNRECOGNIZED, possible_link

    if trimmed.startswith(WINDOWS_PREFIXES):
        return LinkType.WINDOWS, trimmed

    if trimmed.startswith(MAC_PREFIXES):
        return LinkType.MAC, trimmed

    return LinkType.UNRECOGNIZED, possible_link


def mac_to_windows_path(mac_path: str) -> str:
    """
    Convert e.g. smb://example.corp/share/folder/ to file:\\\\example.corp\\share\\folder
    Trailing backslashes are dropped.
    """
    mac_path = mac_path.replace("smb://", "file:\\\\")
    mac_path = mac_path.replace("//", "file:\\\\")
    windows_path = "\\".join(mac_path.split("/"))
    return windows_path.rstrip("\\")


def windows_to_mac_path(windows_path: str) -> str:
    """
    Convert e.g. file:\\\\example.corp\\share\\folder\\ to smb://example.corp/share/folder/
    # NOTE: unlike mac_to_windows_path, a trailing separator is kept.
    """
    # stray forward slashes first, so file:// ends up as file:\\
    windows_path = windows_path.replace("/", "\\")
    windows_path = windows_path.replace("file:\\\\", "smb://")
    # bare UNC form \\host\share
    windows_path = windows_path.replace("\\\\", "smb://")
    return "/".join(windows_path.split("\\"))


def convert_link(link: str, app_title: str = APP_TITLE) -> Tuple[str, str]:
    """
    Convert the given link between Windows and Mac formats.

    Returns a message describing the outcome and the converted link.
    The converted link is an empty string when nothing was recognized.
    """
    link_type, cleaned = classify(link)
    logger.debug("Classified %r as %s", link, link_type.value)

    if link_type is LinkType.WINDOWS:
        converted = windows_to_mac_path(cleaned)
        return f"{app_title} - Converted Windows to Mac Path: \n{converted}", converted

    if link_type is LinkType.MAC:
        converted = mac_to_windows_path(cleaned)
        return f"{app_title} - Converted Mac to Windows Path: \n{converted}", converted

    # shells eat unescaped backslashes, so a mangled file: link is the usual culprit
    extra_info = QUOTING_HINT if "file:" in cleaned else ""
    return f"{app_title} - No valid link detected!{extra_info}", ""
