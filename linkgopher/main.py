"""
Main entry point for the linkgopher CLI tool.
Handles the initial loading of config, reads the link from the arguments
or the clipboard, and prints the converted link.

With no arguments the clipboard is used, and a successful conversion
is copied back to it.
"""

import sys
import logging
from typing import List, Optional

from .clipboard_manager import Clipboard, ClipboardAccessError, PyperclipClipboard
from .config_manager import DEFAULT_CONFIG, apply_env_overrides, load_config, save_config
from .converter import convert_link
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def parse_input(args: List[str], use_clipboard: bool, clipboard: Clipboard) -> str:
    """
    Returns the link to convert, either from the clipboard or from the
    command line arguments joined with single spaces.
    Raises ClipboardAccessError if the clipboard can't be read.
    """
    if use_clipboard:
        return clipboard.read_text()
    return " ".join(args)


def run(args: List[str], config: dict, clipboard: Clipboard) -> None:
    """
    Perform one conversion and report it on stdout.
    """
    title = config.get("app_title", DEFAULT_CONFIG["app_title"])
    use_clipboard = len(args) == 0

    try:
        link = parse_input(args, use_clipboard, clipboard)
    except ClipboardAccessError as e:
        print(f"{title}: Error reading input: {e}")
        return

    result, converted_link = convert_link(link, title)
    print(result)

    if not (use_clipboard and converted_link):
        return
    if not config.get("copy_to_clipboard", True):
        logger.info("Clipboard write-back disabled, leaving clipboard untouched")
        return

    try:
        clipboard.write_text(converted_link)
    except ClipboardAccessError as e:
        print(f"{title}: Error writing to clipboard: {e}")
    else:
        print("Converted link copied to clipboard.")


def entry_point(argv: Optional[List[str]] = None, clipboard: Optional[Clipboard] = None) -> None:
    """
    This is invoked when a user types 'linkgopher' from the shell,
    via [project.scripts] linkgopher="linkgopher.main:entry_point".
    """
    if argv is None:
        argv = sys.argv[1:]
    if clipboard is None:
        clipboard = PyperclipClipboard()

    try:
        config = load_config()
        if config is None:
            # first run, store the defaults so there's a file to edit
            config = dict(DEFAULT_CONFIG)
            save_config(config)
        config = apply_env_overrides(config)
        setup_logging(config.get("log_level", "WARNING"))

        run(argv, config, clipboard)
    except KeyboardInterrupt:
        print("\nExiting...")
        sys.exit(0)
    finally:
        # Always print an empty line at the end
        print()


if __name__ == "__main__":
    entry_point()
