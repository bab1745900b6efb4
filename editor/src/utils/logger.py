"""Error reporting helpers shared by the main window and dialogs.

loggerRaise() is the one place failures are surfaced to the user: it logs
the traceback, shows a critical message box when a window is available,
then re-raises so callers never continue on a failed operation.
"""
import os
import sys
import logging
from PyQt5.QtWidgets import QMessageBox

# Source checkouts re-raise immediately (full traceback, no popup);
# frozen builds, or STITCHCRAFT_DEBUG=0, report through a dialog first
DEBUG_MODE = os.environ.get('STITCHCRAFT_DEBUG', '1' if not getattr(sys, 'frozen', False) else '0') == '1'

logger = logging.getLogger('StitchCraft')

_main_window = None


def set_main_window(window):
    """Parent for error dialogs (None disables them)"""
    global _main_window
    _main_window = window


def show_error(title, message):
    if _main_window is None:
        logger.error(f"{title}: {message}")
        return
    QMessageBox.critical(_main_window, title, message)


def loggerRaise(e: Exception, user_message: str = None, title: str = "Error"):
    """Report an exception, then re-raise it

    Args:
        e: The exception being handled
        user_message: Text for the dialog (defaults to str(e))
        title: Dialog title
    """
    if DEBUG_MODE:
        raise e

    message = user_message or str(e)
    logger.error(message, exc_info=e)
    show_error(title, message)
    raise e
