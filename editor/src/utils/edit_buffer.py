"""Text buffers behind the numeric property fields.

A buffer holds whatever the user has typed. Only text that parses to a
finite number (and passes the buffer's own range check) is handed to the
commit callback; everything else stays local and is discarded on blur.
"""

import logging

from constants import MAX_ANGLE_STEP
from utils.number_utils import parse_finite_number, format_number

logger = logging.getLogger('EditBuffer')


class NumericEditBuffer:
    """Edit buffer for one numeric field.

    Args:
        on_commit: Called with each valid value as the user types
        value: Initial external value (None shows an empty field)
    """

    def __init__(self, on_commit=None, value=None):
        self.on_commit = on_commit
        self.value = value
        self.text = format_number(value)

    def accepts(self, value):
        return True

    def set_text(self, text):
        """User typed: keep the text, commit if it parses and is accepted.

        Returns:
            The committed value, or None if the text was held back
        """
        self.text = text
        parsed = parse_finite_number(text)
        if parsed is None or not self.accepts(parsed):
            return None
        if self.on_commit is not None:
            self.on_commit(parsed)
        return parsed

    def sync(self, value):
        """External value changed (store update, selection change).

        Text that already parses to the same value is left alone so typing
        '1.0' is not rewritten to '1' mid-edit.
        """
        self.value = value
        if value is None:
            self.text = ''
        elif parse_finite_number(self.text) != value:
            self.text = format_number(value)

    def blur(self):
        """Focus left: drop partial input, show the last valid value"""
        self.text = format_number(self.value)
        return self.text


class StepEditBuffer(NumericEditBuffer):
    """Angle step field: only 0 < step <= 90 is accepted."""

    def accepts(self, value):
        if 0 < value <= MAX_ANGLE_STEP:
            return True
        logger.debug(f"Rejected angle step: {value}")
        return False

    def set_text(self, text):
        committed = super().set_text(text)
        if committed is not None:
            self.value = committed
        return committed
