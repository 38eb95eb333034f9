"""Status definitions and exceptions for PrefsPanel.

This module provides:
    - Status: enumeration of possible store states
    - STATUS_MESSAGE: user-facing messages for each status
    - get_message: retrieve the message for a status
    - BaseStatusException: base exception carrying a Status
    - Specific exceptions raised by the preference store and the snapshot functions
"""
import enum
import logging
from typing import Dict


class Status(enum.StrEnum):
    """Enumeration of store status codes."""
    UnknownStatus = enum.auto()
    Okay = enum.auto()

    StoreAccessError = enum.auto()
    StoreFormatError = enum.auto()

    UnknownPreferenceKey = enum.auto()


STATUS_MESSAGE: Dict[Status, str] = {
    Status.UnknownStatus: 'Unknown status.',
    Status.Okay: 'Everything is okay.',

    Status.StoreAccessError: 'Could not write the preferences file. Is the location writable?',
    Status.StoreFormatError: 'The preferences file seems to be malformed.',

    Status.UnknownPreferenceKey: 'The preference key is not part of the registry.',
}


def get_message(status: Status) -> str:
    """
    Get the message for a given status.

    Args:
        status (Status): The status enum.

    Returns:
        str: The message associated with the status.
    """
    return STATUS_MESSAGE.get(status, 'Unknown status')


class BaseStatusException(Exception):
    """Base exception for status-based errors in PrefsPanel.

    Attributes:
        status (Status): Status code associated with this error.
        status_message (str): User-facing message for the status.

    Args:
        message (str): Optional additional context for the error.
    """
    status = Status.UnknownStatus

    def __init__(self, message: str = None):
        self.status_message = get_message(self.status)
        exception_message = f'{self.status_message} {message}' if message else self.status_message
        super().__init__(exception_message)

        logging.error(exception_message)

        from ..ui.actions import signals
        signals.error.emit(message or self.status_message)


class StoreAccessException(BaseStatusException):
    """Raised when the preferences file cannot be read or written."""
    status = Status.StoreAccessError


class StoreFormatException(BaseStatusException):
    """Raised when the preferences file cannot be parsed."""
    status = Status.StoreFormatError


class UnknownPreferenceKeyException(BaseStatusException, KeyError):
    """Raised when a key outside the preference registry is used."""
    status = Status.UnknownPreferenceKey
