"""Exceptions for mpd-ynca."""


class MpdYncaException(Exception):
    """Base exception for errors."""


class ReceiverError(MpdYncaException):
    """Raised on errors talking to the receiver."""


class CannotConnect(ReceiverError, ConnectionError):
    """Raised when the receiver can't be resolved or connected."""


class NotConnected(ReceiverError):
    """Raised when a command is sent without an open connection."""


class PlayerError(MpdYncaException):
    """Raised when the connection to MPD fails or MPD reports an error."""


class ConfigError(MpdYncaException):
    """Raised when the configuration is missing or invalid."""
