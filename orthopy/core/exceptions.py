"""Exceptions raised by OrthoPy."""


class SessionIOError(RuntimeError):
    """A file could not be read, written, moved or deleted.

    Fatal for the current session: callers report it to the user and abort.
    """
