"""
Errors raised by message repositories.
"""


class RepositoryError(Exception):
    """A repository rejected a lookup.

    The message is safe to show to callers; it describes why the room could
    not be used (blank name, unknown room, closed room).
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
