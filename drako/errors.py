"""
Drako errors.
"""

class DrakoError(Exception):
    """Base exception for all drako errors."""
    pass

class UsageError(DrakoError):
    """Errors in how drako was invoked; abort before touching the filesystem."""

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.exit_code = exit_code

class ActionError(DrakoError):
    """An initialization action could not be carried out."""
    pass
