"""
Exceptions raised by the Panda integration.

API client implementations plugged in through PANDA_API_FACTORY should
raise ApiError (or another PandaError subclass) so that management
commands and views can report failures without a traceback.
"""

from typing import Optional


class PandaError(Exception):
    """Base class for every error raised while talking to Panda"""

    pass


class ApiError(PandaError):
    """Raised when the Panda service rejects a request or cannot be reached"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class UploadError(PandaError):
    """Raised when pushing a file to an upload session fails"""

    pass


class UnknownCloud(PandaError):
    """Raised when a cloud name is not configured"""

    def __init__(self, name):
        super().__init__(f'No cloud named "{name}" is configured')
        self.name = name


class UnknownTransformer(PandaError, KeyError):
    """Raised when no transformer is registered for a model name"""

    def __init__(self, name):
        super().__init__(f'No transformer registered for "{name}"')
        self.name = name

    def __str__(self):
        return self.args[0]
