from typing import Optional

from fastapi import status
from libs.result import Error


def error_content(error: Error, message: Optional[str] = None) -> dict:
    """JSON body shared by every error response: {"error": {"code", "message"}}"""
    return {"error": {"code": error.code, "message": message or error.message}}


class ClientError(Exception):
    """Expected failure caused by the request, rendered with its own status"""

    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    """
    Failure on the server side, always rendered as 500.

    The message is replaced by a generic one unless it was written for end
    users (expose_message=True), so internals never leak.
    """

    def __init__(self, base_error: Error, expose_message: bool = False):
        self.base_error = base_error
        self.expose_message = expose_message
        super().__init__(base_error.message)
