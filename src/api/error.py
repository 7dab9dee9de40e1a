from fastapi import status
from libs.result import Error

# Error code -> HTTP status for errors that are safe to show to the caller
CLIENT_ERROR_STATUS = {
    "MALFORMED_INPUT": status.HTTP_400_BAD_REQUEST,
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "UNAUTHORIZED": status.HTTP_401_UNAUTHORIZED,
    "INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "ACCOUNT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "INVALID_OR_EXPIRED_TOKEN": status.HTTP_404_NOT_FOUND,
    "EMAIL_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
    "USERNAME_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
}


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def raise_for_error(error: Error):
    """Raise ClientError for known client-facing codes, ServerError otherwise"""
    status_code = CLIENT_ERROR_STATUS.get(error.code)
    if status_code is not None:
        raise ClientError(error, status_code=status_code)
    raise ServerError(error)
