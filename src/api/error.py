from fastapi import status

from src.libs.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


ERROR_STATUS = {
    "UNAUTHORIZED": status.HTTP_401_UNAUTHORIZED,
    "INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED,
    "CREDENTIAL_ERROR": status.HTTP_400_BAD_REQUEST,
    "INVALID_CODE": status.HTTP_400_BAD_REQUEST,
    "DUPLICATE_STEP_ORDER": status.HTTP_400_BAD_REQUEST,
    "CONSTRAINT_VIOLATION": status.HTTP_409_CONFLICT,
    "INVALID_STATUS_TRANSITION": status.HTTP_409_CONFLICT,
}


def raise_for_error(error: Error) -> None:
    """
    Map a use case error to its HTTP exception

    Raises:
        ClientError: known client-side codes, *_NOT_FOUND (404) and
            *_ALREADY_EXISTS (409)
        ServerError: anything else
    """
    if error.code in ERROR_STATUS:
        raise ClientError(error, status_code=ERROR_STATUS[error.code])
    if error.code.endswith("_NOT_FOUND"):
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    if error.code.endswith("_ALREADY_EXISTS"):
        raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
    raise ServerError(error)
