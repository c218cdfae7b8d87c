from fastapi import Request, status
from fastapi.responses import JSONResponse
from libs.result import Error


class ClientError(Exception):
    """Use-case error surfaced to the HTTP caller"""

    def __init__(self, error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code


async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": {
                "code": exc.error.code,
                "message": exc.error.message,
            }
        },
    )


# Quota lockouts are a signal for the caller, not a failure
LOCKOUT_CODES = ("GUEST_INVOICE_LIMIT_REACHED", "GUEST_EXPORT_LIMIT_REACHED")


def status_code_for(error: Error) -> int:
    if error.code in LOCKOUT_CODES:
        return status.HTTP_403_FORBIDDEN
    if error.code.endswith("_NOT_FOUND") or error.code == "NO_DATA_TO_EXPORT":
        return status.HTTP_404_NOT_FOUND
    if error.code == "INVOICE_ALREADY_PAID":
        return status.HTTP_409_CONFLICT
    if error.code.endswith("_FAILED"):
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return status.HTTP_400_BAD_REQUEST
