"""Errors raised by the request handlers and mapped to HTTP statuses in main."""

from fastapi import status


class GatewayError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ClientUnavailable(GatewayError):
    """The provider needed for this request was never configured."""

    status_code = status.HTTP_400_BAD_REQUEST


class UpstreamError(GatewayError):
    """The provider call failed; the message embeds the provider's error text."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
