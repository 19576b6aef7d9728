"""Errors raised by the foods API gateway."""


class GatewayError(Exception):
    """A foods API call failed."""

    def __init__(self, action: str, message: str) -> None:
        super().__init__(message)
        self.action = action
        self.message = message


class GatewayTransportError(GatewayError):
    """The foods API could not be reached."""


class GatewayHTTPError(GatewayError):
    """The foods API answered with a non-2xx status."""

    def __init__(self, action: str, message: str, status_code: int) -> None:
        super().__init__(action, message)
        self.status_code = status_code
