"""Errors raised by the service layer and rendered as ``{"error": message}``."""


class DashboardError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UpstreamError(DashboardError):
    """The Sleeper API answered non-2xx, timed out, or was unreachable."""


class ProviderError(DashboardError):
    """The text-generation provider call failed."""


class InvalidRequestError(DashboardError):
    status_code = 400
