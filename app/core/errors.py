"""
Error taxonomy for the analysis service.

Only `ValidationError` ever reaches a caller as a 4xx. Gateway failures and
unprobeable blobs degrade in place (see integrations/gateway.py and
analysis/probe.py), and internal scoring failures degrade to the default
verdict at the pipeline boundary.
"""


class AnalysisServiceError(Exception):
    """Base class for errors raised by this service."""


class ValidationError(AnalysisServiceError):
    """Required request input is missing or malformed. No pipeline work is done."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def to_response(self) -> dict:
        return {"success": False, "error": self.message}


class GatewayError(AnalysisServiceError):
    """The object gateway answered with a non-success status."""

    def __init__(self, object_id: str, status: int):
        super().__init__(f"Gateway returned status {status} for {object_id}")
        self.object_id = object_id
        self.status = status
