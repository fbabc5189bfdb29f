"""Domain-specific error types for analytics delivery."""


class AnalyticsError(Exception):
    """Base error for the analytics boundary."""


class QueueUnavailableError(AnalyticsError):
    """The job queue rejected or could not accept a payload."""


class AnalyticsDeliveryError(AnalyticsError):
    """Collection service call failure.

    Attributes:
        status_code: HTTP status code from the service, 0 if none.
    """

    def __init__(self, message: str, status_code: int = 0) -> None:
        super().__init__(message)
        self.status_code = status_code
