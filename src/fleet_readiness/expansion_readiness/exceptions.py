from http import HTTPStatus

from fastapi import HTTPException


class ExpansionReadinessException(HTTPException):
    """Base exception class for expansion readiness errors."""

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR
    message = "An error occurred while scoring expansion readiness."

    def __init__(
        self,
        status_code: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR,
        message: str = "An error occurred while scoring expansion readiness.",
    ):
        self.status_code = status_code
        self.message = message or self.message
        super().__init__(status_code=status_code, detail=self.message)


class FleetUtilizationException(ExpansionReadinessException):
    """Fleet utilization could not be computed."""

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR
    message = "Failed to compute fleet utilization"

    def __init__(self):
        super().__init__(status_code=self.status_code, message=self.message)


class ExpansionReadinessCalculationException(ExpansionReadinessException):
    """The readiness summary could not be computed."""

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR
    message = "Failed to calculate expansion readiness"

    def __init__(self):
        super().__init__(status_code=self.status_code, message=self.message)
