"""HTTP status codes for tenancy domain exceptions."""

from fastapi import status

from tenancy.domain.exceptions import InvalidSubdomainError, TeamNotFoundError
from tenancy.ports.exceptions import DuplicateTeamCodeError

TENANCY_ERROR_STATUS: dict[type[Exception], int] = {
    InvalidSubdomainError: status.HTTP_400_BAD_REQUEST,
    TeamNotFoundError: status.HTTP_404_NOT_FOUND,
    DuplicateTeamCodeError: status.HTTP_409_CONFLICT,
}
