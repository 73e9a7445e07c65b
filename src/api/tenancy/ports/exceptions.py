"""Repository-level exceptions for the tenancy bounded context."""


class DuplicateTeamCodeError(Exception):
    """Raised when creating a team with a code that is already taken.

    Team codes double as subdomain labels, so they must be globally unique.
    """

    code = "TEAM_CODE_CONFLICT"

    def __init__(self, team_code: str) -> None:
        super().__init__(f"Team code '{team_code}' already exists")
        self.team_code = team_code
