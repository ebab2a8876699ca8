# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Domain error taxonomy, mapped to HTTP responses in main.py."""


class GolfClubError(Exception):
    """Base class for errors caused by caller input."""

    code = "error"
    status_code = 400


class NotFoundError(GolfClubError):
    code = "not_found"
    status_code = 404

    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found with id: {entity_id}")


class ConflictError(GolfClubError):
    code = "conflict"
    status_code = 409


class ValidationError(GolfClubError):
    code = "validation_error"
    status_code = 422
