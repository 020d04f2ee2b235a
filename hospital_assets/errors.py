from fastapi import HTTPException


class DomainError(Exception):
    """Base of the errors the services raise; mapped to JSON in main.py."""

    status_code = 400
    code = "DOMAIN_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_detail(self) -> dict:
        return {"code": self.code, "message": self.message}


class ReferenceNotFound(DomainError):
    """A foreign key in the input points at a row that does not exist."""

    status_code = 400
    code = "REFERENCE_NOT_FOUND"

    def __init__(self, entity: str, entity_id: int):
        super().__init__(f"{entity} with id {entity_id} does not exist")
        self.entity = entity
        self.entity_id = entity_id


class NotFound(DomainError):
    """The target row of an update or lookup does not exist."""

    status_code = 404
    code = "NOT_FOUND"

    def __init__(self, entity: str, entity_id: int):
        super().__init__(f"{entity} with id {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class UniquenessViolation(DomainError):
    status_code = 409
    code = "ALREADY_EXISTS"

    def __init__(self, entity: str, field: str):
        super().__init__(f"{entity} with this {field} already exists")
        self.entity = entity
        self.field = field


def _auth_401(code: str, message: str) -> HTTPException:
    return HTTPException(
        status_code=401,
        detail={"code": code, "message": message},
        headers={"WWW-Authenticate": "X-User-Role"},
    )


def _forbidden_403(code: str, message: str) -> HTTPException:
    return HTTPException(status_code=403, detail={"code": code, "message": message})
