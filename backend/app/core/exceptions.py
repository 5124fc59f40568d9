"""
Domain exceptions and their HTTP mapping.

Services raise these (usually wrapped with ``to_http_exception``) so routers
stay free of status-code decisions.
"""
from typing import Any, Optional

from fastapi import HTTPException, status


class ChemLedgerException(Exception):
    code = "CHEMLEDGER_ERROR"
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class EntityNotFoundException(ChemLedgerException):
    code = "NOT_FOUND"
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, entity: str, entity_id: Any):
        super().__init__(f"{entity} not found", {"entity": entity, "id": entity_id})
        self.entity = entity
        self.entity_id = entity_id


class DuplicateEntityException(ChemLedgerException):
    code = "DUPLICATE_ENTITY"
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, entity: str, field: str, value: Any):
        super().__init__(f"{entity} with {field} '{value}' already exists", {"field": field})


class BusinessRuleViolationException(ChemLedgerException):
    code = "BUSINESS_RULE_VIOLATION"
    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationException(ChemLedgerException):
    code = "AUTHENTICATION_FAILED"
    status_code = status.HTTP_401_UNAUTHORIZED


class AuthorizationException(ChemLedgerException):
    code = "FORBIDDEN"
    status_code = status.HTTP_403_FORBIDDEN


def to_http_exception(exc: ChemLedgerException) -> HTTPException:
    headers = None
    if isinstance(exc, AuthenticationException):
        headers = {"WWW-Authenticate": "Bearer"}
    return HTTPException(
        status_code=exc.status_code,
        detail={"code": exc.code, "message": exc.message, "details": exc.details},
        headers=headers,
    )
