"""
Authorization Gate

Separates self-service operations from administrative ones. Admin use cases
call require_admin before opening the unit of work so a forbidden request
never reaches the store.
"""

from libs.result import Error, Result, Return
from src.domain.entities import Principal

FORBIDDEN = Error("FORBIDDEN", "Administrator role required")


def require_admin(principal: Principal) -> Result[None]:
    if principal is None or not principal.is_admin:
        return Return.err(FORBIDDEN)
    return Return.ok(None)
