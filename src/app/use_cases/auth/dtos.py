"""
Authentication Use Case DTOs
"""

from pydantic import BaseModel


class LoginResponse(BaseModel):
    """Response for login use case"""

    access_token: str
    token_type: str = "bearer"
