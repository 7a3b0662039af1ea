from pydantic import BaseModel, Field


class AccountResponse(BaseModel):
    """DTO for account response (no password); the id goes out as `_id` like a stored document"""
    id: str = Field(serialization_alias="_id")
    name: str
    email: str


class DashboardResponse(BaseModel):
    """DTO for both dashboards; the account is always reported under `mentor`"""
    message: str
    mentor: AccountResponse
