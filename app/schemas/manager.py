"""담당자 Pydantic 스키마.

Manager request/response schemas.
"""

from pydantic import BaseModel

from app.schemas.common import UserSummary


class ManagerSaveRequest(BaseModel):
    """담당자 등록 요청 스키마.

    Attributes:
        manager_user_id: 담당자로 등록할 사용자 UUID (User to register as manager)
    """

    manager_user_id: str


class ManagerSaveResponse(BaseModel):
    id: str
    user: UserSummary


class ManagerResponse(BaseModel):
    id: str
    user: UserSummary
