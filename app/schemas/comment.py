"""댓글 Pydantic 스키마.

Comment request/response schemas.
"""

from pydantic import BaseModel, Field

from app.schemas.common import UserSummary


class CommentSaveRequest(BaseModel):
    contents: str = Field(min_length=1)


class CommentSaveResponse(BaseModel):
    id: str
    contents: str
    user: UserSummary


class CommentResponse(BaseModel):
    id: str
    contents: str
    user: UserSummary
