"""일정 관련 Pydantic 요청/응답 스키마 정의.

Todo Pydantic request/response schema definitions.
"""

from datetime import datetime
from pydantic import BaseModel, Field

from app.schemas.common import UserSummary


class TodoSaveRequest(BaseModel):
    """일정 생성 요청 스키마.

    Todo creation request schema. The weather tag is not supplied by the
    client; it is looked up for the creation date.

    Attributes:
        title: 일정 제목 (Todo title)
        contents: 일정 내용 (Todo body)
    """

    title: str = Field(min_length=1, max_length=255)
    contents: str = Field(min_length=1)


class TodoSaveResponse(BaseModel):
    """일정 생성 응답 스키마.

    Attributes:
        id: 일정 UUID (Todo identifier)
        title: 일정 제목 (Todo title)
        contents: 일정 내용 (Todo body)
        weather: 날씨 태그 (Weather tag)
        user: 작성자 요약 (Owner summary)
    """

    id: str
    title: str
    contents: str
    weather: str
    user: UserSummary


class TodoResponse(BaseModel):
    """일정 조회 응답 스키마.

    Todo read response schema. The owner is always embedded.
    """

    id: str
    title: str
    contents: str
    weather: str
    user: UserSummary
    created_at: datetime
    modified_at: datetime


class TodoSearchResponse(BaseModel):
    """일정 검색 요약 응답 스키마.

    Todo search summary row.

    Attributes:
        title: 일정 제목 (Todo title)
        manager_count: 담당자 수 (Number of managers)
        comment_count: 댓글 수 (Number of comments)
    """

    title: str
    manager_count: int
    comment_count: int
