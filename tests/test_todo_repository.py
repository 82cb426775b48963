"""일정 레포지토리 테스트 — 선택 조건 조회, 작성자 fetch join, 요약 검색.

Todo repository tests — Optional-filter lookup, owner join fetch,
owner-as-manager creation and summary search.
"""

import uuid
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import select

from app.models.comment import Comment
from app.models.todo import Manager, Todo
from app.repositories.todo_repository import to_utc, todo_repository
from tests.conftest import StatementCounter, create_user

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
async def dated_todos(db, owner):
    """수정일과 날씨가 서로 다른 일정 4개를 생성합니다.

    a: Sunny  T0+1d
    b: Rainy  T0+2d
    c: Sunny  T0+3d
    d: Rainy  T0+4d
    """
    rows = [
        ("a", "Sunny", T0 + timedelta(days=1)),
        ("b", "Rainy", T0 + timedelta(days=2)),
        ("c", "Sunny", T0 + timedelta(days=3)),
        ("d", "Rainy", T0 + timedelta(days=4)),
    ]
    for title, weather, modified_at in rows:
        db.add(Todo(
            title=title,
            contents=f"{title} contents",
            weather=weather,
            user_id=owner.id,
            created_at=modified_at,
            modified_at=modified_at,
        ))
    await db.commit()


# ===== to_utc =====

class TestToUtc:
    """비교용 시각 정규화 테스트."""

    def test_none(self):
        assert to_utc(None) is None

    def test_naive_is_taken_as_utc(self):
        assert to_utc(datetime(2024, 1, 1, 9, 0)) == datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)

    def test_offset_is_converted(self):
        kst = timezone(timedelta(hours=9))
        result = to_utc(datetime(2024, 1, 1, 9, 0, tzinfo=kst))
        assert result == datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc)
        assert result.tzinfo == timezone.utc


# ===== find_by_filters =====

class TestFindByFilters:
    """선택 조건 조회 테스트."""

    @pytest.mark.parametrize(
        ("weather", "start", "end", "expected"),
        [
            (None, None, None, ["d", "c", "b", "a"]),
            ("Sunny", None, None, ["c", "a"]),
            (None, T0 + timedelta(days=2), None, ["d", "c", "b"]),
            (None, None, T0 + timedelta(days=3), ["c", "b", "a"]),
            ("Sunny", T0 + timedelta(days=2), None, ["c"]),
            ("Sunny", None, T0 + timedelta(days=3), ["c", "a"]),
            (None, T0 + timedelta(days=2), T0 + timedelta(days=3), ["c", "b"]),
            ("Rainy", T0 + timedelta(days=2), T0 + timedelta(days=3), ["b"]),
        ],
    )
    async def test_filter_combinations(self, db, dated_todos, weather, start, end, expected):
        """지정한 조건만 적용되고, 수정일 내림차순으로 반환."""
        todos = await todo_repository.find_by_filters(db, weather, start, end)
        assert [t.title for t in todos] == expected

    async def test_bounds_are_inclusive(self, db, dated_todos):
        """start == end == 수정일이면 해당 일정이 포함됨."""
        exact = T0 + timedelta(days=2)
        todos = await todo_repository.find_by_filters(db, start=exact, end=exact)
        assert [t.title for t in todos] == ["b"]

    async def test_start_after_end_is_empty(self, db, dated_todos):
        """start > end는 오류 없이 빈 결과."""
        todos = await todo_repository.find_by_filters(
            db, start=T0 + timedelta(days=4), end=T0 + timedelta(days=1)
        )
        assert list(todos) == []

    async def test_empty_weather_is_a_real_filter(self, db, dated_todos):
        """빈 문자열 날씨는 조건 없음이 아니라 일치하는 값 없음."""
        todos = await todo_repository.find_by_filters(db, weather="")
        assert list(todos) == []

    async def test_unknown_weather_is_empty(self, db, dated_todos):
        todos = await todo_repository.find_by_filters(db, weather="Snowy")
        assert list(todos) == []

    async def test_offset_bounds_match_utc_values(self, db, dated_todos):
        """다른 오프셋의 시각도 같은 순간으로 비교."""
        kst = timezone(timedelta(hours=9))
        start = (T0 + timedelta(days=3)).astimezone(kst)
        todos = await todo_repository.find_by_filters(db, start=start)
        assert [t.title for t in todos] == ["d", "c"]

    async def test_owner_loaded_in_one_statement(self, engine, session_factory, dated_todos):
        """작성자가 같은 SELECT로 로드되어 추가 쿼리가 없음."""
        with StatementCounter(engine) as counter:
            async with session_factory() as session:
                todos = await todo_repository.find_by_filters(session, weather="Sunny")
                nicknames = {t.user.nickname for t in todos}

        assert nicknames == {"owner"}
        assert len(counter.statements) == 1

    async def test_no_todos(self, db):
        assert list(await todo_repository.find_by_filters(db)) == []


# ===== get_filtered =====

class TestGetFiltered:
    """페이지네이션 조회 테스트."""

    async def test_pagination(self, db, dated_todos):
        todos, total = await todo_repository.get_filtered(db, page=2, per_page=3)
        assert total == 4
        assert [t.title for t in todos] == ["a"]

    async def test_total_respects_filters(self, db, dated_todos):
        todos, total = await todo_repository.get_filtered(db, weather="Rainy", per_page=1)
        assert total == 2
        assert [t.title for t in todos] == ["d"]


# ===== get_with_user =====

class TestGetWithUser:
    """작성자 fetch join 단건 조회 테스트."""

    async def test_missing_id_returns_none(self, db, dated_todos):
        assert await todo_repository.get_with_user(db, uuid.uuid4()) is None

    async def test_loads_owner_in_one_statement(self, engine, session_factory, owner, make_todo):
        todo = await make_todo(owner)

        with StatementCounter(engine) as counter:
            async with session_factory() as session:
                found = await todo_repository.get_with_user(session, todo.id)
                assert found is not None
                assert found.title == "Write report"
                assert found.user.email == "owner@test.com"

        assert len(counter.statements) == 1


# ===== create_with_owner =====

class TestCreateWithOwner:
    """작성자 자동 담당자 등록 테스트."""

    async def test_owner_is_first_manager(self, db, owner, make_todo):
        todo = await make_todo(owner)

        result = await db.execute(select(Manager).where(Manager.todo_id == todo.id))
        managers = result.scalars().all()
        assert len(managers) == 1
        assert managers[0].user_id == owner.id
        assert todo.user_id == owner.id

    async def test_timestamps_set(self, db, owner, make_todo):
        todo = await make_todo(owner)
        assert todo.created_at is not None
        assert todo.modified_at is not None


# ===== search_summaries =====

class TestSearchSummaries:
    """제목/담당자 닉네임/생성일 요약 검색 테스트."""

    @pytest.fixture
    async def summaries(self, db, owner, make_todo):
        helper = await create_user(db, "helper@test.com", "Helper Kim")
        meeting = await make_todo(owner, title="Team Meeting")
        report = await make_todo(owner, title="Monthly report")

        db.add(Manager(todo_id=meeting.id, user_id=helper.id))
        db.add(Comment(contents="first", user_id=owner.id, todo_id=meeting.id))
        db.add(Comment(contents="second", user_id=helper.id, todo_id=meeting.id))
        db.add(Comment(contents="only", user_id=owner.id, todo_id=report.id))
        await db.commit()
        return meeting, report

    async def test_counts(self, db, summaries):
        rows, total = await todo_repository.search_summaries(db)
        counts = {row.title: (row.manager_count, row.comment_count) for row in rows}
        assert total == 2
        assert counts == {"Team Meeting": (2, 2), "Monthly report": (1, 1)}

    async def test_title_is_case_insensitive_substring(self, db, summaries):
        rows, total = await todo_repository.search_summaries(db, title="MEET")
        assert total == 1
        assert rows[0].title == "Team Meeting"

    async def test_nickname_filter_keeps_full_manager_count(self, db, summaries):
        """닉네임 조건이 담당자 수를 줄이지 않음."""
        rows, total = await todo_repository.search_summaries(db, nickname="helper")
        assert total == 1
        assert rows[0].title == "Team Meeting"
        assert rows[0].manager_count == 2

    async def test_nickname_matching_owner_hits_all(self, db, summaries):
        rows, total = await todo_repository.search_summaries(db, nickname="own")
        assert total == 2

    async def test_created_range(self, db, summaries):
        future = datetime.now(timezone.utc) + timedelta(days=1)
        rows, total = await todo_repository.search_summaries(db, start=future)
        assert total == 0
        assert list(rows) == []

    async def test_no_match(self, db, summaries):
        rows, total = await todo_repository.search_summaries(db, title="nothing")
        assert total == 0

    async def test_title_underscore_is_literal(self, db, owner, make_todo):
        """'_'는 임의의 한 글자가 아니라 문자 그대로 비교."""
        await make_todo(owner, title="a_b plan")
        await make_todo(owner, title="axb plan")

        rows, total = await todo_repository.search_summaries(db, title="a_b")
        assert total == 1
        assert rows[0].title == "a_b plan"

    async def test_title_percent_is_literal(self, db, owner, make_todo):
        await make_todo(owner, title="100% done")
        await make_todo(owner, title="100 items")

        rows, total = await todo_repository.search_summaries(db, title="100%")
        assert total == 1
        assert rows[0].title == "100% done"

    async def test_nickname_underscore_is_literal(self, db, owner, make_todo):
        lee = await create_user(db, "lee@test.com", "lee_k")
        lex = await create_user(db, "lex@test.com", "leexk")
        first = await make_todo(owner, title="first")
        second = await make_todo(owner, title="second")
        db.add(Manager(todo_id=first.id, user_id=lee.id))
        db.add(Manager(todo_id=second.id, user_id=lex.id))
        await db.commit()

        rows, total = await todo_repository.search_summaries(db, nickname="e_k")
        assert total == 1
        assert rows[0].title == "first"
