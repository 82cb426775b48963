"""레포지토리 패키지 — 일정, 담당자, 댓글, 사용자, 로그 쿼리 계층.

Repository package. Each module exposes a BaseRepository subclass and a
module-level singleton; todo_repository owns the optional-filter search
and the owner join fetch.
"""
