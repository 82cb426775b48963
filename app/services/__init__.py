"""서비스 패키지 — 인증, 사용자, 일정, 댓글, 담당자 비즈니스 규칙.

Service package. Services raise the HTTP exceptions in app.utils.exceptions
and leave commits to the routers, except log_service which commits its own
independent transaction.
"""
