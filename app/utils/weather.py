"""날씨 조회 유틸리티 — 오늘 날씨 피드 (httpx).

Weather lookup utility. Fetches the daily weather feed configured by
WEATHER_API_URL and picks today's entry.

Feed format:
    [{"date": "10-18", "weather": "Sunny"}, ...]   # date는 MM-dd
"""

from datetime import datetime, timezone

import httpx
import structlog

from app.config import settings
from app.utils.exceptions import ServerError

logger = structlog.get_logger(__name__)


class WeatherClient:
    """날씨 피드 클라이언트 (Daily weather feed client)."""

    def __init__(self, url: str, timeout: float) -> None:
        self.url: str = url
        self.timeout: float = timeout

    async def _fetch(self) -> list[dict]:
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                response = await client.get(self.url)
            except httpx.HTTPError as exc:
                logger.warning("weather_fetch_failed", url=self.url, error=str(exc))
                raise ServerError("날씨 데이터를 가져오는데 실패했습니다 (Failed to fetch weather data)") from exc

        if response.status_code != 200:
            logger.warning("weather_fetch_failed", url=self.url, status_code=response.status_code)
            raise ServerError(
                f"날씨 데이터를 가져오는데 실패했습니다. 상태 코드: {response.status_code} "
                f"(Failed to fetch weather data, status {response.status_code})"
            )
        try:
            entries = response.json()
        except ValueError as exc:
            logger.warning("weather_fetch_failed", url=self.url, error="invalid json body")
            raise ServerError("날씨 데이터 형식이 올바르지 않습니다 (Malformed weather feed)") from exc
        if entries is None:
            return []
        if not isinstance(entries, list):
            logger.warning("weather_fetch_failed", url=self.url, error="feed is not a list")
            raise ServerError("날씨 데이터 형식이 올바르지 않습니다 (Malformed weather feed)")
        return entries

    async def get_today_weather(self) -> str:
        """오늘(UTC 기준) 날씨를 반환합니다.

        Return the weather tag for today's date.

        Raises:
            ServerError: 피드 조회 실패, 형식 오류, 빈 피드, 오늘 데이터 없음
                         (Feed unreachable, malformed, empty, or missing today's entry)
        """
        entries: list[dict] = await self._fetch()
        if not entries:
            raise ServerError("날씨 데이터가 없습니다 (Weather feed is empty)")

        today: str = datetime.now(timezone.utc).strftime("%m-%d")
        for entry in entries:
            if not isinstance(entry, dict) or entry.get("date") != today:
                continue
            weather = entry.get("weather")
            if not isinstance(weather, str):
                logger.warning("weather_fetch_failed", url=self.url, error="today's entry has no weather")
                raise ServerError("날씨 데이터 형식이 올바르지 않습니다 (Malformed weather feed)")
            return weather

        raise ServerError("오늘에 해당하는 날씨 데이터를 찾을 수 없습니다 (No weather entry for today)")


# 싱글턴 인스턴스 — Singleton instance
weather_client: WeatherClient = WeatherClient(
    settings.WEATHER_API_URL, settings.WEATHER_TIMEOUT_SECONDS
)
