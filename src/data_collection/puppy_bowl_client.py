"""
Puppy Bowl API Client.

비동기 HTTP 클라이언트로 Puppy Bowl API와 통신합니다.
모든 공개 메서드는 실패 시 예외 대신 로그를 남기고 실패 결과(ApiResult)를 반환합니다.
재시도/캐싱은 하지 않습니다.
"""

import asyncio
from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Optional, TypeVar

import aiohttp
from aiohttp import ClientTimeout

from app.models.data_types import NewPlayer, Player, PlayerId
from config.constants import PLAYERS_ENDPOINT
from src.utils.logger import logger


T = TypeVar("T")


class PuppyBowlAPIError(Exception):
    """Puppy Bowl API 에러 기본 클래스"""
    pass


class PuppyBowlNotFoundError(PuppyBowlAPIError):
    """존재하지 않는 선수"""
    pass


class PuppyBowlResponseError(PuppyBowlAPIError):
    """응답 본문 파싱 실패 또는 success=false 응답"""
    pass


# 각 오퍼레이션 경계에서 잡는 예외
CLIENT_ERRORS = (
    aiohttp.ClientError,
    asyncio.TimeoutError,
    PuppyBowlAPIError,
    ValueError,
    KeyError,
    TypeError,
)


@dataclass
class ApiResult(Generic[T]):
    """API 호출 결과 (성공/실패)"""
    ok: bool
    data: Optional[T] = None
    error: Optional[BaseException] = None

    @classmethod
    def success(cls, data: Optional[T] = None) -> "ApiResult[T]":
        return cls(ok=True, data=data)

    @classmethod
    def failure(cls, error: BaseException) -> "ApiResult[T]":
        return cls(ok=False, error=error)

    def unwrap(self) -> Optional[T]:
        """
        성공이면 데이터를, 실패면 저장된 예외를 발생시킵니다.

        Raises:
            저장된 예외 (없으면 PuppyBowlAPIError)
        """
        if not self.ok:
            raise self.error or PuppyBowlAPIError("API call failed")
        return self.data


@dataclass
class PuppyBowlClientConfig:
    """클라이언트 설정"""
    base_url: str = "https://fsa-puppy-bowl.herokuapp.com/api"
    cohort_name: str = "2306-FTB-ET-WEB-FT"
    timeout: int = 30

    @property
    def api_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/{self.cohort_name.strip('/')}/"


class PuppyBowlClient:
    """
    Puppy Bowl API 비동기 클라이언트.

    Usage:
        async with PuppyBowlClient(config) as client:
            result = await client.list_players()
            if result.ok:
                players = result.data
    """

    def __init__(self, config: PuppyBowlClientConfig):
        """
        Args:
            config: 클라이언트 설정
        """
        self.config = config
        self._session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self) -> "PuppyBowlClient":
        """컨텍스트 매니저 진입"""
        await self._create_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """컨텍스트 매니저 종료"""
        await self.close()

    async def _create_session(self) -> None:
        """HTTP 세션 생성"""
        if self._session is None or self._session.closed:
            timeout = ClientTimeout(total=self.config.timeout)
            self._session = aiohttp.ClientSession(
                timeout=timeout,
                headers={
                    "Accept": "application/json",
                    "User-Agent": "PuppyBowl-Roster/1.0"
                }
            )

    async def close(self) -> None:
        """리소스 정리"""
        if self._session and not self._session.closed:
            await self._session.close()

    async def _request(
        self,
        method: str,
        path: str,
        payload: Optional[Dict[str, Any]] = None
    ) -> Any:
        """
        HTTP 요청 실행 후 JSON 본문 반환.

        Args:
            method: HTTP 메서드
            path: api_url 기준 상대 경로 (예: "players/42")
            payload: JSON 요청 본문

        Returns:
            파싱된 JSON (204 응답이면 None)
        """
        await self._create_session()

        url = f"{self.config.api_url}{path}"
        logger.debug(f"{method} {url}")

        async with self._session.request(method, url, json=payload) as response:
            if response.status == 404:
                raise PuppyBowlNotFoundError(f"No resource found at {path}")

            if response.status >= 400:
                text = await response.text()
                raise PuppyBowlAPIError(f"API error {response.status}: {text}")

            if response.status == 204:
                return None

            return await response.json()

    @staticmethod
    def _unwrap(body: Any, key: Optional[str] = None) -> Any:
        """
        {success, error, data} 응답 봉투 해제.

        data 안에 key가 있으면 data[key], 없으면 data 자체를 반환합니다.
        """
        if not isinstance(body, dict):
            raise PuppyBowlResponseError(f"Unexpected response body: {body!r}")

        if body.get("success") is False:
            raise PuppyBowlResponseError(f"API reported failure: {body.get('error')}")

        data = body.get("data")
        if data is None:
            raise PuppyBowlResponseError("Response has no data field")

        if key and isinstance(data, dict) and key in data:
            return data[key]
        return data

    # ===================
    # Public API Methods
    # ===================

    async def list_players(self) -> ApiResult[List[Player]]:
        """
        전체 선수 목록 조회.

        Returns:
            API 응답 순서대로의 선수 리스트를 담은 결과
        """
        try:
            body = await self._request("GET", PLAYERS_ENDPOINT)
            raw_players = self._unwrap(body, "players")
            if not isinstance(raw_players, list):
                raise PuppyBowlResponseError("Players payload is not a list")
            players = [Player.from_dict(item) for item in raw_players]
        except CLIENT_ERRORS as e:
            logger.error(f"Uh oh, trouble fetching players! {e!r}")
            return ApiResult.failure(e)

        logger.debug(f"Fetched {len(players)} players")
        return ApiResult.success(players)

    async def get_player(self, player_id: PlayerId) -> ApiResult[Player]:
        """
        단일 선수 조회.

        Args:
            player_id: 선수 ID
        """
        try:
            body = await self._request("GET", f"{PLAYERS_ENDPOINT}/{player_id}")
            player = Player.from_dict(self._unwrap(body, "player"))
        except CLIENT_ERRORS as e:
            logger.error(f"Oh no, trouble fetching player #{player_id}! {e!r}")
            return ApiResult.failure(e)

        return ApiResult.success(player)

    async def create_player(self, new_player: NewPlayer) -> ApiResult[Player]:
        """
        신규 선수 등록.

        Args:
            new_player: id 없는 신규 선수

        Returns:
            서버가 id를 부여한 선수를 담은 결과
        """
        try:
            body = await self._request(
                "POST",
                PLAYERS_ENDPOINT,
                payload=new_player.to_payload()
            )
            created = Player.from_dict(self._unwrap(body, "newPlayer"))
        except CLIENT_ERRORS as e:
            logger.error(f"Oops, something went wrong with adding that player! {e!r}")
            return ApiResult.failure(e)

        logger.info(f"Player added successfully: {created}")
        return ApiResult.success(created)

    async def delete_player(self, player_id: PlayerId) -> ApiResult[Any]:
        """
        선수 삭제.

        Args:
            player_id: 선수 ID

        Returns:
            서버 응답의 data 필드를 담은 결과
        """
        try:
            body = await self._request("DELETE", f"{PLAYERS_ENDPOINT}/{player_id}")
            if body is not None:
                if not isinstance(body, dict):
                    raise PuppyBowlResponseError(f"Unexpected response body: {body!r}")
                if body.get("success") is False:
                    raise PuppyBowlResponseError(f"API reported failure: {body.get('error')}")
                data = body.get("data")
            else:
                data = None
        except CLIENT_ERRORS as e:
            logger.error(f"Whoops, trouble removing player #{player_id} from the roster! {e!r}")
            return ApiResult.failure(e)

        logger.info(f"Player removed from roster: #{player_id} {data}")
        return ApiResult.success(data)


# ===================
# Factory Function
# ===================

def create_puppy_bowl_client(settings, **kwargs) -> PuppyBowlClient:
    """
    Puppy Bowl 클라이언트 팩토리 함수.

    Args:
        settings: config.settings.Settings 인스턴스
        **kwargs: 설정 덮어쓰기 (base_url, cohort_name, timeout)

    Returns:
        PuppyBowlClient 인스턴스
    """
    options = {
        "base_url": settings.api_base_url,
        "cohort_name": settings.cohort_name,
        "timeout": settings.request_timeout,
    }
    options.update(kwargs)
    return PuppyBowlClient(PuppyBowlClientConfig(**options))
