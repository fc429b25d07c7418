"""
PuppyBowl 테스트 설정.

Pytest 설정 및 공통 Fixture 정의.
API 테스트는 aiohttp.web으로 만든 인프로세스 가짜 Puppy Bowl 서버를 사용합니다.
"""

import sys
import asyncio
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

# 프로젝트 루트 추가
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from app.models.data_types import NewPlayer, Player
from src.data_collection.puppy_bowl_client import (
    ApiResult,
    PuppyBowlAPIError,
    PuppyBowlClient,
    PuppyBowlClientConfig,
)
from src.utils.logger import logger


TEST_COHORT = "test-cohort"


# =============================================================================
# Pytest 마커 설정
# =============================================================================

def pytest_configure(config):
    """Pytest 마커 등록"""
    config.addinivalue_line("markers", "unit: 단위 테스트")
    config.addinivalue_line("markers", "api: 가짜 API 서버 연동 테스트")
    config.addinivalue_line("markers", "e2e: End-to-End 통합 테스트")


# =============================================================================
# 데이터 Fixture
# =============================================================================

def _player_dict(player_id: int, name: str, breed: str, status: str = "bench") -> Dict[str, Any]:
    return {
        "id": player_id,
        "name": name,
        "breed": breed,
        "status": status,
        "imageUrl": f"http://img.example/{name.lower()}.png",
        "createdAt": "2023-06-01T00:00:00.000Z",
        "updatedAt": "2023-06-01T00:00:00.000Z",
        "teamId": None,
        "cohortId": 7,
    }


@pytest.fixture
def sample_player_dicts() -> List[Dict[str, Any]]:
    """API 형식 선수 3명"""
    return [
        _player_dict(41, "Anise", "Havanese", "field"),
        _player_dict(42, "Bowie", "Beagle"),
        _player_dict(43, "Crumpet", "Corgi"),
    ]


@pytest.fixture
def sample_players(sample_player_dicts) -> List[Player]:
    """Player 객체 3명"""
    return [Player.from_dict(d) for d in sample_player_dicts]


@pytest.fixture
def other_players() -> List[Player]:
    """두 번째 렌더링용 다른 로스터"""
    return [
        Player.from_dict(_player_dict(51, "Duke", "Dalmatian")),
        Player.from_dict(_player_dict(52, "Echo", "Eurasier")),
    ]


@pytest.fixture
def log_messages():
    """loguru 메시지 수집"""
    messages: List[str] = []
    sink_id = logger.add(messages.append, level="DEBUG", format="{message}")
    yield messages
    logger.remove(sink_id)


# =============================================================================
# 가짜 Puppy Bowl 서버
# =============================================================================

class FakePuppyBowlAPI:
    """
    메모리 기반 Puppy Bowl API.

    Attributes:
        players: 현재 로스터 (API 형식 딕셔너리)
        requests: (method, path, body) 요청 기록
        broken: True면 모든 응답을 JSON이 아닌 HTML로 반환
    """

    def __init__(self, players: Optional[List[Dict[str, Any]]] = None, cohort: str = TEST_COHORT):
        self.cohort = cohort
        self.players = [dict(p) for p in players or []]
        self.requests: List[tuple] = []
        self.broken = False
        self._next_id = max([p["id"] for p in self.players], default=0) + 1

    def build_app(self) -> web.Application:
        base = f"/api/{self.cohort}/players"
        app = web.Application()
        app.router.add_get(base, self.list_players)
        app.router.add_post(base, self.create_player)
        app.router.add_get(base + "/{player_id}", self.get_player)
        app.router.add_delete(base + "/{player_id}", self.delete_player)
        return app

    def requests_for(self, method: str) -> List[tuple]:
        return [r for r in self.requests if r[0] == method]

    def _broken_response(self) -> web.Response:
        return web.Response(text="<html>Application Error</html>", content_type="text/html")

    def _find(self, player_id: str) -> Optional[Dict[str, Any]]:
        for player in self.players:
            if str(player["id"]) == player_id:
                return player
        return None

    @staticmethod
    def _not_found(player_id: str) -> web.Response:
        return web.json_response(
            {
                "success": False,
                "error": {"name": "NotFoundError", "message": f"No player with id {player_id}"},
                "data": None,
            },
            status=404,
        )

    async def list_players(self, request: web.Request) -> web.Response:
        self.requests.append(("GET", request.path, None))
        if self.broken:
            return self._broken_response()
        return web.json_response({"success": True, "error": None, "data": {"players": self.players}})

    async def get_player(self, request: web.Request) -> web.Response:
        self.requests.append(("GET", request.path, None))
        if self.broken:
            return self._broken_response()
        player = self._find(request.match_info["player_id"])
        if player is None:
            return self._not_found(request.match_info["player_id"])
        return web.json_response({"success": True, "error": None, "data": {"player": player}})

    async def create_player(self, request: web.Request) -> web.Response:
        body = await request.json()
        self.requests.append(("POST", request.path, body))
        if self.broken:
            return self._broken_response()
        player = dict(body, id=self._next_id, teamId=None, cohortId=7)
        self._next_id += 1
        self.players.append(player)
        return web.json_response({"success": True, "error": None, "data": {"newPlayer": player}})

    async def delete_player(self, request: web.Request) -> web.Response:
        self.requests.append(("DELETE", request.path, None))
        if self.broken:
            return self._broken_response()
        player = self._find(request.match_info["player_id"])
        if player is None:
            return self._not_found(request.match_info["player_id"])
        self.players.remove(player)
        return web.json_response({"success": True, "error": None, "data": None})


async def _serve(api: FakePuppyBowlAPI, scenario):
    server = TestServer(api.build_app())
    await server.start_server()
    try:
        return await scenario(str(server.make_url("/api")))
    finally:
        await server.close()


@pytest.fixture
def fake_api(sample_player_dicts) -> FakePuppyBowlAPI:
    """샘플 선수 3명이 등록된 가짜 API"""
    return FakePuppyBowlAPI(sample_player_dicts)


@pytest.fixture
def run_against():
    """
    가짜 서버를 띄우고 scenario(base_url) 코루틴을 실행합니다.

    Usage:
        run_against(api, lambda base_url: some_coroutine(base_url))
    """
    def _run(api: FakePuppyBowlAPI, scenario):
        return asyncio.run(_serve(api, scenario))
    return _run


@pytest.fixture
def run_with_client(run_against):
    """가짜 서버에 연결된 PuppyBowlClient로 scenario(client)를 실행합니다."""
    def _run(api: FakePuppyBowlAPI, scenario):
        async def _with_client(base_url: str):
            config = PuppyBowlClientConfig(base_url=base_url, cohort_name=api.cohort, timeout=5)
            async with PuppyBowlClient(config) as client:
                return await scenario(client)
        return run_against(api, _with_client)
    return _run


# =============================================================================
# 기록용 스텁 클라이언트
# =============================================================================

class RecordingClient:
    """
    호출을 기록하는 스텁 클라이언트.

    Args:
        rosters: list_players 호출마다 차례로 반환할 로스터 (None이면 실패).
                 마지막 값은 이후 호출에서 반복됩니다.
        delete_ok: delete_player 성공 여부
    """

    def __init__(self, rosters: List[Optional[List[Player]]], delete_ok: bool = True):
        self.rosters = list(rosters)
        self.delete_ok = delete_ok
        self.calls: List[tuple] = []

    def calls_named(self, name: str) -> List[tuple]:
        return [c for c in self.calls if c[0] == name]

    async def list_players(self) -> ApiResult:
        self.calls.append(("list",))
        roster = self.rosters.pop(0) if len(self.rosters) > 1 else self.rosters[0]
        if roster is None:
            return ApiResult.failure(PuppyBowlAPIError("fetch failed"))
        return ApiResult.success(list(roster))

    async def get_player(self, player_id) -> ApiResult:
        self.calls.append(("get", player_id))
        return ApiResult.failure(PuppyBowlAPIError("not used"))

    async def create_player(self, new_player: NewPlayer) -> ApiResult:
        self.calls.append(("create", new_player.to_payload()))
        return ApiResult.success(Player.from_dict(dict(new_player.to_payload(), id=99)))

    async def delete_player(self, player_id) -> ApiResult:
        self.calls.append(("delete", player_id))
        if not self.delete_ok:
            return ApiResult.failure(PuppyBowlAPIError("delete failed"))
        return ApiResult.success(None)


@pytest.fixture
def make_client():
    """RecordingClient 생성 함수"""
    return RecordingClient


@pytest.fixture
def make_api():
    """FakePuppyBowlAPI 생성 함수"""
    return FakePuppyBowlAPI


# =============================================================================
# 백그라운드 스레드 서버 (Streamlit 앱/CLI가 자체 이벤트 루프를 만드는 경우)
# =============================================================================

@pytest.fixture
def live_api(fake_api):
    """
    별도 스레드의 이벤트 루프에서 가짜 서버를 실행합니다.

    Yields:
        base_url 속성이 설정된 FakePuppyBowlAPI
    """
    loop = asyncio.new_event_loop()
    thread = threading.Thread(target=loop.run_forever, daemon=True)
    thread.start()

    async def _start():
        server = TestServer(fake_api.build_app())
        await server.start_server()
        return server

    server = asyncio.run_coroutine_threadsafe(_start(), loop).result(timeout=10)
    fake_api.base_url = str(server.make_url("/api"))

    yield fake_api

    asyncio.run_coroutine_threadsafe(server.close(), loop).result(timeout=10)
    loop.call_soon_threadsafe(loop.stop)
    thread.join(timeout=5)
    loop.close()


@pytest.fixture
def live_settings_env(live_api, monkeypatch):
    """get_settings()가 live_api를 가리키도록 환경변수 설정"""
    from config.settings import get_settings

    monkeypatch.setenv("PUPPYBOWL_API_BASE_URL", live_api.base_url)
    monkeypatch.setenv("PUPPYBOWL_COHORT_NAME", live_api.cohort)
    get_settings.cache_clear()
    yield live_api
    get_settings.cache_clear()
