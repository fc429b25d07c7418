"""
로스터 오케스트레이터.

시작 시 로스터를 조회/렌더링하고, 삭제 성공 시 전체 로스터를 다시 조회해 다시 그립니다.
신규 등록 후에는 로스터를 갱신하지 않습니다.
"""

from typing import List, Optional

from app.components.player_card import render_all_players
from app.models.data_types import NewPlayer, Player, PlayerId, RosterView
from config.constants import DEFAULT_STATUS
from src.data_collection.puppy_bowl_client import ApiResult, PuppyBowlClient
from src.utils.logger import logger


class RosterApp:
    """
    로스터 화면과 API 클라이언트를 연결하는 서비스.

    Usage:
        async with create_puppy_bowl_client(settings) as client:
            app = RosterApp(client, view)
            await app.init()
    """

    def __init__(
        self,
        client: PuppyBowlClient,
        view: Optional[RosterView] = None,
        default_status: str = DEFAULT_STATUS,
    ):
        """
        Args:
            client: Puppy Bowl API 클라이언트
            view: 로스터 화면 상태 (없으면 새로 생성)
            default_status: 상태 미입력 신규 선수의 기본 상태
        """
        self.client = client
        self.view = view if view is not None else RosterView()
        self.default_status = default_status

    async def init(self) -> None:
        """로스터 조회 → 렌더링 → 폼 렌더링"""
        try:
            players = await self.fetch_all_players()
            render_all_players(self.view, players)
            self.view.form_rendered = True
        except Exception:
            logger.exception("Error initializing the app")

    async def fetch_all_players(self) -> Optional[List[Player]]:
        """
        전체 선수 조회.

        Returns:
            선수 리스트, 실패 시 None
        """
        result = await self.client.list_players()
        return result.data if result.ok else None

    async def fetch_single_player(self, player_id: PlayerId) -> ApiResult[Player]:
        return await self.client.get_player(player_id)

    async def refresh(self) -> None:
        """전체 재조회 후 다시 그리기"""
        players = await self.fetch_all_players()
        render_all_players(self.view, players)

    async def add_new_player(self, new_player: NewPlayer) -> ApiResult[Player]:
        """
        신규 선수 등록.

        현재 그려진 로스터는 변경하지 않습니다.
        """
        return await self.client.create_player(new_player)

    async def remove_player(self, player_id: PlayerId) -> ApiResult:
        """
        선수 삭제. 성공하면 로스터를 한 번 재조회하고 한 번 다시 그립니다.

        Args:
            player_id: 삭제할 선수 ID
        """
        result = await self.client.delete_player(player_id)
        if result.ok:
            await self.refresh()
        return result
