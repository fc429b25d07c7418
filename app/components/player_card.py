"""
선수 카드 컴포넌트.

선수 리스트를 카드 상태(RosterView)로 변환하고, 카드 HTML과
"See Details" / "Remove from Roster" 버튼을 Streamlit 컨테이너에 그립니다.
"""

from html import escape
from typing import Callable, Iterable, Optional

import streamlit as st

from app.models.data_types import Player, PlayerCard, PlayerId, RosterView
from app.theme.colors import COLORS
from config.constants import DETAILS_LABEL, PLAYER_CONTAINER_ID, REMOVE_LABEL
from src.utils.logger import logger


CARD_CSS = f"""
<style>
.player-card {{
    background: {COLORS['bg_secondary']};
    border-radius: 10px;
    padding: 12px;
    margin-bottom: 8px;
    text-align: center;
}}

.player-card img {{
    width: 100%;
    max-height: 220px;
    object-fit: cover;
    border-radius: 8px;
}}

.player-card h3 {{
    color: {COLORS['text_primary']};
    margin: 8px 0 4px 0;
}}

.player-card p {{
    color: {COLORS['text_muted']};
    margin: 2px 0;
}}

.player-card .hidden {{
    display: none;
}}
</style>
"""


def inject_card_styles():
    """카드 CSS 스타일 주입"""
    st.markdown(CARD_CSS, unsafe_allow_html=True)


def render_all_players(view: RosterView, players: Optional[Iterable[Player]]) -> None:
    """
    선수 리스트로 카드 상태를 새로 만듭니다.

    이전 카드는 모두 제거되며, 품종/상태 라인은 숨김 상태로 시작합니다.
    players가 None(조회 실패)이면 빈 로스터로 렌더링합니다.

    Args:
        view: 로스터 화면 상태
        players: API 응답 순서의 선수 리스트
    """
    view.clear()
    view.render_count += 1

    if players is None:
        logger.warning("No players to render, showing an empty roster")
        return

    for player in players:
        view.cards.append(PlayerCard(player=player))

    logger.debug(f"Rendered {len(view.cards)} player cards")


def player_card_html(card: PlayerCard) -> str:
    """카드 하나의 HTML 마크업"""
    player = card.player
    hidden = "" if card.details_visible else " hidden"
    name = escape(str(player.name))

    return f'''
        <div class="player-card" data-id="{escape(str(player.id))}">
            <img src="{escape(str(player.image_url))}" alt="{name}">
            <h3>{name}</h3>
            <p class="breed-info{hidden}">Breed: {escape(str(player.breed))}</p>
            <p class="status-info{hidden}">Status: {escape(str(player.status))}</p>
        </div>
    '''


def render_roster(
    container,
    view: RosterView,
    on_remove: Callable[[PlayerId], None],
    columns: int = 3,
) -> None:
    """
    로스터 카드 그리기.

    Args:
        container: 카드를 그릴 Streamlit 컨테이너
        view: 로스터 화면 상태
        on_remove: "Remove from Roster" 클릭 시 호출 (player_id 인자)
        columns: 한 줄에 표시할 카드 수
    """
    with container:
        st.markdown(f'<div id="{PLAYER_CONTAINER_ID}"></div>', unsafe_allow_html=True)

        if not view.cards:
            st.info("No players on the roster.")
            return

        cols = st.columns(columns)
        for idx, card in enumerate(view.cards):
            with cols[idx % columns]:
                _render_card(card, on_remove)


def _render_card(card: PlayerCard, on_remove: Callable[[PlayerId], None]) -> None:
    player_id = card.player.id
    st.markdown(player_card_html(card), unsafe_allow_html=True)

    # 컬럼 중첩은 한 단계까지만 허용됨
    st.button(
        DETAILS_LABEL,
        key=f"details-{player_id}",
        on_click=card.toggle_details,
        use_container_width=True,
    )
    st.button(
        REMOVE_LABEL,
        key=f"remove-{player_id}",
        on_click=on_remove,
        args=(player_id,),
        use_container_width=True,
    )
