"""
신규 선수 등록 폼 컴포넌트.

입력값으로 NewPlayer를 만들어 on_submit 콜백에 넘깁니다.
입력값 검증, 입력 초기화, 로스터 갱신은 하지 않습니다.
"""

from typing import Callable, Optional

import streamlit as st

from app.models.data_types import NewPlayer
from config.constants import (
    ADD_PLAYER_LABEL,
    DEFAULT_STATUS,
    FORM_CONTAINER_ID,
    FORM_HINT,
    FORM_TITLE,
)


def build_new_player(
    name: str,
    breed: str,
    image_url: str,
    status: Optional[str] = None,
    default_status: str = DEFAULT_STATUS,
) -> NewPlayer:
    """
    폼 입력값으로 신규 선수 생성.

    상태가 없거나 공백이면 default_status를 사용합니다.
    """
    if status is None or not status.strip():
        status = default_status
    return NewPlayer(name=name, breed=breed, image_url=image_url, status=status)


def render_new_player_form(
    container,
    on_submit: Callable[[NewPlayer], None],
    show_status_field: bool = True,
    default_status: str = DEFAULT_STATUS,
) -> None:
    """
    신규 선수 폼 렌더링.

    Args:
        container: 폼을 그릴 Streamlit 컨테이너
        on_submit: 제출 시 NewPlayer를 받는 콜백
        show_status_field: 상태 입력 필드 표시 여부
        default_status: 상태 미입력 시 기본값
    """
    with container:
        st.markdown(f'<div id="{FORM_CONTAINER_ID}"></div>', unsafe_allow_html=True)
        st.subheader(FORM_TITLE)
        st.caption(FORM_HINT)

        with st.form(key=FORM_CONTAINER_ID, clear_on_submit=False):
            name = st.text_input("Name", placeholder="Name", key="player-name")
            breed = st.text_input("Breed", placeholder="Breed", key="player-breed")
            status = None
            if show_status_field:
                status = st.text_input("Status", placeholder="Status", key="player-status")
            image_url = st.text_input("Image URL", placeholder="Image URL", key="player-image")

            submitted = st.form_submit_button(ADD_PLAYER_LABEL)

        if submitted:
            on_submit(build_new_player(
                name=name,
                breed=breed,
                image_url=image_url,
                status=status,
                default_status=default_status,
            ))
