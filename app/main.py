"""
🐶 PuppyBowl - 로스터 관리 앱

Streamlit 메인 엔트리포인트

실행:
    streamlit run app/main.py
"""

import sys
from functools import partial
from pathlib import Path

import streamlit as st

# 프로젝트 루트 추가 (streamlit run 실행 시)
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.components.player_card import render_roster
from app.components.player_form import render_new_player_form
from app.models.data_types import NewPlayer, RosterView
from app.theme import inject_all_styles, render_header, render_footer
from app.utils.streamlit_utils import (
    configure_logging,
    get_roster_view,
    run_roster_action,
)
from config.settings import Settings, get_settings


# 페이지 설정
st.set_page_config(
    page_title="Puppy Bowl",
    page_icon="🐶",
    layout="wide",
    initial_sidebar_state="collapsed"
)

# 스타일 주입
inject_all_styles()


def main():
    """메인 함수"""
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_dir)

    view = get_roster_view()

    # 최초 실행 시에만 로스터 조회
    if not st.session_state.get("roster_initialized"):
        run_roster_action(settings, view, lambda app: app.init())
        st.session_state["roster_initialized"] = True

    render_header()
    _render_sidebar(settings, view)

    roster_col, form_col = st.columns([3, 1])

    render_roster(
        roster_col,
        view,
        on_remove=partial(_remove_player, settings, view),
    )

    if view.form_rendered:
        render_new_player_form(
            form_col,
            on_submit=partial(_add_player, settings, view),
            show_status_field=settings.show_status_field,
            default_status=settings.default_status,
        )

    render_footer(settings.api_url)


def _render_sidebar(settings: Settings, view: RosterView):
    """사이드바 렌더링"""
    with st.sidebar:
        st.header("Roster")
        st.caption(f"Cohort: {settings.cohort_name}")
        st.caption(f"Players shown: {len(view.cards)}")

        if st.button("🔄 Reload roster", use_container_width=True):
            run_roster_action(settings, view, lambda app: app.refresh())
            st.rerun()


def _remove_player(settings: Settings, view: RosterView, player_id):
    """카드 삭제 버튼 콜백"""
    run_roster_action(settings, view, lambda app: app.remove_player(player_id))


def _add_player(settings: Settings, view: RosterView, new_player: NewPlayer):
    """폼 제출 콜백 (로스터는 갱신하지 않음)"""
    run_roster_action(settings, view, lambda app: app.add_new_player(new_player))


if __name__ == "__main__":
    main()
