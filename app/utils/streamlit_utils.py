"""
Streamlit 관련 유틸리티.

Streamlit 콜백(동기)에서 비동기 오케스트레이터를 실행하는 브리지를 제공합니다.
"""

import asyncio
from pathlib import Path
from typing import Awaitable, Callable, Optional, TypeVar

import streamlit as st

from app.models.data_types import RosterView
from app.services.roster_service import RosterApp
from src.data_collection.puppy_bowl_client import create_puppy_bowl_client
from src.utils.logger import set_console_level, setup_file_logging


T = TypeVar("T")

ROSTER_VIEW_KEY = "roster_view"


@st.cache_resource
def configure_logging(log_level: str, log_dir: Optional[Path] = None) -> bool:
    """
    로깅 설정 (프로세스당 1회).

    Args:
        log_level: 콘솔 로그 레벨
        log_dir: 파일 로그 디렉토리 (None이면 비활성화)
    """
    set_console_level(log_level)
    if log_dir is not None:
        setup_file_logging(Path(log_dir))
    return True


def get_roster_view() -> RosterView:
    """세션별 로스터 화면 상태"""
    if ROSTER_VIEW_KEY not in st.session_state:
        st.session_state[ROSTER_VIEW_KEY] = RosterView()
    return st.session_state[ROSTER_VIEW_KEY]


def run_roster_action(
    settings,
    view: RosterView,
    action: Callable[[RosterApp], Awaitable[T]],
) -> T:
    """
    클라이언트 세션을 열고 RosterApp 액션 하나를 실행합니다.

    Args:
        settings: config.settings.Settings 인스턴스
        view: 로스터 화면 상태
        action: RosterApp을 받아 코루틴을 반환하는 함수

    Returns:
        액션 결과
    """
    async def _run():
        async with create_puppy_bowl_client(settings) as client:
            app = RosterApp(client, view, default_status=settings.default_status)
            return await action(app)

    return asyncio.run(_run())
