"""
앱 유틸리티 모듈.
"""

from app.utils.streamlit_utils import (
    configure_logging,
    get_roster_view,
    run_roster_action,
)

__all__ = [
    'configure_logging',
    'get_roster_view',
    'run_roster_action',
]
