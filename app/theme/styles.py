"""
PuppyBowl CSS 스타일 및 렌더 함수.
"""

import streamlit as st

from .colors import COLORS


# 메인 CSS 스타일
MAIN_CSS = f"""
<style>
.stApp {{
    background-color: {COLORS['bg_primary']};
}}

.main-header {{
    font-size: 3rem;
    font-weight: bold;
    text-align: center;
    padding: 20px;
    background: linear-gradient(90deg, {COLORS['accent_dark']}, {COLORS['accent']});
    -webkit-background-clip: text;
    -webkit-text-fill-color: transparent;
    margin-bottom: 30px;
}}

.sub-header {{
    text-align: center;
    color: {COLORS['text_secondary']};
    margin-bottom: 40px;
}}

div[data-testid="stForm"] {{
    background: {COLORS['bg_tertiary']};
    border-color: {COLORS['border']};
}}
</style>
"""


def inject_main_styles() -> None:
    """메인 CSS 스타일 주입"""
    st.markdown(MAIN_CSS, unsafe_allow_html=True)


def inject_all_styles() -> None:
    """모든 CSS 스타일 주입 (메인 + 선수 카드)"""
    inject_main_styles()

    from app.components.player_card import inject_card_styles
    inject_card_styles()


def render_header() -> None:
    """메인 헤더 렌더링"""
    st.markdown(
        '<div class="main-header">🐶 Puppy Bowl</div>',
        unsafe_allow_html=True
    )
    st.markdown(
        '<div class="sub-header">Roster manager</div>',
        unsafe_allow_html=True
    )


def render_footer(api_url: str) -> None:
    """푸터 렌더링"""
    st.markdown("---")
    st.markdown(
        f"""
        <div style="text-align: center; color: #666; font-size: 0.8rem;">
        데이터 출처: {api_url}
        </div>
        """,
        unsafe_allow_html=True
    )
