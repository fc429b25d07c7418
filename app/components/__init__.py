"""PuppyBowl UI 컴포넌트"""

from .player_card import (
    render_all_players,
    render_roster,
    player_card_html,
    inject_card_styles,
)
from .player_form import build_new_player, render_new_player_form

__all__ = [
    "render_all_players",
    "render_roster",
    "player_card_html",
    "inject_card_styles",
    "build_new_player",
    "render_new_player_form",
]
