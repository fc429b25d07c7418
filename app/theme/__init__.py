# PuppyBowl Theme System
from .colors import COLORS
from .styles import (
    inject_main_styles,
    inject_all_styles,
    render_header,
    render_footer,
    MAIN_CSS,
)

__all__ = [
    'COLORS',
    'inject_main_styles',
    'inject_all_styles',
    'render_header',
    'render_footer',
    'MAIN_CSS',
]
