# PuppyBowl Color System
# Dark Theme Design Tokens

COLORS = {
    # Background
    "bg_primary": "#0d1117",      # Main background
    "bg_secondary": "#161b22",    # Card background
    "bg_tertiary": "#21262d",     # Form background

    # Text
    "text_primary": "#ffffff",
    "text_secondary": "#e6edf3",
    "text_muted": "#c9d1d9",

    # Accent
    "accent": "#f7931e",
    "accent_dark": "#ff6b35",

    # Border
    "border": "#30363d",
}
