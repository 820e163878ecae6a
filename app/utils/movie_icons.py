"""
Emoji icons for movies, picked from keywords in the title.
"""

DEFAULT_ICON = "🎬"

# Checked in order; the first keyword found in the title wins
_KEYWORD_ICONS = [
    ("prison", "⛓️"),
    ("escape", "🏃"),
    ("family", "👨‍👩‍👧"),
    ("boss", "🕴️"),
    ("hero", "🦸"),
    ("knight", "🦇"),
    ("space", "🚀"),
    ("star", "⭐"),
    ("dream", "💭"),
    ("love", "❤️"),
    ("war", "⚔️"),
    ("ring", "💍"),
    ("life", "🌱"),
    ("city", "🏙️"),
    ("game", "🎮"),
    ("fight", "🥊"),
]


def get_movie_icon(movie_name: str | None) -> str:
    """
    Get a display icon for a movie title.

    Args:
        movie_name: Movie title (None or blank gives the default icon)

    Returns:
        Emoji string
    """
    if not movie_name:
        return DEFAULT_ICON
    lowered = movie_name.casefold()
    for keyword, icon in _KEYWORD_ICONS:
        if keyword in lowered:
            return icon
    return DEFAULT_ICON
