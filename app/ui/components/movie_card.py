"""
Movie display card component.
"""

import streamlit as st


def render_movie_card(movie: dict, on_details: callable = None) -> None:
    """
    Render a movie card with an optional details button.

    Args:
        movie: Movie dict as returned by the API
        on_details: Callback(movie_id) when the details button is pressed
    """
    with st.container():
        col1, col2 = st.columns([4, 1])
        with col1:
            st.markdown(f"**{movie['name']}** ({movie['year']})")
            st.caption(
                f"{movie['genre']} | {movie['director']} | "
                f"{movie['duration']} min | ⭐ {movie['rating']:.1f}"
            )
        with col2:
            if on_details and st.button("Details", key=f"details_{movie['id']}"):
                on_details(movie["id"])
        st.divider()


def render_review(review: dict) -> None:
    """Render a single review line."""
    st.markdown(
        f"{review['avatar_emoji']} **{review['user_name']}** "
        f"- ⭐ {review['rating']:.1f}"
    )
    st.caption(review["comment"])
