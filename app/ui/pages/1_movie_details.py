"""
Movie details page - movie info and reviews.
"""

import streamlit as st

from app.ui.utils.api_client import get_movie_details
from app.ui.utils.session_state import get_selected_movie_id, init_session_state
from app.ui.components.movie_card import render_review

init_session_state()

movie_id = get_selected_movie_id()

if not movie_id:
    st.warning("Pick a movie from the catalog first.")
    if st.button("Back to catalog"):
        st.switch_page("app.py")
    st.stop()

try:
    details = get_movie_details(movie_id)
except Exception as e:
    st.error(f"Failed to load movie: {e}")
    st.stop()

if details is None:
    st.error(f"Movie with ID {movie_id} was not found.")
    st.stop()

movie = details["movie"]
st.title(f"{details['icon']} {movie['name']}")
st.caption(
    f"{movie['year']} | {movie['genre']} | {movie['duration']} min | "
    f"Directed by {movie['director']}"
)
st.metric("Rating", f"{movie['rating']:.1f}")
st.write(movie["description"])

st.divider()
st.subheader("Reviews")
if details["reviews"]:
    for review in details["reviews"]:
        render_review(review)
else:
    st.info("No reviews yet.")

if st.button("Back to catalog"):
    st.switch_page("app.py")
