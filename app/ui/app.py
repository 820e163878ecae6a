"""
Streamlit main app for the Movie Catalog.

Run: streamlit run app/ui/app.py --server.port 8501
"""

import streamlit as st

from app.ui.utils.api_client import browse_movies, get_genres, health_check
from app.ui.utils.session_state import init_session_state, select_movie
from app.ui.components.movie_card import render_movie_card

st.set_page_config(
    page_title="Movie Catalog",
    page_icon="🎬",
    layout="wide",
    initial_sidebar_state="expanded",
)

init_session_state()

st.title("🎬 Movie Catalog")


def show_details(movie_id: int) -> None:
    """Open the details page for a movie."""
    select_movie(movie_id)
    st.switch_page("pages/1_movie_details.py")


try:
    health = health_check()
    if health.get("status") != "healthy":
        st.warning("API is up but the movie catalog is empty")
    genres = get_genres()
except Exception as e:
    st.error(f"API not available: {e}")
    st.info("Start the API with: uvicorn app.api.main:app --host 0.0.0.0 --port 8000")
    st.stop()

with st.form("search"):
    col1, col2, col3 = st.columns([2, 1, 2])
    with col1:
        name = st.text_input("Name")
    with col2:
        movie_id_text = st.text_input("ID")
    with col3:
        genre = st.selectbox("Genre", [""] + genres)
    st.form_submit_button("Search")

movie_id = None
if movie_id_text.strip():
    try:
        movie_id = int(movie_id_text)
    except ValueError:
        st.warning("ID must be a whole number.")

try:
    data = browse_movies(name=name, movie_id=movie_id, genre=genre)
except Exception as e:
    st.error(f"Failed to load movies: {e}")
    st.stop()

if data["search_message"]:
    st.info(data["search_message"])

for movie in data["movies"]:
    render_movie_card(movie, on_details=show_details)
