"""Fetch popular movies and genres for every locale into the local cache."""

from moviedash.config import LANGUAGES
from moviedash.data.tmdb import FetchError, fetch_genres, fetch_movies
from moviedash.features.genres import build_genre_index
from moviedash.features.pipeline import genre_rating_aggregate, movies_frame


def main():
    for language in LANGUAGES:
        print(f"\n--- {language} ---")
        try:
            movies = fetch_movies(language)
            genres = fetch_genres(language)
        except FetchError as e:
            print(f"Error: {e}")
            continue

        df = movies_frame(movies)
        index = build_genre_index(genres)
        print(f"Genres: {len(index)}")
        if not df.empty:
            print(f"Rating range: {df['vote_average'].min():.1f} - {df['vote_average'].max():.1f}")
        for rating in genre_rating_aggregate(df, genres):
            print(f"  {rating.genre}: {rating.rating:.2f} ({rating.count} movies)")


if __name__ == "__main__":
    main()
