"""
Tests des repositories SQLModel sur une base SQLite en memoire.

Couvre:
- Listing des films trie par titre avec genre et langue joints
- Recherches insensibles a la casse (titre, nom de genre, nom de langue)
- Mise a jour partielle, suppression, comptage par genre
"""

from datetime import date

import pytest
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from cinecatalog.core.entities.catalog import Genre, Language, Movie, MoviePatch
from cinecatalog.infrastructure.persistence.models import MovieModel
from cinecatalog.infrastructure.persistence.repositories import (
    SQLModelGenreRepository,
    SQLModelLanguageRepository,
    SQLModelMovieRepository,
)


# ============================================================================
# Movie repository
# ============================================================================


class TestMovieRepository:
    """Tests pour SQLModelMovieRepository."""

    def test_list_all_ordered_by_title_with_joins(self, session: Session, sample_movies):
        repo = SQLModelMovieRepository(session)

        movies = repo.list_all()

        assert [m.title for m in movies] == ["Airplane!", "Central do Brasil", "Superbad"]
        assert movies[0].genre.name == "Comedy"
        assert movies[0].language.name == "English"
        assert movies[1].language.name == "Português"

    def test_list_all_empty(self, session: Session):
        assert SQLModelMovieRepository(session).list_all() == []

    def test_get_by_id(self, session: Session, sample_movies):
        repo = SQLModelMovieRepository(session)

        movie = repo.get_by_id(sample_movies[0].id)

        assert movie is not None
        assert movie.title == "Superbad"
        assert movie.release_date == date(2007, 8, 17)

    def test_get_by_id_not_found(self, session: Session):
        assert SQLModelMovieRepository(session).get_by_id(12345) is None

    def test_find_by_title_ignores_case(self, session: Session, sample_movies):
        repo = SQLModelMovieRepository(session)

        assert repo.find_by_title("SUPERBAD").id == sample_movies[0].id
        assert repo.find_by_title("central do brasil") is not None
        assert repo.find_by_title("Superbad 2") is None

    def test_list_by_genre_name_ignores_case(self, session: Session, sample_movies):
        repo = SQLModelMovieRepository(session)

        comedies = repo.list_by_genre_name("cOmEdY")

        assert {m.title for m in comedies} == {"Superbad", "Airplane!"}
        assert all(m.genre.name == "Comedy" for m in comedies)
        assert all(m.language is not None for m in comedies)

    def test_list_by_genre_name_no_match(self, session: Session, sample_movies):
        assert SQLModelMovieRepository(session).list_by_genre_name("Western") == []

    def test_count_by_genre(self, session: Session, reference_data, sample_movies):
        repo = SQLModelMovieRepository(session)

        assert repo.count_by_genre(reference_data["Comedy"]) == 2
        assert repo.count_by_genre(reference_data["Action"]) == 0

    def test_save_inserts(self, session: Session, reference_data):
        repo = SQLModelMovieRepository(session)

        created = repo.save(
            Movie(
                title="Matrix",
                genre_id=reference_data["Action"],
                language_id=reference_data["English"],
                oscar_count=4,
                release_date=date(1999, 3, 31),
                duration=136,
            )
        )

        assert created.id is not None
        assert session.get(MovieModel, created.id).title == "Matrix"

    def test_save_with_unknown_language_rolls_back(self, session: Session, reference_data):
        """Une cle etrangere invalide leve IntegrityError et la session reste utilisable."""
        repo = SQLModelMovieRepository(session)

        with pytest.raises(IntegrityError):
            repo.save(
                Movie(
                    title="Sans langue",
                    genre_id=reference_data["Drama"],
                    language_id=999,
                    release_date=date(2001, 1, 1),
                    duration=100,
                )
            )

        assert repo.list_all() == []

    def test_update_applies_only_supplied_fields(self, session: Session, sample_movies):
        repo = SQLModelMovieRepository(session)
        movie_id = sample_movies[0].id

        updated = repo.update(movie_id, MoviePatch(oscar_count=1, duration=120))

        assert updated.oscar_count == 1
        assert updated.duration == 120
        assert updated.title == "Superbad"
        assert updated.release_date == date(2007, 8, 17)

    def test_update_missing_movie(self, session: Session):
        with pytest.raises(LookupError):
            SQLModelMovieRepository(session).update(999, MoviePatch(title="x"))

    def test_delete(self, session: Session, sample_movies):
        repo = SQLModelMovieRepository(session)
        movie_id = sample_movies[1].id

        assert repo.delete(movie_id) is True
        assert repo.get_by_id(movie_id) is None
        assert repo.delete(movie_id) is False


# ============================================================================
# Genre repository
# ============================================================================


class TestGenreRepository:
    """Tests pour SQLModelGenreRepository."""

    def test_list_all(self, session: Session, reference_data):
        names = {g.name for g in SQLModelGenreRepository(session).list_all()}
        assert names == {"Action", "Comedy", "Drama"}

    def test_find_by_name_ignores_case(self, session: Session, reference_data):
        repo = SQLModelGenreRepository(session)

        assert repo.find_by_name("drama").id == reference_data["Drama"]
        assert repo.find_by_name("Horror") is None

    def test_find_by_name_folds_accented_letters(self, session: Session):
        repo = SQLModelGenreRepository(session)
        saved = repo.save(Genre(name="Ação"))

        assert repo.find_by_name("AÇÃO").id == saved.id
        assert repo.find_by_name("ação").id == saved.id

    def test_find_by_name_excluding_id(self, session: Session, reference_data):
        repo = SQLModelGenreRepository(session)

        assert repo.find_by_name("DRAMA", exclude_id=reference_data["Drama"]) is None
        assert repo.find_by_name("DRAMA", exclude_id=reference_data["Action"]) is not None

    def test_save_and_rename(self, session: Session):
        repo = SQLModelGenreRepository(session)

        created = repo.save(Genre(name="Horror"))
        renamed = repo.rename(created.id, "Terror")

        assert renamed == Genre(id=created.id, name="Terror")
        assert repo.get_by_id(created.id).name == "Terror"

    def test_delete(self, session: Session, reference_data):
        repo = SQLModelGenreRepository(session)

        assert repo.delete(reference_data["Action"]) is True
        assert repo.get_by_id(reference_data["Action"]) is None
        assert repo.delete(reference_data["Action"]) is False


# ============================================================================
# Language repository
# ============================================================================


class TestLanguageRepository:
    """Tests pour SQLModelLanguageRepository."""

    def test_save_list_and_find(self, session: Session):
        repo = SQLModelLanguageRepository(session)

        created = repo.save(Language(name="Français"))

        assert repo.list_all() == [created]
        assert repo.get_by_id(created.id).name == "Français"
        assert repo.find_by_name("français") == created
        assert repo.find_by_name("Deutsch") is None
