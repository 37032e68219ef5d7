"""
Fixtures pytest partagees pour les tests CineCatalog.

Ce module contient les fixtures communes utilisees dans les tests:
- Engine et session SQLite en memoire, tables creees
- Donnees de reference (genres, langues)
- Settings et Container de test
- Client HTTP FastAPI branche sur une base en memoire
"""

from datetime import date
from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from cinecatalog.config import Settings
from cinecatalog.container import Container
from cinecatalog.infrastructure.persistence.database import create_db_engine, init_db
from cinecatalog.infrastructure.persistence.models import (
    GenreModel,
    LanguageModel,
    MovieModel,
)
from cinecatalog.web.app import create_app


@pytest.fixture
def engine():
    """Engine SQLite en memoire avec toutes les tables creees."""
    engine = init_db(create_db_engine("sqlite://"))
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine) -> Iterator[Session]:
    """Session SQLModel sur la base en memoire."""
    with Session(engine) as session:
        yield session


@pytest.fixture
def reference_data(session: Session) -> dict[str, int]:
    """
    Genres et langues de reference.

    Retourne un dictionnaire nom -> ID.
    """
    models = [
        GenreModel(name="Action"),
        GenreModel(name="Comedy"),
        GenreModel(name="Drama"),
        LanguageModel(name="English"),
        LanguageModel(name="Português"),
    ]
    session.add_all(models)
    session.commit()
    return {model.name: model.id for model in models}


@pytest.fixture
def sample_movies(session: Session, reference_data: dict[str, int]) -> list[MovieModel]:
    """Trois films : deux comedies et un drame."""
    movies = [
        MovieModel(
            title="Superbad",
            genre_id=reference_data["Comedy"],
            language_id=reference_data["English"],
            oscar_count=0,
            release_date=date(2007, 8, 17),
            duration=113,
        ),
        MovieModel(
            title="Central do Brasil",
            genre_id=reference_data["Drama"],
            language_id=reference_data["Português"],
            oscar_count=0,
            release_date=date(1998, 4, 3),
            duration=110,
        ),
        MovieModel(
            title="Airplane!",
            genre_id=reference_data["Comedy"],
            language_id=reference_data["English"],
            oscar_count=0,
            release_date=date(1980, 7, 2),
            duration=88,
        ),
    ]
    session.add_all(movies)
    session.commit()
    for movie in movies:
        session.refresh(movie)
    return movies


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec base en memoire et log dans tmp_path.
    """
    return Settings(
        database_url="sqlite://",
        log_file=tmp_path / "test.log",
    )


@pytest.fixture
def container(test_settings: Settings) -> Iterator[Container]:
    """Container DI dont la configuration pointe vers la base en memoire."""
    container = Container()
    container.config.override(test_settings)
    container.database.init()
    yield container
    container.shutdown_resources()
    container.engine().dispose()


@pytest.fixture
def client(container: Container) -> Iterator[TestClient]:
    """Client HTTP sur l'application branchee sur le container de test."""
    app = create_app(container)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def api_reference_data(container: Container) -> dict[str, int]:
    """Genres et langues inseres via les services du container de test."""
    session = container.session()
    try:
        genre_service = container.genre_service(
            genre_repo__session=session, movie_repo__session=session
        )
        language_service = container.language_service(language_repo__session=session)
        ids = {}
        for name in ("Action", "Comedy", "Drama"):
            ids[name] = genre_service.create_genre(name).id
        for name in ("English", "Português"):
            ids[name] = language_service.add_language(name).id
        return ids
    finally:
        session.close()
