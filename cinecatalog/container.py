"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web :
configuration, engine de base de donnees, sessions, repositories et services.
"""

from dependency_injector import containers, providers
from sqlmodel import Session

from .config import Settings
from .infrastructure.persistence.database import create_db_engine, init_db
from .infrastructure.persistence.repositories import (
    SQLModelGenreRepository,
    SQLModelLanguageRepository,
    SQLModelMovieRepository,
)
from .services.genres import GenreService
from .services.languages import LanguageService
from .services.movies import MovieService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Cree les tables une fois
        session = container.session()
        movie_service = container.movie_service(movie_repo__session=session)

    La session est une Factory : chaque appel ouvre une nouvelle session.
    Pour partager une session entre plusieurs repositories d'un meme service,
    la passer explicitement avec la notation <provider>__session.
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Engine unique pour tout le processus
    engine = providers.Singleton(
        create_db_engine,
        database_url=config.provided.database_url,
        echo=config.provided.sql_echo,
    )

    # Database - Resource pour initialisation unique des tables
    database = providers.Resource(init_db, engine=engine)

    # Session factory - nouvelle session a chaque appel
    session = providers.Factory(Session, engine)

    # Repositories - Factory pour nouvelle instance avec session fraiche
    movie_repository = providers.Factory(
        SQLModelMovieRepository,
        session=session,
    )
    genre_repository = providers.Factory(
        SQLModelGenreRepository,
        session=session,
    )
    language_repository = providers.Factory(
        SQLModelLanguageRepository,
        session=session,
    )

    # Services - Factory car dependent de repositories (sessions fraiches)
    movie_service = providers.Factory(
        MovieService,
        movie_repo=movie_repository,
    )
    genre_service = providers.Factory(
        GenreService,
        genre_repo=genre_repository,
        movie_repo=movie_repository,
    )
    language_service = providers.Factory(
        LanguageService,
        language_repo=language_repository,
    )
