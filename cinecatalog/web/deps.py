"""
Dépendances partagées de l'application web.

Ouvre une session de base de données par requête et construit les services
du Container DI autour de cette session unique.
"""

from collections.abc import Generator
from typing import Annotated

from fastapi import Depends, Request
from sqlmodel import Session

from ..container import Container
from ..services.genres import GenreService
from ..services.languages import LanguageService
from ..services.movies import MovieService


def get_container(request: Request) -> Container:
    """Container DI attaché à l'application au démarrage."""
    return request.app.state.container


def get_db_session(
    container: Annotated[Container, Depends(get_container)],
) -> Generator[Session, None, None]:
    """Session de la requête, fermée (et annulée si non validée) à la fin."""
    session = container.session()
    try:
        yield session
    finally:
        session.close()


def get_movie_service(
    container: Annotated[Container, Depends(get_container)],
    session: Annotated[Session, Depends(get_db_session)],
) -> MovieService:
    return container.movie_service(movie_repo__session=session)


def get_genre_service(
    container: Annotated[Container, Depends(get_container)],
    session: Annotated[Session, Depends(get_db_session)],
) -> GenreService:
    return container.genre_service(
        genre_repo__session=session,
        movie_repo__session=session,
    )


def get_language_service(
    container: Annotated[Container, Depends(get_container)],
    session: Annotated[Session, Depends(get_db_session)],
) -> LanguageService:
    return container.language_service(language_repo__session=session)


MovieServiceDep = Annotated[MovieService, Depends(get_movie_service)]
GenreServiceDep = Annotated[GenreService, Depends(get_genre_service)]
LanguageServiceDep = Annotated[LanguageService, Depends(get_language_service)]
