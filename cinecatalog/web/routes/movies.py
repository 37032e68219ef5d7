"""
Routes de la ressource /movies.

GET /movies/{genre_name} est exclusivement un filtre par nom de genre :
aucune route ne récupère un film isolé par son ID.
"""

from fastapi import APIRouter, Response, status

from ...core.entities.catalog import Movie, MoviePatch
from ..deps import MovieServiceDep
from ..schemas import MovieCreate, MovieListOut, MovieOut, MovieUpdate

router = APIRouter(prefix="/movies", tags=["movies"])


@router.get("", response_model=MovieListOut)
def list_movies(service: MovieServiceDep):
    """Tous les films par titre, avec le total et la durée moyenne."""
    return service.list_movies()


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
def create_movie(body: MovieCreate, service: MovieServiceDep) -> Response:
    """Crée un film ; 409 si le titre existe déjà (casse ignorée)."""
    service.create_movie(Movie(**body.model_dump()))
    return Response(status_code=status.HTTP_201_CREATED)


@router.put("/{movie_id}", response_class=Response)
def update_movie(movie_id: int, body: MovieUpdate, service: MovieServiceDep) -> Response:
    """Mise à jour partielle d'un film ; 404 si absent."""
    patch = MoviePatch(**body.model_dump(exclude_unset=True))
    service.update_movie(movie_id, patch)
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/{movie_id}", response_class=Response)
def delete_movie(movie_id: int, service: MovieServiceDep) -> Response:
    """Supprime un film ; 404 si absent."""
    service.delete_movie(movie_id)
    return Response(status_code=status.HTTP_200_OK)


@router.get("/{genre_name}", response_model=list[MovieOut])
def filter_movies_by_genre(genre_name: str, service: MovieServiceDep):
    """Films dont le genre porte ce nom, casse ignorée."""
    return service.filter_by_genre(genre_name)
