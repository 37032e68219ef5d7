"""Routes de la ressource /genres."""

from fastapi import APIRouter, Response, status

from ..deps import GenreServiceDep
from ..schemas import GenreIn, GenreOut

router = APIRouter(prefix="/genres", tags=["genres"])


@router.get("", response_model=list[GenreOut])
def list_genres(service: GenreServiceDep):
    return service.list_genres()


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
def create_genre(body: GenreIn, service: GenreServiceDep) -> Response:
    """Crée un genre ; 409 si le nom existe déjà (casse ignorée)."""
    service.create_genre(body.name)
    return Response(status_code=status.HTTP_201_CREATED)


@router.put("/{genre_id}", response_model=GenreOut)
def update_genre(genre_id: int, body: GenreIn, service: GenreServiceDep):
    """Renomme un genre et retourne l'enregistrement mis à jour."""
    return service.update_genre(genre_id, body.name)


@router.delete("/{genre_id}", response_class=Response)
def delete_genre(genre_id: int, service: GenreServiceDep) -> Response:
    """Supprime un genre ; 404 si absent, 409 s'il est encore utilisé."""
    service.delete_genre(genre_id)
    return Response(status_code=status.HTTP_200_OK)
