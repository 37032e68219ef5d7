"""
Service de gestion des genres.

Regles metier :
- Le nom d'un genre est unique, casse ignoree (creation et renommage)
- Un genre encore reference par au moins un film ne peut pas etre supprime
"""

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from cinecatalog.core.entities.catalog import Genre
from cinecatalog.core.exceptions import ConflictError, NotFoundError, PersistenceError
from cinecatalog.core.ports.repositories import IGenreRepository, IMovieRepository


class GenreService:
    """Service des genres."""

    def __init__(
        self,
        genre_repo: IGenreRepository,
        movie_repo: IMovieRepository,
    ) -> None:
        """
        Initialise le service des genres.

        Args:
            genre_repo: Repository de persistance des genres
            movie_repo: Repository des films (controle des references avant suppression)
        """
        self._genre_repo = genre_repo
        self._movie_repo = movie_repo

    def list_genres(self) -> list[Genre]:
        """Liste tous les genres, sans ordre garanti."""
        return self._genre_repo.list_all()

    def create_genre(self, name: str) -> Genre:
        """
        Cree un genre si le nom n'existe pas deja (casse ignoree).

        Raises:
            ConflictError: Un genre porte deja ce nom
            PersistenceError: Echec de la base
        """
        try:
            if self._genre_repo.find_by_name(name):
                raise ConflictError(
                    "Um genero com o mesmo valor ja foi adicionado ao banco de dados"
                )
            created = self._genre_repo.save(Genre(name=name))
        except SQLAlchemyError as exc:
            logger.exception("Echec de creation du genre", name=name)
            raise PersistenceError("Ocorreu um erro ao colocar os novos valores") from exc

        logger.info("Genre cree", id=created.id, name=created.name)
        return created

    def update_genre(self, genre_id: int, name: str) -> Genre:
        """
        Renomme un genre.

        Args:
            genre_id: ID du genre a renommer
            name: Nouveau nom

        Returns:
            Le genre mis a jour

        Raises:
            NotFoundError: Aucun genre avec cet ID
            ConflictError: Un autre genre porte deja ce nom (casse ignoree)
            PersistenceError: Echec de la base
        """
        try:
            if self._genre_repo.get_by_id(genre_id) is None:
                raise NotFoundError("Gênero não encontrado.")
            if self._genre_repo.find_by_name(name, exclude_id=genre_id):
                raise ConflictError("Este nome de gênero já existe.")
            updated = self._genre_repo.rename(genre_id, name)
        except SQLAlchemyError as exc:
            logger.exception("Echec de mise a jour du genre", id=genre_id)
            raise PersistenceError("Houve um problema ao atualizar o gênero.") from exc

        logger.info("Genre renomme", id=genre_id, name=name)
        return updated

    def delete_genre(self, genre_id: int) -> None:
        """
        Supprime un genre qui n'est plus reference par aucun film.

        Raises:
            NotFoundError: Aucun genre avec cet ID
            ConflictError: Le genre est encore utilise par des films
            PersistenceError: Echec de la base (cause non divulguee au client)
        """
        try:
            if self._genre_repo.get_by_id(genre_id) is None:
                raise NotFoundError("O genero não foi encontrado")
            in_use = self._movie_repo.count_by_genre(genre_id)
            if in_use:
                raise ConflictError(
                    f"O gênero ainda está associado a {in_use} filme(s)"
                )
            self._genre_repo.delete(genre_id)
        except SQLAlchemyError as exc:
            logger.exception("Echec de suppression du genre", id=genre_id)
            raise PersistenceError(
                "Ocorreu um erro inesperado em nosso servidor, "
                "não se preocupe isso não é culpa sua"
            ) from exc

        logger.info("Genre supprime", id=genre_id)
