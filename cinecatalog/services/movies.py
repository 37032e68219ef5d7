"""
Service de gestion des films du catalogue.

Le MovieService porte les cas d'utilisation de la ressource /movies :
listing avec statistiques, creation avec controle d'unicite du titre,
mise a jour partielle, suppression et filtrage par genre.

Chaque cas d'utilisation effectue une ou deux requetes sequentielles via
le repository. Un echec inattendu de la base est journalise puis converti
en PersistenceError (500), sans nouvelle tentative.
"""

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from cinecatalog.core.entities.catalog import Movie, MovieListing, MoviePatch
from cinecatalog.core.exceptions import ConflictError, NotFoundError, PersistenceError
from cinecatalog.core.ports.repositories import IMovieRepository


def media_duration(movies: list[Movie]) -> float:
    """
    Duree moyenne en minutes d'une liste de films.

    Retourne 0 pour une liste vide.
    """
    total = len(movies)
    if total == 0:
        return 0
    total_duration = 0
    for movie in movies:
        total_duration += movie.duration
    return total_duration / total


class MovieService:
    """
    Service des films.

    Example:
        service = MovieService(movie_repo=SQLModelMovieRepository(session))
        listing = service.list_movies()
        service.create_movie(Movie(title="Matrix", genre_id=1, ...))
    """

    def __init__(self, movie_repo: IMovieRepository) -> None:
        """
        Initialise le service des films.

        Args:
            movie_repo: Repository de persistance des films
        """
        self._movie_repo = movie_repo

    def list_movies(self) -> MovieListing:
        """
        Liste tous les films par titre, avec le total et la duree moyenne.

        Returns:
            MovieListing(total, media_duration, movies)
        """
        movies = self._movie_repo.list_all()
        return MovieListing(
            total=len(movies),
            media_duration=media_duration(movies),
            movies=movies,
        )

    def create_movie(self, movie: Movie) -> Movie:
        """
        Cree un film si aucun film n'a deja ce titre (casse ignoree).

        Raises:
            ConflictError: Un film porte deja ce titre
            PersistenceError: Echec de la base (cle etrangere invalide, etc.)
        """
        try:
            if self._movie_repo.find_by_title(movie.title):
                raise ConflictError(
                    "Ja existe um filme com esses valores cadastrado no banco"
                )
            created = self._movie_repo.save(movie)
        except SQLAlchemyError as exc:
            logger.exception("Echec de creation du film", title=movie.title)
            raise PersistenceError(
                "Falha ao cadastrar um filme, erro ao colocar os valores"
            ) from exc

        logger.info("Film cree", id=created.id, title=created.title)
        return created

    def update_movie(self, movie_id: int, patch: MoviePatch) -> Movie:
        """
        Met a jour les seuls champs fournis du film.

        Le titre n'est pas controle contre les doublons, contrairement
        a la creation.

        Raises:
            NotFoundError: Aucun film avec cet ID
            PersistenceError: Echec de la base
        """
        try:
            if self._movie_repo.get_by_id(movie_id) is None:
                raise NotFoundError("Filme não encontrado")
            updated = self._movie_repo.update(movie_id, patch)
        except SQLAlchemyError as exc:
            logger.exception("Echec de mise a jour du film", id=movie_id)
            raise PersistenceError("Falha ao atualizar o registro") from exc

        logger.info("Film mis a jour", id=movie_id, fields=sorted(patch.changes()))
        return updated

    def delete_movie(self, movie_id: int) -> None:
        """
        Supprime un film.

        Raises:
            NotFoundError: Aucun film avec cet ID
            PersistenceError: Echec de la base
        """
        try:
            if self._movie_repo.get_by_id(movie_id) is None:
                raise NotFoundError("O filme não foi encontrado")
            self._movie_repo.delete(movie_id)
        except SQLAlchemyError as exc:
            logger.exception("Echec de suppression du film", id=movie_id)
            raise PersistenceError("Não foi possivel remover o filme") from exc

        logger.info("Film supprime", id=movie_id)

    def filter_by_genre(self, genre_name: str) -> list[Movie]:
        """Films dont le genre porte ce nom (casse ignoree), liste vide sinon."""
        try:
            return self._movie_repo.list_by_genre_name(genre_name)
        except SQLAlchemyError as exc:
            logger.exception("Echec du filtrage par genre", genre=genre_name)
            raise PersistenceError("Houve um erro durante o filtro") from exc
