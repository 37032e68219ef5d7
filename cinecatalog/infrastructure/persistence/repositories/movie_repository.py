"""
Implementation SQLModel du repository Movie.

Implemente l'interface IMovieRepository pour la persistance des films
dans la base de donnees via SQLModel.
"""

from typing import Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from cinecatalog.core.entities.catalog import Genre, Language, Movie, MoviePatch
from cinecatalog.core.ports.repositories import IMovieRepository
from cinecatalog.infrastructure.persistence.models import (
    GenreModel,
    LanguageModel,
    MovieModel,
)


class SQLModelMovieRepository(IMovieRepository):
    """
    Repository SQLModel pour les films.

    Implemente IMovieRepository avec conversion bidirectionnelle
    entre l'entite Movie (domaine) et MovieModel (persistance).
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _to_entity(
        self,
        model: MovieModel,
        genre: Optional[GenreModel] = None,
        language: Optional[LanguageModel] = None,
    ) -> Movie:
        """
        Convertit un modele DB en entite domaine.

        Args :
            model : Le modele MovieModel depuis la DB
            genre : Le genre joint (optionnel)
            language : La langue jointe (optionnel)

        Retourne :
            L'entite Movie correspondante
        """
        return Movie(
            id=model.id,
            title=model.title,
            genre_id=model.genre_id,
            language_id=model.language_id,
            oscar_count=model.oscar_count,
            release_date=model.release_date,
            duration=model.duration,
            genre=Genre(id=genre.id, name=genre.name) if genre else None,
            language=Language(id=language.id, name=language.name) if language else None,
        )

    def _to_model(self, entity: Movie) -> MovieModel:
        """Convertit une entite domaine en modele DB."""
        model = MovieModel(
            title=entity.title,
            genre_id=entity.genre_id,
            language_id=entity.language_id,
            oscar_count=entity.oscar_count,
            release_date=entity.release_date,
            duration=entity.duration,
        )
        if entity.id:
            model.id = entity.id
        return model

    def _commit(self) -> None:
        """Valide la transaction, annule la session en cas d'echec."""
        try:
            self._session.commit()
        except SQLAlchemyError:
            self._session.rollback()
            raise

    def _detailed(self):
        """Requete films + genre + langue (jointures internes)."""
        return (
            select(MovieModel, GenreModel, LanguageModel)
            .join(GenreModel, MovieModel.genre_id == GenreModel.id)
            .join(LanguageModel, MovieModel.language_id == LanguageModel.id)
        )

    def list_all(self) -> list[Movie]:
        """Liste tous les films par titre croissant, genre et langue joints."""
        statement = self._detailed().order_by(MovieModel.title)
        rows = self._session.exec(statement).all()
        return [self._to_entity(movie, genre, language) for movie, genre, language in rows]

    def get_by_id(self, movie_id: int) -> Optional[Movie]:
        """Recupere un film par son ID."""
        model = self._session.get(MovieModel, movie_id)
        if model:
            return self._to_entity(model)
        return None

    def find_by_title(self, title: str) -> Optional[Movie]:
        """Recherche un film par titre, sans tenir compte de la casse."""
        statement = select(MovieModel).where(
            func.lower(MovieModel.title) == func.lower(title)
        )
        model = self._session.exec(statement).first()
        if model:
            return self._to_entity(model)
        return None

    def list_by_genre_name(self, genre_name: str) -> list[Movie]:
        """Liste les films dont le genre correspond au nom, sans tenir compte de la casse."""
        statement = self._detailed().where(
            func.lower(GenreModel.name) == func.lower(genre_name)
        )
        rows = self._session.exec(statement).all()
        return [self._to_entity(movie, genre, language) for movie, genre, language in rows]

    def count_by_genre(self, genre_id: int) -> int:
        """Compte les films rattaches a un genre."""
        statement = (
            select(func.count())
            .select_from(MovieModel)
            .where(MovieModel.genre_id == genre_id)
        )
        return self._session.exec(statement).one()

    def save(self, movie: Movie) -> Movie:
        """Insere un nouveau film."""
        model = self._to_model(movie)
        self._session.add(model)
        self._commit()
        self._session.refresh(model)
        return self._to_entity(model)

    def update(self, movie_id: int, patch: MoviePatch) -> Movie:
        """Applique les seuls champs fournis par le patch au film existant."""
        model = self._session.get(MovieModel, movie_id)
        if model is None:
            raise LookupError(f"Film {movie_id} introuvable")
        for name, value in patch.changes().items():
            setattr(model, name, value)
        self._session.add(model)
        self._commit()
        self._session.refresh(model)
        return self._to_entity(model)

    def delete(self, movie_id: int) -> bool:
        """Supprime un film par ID. Retourne True si supprime."""
        model = self._session.get(MovieModel, movie_id)
        if model is None:
            return False
        self._session.delete(model)
        self._commit()
        return True
