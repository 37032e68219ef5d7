"""
Implementation SQLModel du repository Genre.

Implemente l'interface IGenreRepository pour la persistance des genres
dans la base de donnees via SQLModel.
"""

from typing import Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from cinecatalog.core.entities.catalog import Genre
from cinecatalog.core.ports.repositories import IGenreRepository
from cinecatalog.infrastructure.persistence.models import GenreModel


class SQLModelGenreRepository(IGenreRepository):
    """Repository SQLModel pour les genres."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def _to_entity(self, model: GenreModel) -> Genre:
        """Convertit un modele DB en entite domaine."""
        return Genre(id=model.id, name=model.name)

    def _commit(self) -> None:
        """Valide la transaction, annule la session en cas d'echec."""
        try:
            self._session.commit()
        except SQLAlchemyError:
            self._session.rollback()
            raise

    def list_all(self) -> list[Genre]:
        """Liste tous les genres."""
        models = self._session.exec(select(GenreModel)).all()
        return [self._to_entity(model) for model in models]

    def get_by_id(self, genre_id: int) -> Optional[Genre]:
        """Recupere un genre par son ID."""
        model = self._session.get(GenreModel, genre_id)
        if model:
            return self._to_entity(model)
        return None

    def find_by_name(
        self, name: str, exclude_id: Optional[int] = None
    ) -> Optional[Genre]:
        """Recherche un genre par nom sans tenir compte de la casse, hors exclude_id."""
        statement = select(GenreModel).where(
            func.lower(GenreModel.name) == func.lower(name)
        )
        if exclude_id is not None:
            statement = statement.where(GenreModel.id != exclude_id)
        model = self._session.exec(statement).first()
        if model:
            return self._to_entity(model)
        return None

    def save(self, genre: Genre) -> Genre:
        """Insere un nouveau genre."""
        model = GenreModel(name=genre.name)
        self._session.add(model)
        self._commit()
        self._session.refresh(model)
        return self._to_entity(model)

    def rename(self, genre_id: int, name: str) -> Genre:
        """Renomme un genre existant et retourne l'enregistrement mis a jour."""
        model = self._session.get(GenreModel, genre_id)
        if model is None:
            raise LookupError(f"Genre {genre_id} introuvable")
        model.name = name
        self._session.add(model)
        self._commit()
        self._session.refresh(model)
        return self._to_entity(model)

    def delete(self, genre_id: int) -> bool:
        """Supprime un genre par ID. Retourne True si supprime."""
        model = self._session.get(GenreModel, genre_id)
        if model is None:
            return False
        self._session.delete(model)
        self._commit()
        return True
