"""
Implementation SQLModel du repository Language.

Les langues sont en lecture seule pour l'API HTTP ; l'insertion
sert uniquement aux commandes d'administration du CLI.
"""

from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from cinecatalog.core.entities.catalog import Language
from cinecatalog.core.ports.repositories import ILanguageRepository
from cinecatalog.infrastructure.persistence.models import LanguageModel


class SQLModelLanguageRepository(ILanguageRepository):
    """Repository SQLModel pour les langues."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def _to_entity(self, model: LanguageModel) -> Language:
        return Language(id=model.id, name=model.name)

    def list_all(self) -> list[Language]:
        """Liste toutes les langues."""
        models = self._session.exec(select(LanguageModel)).all()
        return [self._to_entity(model) for model in models]

    def get_by_id(self, language_id: int) -> Optional[Language]:
        """Recupere une langue par son ID."""
        model = self._session.get(LanguageModel, language_id)
        if model:
            return self._to_entity(model)
        return None

    def find_by_name(self, name: str) -> Optional[Language]:
        """Recherche une langue par nom, sans tenir compte de la casse."""
        statement = select(LanguageModel).where(
            func.lower(LanguageModel.name) == func.lower(name)
        )
        model = self._session.exec(statement).first()
        if model:
            return self._to_entity(model)
        return None

    def save(self, language: Language) -> Language:
        """Insere une nouvelle langue."""
        model = LanguageModel(name=language.name)
        self._session.add(model)
        self._session.commit()
        self._session.refresh(model)
        return self._to_entity(model)
