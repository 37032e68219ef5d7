"""Service de consultation et d'amorcage des langues."""

from loguru import logger

from cinecatalog.core.entities.catalog import Language
from cinecatalog.core.exceptions import ConflictError
from cinecatalog.core.ports.repositories import ILanguageRepository


class LanguageService:
    """Les langues sont en lecture seule via HTTP ; add_language sert au CLI."""

    def __init__(self, language_repo: ILanguageRepository) -> None:
        self._language_repo = language_repo

    def list_languages(self) -> list[Language]:
        """Liste toutes les langues."""
        return self._language_repo.list_all()

    def add_language(self, name: str) -> Language:
        """
        Ajoute une langue si le nom n'existe pas deja (casse ignoree).

        Raises:
            ConflictError: Une langue porte deja ce nom
        """
        if self._language_repo.find_by_name(name):
            raise ConflictError(f"A língua '{name}' já existe")
        created = self._language_repo.save(Language(name=name))
        logger.info("Langue ajoutee", id=created.id, name=created.name)
        return created
