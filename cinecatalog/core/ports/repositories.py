"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) définissant les contrats pour la persistance des données.
Les implémentations (adaptateurs) fournissent les mécanismes de stockage concrets
(SQLModel sur une base relationnelle, SQLite en mémoire pour les tests, etc.).
"""

from abc import ABC, abstractmethod
from typing import Optional

from cinecatalog.core.entities.catalog import Genre, Language, Movie, MoviePatch


class IGenreRepository(ABC):
    """
    Interface de stockage des genres.

    Définit les opérations pour persister et récupérer les entités Genre.
    """

    @abstractmethod
    def list_all(self) -> list[Genre]:
        """Liste tous les genres."""
        ...

    @abstractmethod
    def get_by_id(self, genre_id: int) -> Optional[Genre]:
        """Récupère un genre par son ID."""
        ...

    @abstractmethod
    def find_by_name(
        self, name: str, exclude_id: Optional[int] = None
    ) -> Optional[Genre]:
        """
        Recherche un genre par nom, sans tenir compte de la casse.

        Args :
            name : Le nom recherché
            exclude_id : ID à ignorer (contrôle de collision lors d'un renommage)

        Retourne :
            Le premier genre correspondant, ou None
        """
        ...

    @abstractmethod
    def save(self, genre: Genre) -> Genre:
        """Insère un nouveau genre."""
        ...

    @abstractmethod
    def rename(self, genre_id: int, name: str) -> Genre:
        """Renomme un genre existant et retourne l'enregistrement mis à jour."""
        ...

    @abstractmethod
    def delete(self, genre_id: int) -> bool:
        """Supprime un genre par ID. Retourne True si supprimé."""
        ...


class ILanguageRepository(ABC):
    """
    Interface de stockage des langues.

    Les langues sont en lecture seule côté HTTP ; save() sert aux commandes
    d'administration.
    """

    @abstractmethod
    def list_all(self) -> list[Language]:
        """Liste toutes les langues."""
        ...

    @abstractmethod
    def get_by_id(self, language_id: int) -> Optional[Language]:
        """Récupère une langue par son ID."""
        ...

    @abstractmethod
    def find_by_name(self, name: str) -> Optional[Language]:
        """Recherche une langue par nom, sans tenir compte de la casse."""
        ...

    @abstractmethod
    def save(self, language: Language) -> Language:
        """Insère une nouvelle langue."""
        ...


class IMovieRepository(ABC):
    """
    Interface de stockage des films.

    Définit les opérations pour persister et récupérer les entités Movie.
    """

    @abstractmethod
    def list_all(self) -> list[Movie]:
        """Liste tous les films par titre croissant, genre et langue joints."""
        ...

    @abstractmethod
    def get_by_id(self, movie_id: int) -> Optional[Movie]:
        """Récupère un film par son ID."""
        ...

    @abstractmethod
    def find_by_title(self, title: str) -> Optional[Movie]:
        """Recherche un film par titre, sans tenir compte de la casse."""
        ...

    @abstractmethod
    def list_by_genre_name(self, genre_name: str) -> list[Movie]:
        """Liste les films dont le nom du genre correspond, sans tenir compte de la casse."""
        ...

    @abstractmethod
    def count_by_genre(self, genre_id: int) -> int:
        """Compte les films rattachés à un genre."""
        ...

    @abstractmethod
    def save(self, movie: Movie) -> Movie:
        """Insère un nouveau film."""
        ...

    @abstractmethod
    def update(self, movie_id: int, patch: MoviePatch) -> Movie:
        """
        Applique une mise à jour partielle à un film existant.

        Args :
            movie_id : L'ID du film
            patch : Champs à modifier (None = inchangé)

        Retourne :
            Le film mis à jour
        """
        ...

    @abstractmethod
    def delete(self, movie_id: int) -> bool:
        """Supprime un film par ID. Retourne True si supprimé."""
        ...
