"""
Implementations SQLModel des repositories.

Ce module contient les implementations concretes des interfaces repository
definies dans cinecatalog/core/ports/repositories.py, utilisant SQLModel pour
la persistance relationnelle.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine
- Recoit une session SQLModel via injection de dependances
- Convertit entre entites de domaine (dataclass) et modeles DB (SQLModel)
"""

from cinecatalog.infrastructure.persistence.repositories.genre_repository import (
    SQLModelGenreRepository,
)
from cinecatalog.infrastructure.persistence.repositories.language_repository import (
    SQLModelLanguageRepository,
)
from cinecatalog.infrastructure.persistence.repositories.movie_repository import (
    SQLModelMovieRepository,
)

__all__ = [
    "SQLModelGenreRepository",
    "SQLModelLanguageRepository",
    "SQLModelMovieRepository",
]
