"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports repository : Contrats de persistance des données
- IMovieRepository : Stockage des films
- IGenreRepository : Stockage des genres
- ILanguageRepository : Stockage des langues
"""

from cinecatalog.core.ports.repositories import (
    IGenreRepository,
    ILanguageRepository,
    IMovieRepository,
)

__all__ = [
    "IGenreRepository",
    "ILanguageRepository",
    "IMovieRepository",
]
