"""
Application services layer (use cases).

Services orchestrate the domain logic to fulfill application use cases.
They coordinate between entities and ports, and translate unexpected
persistence failures into the catalog error taxonomy.

This layer contains:
- MovieService: listing with statistics, create, update, delete, genre filter
- GenreService: list, create, rename, delete
- LanguageService: read-only listing and CLI seeding

Services depend on ports (interfaces) from core/, never on concrete
implementations from infrastructure/.
"""

from cinecatalog.services.genres import GenreService
from cinecatalog.services.languages import LanguageService
from cinecatalog.services.movies import MovieService, media_duration

__all__ = [
    "GenreService",
    "LanguageService",
    "MovieService",
    "media_duration",
]
