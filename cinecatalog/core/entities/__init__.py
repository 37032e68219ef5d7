"""
Business entities representing core domain concepts.

Entities are mutable objects with identity that persist over time.

Exports:
- Movie: A movie of the catalog
- Genre: A movie genre
- Language: A movie language
- MoviePatch: Partial update of a movie
- MovieListing: Movies with aggregate statistics
"""

from cinecatalog.core.entities.catalog import (
    Genre,
    Language,
    Movie,
    MovieListing,
    MoviePatch,
)

__all__ = [
    "Genre",
    "Language",
    "Movie",
    "MovieListing",
    "MoviePatch",
]
