"""
Catalog entities.

Entities representing the movie catalog: movies, their genre and their
original language, plus the partial-update payload used by PUT /movies/{id}.
"""

from dataclasses import dataclass, field, fields
from datetime import date
from typing import Any, Optional


@dataclass
class Genre:
    """
    Movie genre (Action, Drama, ...).

    Attributes:
        id: Internal database ID
        name: Genre name, unique ignoring case
    """

    id: Optional[int] = None
    name: str = ""


@dataclass
class Language:
    """
    Movie language. Read-only through the HTTP API.

    Attributes:
        id: Internal database ID
        name: Language name
    """

    id: Optional[int] = None
    name: str = ""


@dataclass
class Movie:
    """
    Movie of the catalog.

    Attributes:
        id: Internal database ID
        title: Title, unique ignoring case
        genre_id: Reference to the Genre
        language_id: Reference to the Language
        oscar_count: Number of Oscars won
        release_date: Release date
        duration: Runtime in minutes
        genre: Joined Genre record (only filled by listing queries)
        language: Joined Language record (only filled by listing queries)
    """

    id: Optional[int] = None
    title: str = ""
    genre_id: Optional[int] = None
    language_id: Optional[int] = None
    oscar_count: int = 0
    release_date: Optional[date] = None
    duration: int = 0
    genre: Optional[Genre] = None
    language: Optional[Language] = None


@dataclass
class MoviePatch:
    """
    Partial update of a Movie.

    Every field left to None keeps the stored value unchanged.
    """

    title: Optional[str] = None
    genre_id: Optional[int] = None
    language_id: Optional[int] = None
    oscar_count: Optional[int] = None
    release_date: Optional[date] = None
    duration: Optional[int] = None

    def changes(self) -> dict[str, Any]:
        """Return only the supplied fields, keyed by attribute name."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


@dataclass
class MovieListing:
    """
    Result of GET /movies.

    Attributes:
        total: Number of movies returned
        media_duration: Mean duration in minutes (0 when the catalog is empty)
        movies: Movies ordered by title
    """

    total: int = 0
    media_duration: float = 0
    movies: list[Movie] = field(default_factory=list)
