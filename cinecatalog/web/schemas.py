"""
Schémas pydantic des corps de requête et de réponse JSON.

Les noms de clés exposés suivent le format historique de l'API :
`mediaDuration` pour la durée moyenne, `genres` / `languages` pour
les enregistrements joints d'un film.
"""

from datetime import date, datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def parse_release_date(value: Any) -> Any:
    """
    Convertit une entrée « date-like » en date calendaire.

    Accepte une date, un datetime ou une chaîne ISO 8601 avec ou sans heure
    (ex: "1999-03-31" ou "1999-03-31T00:00:00.000Z"). Les autres valeurs
    sont laissées à la validation pydantic.

    Un datetime avec fuseau est ramené en UTC avant d'en extraire la date
    ("1999-03-31T23:00:00-03:00" donne le 1er avril).
    """
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.strip())
        except ValueError:
            return value
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    return value


class GenreOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class LanguageOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class MovieOut(BaseModel):
    """Film avec son genre et sa langue."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    genre_id: int
    language_id: int
    oscar_count: int
    release_date: date
    duration: int
    genre: Optional[GenreOut] = Field(default=None, serialization_alias="genres")
    language: Optional[LanguageOut] = Field(
        default=None, serialization_alias="languages"
    )


class MovieListOut(BaseModel):
    """Réponse de GET /movies."""

    model_config = ConfigDict(from_attributes=True)

    total: int
    media_duration: float = Field(serialization_alias="mediaDuration")
    movies: list[MovieOut]


class MovieCreate(BaseModel):
    """Corps de POST /movies."""

    title: str
    genre_id: int
    language_id: int
    oscar_count: int = Field(default=0, ge=0)
    release_date: date
    duration: int

    @field_validator("release_date", mode="before")
    @classmethod
    def coerce_release_date(cls, v: Any) -> Any:
        return parse_release_date(v)


class MovieUpdate(BaseModel):
    """Corps de PUT /movies/{id} : chaque champ absent reste inchangé."""

    title: Optional[str] = None
    genre_id: Optional[int] = None
    language_id: Optional[int] = None
    oscar_count: Optional[int] = Field(default=None, ge=0)
    release_date: Optional[date] = None
    duration: Optional[int] = None

    @field_validator("release_date", mode="before")
    @classmethod
    def coerce_release_date(cls, v: Any) -> Any:
        # Date vide = champ absent, la date enregistrée reste inchangée
        if isinstance(v, str) and not v.strip():
            return None
        return parse_release_date(v)


class GenreIn(BaseModel):
    """Corps de POST /genres et PUT /genres/{id}."""

    name: str = Field(min_length=1)
