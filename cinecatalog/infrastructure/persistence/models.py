"""
Modeles SQLModel pour la base de donnees CineCatalog.

Ces modeles representent les tables de la base de donnees.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- genres: Genres de films
- languages: Langues des films
- movies: Films, rattaches a un genre et une langue
"""

from datetime import date
from typing import Optional

from sqlmodel import Field, SQLModel


class GenreModel(SQLModel, table=True):
    """Modele representant un genre dans la base de donnees."""

    __tablename__ = "genres"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True)


class LanguageModel(SQLModel, table=True):
    """Modele representant une langue dans la base de donnees."""

    __tablename__ = "languages"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True)


class MovieModel(SQLModel, table=True):
    """
    Modele representant un film dans la base de donnees.

    genre_id et language_id sont des cles etrangeres obligatoires ;
    la duree est exprimee en minutes.
    """

    __tablename__ = "movies"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(index=True)
    genre_id: int = Field(foreign_key="genres.id", index=True)
    language_id: int = Field(foreign_key="languages.id", index=True)
    oscar_count: int = Field(default=0)
    release_date: date
    duration: int
