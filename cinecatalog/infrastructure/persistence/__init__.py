"""
Module de persistance relationnelle pour CineCatalog.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy).
Il contient :

- database.py : Creation de l'engine, session generator, initialisation
- models.py : Modeles SQLModel representant les tables de la base de donnees
- repositories/ : Adaptateurs implementant les ports du domaine

Les modeles ici sont des adapters de persistance, distincts des entites de domaine
(dataclass dans core/entities/). La conversion entre les deux se fait dans les
repositories.

Usage:
    from cinecatalog.infrastructure.persistence import create_db_engine, init_db

    engine = init_db(create_db_engine("sqlite:///cinecatalog.db"))
    with Session(engine) as session:
        session.add(GenreModel(name="Drama"))
        session.commit()
"""

from cinecatalog.infrastructure.persistence.database import (
    create_db_engine,
    get_session,
    init_db,
)
from cinecatalog.infrastructure.persistence.models import (
    GenreModel,
    LanguageModel,
    MovieModel,
)

__all__ = [
    "create_db_engine",
    "get_session",
    "init_db",
    "GenreModel",
    "LanguageModel",
    "MovieModel",
]
