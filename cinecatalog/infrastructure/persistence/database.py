"""
Configuration de la base de donnees pour CineCatalog.

Ce module fournit :
- Engine SQLAlchemy (SQLite par defaut, toute URL SQLAlchemy acceptee)
- Session generator pour une session par requete
- Fonction d'initialisation des tables

L'engine n'est pas un global de module : il est cree par le Container DI
(ou par les tests) puis passe aux fonctions qui en ont besoin.
"""

from collections.abc import Generator
from pathlib import Path

from loguru import logger
from sqlalchemy import Engine, event
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


def _configure_sqlite_connection(dbapi_connection, connection_record) -> None:
    """
    Prepare chaque connexion SQLite.

    - Active l'application des cles etrangeres (desactivee par defaut)
    - Remplace lower() par une version Unicode : la fonction native ne
      traite que l'ASCII ("AÇÃO" resterait "aÇÃo")
    """
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()
    dbapi_connection.create_function("lower", 1, _unicode_lower, deterministic=True)


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Cree l'engine de la base de donnees.

    Pour SQLite :
    - le repertoire parent du fichier est cree si necessaire
    - ":memory:" partage une connexion unique (StaticPool) entre threads
    - les cles etrangeres et un lower() Unicode sont installes sur chaque connexion

    Args :
        database_url : URL SQLAlchemy (ex: sqlite:///cinecatalog.db)
        echo : Journalise les requetes SQL emises

    Retourne :
        L'engine configure
    """
    if not database_url.startswith("sqlite"):
        return create_engine(database_url, echo=echo)

    kwargs: dict = {"connect_args": {"check_same_thread": False}}
    if ":memory:" in database_url or database_url in ("sqlite://", "sqlite:///"):
        kwargs["poolclass"] = StaticPool
    else:
        db_path = Path(database_url.replace("sqlite:///", ""))
        db_path.parent.mkdir(exist_ok=True, parents=True)

    engine = create_engine(database_url, echo=echo, **kwargs)
    event.listen(engine, "connect", _configure_sqlite_connection)
    return engine


def get_session(engine: Engine) -> Generator[Session, None, None]:
    """
    Generateur de session SQLModel.

    Utilisation avec next() ou comme dependance FastAPI :
        session = next(get_session(engine))
        try:
            # operations
        finally:
            session.close()

    Yields:
        Session SQLModel connectee a l'engine
    """
    with Session(engine) as session:
        yield session


def init_db(engine: Engine) -> Engine:
    """
    Initialise la base de donnees en creant toutes les tables.

    Cette fonction importe les modeles pour enregistrer leurs metadonnees
    dans SQLModel.metadata, puis cree les tables correspondantes si elles
    n'existent pas deja.

    Doit etre appelee une fois au demarrage de l'application.
    """
    # Import des modeles pour enregistrer leurs metadonnees
    from cinecatalog.infrastructure.persistence import models  # noqa: F401

    SQLModel.metadata.create_all(engine)
    logger.debug("Tables initialisees", url=str(engine.url))
    return engine
