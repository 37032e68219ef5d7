"""
Point d'entrée CLI de CineCatalog.

Initialise le container DI, configure le logging et fournit les commandes CLI :
lancement du serveur HTTP et amorçage des données de référence.
"""

from typing import Annotated, Optional

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import Settings
from .container import Container
from .core.exceptions import ConflictError
from .logging_config import configure_logging

app = typer.Typer(
    name="cinecatalog",
    help="API de gestion d'un catalogue de films",
)
container = Container()
console = Console()


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    typer.echo(f"Base de données : {config.database_url}")
    typer.echo(f"Écoute : {config.host}:{config.port}")
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"CineCatalog v{__version__}")


@app.command(name="init-db")
def init_database() -> None:
    """Crée les tables si elles n'existent pas."""
    container.database.init()
    typer.echo(f"Base initialisée : {get_config().database_url}")


@app.command(name="add-genre")
def add_genre(name: Annotated[str, typer.Argument(help="Nom du genre")]) -> None:
    """Ajoute un genre au catalogue."""
    container.database.init()
    session = container.session()
    try:
        service = container.genre_service(
            genre_repo__session=session, movie_repo__session=session
        )
        genre = service.create_genre(name)
    except ConflictError as exc:
        typer.echo(exc.message, err=True)
        raise typer.Exit(code=1)
    finally:
        session.close()
    typer.echo(f"Genre #{genre.id} : {genre.name}")


@app.command(name="add-language")
def add_language(name: Annotated[str, typer.Argument(help="Nom de la langue")]) -> None:
    """Ajoute une langue au catalogue (non exposé par l'API HTTP)."""
    container.database.init()
    session = container.session()
    try:
        service = container.language_service(language_repo__session=session)
        language = service.add_language(name)
    except ConflictError as exc:
        typer.echo(exc.message, err=True)
        raise typer.Exit(code=1)
    finally:
        session.close()
    typer.echo(f"Langue #{language.id} : {language.name}")


@app.command()
def languages() -> None:
    """Liste les langues disponibles."""
    container.database.init()
    table = Table(title="Langues")
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Nom")
    session = container.session()
    try:
        service = container.language_service(language_repo__session=session)
        for language in service.list_languages():
            table.add_row(str(language.id), language.name)
    finally:
        session.close()
    console.print(table)


@app.command()
def serve(
    host: Annotated[Optional[str], typer.Option(help="Adresse d'écoute")] = None,
    port: Annotated[Optional[int], typer.Option(help="Port d'écoute")] = None,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur HTTP CineCatalog."""
    import uvicorn

    config = get_config()
    host = host or config.host
    port = port or config.port
    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    uvicorn.run(
        "cinecatalog.web.app:app",
        host=host,
        port=port,
        reload=reload,
        log_config=None,  # Les loggers uvicorn restent interceptés par loguru
    )


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    configure_logging(settings)
    logger.debug("Démarrage de CineCatalog", version=__version__)

    app()


if __name__ == "__main__":
    main()
