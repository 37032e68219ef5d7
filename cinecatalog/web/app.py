"""
Application FastAPI de CineCatalog.

Initialise l'application web avec le Container DI, enregistre le
gestionnaire d'erreurs métier et monte les routes. La documentation
interactive (OpenAPI) est servie sur /docs.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from .. import __version__
from ..container import Container
from ..core.exceptions import CatalogError
from .routes.genres import router as genres_router
from .routes.languages import router as languages_router
from .routes.movies import router as movies_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Crée les tables au démarrage et libère les ressources à l'arrêt."""
    container: Container = app.state.container
    container.database.init()
    logger.info("CineCatalog prêt", database=container.config().database_url)
    yield
    container.shutdown_resources()


async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    """Rend une erreur métier sous la forme {"message": ...}."""
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Fabrique de l'application.

    Args :
        container : Container DI à utiliser (un nouveau par défaut ;
                    les tests en fournissent un pointant vers une base en mémoire)
    """
    app = FastAPI(
        title="CineCatalog",
        description="Catalogue de films : films, genres et langues",
        version=__version__,
        docs_url="/docs",
        lifespan=lifespan,
    )
    app.state.container = container or Container()

    app.add_exception_handler(CatalogError, catalog_error_handler)

    # Routes
    app.include_router(movies_router)
    app.include_router(genres_router)
    app.include_router(languages_router)
    return app


app = create_app()
