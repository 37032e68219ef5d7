"""
CineCatalog - API REST de gestion d'un catalogue de films.

Ce package expose un catalogue de films, genres et langues persiste
dans une base relationnelle via SQLModel, et servi en JSON par FastAPI.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, exceptions)
- services/ : Couche application (cas d'utilisation films/genres/langues)
- infrastructure/ : Persistance SQLModel (modèles, session, repositories)
- web/ : Couche HTTP (application FastAPI, routes, schémas)
"""

__version__ = "0.1.0"
