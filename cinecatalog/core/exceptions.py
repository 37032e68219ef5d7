"""
Exceptions metier du catalogue.

Chaque exception porte le message destine au client HTTP et le code de statut
correspondant. La couche web les convertit en reponse JSON {"message": ...}.
"""


class CatalogError(Exception):
    """
    Erreur de base du catalogue.

    Attributes:
        message: Message lisible renvoye au client
        status_code: Code HTTP associe
    """

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(CatalogError):
    """L'entite referencee n'existe pas."""

    status_code = 404


class ConflictError(CatalogError):
    """Violation d'unicite (titre ou nom deja pris) ou genre encore utilise."""

    status_code = 409


class PersistenceError(CatalogError):
    """Echec inattendu de la base de donnees. Jamais relance."""

    status_code = 500
