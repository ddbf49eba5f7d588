"""
➡️ But : Taxonomie des erreurs métier, indépendante du web.

ValidationError → 400, NotFoundError → 404, StoreError → 500 (message générique).

La traduction en réponses HTTP se fait dans les routers et dans app.main.
"""


class ValidationError(ValueError):
    """Champ requis manquant ou vide."""


class NotFoundError(LookupError):
    """Aucune ligne ne correspond à l'identifiant demandé."""


class StoreError(Exception):
    """Échec côté persistance (connexion, contrainte, timeout...)."""
