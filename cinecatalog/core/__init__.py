"""
Couche domaine (core).

Contient les entités métier, ports (interfaces abstraites) et exceptions.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (BDD, frameworks web).

Sous-packages :
- entities/ : Entités métier (Movie, Genre, Language, MoviePatch)
- ports/ : Interfaces abstraites définissant les contrats de persistance
- exceptions.py : Taxonomie des erreurs métier (404, 409, 500)
"""
