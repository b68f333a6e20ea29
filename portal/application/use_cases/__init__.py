"""
Use Cases de l'application.

Les Use Cases orchestrent les entites du domaine via les ports
(repositories) pour realiser les fonctionnalites de l'application.

Chaque Use Case:
    - A une seule responsabilite
    - Appelle une seule operation de persistance (lecture + ecriture pour update)
    - Retourne un Result (jamais None)
"""
