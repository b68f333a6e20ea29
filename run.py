#!/usr/bin/env python3
"""
Point d'entree principal pour lancer l'API Contributor Portal.

Usage:
------
    python3 run.py
    python3 run.py --host 0.0.0.0 --port 8000
    # ou directement:
    uvicorn portal.presentation.api.main:app --reload

Configuration:
--------------
DATABASE_URL, LOG_LEVEL, JSON_LOGS, SEED_DATA sont lus depuis
l'environnement ou le fichier .env (voir .env.example).
"""
import argparse
import sys

import uvicorn


def main():
    """Lance le serveur uvicorn."""
    parser = argparse.ArgumentParser(description="Contributor Portal API")
    parser.add_argument("--host", default="127.0.0.1", help="Adresse d'ecoute")
    parser.add_argument("--port", type=int, default=8000, help="Port d'ecoute")
    parser.add_argument("--reload", action="store_true", help="Rechargement auto (dev)")
    args = parser.parse_args()

    try:
        uvicorn.run(
            "portal.presentation.api.main:app",
            host=args.host,
            port=args.port,
            reload=args.reload,
        )
    except KeyboardInterrupt:
        print("\nApplication arretee.")
        sys.exit(0)


if __name__ == "__main__":
    main()
