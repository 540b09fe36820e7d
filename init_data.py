#!/usr/bin/env python3
"""Write the sample movie catalog to MOVIES_JSON_PATH and check it loads"""
import os
import sys
import json

from config import Config
from database.movie_catalog import DataLoadError, MovieCatalog
from database.sample_movies import SAMPLE_MOVIES


def init_movies_json(path):
    print("Checking movie catalog...")

    if os.path.exists(path):
        print(f"Catalog already exists at {path}")
        return True

    try:
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        print(f"Writing {len(SAMPLE_MOVIES)} sample movies...")
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(SAMPLE_MOVIES, f, indent=2)

        print(f"Catalog written to {path}")
        return True

    except OSError as e:
        print(f"Catalog write error: {e}")
        return False


def verify_catalog(path):
    print("Verifying movie catalog...")

    try:
        catalog = MovieCatalog.load(path)
    except DataLoadError as e:
        print(f"Catalog invalid: {e}")
        return False

    print(f"Catalog OK ({len(catalog)} movies, {len(catalog.genres)} genres)")
    return True


def main(path=None):
    path = path or Config.MOVIES_JSON_PATH

    print("\nData Initialization\n")

    if not init_movies_json(path):
        print("Catalog initialization failed - CRITICAL")
        sys.exit(1)

    if not verify_catalog(path):
        print("Catalog verification failed - CRITICAL")
        sys.exit(1)

    print("\nInitialization complete\n")


if __name__ == '__main__':
    main()
