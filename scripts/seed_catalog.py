import sys
from pathlib import Path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path: sys.path.insert(0, str(ROOT))

import logging

from notesphere.core.config import DATABASE_URL, LOG_LEVEL
from notesphere.db import build_engine
from notesphere.repositories import SqlCatalogRepository
from notesphere.services.seed import seed_catalog

def main():
    logging.basicConfig(level=LOG_LEVEL)
    repo = SqlCatalogRepository(build_engine(DATABASE_URL))
    repo.create_schema()
    if seed_catalog(repo):
        print("Catalog seed OK")
    else:
        print("Catalog already populated, nothing to do")

if __name__ == "__main__":
    main()
