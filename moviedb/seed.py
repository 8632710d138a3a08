"""
Create the ``movies`` table and load the sample dataset.

    moviedb-seed                 # uses DATABASE_PATH (default database.sqlite)
    moviedb-seed --path x.sqlite --reset
"""
import argparse
import logging
from typing import Optional, Sequence

from sqlalchemy import create_engine, delete
from sqlalchemy.orm import sessionmaker

from moviedb.database import Base
from moviedb.model.movie import Movie
from moviedb.utils.config import settings
from moviedb.utils.middleware.logger import setup_logging

logger = logging.getLogger(__name__)

SAMPLE_MOVIES = [
    {"id": 1, "title": "Dangal", "director": "Nitesh Tiwari", "genre": "Biography", "release_year": 2016, "rating": 4.8, "actor": "Aamir Khan", "box_office_collection": 220},
    {"id": 2, "title": "Baahubali 2: The Conclusion", "director": "S.S. Rajamouli", "genre": "Action", "release_year": 2017, "rating": 4.7, "actor": "Prabhas", "box_office_collection": 181},
    {"id": 3, "title": "PK", "director": "Rajkumar Hirani", "genre": "Comedy", "release_year": 2014, "rating": 4.6, "actor": "Aamir Khan", "box_office_collection": 140},
    {"id": 4, "title": "Bajrangi Bhaijaan", "director": "Kabir Khan", "genre": "Drama", "release_year": 2015, "rating": 4.5, "actor": "Salman Khan", "box_office_collection": 130},
    {"id": 5, "title": "Sultan", "director": "Ali Abbas Zafar", "genre": "Drama", "release_year": 2016, "rating": 4.3, "actor": "Salman Khan", "box_office_collection": 120},
    {"id": 6, "title": "Sanju", "director": "Rajkumar Hirani", "genre": "Biography", "release_year": 2018, "rating": 4.4, "actor": "Ranbir Kapoor", "box_office_collection": 120},
    {"id": 7, "title": "Padmaavat", "director": "Sanjay Leela Bhansali", "genre": "Historical", "release_year": 2018, "rating": 4.2, "actor": "Ranveer Singh", "box_office_collection": 112},
    {"id": 8, "title": "3 Idiots", "director": "Rajkumar Hirani", "genre": "Comedy", "release_year": 2009, "rating": 4.9, "actor": "Aamir Khan", "box_office_collection": 202},
]


def seed(path: str, reset: bool = False, movies: Sequence[dict] = SAMPLE_MOVIES) -> int:
    engine = create_engine(f"sqlite:///{path}")
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        if reset:
            db.execute(delete(Movie))
        existing = {movie_id for (movie_id,) in db.query(Movie.id).all()}
        inserted = 0
        for row in movies:
            if row["id"] in existing:
                continue
            db.add(Movie(**row))
            inserted += 1
        db.commit()
    finally:
        db.close()
        engine.dispose()

    logger.info("Seeded %d movies into %s", inserted, path)
    return inserted


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Load the sample movies into the SQLite store.")
    parser.add_argument("--path", default=settings.database_path, help="SQLite database file")
    parser.add_argument("--reset", action="store_true", help="delete existing rows first")
    args = parser.parse_args(argv)

    setup_logging(settings.log_level)
    seed(args.path, reset=args.reset)


if __name__ == "__main__":
    main()
