from typing import Union

from moviedb.crud.base import CRUDBase, QueryResult
from moviedb.database import Database


class CRUDMovie(CRUDBase):
    async def fetch_all_movies(self, db: Database) -> QueryResult:
        return await self.fetch_all(db, self.select_where())

    async def fetch_movies_by_genre(self, db: Database, genre: str) -> QueryResult:
        return await self.fetch_all(db, self.select_where("genre"), [genre])

    async def fetch_movies_by_id(self, db: Database, id: Union[str, int]) -> QueryResult:
        # plural envelope and list shape, same as the other lookups
        return await self.fetch_all(db, self.select_where("id"), [id])

    async def fetch_movies_by_release_year(self, db: Database, year: Union[str, int]) -> QueryResult:
        return await self.fetch_all(db, self.select_where("release_year"), [year])


movie_crud = CRUDMovie("movies", envelope_key="movies")
