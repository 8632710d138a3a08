from fastapi import APIRouter, HTTPException, Depends, status
from moviedb.schemas.movie_schema import MovieList
from moviedb.crud.base import QueryResult
from moviedb.crud.movie_crud import movie_crud
from moviedb.database import Database, get_db
from moviedb.schemas import QueryStatus

router = APIRouter(
    prefix="/movies", tags=["movies"]

)


def unwrap(result: QueryResult) -> dict:
    if result.ok:
        return result.data
    if result.status == QueryStatus.NOT_READY:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database is not ready"
        )
    raise HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Database query failed: {result.error}"
    )


@router.get("", response_model=MovieList)
async def get_all_movies(db: Database = Depends(get_db)):
    result = await movie_crud.fetch_all_movies(db)
    return unwrap(result)


@router.get("/genre/{genre}", response_model=MovieList)
async def get_movies_by_genre(genre: str, db: Database = Depends(get_db)):
    result = await movie_crud.fetch_movies_by_genre(db, genre)
    return unwrap(result)


@router.get("/details/{id}", response_model=MovieList)
async def get_movie_details(id: str, db: Database = Depends(get_db)):
    """
    Look up a movie by id. Ids are bound as given; an unknown id returns an
    empty list rather than a 404.
    """
    result = await movie_crud.fetch_movies_by_id(db, id)
    return unwrap(result)


@router.get("/release_year/{release_year}", response_model=MovieList)
async def get_movies_by_release_year(release_year: str, db: Database = Depends(get_db)):
    result = await movie_crud.fetch_movies_by_release_year(db, release_year)
    return unwrap(result)
