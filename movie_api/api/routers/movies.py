"""
Movie API endpoints.
"""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from movie_api.api.dependencies import get_movie_service
from movie_api.api.models.movie import MovieCreate, MovieResponse
from movie_api.api.security import get_current_user, require_admin
from movie_api.services.exceptions import NotFoundError, ValidationError
from movie_api.services.movie_service import MovieService

router = APIRouter(prefix="/api/movies", tags=["movies"])

read_access = [Depends(get_current_user)]
write_access = [Depends(require_admin)]


@router.get("", response_model=list[MovieResponse], dependencies=read_access)
def list_movies(service: MovieService = Depends(get_movie_service)):
    """List all movies."""
    return [MovieResponse.model_validate(m) for m in service.list_all()]


@router.get("/exists/{movie_id}", response_model=bool, dependencies=read_access)
def movie_exists(movie_id: int, service: MovieService = Depends(get_movie_service)):
    """Check whether a movie exists."""
    return service.exists_by_id(movie_id)


@router.get("/filter/recommended", response_model=list[MovieResponse], dependencies=read_access)
def filter_by_recommended(
    recommended: bool = Query(...),
    service: MovieService = Depends(get_movie_service),
):
    """List movies by recommendation flag."""
    return [MovieResponse.model_validate(m) for m in service.list_by_recommended(recommended)]


@router.get("/filter/genre", response_model=list[MovieResponse], dependencies=read_access)
def filter_by_genre(
    genre: str = Query(...),
    service: MovieService = Depends(get_movie_service),
):
    """List movies whose genre contains the given text (case-insensitive)."""
    return [MovieResponse.model_validate(m) for m in service.list_by_genre(genre)]


@router.get("/{movie_id}", response_model=MovieResponse, dependencies=read_access)
def get_movie(movie_id: int, service: MovieService = Depends(get_movie_service)):
    """Get movie details by ID."""
    movie = service.get_by_id(movie_id)
    if not movie:
        raise HTTPException(status_code=404, detail="Movie not found")
    return MovieResponse.model_validate(movie)


@router.post("", response_model=MovieResponse, dependencies=write_access)
def create_movie(movie_in: MovieCreate, service: MovieService = Depends(get_movie_service)):
    """Create a movie, including any reviews it carries."""
    try:
        movie = service.create(movie_in)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.to_detail())
    return MovieResponse.model_validate(movie)


@router.post("/batch", response_model=list[MovieResponse], dependencies=write_access)
def create_movies(movies_in: list[MovieCreate], service: MovieService = Depends(get_movie_service)):
    """Create several movies; none are stored if any is invalid."""
    try:
        movies = service.create_batch(movies_in)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.to_detail())
    return [MovieResponse.model_validate(m) for m in movies]


@router.put("/{movie_id}", response_model=MovieResponse, dependencies=write_access)
def update_movie(
    movie_id: int,
    movie_in: MovieCreate,
    service: MovieService = Depends(get_movie_service),
):
    """Replace a movie's fields and its review list."""
    try:
        movie = service.update(movie_id, movie_in)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.to_detail())
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return MovieResponse.model_validate(movie)


@router.delete("/filter/releaseDate", status_code=204, response_class=Response, dependencies=write_access)
def delete_movies_before(
    cutoff: date = Query(..., alias="date"),
    service: MovieService = Depends(get_movie_service),
):
    """Delete movies released strictly before the given date."""
    service.delete_by_release_date_before(cutoff)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{movie_id}", status_code=204, response_class=Response, dependencies=write_access)
def delete_movie(movie_id: int, service: MovieService = Depends(get_movie_service)):
    """Delete a movie and its reviews."""
    if not service.exists_by_id(movie_id):
        raise HTTPException(status_code=404, detail="Movie not found")
    service.delete_by_id(movie_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("", status_code=204, response_class=Response, dependencies=write_access)
def delete_all_movies(service: MovieService = Depends(get_movie_service)):
    """Delete every movie and review."""
    service.delete_all()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
