"""
Review API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from movie_api.api.dependencies import get_review_service
from movie_api.api.models.review import ReviewCreate, ReviewResponse
from movie_api.api.security import get_current_user, require_admin
from movie_api.services.exceptions import (
    LinkageError,
    MovieNotFoundError,
    ReviewNotFoundError,
    ValidationError,
)
from movie_api.services.review_service import ReviewService

router = APIRouter(prefix="/api/reviews", tags=["reviews"])

read_access = [Depends(get_current_user)]
write_access = [Depends(require_admin)]


@router.get("", response_model=list[ReviewResponse], dependencies=read_access)
def list_reviews(
    movie_id: int | None = Query(None, alias="movieId"),
    service: ReviewService = Depends(get_review_service),
):
    """List all reviews, or only those of one movie."""
    if movie_id is not None:
        reviews = service.list_by_movie_id(movie_id)
    else:
        reviews = service.list_all()
    return [ReviewResponse.model_validate(r) for r in reviews]


@router.get("/{review_id}", response_model=ReviewResponse, dependencies=read_access)
def get_review(review_id: int, service: ReviewService = Depends(get_review_service)):
    """Get review by ID."""
    review = service.get_by_id(review_id)
    if not review:
        raise HTTPException(status_code=404, detail="Review not found")
    return ReviewResponse.model_validate(review)


@router.post("", response_model=ReviewResponse, dependencies=write_access)
def create_review(review_in: ReviewCreate, service: ReviewService = Depends(get_review_service)):
    """Create a review for an existing movie."""
    try:
        review = service.create(review_in)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.to_detail())
    except (LinkageError, MovieNotFoundError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    return ReviewResponse.model_validate(review)


@router.post("/batch", response_model=list[ReviewResponse], dependencies=write_access)
def create_reviews(reviews_in: list[ReviewCreate], service: ReviewService = Depends(get_review_service)):
    """Create several reviews; none are stored if any is rejected."""
    try:
        reviews = service.create_batch(reviews_in)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.to_detail())
    except (LinkageError, MovieNotFoundError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    return [ReviewResponse.model_validate(r) for r in reviews]


@router.put("/{review_id}", response_model=ReviewResponse, dependencies=write_access)
def update_review(
    review_id: int,
    review_in: ReviewCreate,
    service: ReviewService = Depends(get_review_service),
):
    """Overwrite a review; a movie reference moves it to that movie."""
    try:
        review = service.update(review_id, review_in)
    except ReviewNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.to_detail())
    except (LinkageError, MovieNotFoundError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    return ReviewResponse.model_validate(review)


@router.delete("/{review_id}", status_code=204, response_class=Response, dependencies=write_access)
def delete_review(review_id: int, service: ReviewService = Depends(get_review_service)):
    """Delete a review."""
    try:
        service.delete_by_id(review_id)
    except ReviewNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("", status_code=204, response_class=Response, dependencies=write_access)
def delete_all_reviews(service: ReviewService = Depends(get_review_service)):
    """Delete every review."""
    service.delete_all_reviews()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
