from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session
from app.config import settings
from app.db.session import get_db
from app.models.post import MAX_ID
from app.schemas.post_schema import PostCreate, PostUpdate, ResponsePost, PostPage
from app.services import post as post_service

router = APIRouter(prefix="/api/posts", tags=["posts"])

# Create a new post

@router.post("/", response_model=ResponsePost, status_code=status.HTTP_201_CREATED)
def create_post(post: PostCreate, db: Session = Depends(get_db)):
    try:
        return post_service.create_post(db, post)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

# Get one page of posts

@router.get("/", response_model=PostPage)
def list_posts(
    page: int = Query(1, ge=1, le=MAX_ID),
    posts_per_page: int = Query(settings.POSTS_PER_PAGE, ge=1, le=MAX_ID),
    db: Session = Depends(get_db),
):
    posts, num_pages = post_service.list_posts(db, page, posts_per_page)
    return PostPage(
        posts=[ResponsePost.model_validate(p) for p in posts],
        page=page,
        posts_per_page=posts_per_page,
        num_pages=num_pages,
    )

# Get posts by exact title

@router.get("/search", response_model=List[ResponsePost])
def search_posts(title: str = Query(..., max_length=255), db: Session = Depends(get_db)):
    return post_service.find_by_title(db, title)

# Get a post by id

@router.get("/{post_id}", response_model=ResponsePost)
def get_post(post_id: int, db: Session = Depends(get_db)):
    return post_service.get_post(db, post_id)

# Update

@router.put("/{post_id}", response_model=ResponsePost)
def update_post(post_id: int, post_data: PostUpdate, db: Session = Depends(get_db)):
    try:
        return post_service.update_post(db, post_id, post_data)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

# Delete

@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_post(post_id: int, db: Session = Depends(get_db)):
    post_service.delete_post(db, post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
