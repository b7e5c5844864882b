import logging
import math
from typing import List, Tuple

from fastapi import HTTPException
from sqlalchemy.orm import Session

from app.models.post import MAX_ID, Post
from app.schemas.post_schema import PostCreate, PostUpdate

logger = logging.getLogger(__name__)


def create_post(db: Session, data: PostCreate) -> Post:
    post = Post(title=data.title, text=data.text)
    db.add(post)
    db.commit()
    db.refresh(post)
    logger.debug("Created post %s", post.id)
    return post


def get_post(db: Session, post_id: int) -> Post:
    # ids outside the column range cannot exist
    if not 1 <= post_id <= MAX_ID:
        raise HTTPException(status_code=404, detail="Post not found")
    post = db.query(Post).filter(Post.id == post_id).first()
    if not post:
        raise HTTPException(status_code=404, detail="Post not found")
    return post


def update_post(db: Session, post_id: int, data: PostUpdate) -> Post:
    post = get_post(db, post_id)
    for key, value in data.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(post, key, value)
    db.commit()
    db.refresh(post)
    logger.debug("Updated post %s", post.id)
    return post


def delete_post(db: Session, post_id: int):
    post = get_post(db, post_id)
    db.delete(post)
    db.commit()
    logger.debug("Deleted post %s", post_id)


def count_pages(total: int, posts_per_page: int) -> int:
    return math.ceil(total / posts_per_page)


def list_posts(db: Session, page: int = 1, posts_per_page: int = 5) -> Tuple[List[Post], int]:
    # page is 1-based; a page past the last one is empty
    if page < 1 or posts_per_page < 1:
        raise ValueError("page and posts_per_page must be positive")

    query = db.query(Post).order_by(Post.id.asc())
    num_pages = count_pages(query.count(), posts_per_page)
    offset = (page - 1) * posts_per_page
    if offset > MAX_ID:
        return [], num_pages
    posts = query.offset(offset).limit(min(posts_per_page, MAX_ID)).all()
    return posts, num_pages


def find_by_title(db: Session, title: str) -> List[Post]:
    return db.query(Post).filter(Post.title == title).order_by(Post.id.asc()).all()
