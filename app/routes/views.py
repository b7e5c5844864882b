from pathlib import Path

from fastapi import APIRouter, Depends, Form, Query, Request
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session
from app.config import settings
from app.db.session import get_db
from app.models.post import MAX_ID, MAX_LENGTH
from app.schemas.post_schema import PostCreate, PostUpdate
from app.services import post as post_service

TEMPLATES_DIRECTORY = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIRECTORY))

router = APIRouter(tags=["pages"])


def redirect_home() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=302)


@router.get("/")
def list_page(
    request: Request,
    page: int = Query(1, ge=1, le=MAX_ID),
    posts_per_page: int = Query(settings.POSTS_PER_PAGE, ge=1, le=MAX_ID),
    db: Session = Depends(get_db),
):
    posts, num_pages = post_service.list_posts(db, page, posts_per_page)
    return templates.TemplateResponse(request, "index.html", {
        "posts": posts,
        "page": page,
        "posts_per_page": posts_per_page,
        "num_pages": num_pages,
    })


@router.get("/new")
def new_page(request: Request):
    return templates.TemplateResponse(request, "new.html", {})


@router.post("/")
def create(
    title: str = Form("", max_length=MAX_LENGTH),
    text: str = Form("", max_length=MAX_LENGTH),
    db: Session = Depends(get_db),
):
    post_service.create_post(db, PostCreate(title=title, text=text))
    return redirect_home()


@router.get("/{post_id:int}")
def edit_page(request: Request, post_id: int, db: Session = Depends(get_db)):
    post = post_service.get_post(db, post_id)
    return templates.TemplateResponse(request, "edit.html", {"post": post})


@router.post("/{post_id:int}")
def update(
    post_id: int,
    title: str = Form("", max_length=MAX_LENGTH),
    text: str = Form("", max_length=MAX_LENGTH),
    db: Session = Depends(get_db),
):
    post_service.update_post(db, post_id, PostUpdate(title=title, text=text))
    return redirect_home()


@router.post("/delete/{post_id:int}")
def delete(post_id: int, db: Session = Depends(get_db)):
    post_service.delete_post(db, post_id)
    return redirect_home()
