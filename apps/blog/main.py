"""
Blog API

CRUD endpoints for blog posts.
"""
import os
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, APIRouter, Depends, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from apps.shared.database import SessionLocal, check_db_connection
from apps.shared.cors import setup_cors
from apps.shared.errors import (
    BlogServiceError,
    ValidationError,
    log_and_sanitize_error,
    missing_field_message,
)
from apps.blog.store import BlogPostStore
from apps.blog.schemas import (
    BlogPostCreate,
    BlogPostUpdate,
    BlogPostResponse,
    BlogPostList,
)

logger = logging.getLogger(__name__)
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())

store = BlogPostStore(SessionLocal)


def get_store() -> BlogPostStore:
    """
    Dependency injection for the blog post store
    Tests swap in a clean store per scenario via app.dependency_overrides.
    """
    return store


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create tables
    store.create_schema()
    yield


app = FastAPI(
    title="Blog API",
    version="1.0.0",
    description="Blog post resource",
    lifespan=lifespan,
)

# Setup CORS from shared configuration
setup_cors(app)


# ──────────────────────────────────────────────────────────────────────────────
# Error handling
# ──────────────────────────────────────────────────────────────────────────────

def error_response(message: str, category: str, status_code: int) -> JSONResponse:
    """Consistent error payloads across the API."""
    return JSONResponse(
        status_code=status_code,
        content={
            "error": message,
            "category": category,
            "status_code": status_code,
        },
    )


@app.exception_handler(BlogServiceError)
async def blog_service_exception_handler(request: Request, exc: BlogServiceError):
    if exc.status_code >= 500:
        message, _ = log_and_sanitize_error(exc, f"{request.method} {request.url.path}", exc.message)
    else:
        logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)
        message = exc.message
    return error_response(message, exc.category, exc.status_code)


def describe_validation_error(error: dict) -> str:
    loc = [str(part) for part in error.get("loc", ()) if part != "body"]
    field = loc[-1] if loc else None

    if error.get("type") == "json_invalid":
        return "Request body is not valid JSON"
    if field and error.get("type") in ("missing", "string_too_short"):
        return missing_field_message(field)
    if field:
        return f"Invalid `{field}`: {error.get('msg')}"
    return error.get("msg") or "Invalid request"


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = describe_validation_error(errors[0]) if errors else "Invalid request"
    logger.warning("%s %s rejected: %s", request.method, request.url.path, message)
    return error_response(message, ValidationError.category, status.HTTP_400_BAD_REQUEST)


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    detail = exc.detail
    message = (
        detail.get("message") if isinstance(detail, dict) else str(detail)
    ) or "Request failed."

    if exc.status_code >= 500:
        category = "server_error"
    elif exc.status_code == status.HTTP_404_NOT_FOUND:
        category = "not_found"
    else:
        category = "client_error"

    return error_response(message, category, exc.status_code)


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    message, _ = log_and_sanitize_error(
        exc,
        f"{request.method} {request.url.path}",
        "A database error occurred while processing the request.",
    )
    return error_response(message, "database", status.HTTP_500_INTERNAL_SERVER_ERROR)


@app.exception_handler(Exception)
async def unexpected_exception_handler(request: Request, exc: Exception):
    message, _ = log_and_sanitize_error(
        exc,
        f"{request.method} {request.url.path}",
        "An unexpected server error occurred. Please try again later.",
    )
    return error_response(message, "server_error", status.HTTP_500_INTERNAL_SERVER_ERROR)


# ──────────────────────────────────────────────────────────────────────────────
# Endpoints
# ──────────────────────────────────────────────────────────────────────────────

@app.get("/health")
def health():
    """Health check endpoint."""
    db_connected = check_db_connection()
    return {
        "status": "ok" if db_connected else "degraded",
        "service": "blog",
        "database": "connected" if db_connected else "disconnected",
    }


router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("", response_model=BlogPostList)
def list_posts(store: BlogPostStore = Depends(get_store)):
    """List all blog posts, oldest first."""
    return {"posts": [post.to_dict() for post in store.find_all()]}


@router.get("/{post_id}", response_model=BlogPostResponse)
def get_post(post_id: str, store: BlogPostStore = Depends(get_store)):
    """Get a single post by id."""
    post = store.find_by_id(post_id)
    if not post:
        raise HTTPException(status_code=404, detail="Blog post not found")
    return post.to_dict()


@router.post("", response_model=BlogPostResponse, status_code=201)
def create_post(post_data: BlogPostCreate, store: BlogPostStore = Depends(get_store)):
    """Create a new post."""
    post = store.insert_one(post_data.model_dump())
    logger.info(f"Created blog post {post.id}")
    return post.to_dict()


@router.put("/{post_id}", status_code=204)
def update_post(
    post_id: str,
    post_data: BlogPostUpdate,
    store: BlogPostStore = Depends(get_store),
):
    """
    Update an existing post.
    The body must carry the same id as the path. Only supplied fields change.
    """
    if post_data.id != post_id:
        raise ValidationError(
            f"Request path id ({post_id}) and request body id ({post_data.id}) must match",
            field="id",
        )

    # Update only provided fields
    update_data = post_data.model_dump(exclude_unset=True, exclude={"id"})
    store.update_by_id(post_id, update_data)
    logger.info(f"Updated blog post {post_id} fields={sorted(update_data)}")


@router.delete("/{post_id}", status_code=204)
def delete_post(post_id: str, store: BlogPostStore = Depends(get_store)):
    """Delete a post. Deleting an absent id is not an error."""
    if store.delete_by_id(post_id):
        logger.info(f"Deleted blog post {post_id}")


app.include_router(router)
