"""
Pydantic schemas for Blog API.

Defines request/response models with validation.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class BlogPostCreate(BaseModel):
    """Schema for creating a new post."""
    author: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    content: str = ""


class BlogPostUpdate(BaseModel):
    """Schema for updating a post. The body id must match the path id."""
    id: Optional[str] = None
    author: Optional[str] = Field(None, min_length=1)
    title: Optional[str] = Field(None, min_length=1)
    content: Optional[str] = None


class BlogPostResponse(BaseModel):
    """Schema for post responses. The field set is fixed."""
    model_config = ConfigDict(extra="forbid")

    id: str
    author: str
    content: str
    title: str
    created: str


class BlogPostList(BaseModel):
    """Schema for the list endpoint."""
    model_config = ConfigDict(extra="forbid")

    posts: list[BlogPostResponse]
