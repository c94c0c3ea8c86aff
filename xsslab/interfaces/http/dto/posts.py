from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class PostDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    post_uuid: str
    title: str
    # Returned verbatim; rendering safely is the client's job.
    content: str
    time_create: int
    user_uuid: str
    username: str | None = None
    user_name: str | None = None


class PostResponseDTO(BaseModel):
    success: bool = True
    post: PostDTO


class PostListResponseDTO(BaseModel):
    success: bool = True
    posts: list[PostDTO]


class DeleteAllPostsDTO(BaseModel):
    success: bool = True
    message: str = "Successfully deleted all posts and comments"
    deleted_posts: int
    deleted_comments: str = "all"


class CreatePostRequestDTO(BaseModel):
    model_config = ConfigDict(strict=True, extra="ignore")

    title: str
    content: str
