from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CommentDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    comment_id: str
    content: str
    user_uuid: str
    post_uuid: str
    username: str | None = None
    user_name: str | None = None


class UserCommentDTO(CommentDTO):
    post_title: str | None = None


class CommentResponseDTO(BaseModel):
    success: bool = True
    comment: CommentDTO


class CommentListResponseDTO(BaseModel):
    success: bool = True
    comments: list[CommentDTO]


class UserCommentListResponseDTO(BaseModel):
    success: bool = True
    comments: list[UserCommentDTO]


class CreateCommentRequestDTO(BaseModel):
    model_config = ConfigDict(strict=True, extra="ignore")

    content: str
    post_uuid: str
