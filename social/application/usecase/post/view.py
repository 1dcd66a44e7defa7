"""Post response models shared by post, like and comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from social.domain.model import Comment, Post


class LikeResponse(BaseModel):
    """Like in a post response."""

    user_id: str


class CommentResponse(BaseModel):
    """Comment in a post response."""

    comment_id: str
    text: str
    name: str
    avatar: str
    user_id: str
    created_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentResponse":
        return cls(
            comment_id=str(comment.id),
            text=comment.text,
            name=comment.name,
            avatar=comment.avatar,
            user_id=str(comment.user_id),
            created_at=comment.created_at,
        )


class PostResponse(BaseModel):
    """Post with its likes and comments, newest first."""

    post_id: str
    text: str
    name: str
    avatar: str
    user_id: str
    likes: list[LikeResponse]
    comments: list[CommentResponse]
    created_at: datetime

    @classmethod
    def from_post(cls, post: Post) -> "PostResponse":
        return cls(
            post_id=str(post.id),
            text=post.text,
            name=post.name,
            avatar=post.avatar,
            user_id=str(post.user_id),
            likes=[LikeResponse(user_id=str(like.user_id)) for like in post.likes],
            comments=[CommentResponse.from_comment(c) for c in post.comments],
            created_at=post.created_at,
        )
