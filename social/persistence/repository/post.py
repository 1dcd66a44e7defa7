"""PostgreSQL implementation of Post repository."""

from collections import defaultdict
from contextlib import contextmanager
from typing import Any, Iterator, List, Optional
from uuid import UUID

import logfire
from sqlalchemy import asc, delete, desc, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.exc import (
    IntegrityError,
    InterfaceError,
    OperationalError,
    TimeoutError as PoolTimeoutError,
)
from sqlalchemy.ext.asyncio import AsyncSession

from social.domain.error import NotFoundError, UnavailableError
from social.domain.model import Comment, Like, Post
from social.domain.repository.post import PostRepository, PostSortOrder
from social.domain.value import CommentId, PostId, UserId
from social.persistence.mappers import (
    comment_to_dict,
    like_to_dict,
    post_to_dict,
    row_to_post,
)
from social.persistence.tables import (
    post_comments_table,
    post_likes_table,
    posts_table,
)


@contextmanager
def storage_errors(operation: str) -> Iterator[None]:
    """Translate connection-level database failures into UnavailableError."""
    try:
        yield
    except (OperationalError, InterfaceError, PoolTimeoutError) as e:
        logfire.error("Database unavailable", operation=operation, error=str(e))
        raise UnavailableError(operation, type(e).__name__) from e


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository.

    Likes and comments live in child tables. The ``uq_post_like`` unique
    constraint makes ``add_like`` an atomic append-if-absent.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_children(
        self, post_ids: list[UUID]
    ) -> tuple[dict[UUID, list[dict[str, Any]]], dict[UUID, list[dict[str, Any]]]]:
        """Fetch likes and comments for multiple posts in two queries.

        Args:
            post_ids: List of post IDs

        Returns:
            Two dicts mapping post_id -> rows (likes, comments), newest first
        """
        likes: dict[UUID, list[dict[str, Any]]] = defaultdict(list)
        comments: dict[UUID, list[dict[str, Any]]] = defaultdict(list)
        if not post_ids:
            return likes, comments

        like_stmt = (
            select(post_likes_table)
            .where(post_likes_table.c.post_id.in_(post_ids))
            .order_by(desc(post_likes_table.c.seq))
        )
        for row in (await self.session.execute(like_stmt)).fetchall():
            likes[row.post_id].append(row._asdict())

        comment_stmt = (
            select(post_comments_table)
            .where(post_comments_table.c.post_id.in_(post_ids))
            .order_by(desc(post_comments_table.c.seq))
        )
        for row in (await self.session.execute(comment_stmt)).fetchall():
            comments[row.post_id].append(row._asdict())

        return likes, comments

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            with storage_errors("find_by_id"):
                stmt = select(posts_table).where(posts_table.c.id == post_id)
                result = await self.session.execute(stmt)
                row = result.fetchone()

                if not row:
                    return None

                likes, comments = await self._fetch_children([row.id])

            return row_to_post(row._asdict(), likes[row.id], comments[row.id])

    async def find_all(self, sort: PostSortOrder = PostSortOrder.RECENT) -> List[Post]:
        """Find all posts ordered by creation date."""
        with logfire.span("post_repository.find_all", sort=sort.value):
            order = desc if sort == PostSortOrder.RECENT else asc
            with storage_errors("find_all"):
                stmt = select(posts_table).order_by(order(posts_table.c.created_at))
                rows = (await self.session.execute(stmt)).fetchall()
                likes, comments = await self._fetch_children([row.id for row in rows])

            return [
                row_to_post(row._asdict(), likes[row.id], comments[row.id])
                for row in rows
            ]

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        with logfire.span("post_repository.save", post_id=str(post.id)):
            with storage_errors("save"):
                exists_stmt = select(posts_table.c.id).where(
                    posts_table.c.id == post.id
                )
                existing = (await self.session.execute(exists_stmt)).fetchone()

                if existing:
                    # Owner and creation date are immutable
                    stmt = (
                        posts_table.update()
                        .where(posts_table.c.id == post.id)
                        .values(text=post.text, name=post.name, avatar=post.avatar)
                    )
                    await self.session.execute(stmt)
                else:
                    logfire.info("Inserting new post", post_id=str(post.id))
                    await self.session.execute(
                        posts_table.insert().values(**post_to_dict(post))
                    )
                    # Oldest first so that seq order matches list order
                    for like in reversed(post.likes):
                        await self.session.execute(
                            post_likes_table.insert().values(
                                **like_to_dict(post.id, like)
                            )
                        )
                    for comment in reversed(post.comments):
                        await self.session.execute(
                            post_comments_table.insert().values(
                                **comment_to_dict(post.id, comment)
                            )
                        )

                await self.session.flush()

            return await self.find_by_id(post.id) or post

    async def delete(self, post_id: PostId) -> None:
        """Delete a post (hard delete, children cascade)."""
        with storage_errors("delete"):
            stmt = posts_table.delete().where(posts_table.c.id == post_id)
            await self.session.execute(stmt)
            await self.session.flush()

    async def add_like(self, post_id: PostId, like: Like) -> bool:
        """Insert a like unless one exists for the same user and post."""
        with logfire.span(
            "post_repository.add_like", post_id=str(post_id), user_id=str(like.user_id)
        ):
            stmt = (
                pg_insert(post_likes_table)
                .values(**like_to_dict(post_id, like))
                .on_conflict_do_nothing(constraint="uq_post_like")
                .returning(post_likes_table.c.id)
            )
            try:
                with storage_errors("add_like"):
                    # Savepoint keeps the request transaction usable on failure
                    async with self.session.begin_nested():
                        result = await self.session.execute(stmt)
            except IntegrityError as e:
                # Only the post_id foreign key can fail here
                raise NotFoundError("Post", str(post_id)) from e

            inserted = result.fetchone() is not None
            await self.session.flush()
            return inserted

    async def remove_like(self, post_id: PostId, user_id: UserId) -> bool:
        """Delete a user's like."""
        with storage_errors("remove_like"):
            stmt = (
                delete(post_likes_table)
                .where(post_likes_table.c.post_id == post_id)
                .where(post_likes_table.c.user_id == user_id)
                .returning(post_likes_table.c.id)
            )
            result = await self.session.execute(stmt)
            removed = result.fetchone() is not None
            await self.session.flush()
            return removed

    async def add_comment(self, post_id: PostId, comment: Comment) -> None:
        """Insert a comment."""
        with logfire.span(
            "post_repository.add_comment",
            post_id=str(post_id),
            comment_id=str(comment.id),
        ):
            stmt = post_comments_table.insert().values(
                **comment_to_dict(post_id, comment)
            )
            try:
                with storage_errors("add_comment"):
                    async with self.session.begin_nested():
                        await self.session.execute(stmt)
            except IntegrityError as e:
                raise NotFoundError("Post", str(post_id)) from e

    async def remove_comment(self, post_id: PostId, comment_id: CommentId) -> bool:
        """Delete a comment if it belongs to the post."""
        with storage_errors("remove_comment"):
            stmt = (
                delete(post_comments_table)
                .where(post_comments_table.c.post_id == post_id)
                .where(post_comments_table.c.id == comment_id)
                .returning(post_comments_table.c.id)
            )
            result = await self.session.execute(stmt)
            removed = result.fetchone() is not None
            await self.session.flush()
            return removed
