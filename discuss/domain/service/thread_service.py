"""Thread assembly.

Turns the flat comment rows of one post plus the like facts relevant to
one caller into the nested, newest-first discussion tree.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime
from typing import AbstractSet, Iterator, Mapping, Optional, Sequence

import logfire

from discuss.domain.error import NotFoundError
from discuss.domain.model import Comment, Post
from discuss.domain.value import CommentId, PostId, UserId, UserName

from .base import Service


@dataclass
class AnnotatedComment:
    """Node in a post's comment thread.

    A comment plus the like state seen by one caller, with its replies
    nested in ``children`` (newest first). Built per read, never stored.
    """

    id: CommentId
    post_id: PostId
    parent_id: Optional[CommentId]
    author_id: UserId
    author_name: UserName
    message: str
    created_at: datetime
    like_count: int = 0
    liked_by_me: bool = False
    children: list["AnnotatedComment"] = field(default_factory=list)

    @classmethod
    def from_comment(
        cls, comment: Comment, like_count: int = 0, liked_by_me: bool = False
    ) -> "AnnotatedComment":
        """Annotate a single comment without children."""
        return cls(
            id=comment.id,
            post_id=comment.post_id,
            parent_id=comment.parent_id,
            author_id=comment.author_id,
            author_name=comment.author_name,
            message=comment.message,
            created_at=comment.created_at,
            like_count=like_count,
            liked_by_me=liked_by_me,
        )


def thread_order_key(comment: Comment | AnnotatedComment) -> tuple[datetime, str]:
    """Sort key for display order. Use with ``reverse=True`` for newest first.

    The id breaks ties between equal timestamps so the order is total.
    """
    return (comment.created_at, str(comment.id))


def iter_thread(forest: Sequence[AnnotatedComment]) -> Iterator[AnnotatedComment]:
    """Yield every node of a forest in display (pre-)order."""
    stack = list(reversed(forest))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


class ThreadAssembler(Service):
    """Builds the annotated comment forest of a post.

    Orphans, comments whose parent is not part of the post's comment set
    (typically because the parent was deleted), are surfaced at top level
    in their sorted position. The same goes for a comment listing itself
    as parent and for members of a parent cycle, so every input row shows
    up exactly once.
    """

    def assemble(
        self,
        post_id: PostId,
        post: Optional[Post],
        comments: Sequence[Comment],
        liked_comment_ids: AbstractSet[CommentId],
        like_counts: Mapping[CommentId, int],
    ) -> list[AnnotatedComment]:
        """Assemble the thread of a post.

        Steps:
        1. Keep only comments that belong to the post
        2. Sort newest first (ties broken by id)
        3. Annotate each comment with like count and caller like state
        4. Attach replies to their parent, preserving the sort order

        Args:
            post_id: ID of the post the thread belongs to
            post: The post, or None if it does not exist
            comments: Flat comment rows of the post
            liked_comment_ids: IDs of the comments the caller likes
            like_counts: Like count per comment ID (missing means 0)

        Returns:
            Top-level comments, each carrying its replies

        Raises:
            NotFoundError: If the post does not exist
        """
        if post is None:
            raise NotFoundError("Post", str(post_id))

        with logfire.span(
            "thread_assembler.assemble", post_id=str(post_id), count=len(comments)
        ):
            ordered = sorted(
                (c for c in comments if c.post_id == post_id),
                key=thread_order_key,
                reverse=True,
            )

            nodes: dict[CommentId, AnnotatedComment] = {}
            for comment in ordered:
                if comment.id in nodes:
                    continue
                nodes[comment.id] = AnnotatedComment.from_comment(
                    comment,
                    like_count=like_counts.get(comment.id, 0),
                    liked_by_me=comment.id in liked_comment_ids,
                )

            # Adjacency map: parent_id -> [child_ids], already newest first
            children_of: dict[CommentId, list[CommentId]] = defaultdict(list)
            root_ids: list[CommentId] = []
            orphan_count = 0
            for node in nodes.values():
                parent_id = node.parent_id
                if parent_id is None:
                    root_ids.append(node.id)
                elif parent_id == node.id or parent_id not in nodes:
                    orphan_count += 1
                    root_ids.append(node.id)
                else:
                    children_of[parent_id].append(node.id)

            attached: set[CommentId] = set()
            forest = [self._attach(r, nodes, children_of, attached) for r in root_ids]

            # Whatever is still detached sits on a parent cycle
            for node_id in nodes:
                if node_id not in attached:
                    orphan_count += 1
                    forest.append(self._attach(node_id, nodes, children_of, attached))
            forest.sort(key=thread_order_key, reverse=True)

            if orphan_count:
                logfire.warn(
                    "Orphaned comments surfaced at top level",
                    post_id=str(post_id),
                    orphan_count=orphan_count,
                )
            logfire.info(
                "Thread assembled",
                post_id=str(post_id),
                comment_count=len(nodes),
                root_count=len(forest),
            )
            return forest

    @staticmethod
    def _attach(
        root_id: CommentId,
        nodes: dict[CommentId, AnnotatedComment],
        children_of: dict[CommentId, list[CommentId]],
        attached: set[CommentId],
    ) -> AnnotatedComment:
        """Attach the subtree below ``root_id``.

        Iterative so that thread depth is not bounded by the recursion limit.
        """
        attached.add(root_id)
        stack = [root_id]
        while stack:
            current = stack.pop()
            for child_id in children_of.get(current, ()):
                if child_id in attached:
                    continue
                attached.add(child_id)
                nodes[current].children.append(nodes[child_id])
                stack.append(child_id)
        return nodes[root_id]
