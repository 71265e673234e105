"""Response model for a node of a comment thread."""

from datetime import datetime

from pydantic import BaseModel, Field

from discuss.domain.service import AnnotatedComment, iter_thread


class AuthorInfo(BaseModel):
    """Author of a comment."""

    id: str
    name: str


class CommentNode(BaseModel):
    """Comment as returned to clients, with its replies nested."""

    id: str
    post_id: str
    parent_id: str | None
    message: str
    author: AuthorInfo
    created_at: datetime
    like_count: int = 0
    liked_by_me: bool = False
    children: list["CommentNode"] = Field(default_factory=list)

    @classmethod
    def from_annotated(cls, comment: AnnotatedComment) -> "CommentNode":
        """Build a single node without children."""
        return cls(
            id=str(comment.id),
            post_id=str(comment.post_id),
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            message=comment.message,
            author=AuthorInfo(id=str(comment.author_id), name=comment.author_name.root),
            created_at=comment.created_at,
            like_count=comment.like_count,
            liked_by_me=comment.liked_by_me,
        )

    @classmethod
    def from_forest(cls, forest: list[AnnotatedComment]) -> list["CommentNode"]:
        """Convert an annotated forest, keeping order and nesting.

        Walks the forest iteratively so deep reply chains don't hit the
        recursion limit.
        """
        nodes: dict[int, CommentNode] = {}
        for comment in iter_thread(forest):
            nodes[id(comment)] = cls.from_annotated(comment)
        for comment in iter_thread(forest):
            nodes[id(comment)].children = [
                nodes[id(child)] for child in comment.children
            ]
        return [nodes[id(root)] for root in forest]


def dump_thread_json(nodes: list[CommentNode]) -> str:
    """Encode a list of comment nodes as JSON without recursing.

    Each node's own fields go through pydantic; the ``children`` arrays are
    opened and closed from an explicit stack, so reply chains of any depth
    encode the same as a shallow thread.
    """
    parts = ["["]
    stack: list[tuple[list[CommentNode], int]] = [(nodes, 0)]
    while stack:
        siblings, index = stack.pop()
        if index == len(siblings):
            parts.append("]")
            if stack:
                # Closes the node that owns this children array
                parts.append("}")
            continue
        if index:
            parts.append(",")
        node = siblings[index]
        stack.append((siblings, index + 1))
        fields = node.model_dump_json(exclude={"children"})
        parts.append(fields[:-1])
        parts.append(',"children":[')
        stack.append((node.children, 0))
    return "".join(parts)
