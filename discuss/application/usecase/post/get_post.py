"""Get post use case."""

from uuid import UUID

from pydantic import BaseModel

from discuss.application.usecase.base import BaseUseCase
from discuss.application.usecase.comment.comment_node import (
    CommentNode,
    dump_thread_json,
)
from discuss.domain.service import (
    CommentService,
    LikeService,
    PostService,
    ThreadAssembler,
)
from discuss.domain.value import CallerIdentity, PostId, UserId


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str  # UUID string
    user_id: str | None = None  # Caller's user ID (None when anonymous)


class GetPostResponse(BaseModel):
    """Get post response: the post and its comment thread."""

    id: str
    title: str
    body: str
    comments: list[CommentNode]

    def to_json(self) -> str:
        """Encode as JSON, with the thread encoded iteratively."""
        head = self.model_dump_json(exclude={"comments"})
        return f"{head[:-1]},\"comments\":{dump_thread_json(self.comments)}}}"


class GetPostUseCase(BaseUseCase):
    """Use case for reading a post with its annotated comment thread."""

    def __init__(
        self,
        post_service: PostService,
        comment_service: CommentService,
        like_service: LikeService,
        thread_assembler: ThreadAssembler,
    ) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            comment_service: Comment domain service
            like_service: Like domain service
            thread_assembler: Builds the nested thread
        """
        self.post_service = post_service
        self.comment_service = comment_service
        self.like_service = like_service
        self.thread_assembler = thread_assembler

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Like state is only loaded for the comments of this post.

        Args:
            request: Get post request

        Returns:
            Post with its comments as a newest-first forest

        Raises:
            NotFoundError: If post not found
        """
        post_id = PostId(UUID(request.post_id))
        caller = (
            CallerIdentity(user_id=UserId(UUID(request.user_id)))
            if request.user_id
            else None
        )

        post = await self.post_service.get_post_by_id(post_id)
        comments = (
            await self.comment_service.get_comments_for_post(post_id) if post else []
        )
        liked_ids, like_counts = await self.like_service.get_like_state(
            caller, [comment.id for comment in comments]
        )

        forest = self.thread_assembler.assemble(
            post_id=post_id,
            post=post,
            comments=comments,
            liked_comment_ids=liked_ids,
            like_counts=like_counts,
        )

        return GetPostResponse(
            id=str(post.id),
            title=post.title,
            body=post.body,
            comments=CommentNode.from_forest(forest),
        )
