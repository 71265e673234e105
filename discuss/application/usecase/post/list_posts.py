"""List posts use case."""

from pydantic import BaseModel

from discuss.application.usecase.base import BaseUseCase
from discuss.domain.service import PostService


class PostListItem(BaseModel):
    """Post list item in response."""

    id: str
    title: str


class ListPostsRequest(BaseModel):
    """List posts request."""


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostListItem]


class ListPostsUseCase(BaseUseCase):
    """Use case for listing posts, newest first."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow."""
        posts = await self.post_service.list_posts()
        return ListPostsResponse(
            posts=[PostListItem(id=str(post.id), title=post.title) for post in posts]
        )
