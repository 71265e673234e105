"""Domain layer DI providers."""

from dishka import Scope, provide

from discuss.config import AuthSettings
from discuss.domain.repository import (
    CommentRepository,
    LikeRepository,
    PostRepository,
    UserRepository,
)
from discuss.domain.service import (
    CommentService,
    IdentityService,
    LikeService,
    PostService,
    ThreadAssembler,
    UserService,
)
from discuss.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_identity_service(self, auth_settings: AuthSettings) -> IdentityService:
        """Provide caller identity service."""
        return IdentityService(auth_settings=auth_settings)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_like_service(
        self, like_repository: LikeRepository, comment_service: CommentService
    ) -> LikeService:
        """Provide like domain service."""
        return LikeService(
            like_repository=like_repository, comment_service=comment_service
        )

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_thread_assembler(self) -> ThreadAssembler:
        """Provide thread assembler."""
        return ThreadAssembler()
