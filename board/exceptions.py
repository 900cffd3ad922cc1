"""
Application exceptions.

Services raise these; the HTTP layer translates them into responses
exactly once, in the handlers registered by ``board.main``.
"""


class BoardError(Exception):
    """Base class for errors raised by the board service layer."""
    pass


class PostNotFoundError(BoardError):
    """Raised when a post id does not match any stored post."""

    def __init__(self, post_id: int) -> None:
        self.post_id = post_id
        super().__init__(f"No post found for postId={post_id}")
