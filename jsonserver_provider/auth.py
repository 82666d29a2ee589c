import logging
from typing import Awaitable, Callable, Optional

TokenGetter = Callable[[], Awaitable[Optional[str]]]

logger = logging.getLogger(__name__)


async def no_token() -> Optional[str]:
    """Default token getter: requests go out without a bearer token."""
    return None


class StaticTokenGetter:
    """
    Token getter returning a fixed bearer token.

    Example usage:
        provider = create_provider("http://localhost:3000", token_getter=StaticTokenGetter("secret123"))
    """
    def __init__(self, token: Optional[str]):
        self.token = token or None

    async def __call__(self) -> Optional[str]:
        if self.token is None:
            logger.debug("No static token configured; sending anonymous request")
        return self.token

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(token={'***' if self.token else None})"
