import asyncio
from collections.abc import AsyncGenerator, Callable

from litestar.params import SkipValidation
from loguru import logger

from infrastructure.config import Settings
from services import AtCoderClient, create_atcoder_client

ClientProvider = Callable[[], AsyncGenerator[AtCoderClient, None]]


def make_client_provider(settings: Settings) -> ClientProvider:
    """
    Build a dependency yielding one AtCoderClient per request.

    All clients share the cookie file, so a request holds the lock from
    opening the session until its cookies are written back.
    """
    session_lock = asyncio.Lock()

    async def provide_atcoder_client() -> AsyncGenerator[AtCoderClient, None]:
        async with session_lock:
            client = create_atcoder_client(settings)
            logger.debug("Opened AtCoder session for request")

            try:
                yield client
            finally:
                await client.close()
                logger.debug("AtCoder session closed")

    return provide_atcoder_client


ClientDependency = SkipValidation[AtCoderClient]
