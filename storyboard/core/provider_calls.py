import asyncio
import functools

from storyboard.helpers.errors import ProviderError


async def call_provider(func, *args, timeout: float, **kwargs):
    """
    Run a blocking provider SDK call in a worker thread with a deadline.

    The event loop stays free while the call is in flight; a call that
    outlives ``timeout`` fails with ProviderError.
    """
    try:
        return await asyncio.wait_for(
            asyncio.to_thread(functools.partial(func, *args, **kwargs)),
            timeout=timeout,
        )
    except asyncio.TimeoutError as e:
        raise ProviderError(f"Provider did not respond within {timeout:g}s") from e
