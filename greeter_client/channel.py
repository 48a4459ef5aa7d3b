# -*- coding: utf-8 -*-
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional, Sequence

import grpc
from grpc.aio import ClientInterceptor
from logzero import logger

from greeter_client.signals import channel_opened, channel_closed

DEFAULT_SHUTDOWN_TIMEOUT = 5.0


@asynccontextmanager
async def open_channel(
    target: str,
    *,
    shutdown_timeout: float = DEFAULT_SHUTDOWN_TIMEOUT,
    interceptors: Optional[Sequence[ClientInterceptor]] = None,
) -> AsyncIterator[grpc.aio.Channel]:
    """
    Open a plaintext channel to `target` and shut it down when the block exits.

    The channel uses insecure credentials, so no TLS certificates are needed.
    On exit new calls are rejected right away and in-flight calls get up to
    `shutdown_timeout` seconds before they are cancelled.

    ## Example

    ```python
    async with open_channel("localhost:50051") as channel:
        client = GreeterClient(channel)
        await client.greet("Sabrine", "Kammoun", "1234567")
    ```
    """
    channel = grpc.aio.insecure_channel(target, interceptors=interceptors)
    logger.debug(f"Opened channel to {target}")
    channel_opened.send(target)
    try:
        yield channel
    finally:
        await channel.close(grace=shutdown_timeout)
        logger.debug(f"Closed channel to {target}")
        channel_closed.send(target)
