# -*- coding: utf-8 -*-
import asyncio
import logging
import sys
from typing import Optional, Sequence

import logzero
from logzero import logger

from greeter_client.channel import open_channel
from greeter_client.client import GreeterClient
from greeter_client.config import ClientSettings, parse_args, render_usage
from greeter_client.exceptions import UsageRequested
from greeter_client.middleware import ClientLoggingInterceptor


async def run_async(settings: ClientSettings) -> None:
    async with open_channel(
        settings.target,
        shutdown_timeout=settings.shutdown_timeout,
        interceptors=[ClientLoggingInterceptor()],
    ) as channel:
        client = GreeterClient(channel)
        await client.greet(settings.first_name, settings.last_name, settings.cin)
    logger.debug(f"Greeting session finished in state {client.state.value}")


def run(settings: ClientSettings) -> None:
    asyncio.run(run_async(settings))


def main(argv: Optional[Sequence[str]] = None) -> None:
    """
    Greet the server. Positional arguments override, in order, the first name,
    the last name, the CIN and the target address.

    RPC failures are logged and do not change the exit status.
    """
    if argv is None:
        argv = sys.argv[1:]
    try:
        settings = parse_args(argv)
    except UsageRequested:
        sys.stderr.write(render_usage())
        sys.exit(1)
    logzero.loglevel(logging.getLevelName(settings.log_level.upper()))
    run(settings)
