# -*- coding: utf-8 -*-
from greeter_client.app import main, run, run_async
from greeter_client.channel import open_channel
from greeter_client.client import GreeterClient, GreetState
from greeter_client.config import ClientSettings, parse_args
from greeter_client.exceptions import RpcStatus, UsageRequested
from greeter_client.types import GreetingReply, GreetingRequest, RpcResult

__all__ = [
    "main",
    "run",
    "run_async",
    "open_channel",
    "GreeterClient",
    "GreetState",
    "ClientSettings",
    "parse_args",
    "RpcStatus",
    "UsageRequested",
    "GreetingReply",
    "GreetingRequest",
    "RpcResult",
]
