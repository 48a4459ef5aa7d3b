# -*- coding: utf-8 -*-
from enum import Enum

import grpc
from logzero import logger

from greeter_client.exceptions import RpcStatus
from greeter_client.proto import pb2, pb2_grpc
from greeter_client.types import GreetingReply, GreetingRequest, RpcResult
from greeter_client.utils import message_to_pydantic, pydantic_to_message


class GreetState(Enum):
    IDLE = "idle"
    FIRST_CALL_IN_FLIGHT = "first_call_in_flight"
    SECOND_CALL_IN_FLIGHT = "second_call_in_flight"
    COMPLETED = "completed"
    ABORTED = "aborted"


class GreeterClient(object):
    """
    Client for the `helloworld.Greeter` service.

    The channel is passed in and stays owned by the caller, so the client
    never shuts it down.

    ## Example

    ```python
    async with open_channel("localhost:50051") as channel:
        await GreeterClient(channel).greet("Sabrine", "Kammoun", "1234567")
    ```
    """

    def __init__(self, channel: grpc.aio.Channel):
        self._stub = pb2_grpc.GreeterStub(channel)
        self.state = GreetState.IDLE

    async def say_hello(self, request: GreetingRequest) -> RpcResult:
        return await self._invoke(self._stub.SayHello, request)

    async def say_hello_again(self, request: GreetingRequest) -> RpcResult:
        return await self._invoke(self._stub.SayHelloAgain, request)

    async def _invoke(self, method, request: GreetingRequest) -> RpcResult:
        try:
            response = await method(pydantic_to_message(request, pb2.HelloRequest))
        except grpc.RpcError as e:
            return RpcResult(status=RpcStatus.from_error(e))
        return RpcResult(
            status=RpcStatus(grpc.StatusCode.OK),
            reply=message_to_pydantic(response, GreetingReply),
        )

    async def greet(self, first_name: str, last_name: str, cin: str) -> None:
        """Say hello to the server, then say hello again if the first call succeeded."""
        logger.info(f"Will try to greet {first_name} {last_name} (CIN: {cin}) ...")
        request = GreetingRequest(first_name=first_name, last_name=last_name, cin=cin)

        self.state = GreetState.FIRST_CALL_IN_FLIGHT
        result = await self.say_hello(request)
        if not result.ok:
            logger.warning(f"RPC failed: {result.status}")
            self.state = GreetState.ABORTED
            return
        logger.info(f"Greeting: {result.reply.message}")

        self.state = GreetState.SECOND_CALL_IN_FLIGHT
        result = await self.say_hello_again(request)
        self.state = GreetState.COMPLETED
        if not result.ok:
            logger.warning(f"RPC failed: {result.status}")
            return
        logger.info(f"Greeting: {result.reply.message}")
