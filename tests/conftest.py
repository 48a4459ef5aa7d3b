from concurrent import futures
from unittest.mock import AsyncMock, Mock

import grpc
import pytest

from greeter_client.proto import pb2, pb2_grpc


class FakeGreeter(pb2_grpc.GreeterServicer):
    def __init__(self):
        self.requests = []
        self.fail_first = False
        self.fail_second = False
        self.target = ""

    def SayHello(self, request, context):
        self.requests.append(("SayHello", request))
        if self.fail_first:
            context.abort(grpc.StatusCode.UNAVAILABLE, "greeter is down")
        return pb2.HelloReply(message=f"Hello {request.first_name}")

    def SayHelloAgain(self, request, context):
        self.requests.append(("SayHelloAgain", request))
        if self.fail_second:
            context.abort(grpc.StatusCode.INTERNAL, "greeter is tired")
        return pb2.HelloReply(message=f"Hello again {request.first_name}")


@pytest.fixture
def greeter_server():
    servicer = FakeGreeter()
    server = grpc.server(futures.ThreadPoolExecutor(max_workers=4))
    pb2_grpc.add_GreeterServicer_to_server(servicer, server)
    port = server.add_insecure_port("127.0.0.1:0")
    server.start()
    servicer.target = f"127.0.0.1:{port}"
    yield servicer
    server.stop(None)


@pytest.fixture
def make_rpc_error():
    def factory(code=grpc.StatusCode.UNAVAILABLE, details="connection refused"):
        return grpc.aio.AioRpcError(
            code, grpc.aio.Metadata(), grpc.aio.Metadata(), details=details
        )

    return factory


@pytest.fixture
def fake_channel():
    channel = Mock()
    channel.close = AsyncMock()
    return channel
