import grpc
import pytest
from pydantic import ValidationError

from greeter_client.exceptions import RpcStatus
from greeter_client.types import GreetingReply, GreetingRequest, RpcResult


def test_greeting_request_is_immutable():
    request = GreetingRequest(first_name="Alice", last_name="Dupont", cin="9999999")
    with pytest.raises(ValidationError):
        request.first_name = "Bob"


def test_greeting_request_requires_all_fields():
    with pytest.raises(ValidationError):
        GreetingRequest(first_name="Alice", last_name="Dupont")


def test_greeting_request_equality_by_value():
    a = GreetingRequest(first_name="Alice", last_name="Dupont", cin="9999999")
    b = GreetingRequest(first_name="Alice", last_name="Dupont", cin="9999999")
    assert a == b


def test_rpc_status_default_details():
    status = RpcStatus(grpc.StatusCode.NOT_FOUND)
    assert status.details == "not found"
    assert not status.ok
    assert repr(status) == "RpcStatus(code=NOT_FOUND, details='not found')"


def test_rpc_status_from_aio_error(make_rpc_error):
    status = RpcStatus.from_error(make_rpc_error(grpc.StatusCode.DEADLINE_EXCEEDED, "too slow"))
    assert status == RpcStatus(grpc.StatusCode.DEADLINE_EXCEEDED, "too slow")
    assert str(status) == "RpcStatus(code=DEADLINE_EXCEEDED, details='too slow')"


def test_rpc_status_from_bare_rpc_error():
    status = RpcStatus.from_error(grpc.RpcError("boom"))
    assert status.code is grpc.StatusCode.UNKNOWN
    assert status.details == "boom"


def test_rpc_result_ok():
    result = RpcResult(
        status=RpcStatus(grpc.StatusCode.OK), reply=GreetingReply(message="Hello")
    )
    assert result.ok
    assert result.reply.message == "Hello"

    failed = RpcResult(status=RpcStatus(grpc.StatusCode.UNAVAILABLE))
    assert not failed.ok
    assert failed.reply is None
