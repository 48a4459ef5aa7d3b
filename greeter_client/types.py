# -*- coding: utf-8 -*-
from typing import Optional

from pydantic import ConfigDict

from greeter_client.base import BaseSchema
from greeter_client.exceptions import RpcStatus


class GreetingRequest(BaseSchema):
    first_name: str
    last_name: str
    cin: str


class GreetingReply(BaseSchema):
    message: str


class RpcResult(BaseSchema):
    """Outcome of one unary call: the reply on success, the status either way."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    status: RpcStatus
    reply: Optional[GreetingReply] = None

    @property
    def ok(self) -> bool:
        return self.status.ok
