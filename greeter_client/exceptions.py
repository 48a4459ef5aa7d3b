# -*- coding: utf-8 -*-
from typing import Optional

import grpc
from grpc._typing import MetadataType


class UsageRequested(Exception):
    """Raised by argument parsing when the caller asked for the usage text."""


class RpcStatus(grpc.Status):
    def __init__(
        self,
        code: grpc.StatusCode,
        details: Optional[str] = None,
        trailing_metadata: Optional[MetadataType] = None,
    ):
        if not details:
            details = code.value[1]
        self.code = code
        self.details = details
        self.trailing_metadata = trailing_metadata

    @classmethod
    def from_error(cls, error: grpc.RpcError) -> "RpcStatus":
        """Build a status from whatever the transport attached to `error`.

        `grpc.aio.AioRpcError` exposes `code()` and `details()`; a bare
        `grpc.RpcError` carries neither and is reported as UNKNOWN.
        """
        code = grpc.StatusCode.UNKNOWN
        details = str(error) or None
        trailing_metadata = None
        if callable(getattr(error, "code", None)):
            code = error.code()
        if callable(getattr(error, "details", None)):
            details = error.details()
        if callable(getattr(error, "trailing_metadata", None)):
            trailing_metadata = error.trailing_metadata()
        return cls(code, details, trailing_metadata)

    @property
    def ok(self) -> bool:
        return self.code is grpc.StatusCode.OK

    def __eq__(self, other) -> bool:
        if not isinstance(other, RpcStatus):
            return NotImplemented
        return self.code == other.code and self.details == other.details

    def __hash__(self) -> int:
        return hash((self.code, self.details))

    def __repr__(self) -> str:
        class_name = self.__class__.__name__
        return f"{class_name}(code={self.code.name}, details={self.details!r})"

    __str__ = __repr__
