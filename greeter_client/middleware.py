import grpc
from grpc.aio import ClientCallDetails, UnaryUnaryClientInterceptor
from logzero import logger

from greeter_client.context import CallContext
from greeter_client.utils import message_to_str


class ClientLoggingInterceptor(UnaryUnaryClientInterceptor):
    """Log every unary call with its request, final status and elapsed time."""

    async def intercept_unary_unary(
        self,
        continuation,
        client_call_details: ClientCallDetails,
        request,
    ):
        method = client_call_details.method
        if isinstance(method, bytes):
            method = method.decode()
        context = CallContext(method)
        call = await continuation(client_call_details, request)
        # code() waits for the call to finish and never raises
        code = await call.code()
        if code == grpc.StatusCode.OK:
            logger.info(
                f"GRPC invoke {context.method}({message_to_str(request)}) [OK] {context.elapsed_time} ms"
            )
        else:
            logger.warning(
                f"GRPC invoke {context.method}({message_to_str(request)}) [Err] {code.name} {context.elapsed_time} ms"
            )
        return call
