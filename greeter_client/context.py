import time


class CallContext:
    def __init__(self, method: str):
        self.method = method
        self._start_time = time.time()

    @property
    def elapsed_time(self) -> int:
        return int((time.time() - self._start_time) * 1000)
