class RepaintScheduler:
    """
    Coalescing repaint flag.

    Components call request() synchronously; the host loop calls consume()
    once per frame and renders when it returns True. Any number of requests
    between two frames produce a single render.
    """

    def __init__(self) -> None:
        self._pending = False
        self.request_count = 0

    def request(self) -> None:
        self._pending = True
        self.request_count += 1

    @property
    def pending(self) -> bool:
        return self._pending

    def consume(self) -> bool:
        pending = self._pending
        self._pending = False
        return pending
