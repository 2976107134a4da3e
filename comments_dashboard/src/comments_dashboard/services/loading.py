"""Generation tokens used to discard results of superseded loads."""


class LoadGeneration:
    """
    Monotonic counter handed out to each load.
    
    A load only publishes its result if its token is still the latest one;
    ``invalidate`` drops whatever is in flight (e.g. when a view goes away).
    """

    def __init__(self) -> None:
        self._current = 0

    def begin(self) -> int:
        self._current += 1
        return self._current

    def is_current(self, token: int) -> bool:
        return token == self._current

    def invalidate(self) -> None:
        self._current += 1
