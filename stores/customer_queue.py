from collections import deque
from typing import Deque, Optional, Tuple

from models import Customer


class CustomerQueue:
    """FIFO of customers waiting to be served."""

    def __init__(self):
        self._queue: Deque[Customer] = deque()

    def enqueue(self, customer: Customer) -> None:
        self._queue.append(customer)

    def dequeue(self) -> Optional[Customer]:
        """Pop the head customer, or None when the queue is empty."""
        if not self._queue:
            return None
        return self._queue.popleft()

    def size(self) -> int:
        return len(self._queue)

    def is_empty(self) -> bool:
        return not self._queue

    def snapshot(self) -> Tuple[Customer, ...]:
        return tuple(self._queue)
