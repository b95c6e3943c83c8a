"""One-slot producer/consumer handoff between a reader and the profiler."""

import queue
import threading
from typing import Iterator, TypeVar

from ..utils.logger import get_logger

logger = get_logger('pipeline')

T = TypeVar('T')

_DONE = object()


class _Failure:
    __slots__ = ('error',)

    def __init__(self, error: BaseException):
        self.error = error


def prefetch_rows(source: Iterator[T], poll_interval: float = 0.1) -> Iterator[T]:
    """
    Decode the next item on a worker thread while the caller handles the current one.

    The queue holds a single item, so the producer blocks until the consumer
    has taken the previous row. Order is preserved, producer exceptions are
    re-raised in the consumer, and closing this generator early stops the
    worker and closes ``source``.

    Args:
        source: Row generator to drain
        poll_interval: Seconds the producer waits between checks for cancellation

    Yields:
        Items of ``source`` in order
    """
    handoff: queue.Queue = queue.Queue(maxsize=1)
    stop = threading.Event()

    def put(item) -> bool:
        while not stop.is_set():
            try:
                handoff.put(item, timeout=poll_interval)
                return True
            except queue.Full:
                continue
        return False

    def produce():
        try:
            for item in source:
                if not put(item):
                    break
            else:
                put(_DONE)
                return
        except BaseException as e:  # forwarded to the consumer
            put(_Failure(e))
            return
        finally:
            close = getattr(source, 'close', None)
            if close is not None:
                close()
        logger.debug("Producer cancelled before the source was exhausted")

    worker = threading.Thread(target=produce, name='fcheck-row-producer', daemon=True)
    worker.start()
    try:
        while True:
            item = handoff.get()
            if item is _DONE:
                return
            if isinstance(item, _Failure):
                raise item.error
            yield item
    finally:
        stop.set()
        worker.join()
