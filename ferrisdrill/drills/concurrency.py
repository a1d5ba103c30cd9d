"""Concurrency drills: shared data, joined threads, locks and channels."""

import threading
import time
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from queue import SimpleQueue
from typing import Any


def sum_by_offset(numbers: Sequence[int], stride: int = 8) -> list[int]:
    """Sum every *stride*-th number for each offset, one thread per offset.

    All threads share the same sequence; element i of the result is the sum
    of the numbers equal to i modulo *stride*.
    """
    if stride <= 0:
        raise ValueError("stride must be positive")

    def offset_sum(offset: int) -> int:
        return sum(n for n in numbers if n % stride == offset)

    with ThreadPoolExecutor(max_workers=stride) as pool:
        return list(pool.map(offset_sum, range(stride)))


def run_timed_jobs(count: int = 10, duration: float = 0.25) -> list[int]:
    """Run *count* threads that each sleep *duration* seconds.

    Returns, in thread order, the milliseconds each thread took.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    if count == 0:
        return []

    def job(_: int) -> int:
        start = time.monotonic()
        time.sleep(duration)
        return int((time.monotonic() - start) * 1000)

    with ThreadPoolExecutor(max_workers=count) as pool:
        return list(pool.map(job, range(count)))


@dataclass
class JobStatus:
    """A counter of completed jobs, safe to update from several threads."""

    jobs_completed: int = 0
    _lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )


def complete_jobs(count: int = 10, delay: float = 0.25) -> JobStatus:
    """Let *count* threads each wait *delay* seconds and record one finished job."""
    if count < 0:
        raise ValueError("count must not be negative")
    status = JobStatus()

    def job() -> None:
        time.sleep(delay)
        with status._lock:
            status.jobs_completed += 1

    threads = [threading.Thread(target=job) for _ in range(count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return status


@dataclass
class Queue:
    """A queue of numbers split into two halves."""

    length: int = 10
    first_half: list[int] = field(default_factory=lambda: [1, 2, 3, 4, 5])
    second_half: list[int] = field(default_factory=lambda: [6, 7, 8, 9, 10])


def send_tx(queue: Queue, channel: Any, delay: float = 1.0) -> list[threading.Thread]:
    """Send both halves of *queue* into *channel* from two threads.

    *channel* needs a ``put`` method. The started threads are returned so the
    caller can wait for them.
    """

    def sender(values: list[int]) -> None:
        for value in values:
            print(f"sending {value}")
            channel.put(value)
            time.sleep(delay)

    threads = [
        threading.Thread(target=sender, args=(half,))
        for half in (queue.first_half, queue.second_half)
    ]
    for thread in threads:
        thread.start()
    return threads


def collect_queue(queue: Queue, delay: float = 1.0) -> list[int]:
    """Send the queue through a channel and return everything received.

    Raises RuntimeError if the number received differs from the queue's length.
    """
    channel: SimpleQueue = SimpleQueue()
    for thread in send_tx(queue, channel, delay):
        thread.join()
    received = []
    while not channel.empty():
        value = channel.get()
        print(f"Got: {value}")
        received.append(value)
    print(f"total numbers received: {len(received)}")
    if len(received) != queue.length:
        raise RuntimeError(
            f"received {len(received)} numbers, expected {queue.length}"
        )
    return received