"""
Stopwatch class for timing feature extraction.
"""
import time
from typing import Optional


class Stopwatch:
    """Stopwatch measuring CPU time."""

    def __init__(self) -> None:
        self.start_time: Optional[float] = None

    def start(self) -> None:
        self.start_time = time.process_time()

    def stop(self) -> float:
        """
        Stop the stopwatch.
        :return: Elapsed CPU time in seconds
        """
        elapsed = self.get_elapsed_time()
        self.start_time = None
        return elapsed

    def get_elapsed_time(self) -> float:
        """
        Get the elapsed time since start.
        :return: Elapsed time in seconds
        """
        if self.start_time is None:
            raise ValueError("Stopwatch not started")
        return time.process_time() - self.start_time

    def __enter__(self) -> "Stopwatch":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.start_time = None
