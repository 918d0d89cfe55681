import statistics
import time
from typing import Callable, Dict


def time_fn(fn: Callable[[], object], repeats: int = 1, warmup: int = 0) -> Dict[str, float]:
    """
    Run fn warmup times untimed, then repeats times under time.perf_counter
    Returns a summary of the timed samples in seconds
    """
    if repeats < 1:
        raise ValueError(f"repeats must be >= 1, got {repeats}")
    for _ in range(warmup):
        fn()
    samples = []
    for _ in range(repeats):
        t0 = time.perf_counter()
        fn()
        t1 = time.perf_counter()
        samples.append(t1 - t0)
    return {
        "runs": repeats,
        "min": min(samples),
        "median": statistics.median(samples),
        "mean": statistics.fmean(samples),
        "stdev": statistics.pstdev(samples) if repeats > 1 else 0.0,
    }


def fmt_ms(sec: float) -> str:
    return f"{sec * 1000.0:.3f} ms"
