#!/usr/bin/env python3
"""
Performance benchmarking script for the Erg dune simulation.

Runs the simulation headless (no rendering) to measure pure simulation performance.
Profiles per-system tick times, memory usage, and identifies hot code paths.

Ticks go through main.simulate_tick; the three systems it calls are wrapped
with timers for the duration of the run, so the benchmark always follows
the driver's order and run gate.
"""
from __future__ import annotations

import cProfile
import contextlib
import io
import pstats
import time
import tracemalloc
from typing import Callable, Dict, Iterator, List
from statistics import mean, median, stdev

import main
from config import SimulationConfig
from game_state import build_initial_state

FRAME_DT = 1 / 60
REPORT_WIDTH = 80

# Driver attribute -> report label
TIMED_SYSTEMS = {
    "simulate_wind_tracers": "wind_tracers",
    "simulate_grains": "grains",
    "apply_avalanche": "avalanche",
}


class PerformanceMetrics:
    """Tracks performance metrics during simulation."""

    def __init__(self):
        self.tick_times: List[float] = []
        self.system_times: Dict[str, List[float]] = {label: [] for label in TIMED_SYSTEMS.values()}
        self.memory_snapshots: List[int] = []  # Bytes
        self.start_time: float = 0
        self.end_time: float = 0

    def record_memory(self):
        current, _ = tracemalloc.get_traced_memory()
        self.memory_snapshots.append(current)

    def get_total_time(self) -> float:
        return self.end_time - self.start_time

    def print_report(self, resolution: int):
        """Print tick timing, the per-system breakdown and memory usage."""
        samples = resolution + 1
        _header(f"ERG PERFORMANCE REPORT ({samples}x{samples} height field)")

        total_time = self.get_total_time()
        total_ticks = len(self.tick_times)
        _metric("Total Runtime:", f"{total_time:.2f}s")
        _metric("Total Ticks:", str(total_ticks))
        if total_time > 0:
            _metric("Average TPS:", f"{total_ticks / total_time:.1f} ticks/sec")

        if self.tick_times:
            print("\nTICK TIMING")
            _metric("Mean:", _ms(mean(self.tick_times)))
            _metric("Median:", _ms(median(self.tick_times)))
            if len(self.tick_times) > 1:
                _metric("Std Dev:", _ms(stdev(self.tick_times)))
            _metric("Max:", _ms(max(self.tick_times)))

            # Tracers only run on fired sub-steps, so call counts differ per system
            print("\nSYSTEM BREAKDOWN (average time per call)")
            tick_total = sum(self.tick_times)
            for system, times in self.system_times.items():
                if times:
                    share = sum(times) / tick_total * 100
                    _metric(f"{system}:",
                            f"{_ms(mean(times))}  x{len(times):<5} ({share:5.1f}% of total)")

        if self.memory_snapshots:
            print("\nMEMORY USAGE")
            _metric("Mean:", f"{mean(self.memory_snapshots) / 2**20:.1f} MB")
            _metric("Peak:", f"{max(self.memory_snapshots) / 2**20:.1f} MB")


def _header(title: str):
    print("\n" + "=" * REPORT_WIDTH)
    print(title)
    print("=" * REPORT_WIDTH)


def _metric(label: str, value: str):
    print(f"  {label:<25} {value}")


def _ms(seconds: float) -> str:
    return f"{seconds * 1000:.2f}ms"


def _timed(fn: Callable, times: List[float]) -> Callable:
    def wrapper(*args, **kwargs):
        start = time.perf_counter()
        try:
            return fn(*args, **kwargs)
        finally:
            times.append(time.perf_counter() - start)
    return wrapper


@contextlib.contextmanager
def timed_systems(metrics: PerformanceMetrics) -> Iterator[None]:
    """Wrap the systems main.simulate_tick calls with timers, restoring them on exit."""
    originals = {name: getattr(main, name) for name in TIMED_SYSTEMS}
    try:
        for name, label in TIMED_SYSTEMS.items():
            setattr(main, name, _timed(originals[name], metrics.system_times[label]))
        yield
    finally:
        for name, fn in originals.items():
            setattr(main, name, fn)


def run_benchmark(num_ticks: int = 600, profile_hotspots: bool = True,
                  config: SimulationConfig | None = None) -> PerformanceMetrics:
    """
    Run a headless simulation benchmark.

    Args:
        num_ticks: Number of simulation ticks (frames) to run
        profile_hotspots: If True, run cProfile to identify hot code paths
        config: Simulation parameters (a fixed seed by default)

    Returns:
        PerformanceMetrics object with collected data
    """
    config = config or SimulationConfig(seed=1234)
    print(f"\nStarting benchmark: {num_ticks} ticks at resolution {config.resolution}...")

    tracemalloc.start()
    state = build_initial_state(config)
    main.start(state)
    metrics = PerformanceMetrics()

    profiler = cProfile.Profile() if profile_hotspots else None
    if profiler is not None:
        profiler.enable()

    with timed_systems(metrics):
        metrics.start_time = time.perf_counter()
        for i in range(num_ticks):
            tick_start = time.perf_counter()
            main.simulate_tick(state, FRAME_DT)
            metrics.tick_times.append(time.perf_counter() - tick_start)
            if i % 100 == 0:
                metrics.record_memory()
                print(f"    Ticks: {i / num_ticks * 100:.0f}% ({i}/{num_ticks})", end='\r')
        metrics.end_time = time.perf_counter()
    print(f"    Ticks: 100% ({num_ticks}/{num_ticks})")

    if profiler is not None:
        profiler.disable()
    tracemalloc.stop()

    metrics.print_report(config.resolution)

    if profiler is not None:
        _header("HOT CODE PATHS (Top 20 functions by cumulative time)")
        s = io.StringIO()
        pstats.Stats(profiler, stream=s).sort_stats('cumulative').print_stats(20)
        for line in s.getvalue().split('\n')[:25]:
            if line.strip():
                print(line)

    return metrics


def compare_resolutions(resolutions=(32, 64, 96, 128), num_ticks: int = 300):
    """Run benchmarks at different grid resolutions for comparison."""
    _header("RESOLUTION COMPARISON BENCHMARK")
    for resolution in resolutions:
        run_benchmark(num_ticks=num_ticks, profile_hotspots=False,
                      config=SimulationConfig(resolution=resolution, seed=1234))


if __name__ == "__main__":
    import sys

    if len(sys.argv) > 1 and sys.argv[1] == "compare":
        compare_resolutions()
    else:
        run_benchmark()
