"""
Evaluation and benchmarking tools for ciphercore.
"""

from .benchmark import BenchmarkResult, PrimitiveBenchmark, RatioResult, run_comprehensive_benchmark

__all__ = [
    'BenchmarkResult',
    'PrimitiveBenchmark',
    'RatioResult',
    'run_comprehensive_benchmark',
]
