"""
Benchmark module for performance evaluation of ciphercore primitives.

Measures per-call latency, throughput and memory growth for AES-256-GCM,
SHA-256 and zstd across message sizes, and reports compression ratios
for representative payloads.
"""

import gc
import statistics
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

import psutil

from ..compression import compress, compression_ratio, decompress
from ..crypto.aead import decrypt, encrypt
from ..crypto.hashing import sha256
from ..crypto.rng import RandomSource

DEFAULT_MESSAGE_SIZES = [64, 1024, 16 * 1024, 256 * 1024]


@dataclass
class BenchmarkResult:
    """Container for benchmark results."""
    name: str
    operation: str
    message_size: int
    iterations: int
    total_time: float
    avg_time: float
    throughput_mbps: float
    memory_usage: Optional[Dict[str, float]] = None
    output_size: Optional[int] = None


@dataclass
class RatioResult:
    """Compression ratio for one payload."""
    payload: str
    original_size: int
    compressed_size: int
    ratio: float


def _sample_payloads(size: int, source: RandomSource) -> Dict[str, bytes]:
    text = b"The quick brown fox jumps over the lazy dog. "
    return {
        'zeros': bytes(size),
        'text': (text * (size // len(text) + 1))[:size],
        'random': source.generate(size),
    }


class PrimitiveBenchmark:
    """
    Performance benchmarking for ciphercore primitives.
    """

    def __init__(self, source: Optional[RandomSource] = None):
        """
        Initialize benchmark suite.

        Args:
            source: Random source for test data (defaults to the OS CSPRNG)
        """
        self.source = source or RandomSource()
        self.results: List[BenchmarkResult] = []

    def measure_memory_usage(self) -> Dict[str, float]:
        """
        Measure current memory usage.

        Returns:
            Dictionary with memory statistics in MB
        """
        process = psutil.Process()
        memory_info = process.memory_info()

        return {
            'rss': memory_info.rss / 1024 / 1024,  # MB
            'vms': memory_info.vms / 1024 / 1024,  # MB
            'percent': process.memory_percent()
        }

    def _run(self, operation: str, size: int, iterations: int,
             func: Callable[[], bytes]) -> BenchmarkResult:
        gc.collect()
        memory_before = self.measure_memory_usage()

        output = b""
        start_time = time.perf_counter()
        for _ in range(iterations):
            output = func()
        total_time = time.perf_counter() - start_time

        memory_after = self.measure_memory_usage()
        memory_delta = {
            'rss_delta': memory_after['rss'] - memory_before['rss'],
            'vms_delta': memory_after['vms'] - memory_before['vms']
        }

        avg_time = total_time / iterations
        throughput = (size * iterations) / total_time / 1024 / 1024 if total_time > 0 else 0.0

        result = BenchmarkResult(
            name=f"{operation}-{size}B",
            operation=operation,
            message_size=size,
            iterations=iterations,
            total_time=total_time,
            avg_time=avg_time,
            throughput_mbps=throughput,
            memory_usage=memory_delta,
            output_size=len(output),
        )
        self.results.append(result)
        return result

    def benchmark_aead(self, message_sizes: List[int],
                       iterations: int = 1000) -> List[BenchmarkResult]:
        """
        Benchmark AES-256-GCM encryption and decryption.

        A fresh nonce is drawn per message size; the repeated encryptions
        within one size reuse it and are for timing only.

        Args:
            message_sizes: List of message sizes to test
            iterations: Number of iterations per size

        Returns:
            List of benchmark results (encrypt then decrypt per size)
        """
        results = []
        key = self.source.generate(32)

        for size in message_sizes:
            nonce = self.source.generate(12)
            plaintext = self.source.generate(size)
            ciphertext = encrypt(key, nonce, plaintext)

            results.append(self._run("encrypt", size, iterations,
                                     lambda: encrypt(key, nonce, plaintext)))
            results.append(self._run("decrypt", size, iterations,
                                     lambda: decrypt(key, nonce, ciphertext)))

        return results

    def benchmark_hash(self, message_sizes: List[int],
                       iterations: int = 1000) -> List[BenchmarkResult]:
        """Benchmark SHA-256 over random messages."""
        results = []
        for size in message_sizes:
            data = self.source.generate(size)
            results.append(self._run("sha256", size, iterations, lambda: sha256(data)))
        return results

    def benchmark_compression(self, message_sizes: List[int],
                              iterations: int = 100) -> List[BenchmarkResult]:
        """
        Benchmark zstd compression and decompression on text-like data.

        Args:
            message_sizes: List of message sizes to test
            iterations: Number of iterations per size

        Returns:
            List of benchmark results (compress then decompress per size)
        """
        results = []
        for size in message_sizes:
            data = _sample_payloads(size, self.source)['text']
            blob = compress(data)

            results.append(self._run("compress", size, iterations, lambda: compress(data)))
            results.append(self._run("decompress", size, iterations, lambda: decompress(blob)))
        return results

    def measure_compression_ratios(self, size: int = 64 * 1024) -> List[RatioResult]:
        """
        Compression ratios for zero-filled, text and random payloads.

        Args:
            size: Payload size in bytes

        Returns:
            One RatioResult per payload kind
        """
        ratios = []
        for name, data in _sample_payloads(size, self.source).items():
            compressed_size = len(compress(data))
            ratios.append(RatioResult(
                payload=name,
                original_size=len(data),
                compressed_size=compressed_size,
                ratio=compression_ratio(len(data), compressed_size),
            ))
        return ratios

    def get_summary_report(self) -> Dict[str, Any]:
        """
        Generate summary report of all benchmark results.

        Returns:
            Summary grouped by operation
        """
        if not self.results:
            return {'error': 'No benchmark results available'}

        by_operation: Dict[str, List[BenchmarkResult]] = {}
        for result in self.results:
            by_operation.setdefault(result.operation, []).append(result)

        summary = {
            'total_benchmarks': len(self.results),
            'operations_tested': list(by_operation.keys()),
            'by_operation': {}
        }

        for operation, results in by_operation.items():
            throughputs = [r.throughput_mbps for r in results]
            latencies = [r.avg_time for r in results]

            summary['by_operation'][operation] = {
                'benchmark_count': len(results),
                'avg_throughput_mbps': statistics.mean(throughputs),
                'max_throughput_mbps': max(throughputs),
                'avg_latency_ms': statistics.mean(latencies) * 1000,
                'min_latency_ms': min(latencies) * 1000,
                'message_sizes_tested': sorted(set(r.message_size for r in results))
            }

        return summary


def run_comprehensive_benchmark(quick: bool = False) -> Dict[str, Any]:
    """
    Run the full benchmark suite.

    Args:
        quick: If True, run reduced test set for faster execution

    Returns:
        Summary report plus compression ratios
    """
    if quick:
        message_sizes = [64, 1024]
        iterations = 20
    else:
        message_sizes = DEFAULT_MESSAGE_SIZES
        iterations = 500

    benchmark = PrimitiveBenchmark()
    benchmark.benchmark_aead(message_sizes, iterations)
    benchmark.benchmark_hash(message_sizes, iterations)
    benchmark.benchmark_compression(message_sizes, max(1, iterations // 5))
    ratios = benchmark.measure_compression_ratios(4096 if quick else 64 * 1024)

    report = benchmark.get_summary_report()
    report['compression_ratios'] = {r.payload: r.ratio for r in ratios}
    return report
