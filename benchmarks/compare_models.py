#!/usr/bin/env python3
"""
Process vs Thread - Worker Sayısı Karşılaştırması

Aynı sayı aralığını önce process, sonra thread worker'larla factorize eder.
Her worker sayısı için duvar saati süresi, speedup ve efficiency ölçer.
Toplam iş sabittir; worker sayısı arttıkça worker başına görev azalır.

Kullanım:
    python benchmarks/compare_models.py
    python benchmarks/compare_models.py --start 1000000 --total 480
"""

import argparse
import logging
import multiprocessing
import sys
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from prime_decomposer import Coordinator, RunConfig, WorkerMode


@dataclass
class ModelResult:
    """Tek bir (mod, worker sayısı) ölçümü"""
    mode: str
    num_workers: int
    task_count: int
    wall_time: float = 0.0
    speedup_factor: float = 0.0  # 1 worker'a göre hızlanma
    efficiency_ratio: float = 0.0  # Speedup / num_workers (ideal = 1.0)
    success: bool = True
    metrics: Dict[str, Any] = field(default_factory=dict)


def worker_counts_for(total: int) -> List[int]:
    """Toplam işi tam bölen worker sayıları (en fazla 2x CPU)"""
    max_workers = multiprocessing.cpu_count() * 2
    return [w for w in (1, 2, 4, 8, 16, 32, 64) if w <= max_workers and total % w == 0]


def run_model(
    mode: WorkerMode,
    num_workers: int,
    total: int,
    start: int,
    output_dir: Path,
    baseline_time: Optional[float] = None
) -> ModelResult:
    """Bir modu verilen worker sayısıyla çalıştırır"""
    config = RunConfig(
        worker_count=num_workers,
        tasks_per_worker=total // num_workers,
        start_value=start,
        output_path=str(output_dir / f"{mode.value}-{num_workers}.log"),
        mode=mode,
        log_level="WARNING"
    )
    report = Coordinator(config).run()

    wall_time = report.wall_time_s
    speedup = baseline_time / wall_time if baseline_time and wall_time > 0 else 1.0

    result = ModelResult(
        mode=mode.value,
        num_workers=num_workers,
        task_count=total,
        wall_time=wall_time,
        speedup_factor=speedup,
        efficiency_ratio=speedup / num_workers,
        success=report.is_success,
        metrics={
            "total_elapsed_us": report.total_elapsed_us,
            "max_rss_mb": max((s.metrics.get("rss_mb", 0.0) for s in report.summaries), default=0.0),
        }
    )

    print(f"   {mode.value:<8} {num_workers:>3} worker: {wall_time:8.3f} s  "
          f"speedup {speedup:5.2f}x  efficiency {result.efficiency_ratio:5.2f}")
    return result


def print_summary_table(results: List[ModelResult]):
    """Özet tablo"""
    print("\n" + "=" * 70)
    print("📊 ÖZET")
    print("=" * 70)
    print(f"{'Mod':<10}{'Worker':>8}{'Süre (s)':>12}{'Speedup':>10}{'Efficiency':>12}{'RSS (MB)':>12}")
    for r in results:
        print(f"{r.mode:<10}{r.num_workers:>8}{r.wall_time:>12.3f}{r.speedup_factor:>10.2f}"
              f"{r.efficiency_ratio:>12.2f}{r.metrics['max_rss_mb']:>12.1f}")


def main():
    """Ana fonksiyon"""
    parser = argparse.ArgumentParser(description="Process vs thread factorization karşılaştırması")
    parser.add_argument('--start', type=int, default=1_000_000, help='İlk sayı')
    parser.add_argument('--total', type=int, default=240, help='Toplam sayı adedi')
    args = parser.parse_args()

    logging.basicConfig(level=logging.WARNING)

    print("=" * 70)
    print("🚀 Prime Decomposer - Process vs Thread Benchmark")
    print("=" * 70)
    print(f"\n💻 CPU Çekirdek Sayısı: {multiprocessing.cpu_count()}")

    worker_counts = worker_counts_for(args.total)
    print(f"📊 Test Edilecek Worker Sayıları: {worker_counts}")

    results = []
    with tempfile.TemporaryDirectory() as tmp:
        output_dir = Path(tmp)
        for mode in (WorkerMode.PROCESS, WorkerMode.THREAD):
            print(f"\n🧪 {mode.value}")
            baseline_time = None
            for num_workers in worker_counts:
                result = run_model(mode, num_workers, args.total, args.start, output_dir, baseline_time)
                if baseline_time is None:
                    baseline_time = result.wall_time
                results.append(result)

    print_summary_table(results)
    return 0 if all(r.success for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())
