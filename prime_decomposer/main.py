#!/usr/bin/env python3
"""
Prime Decomposer - Ana Giriş Noktası

Kullanım:
    prime-process 3 2 10 -w out.log
    prime-thread 3 2 10 -w out.log
    python -m prime_decomposer.main 3 2 10 -w out.log --mode thread
    python -m prime_decomposer.main 4 100 1000000 -w out.log --config config.json
"""

import argparse
import json
import multiprocessing
import sys
from typing import Any, Dict, List, Optional

from .config import RunConfig, MAX_FACTORS
from .core.enums import WorkerMode
from .core.exceptions import ConfigurationError, SpawnError
from .engine.coordinator import Coordinator
from .status import RunReport
from .task.result import unbounded_int_digits
from .task.target_range import parse_start_value

USAGE = (
    "%(prog)s <number of workers> <number of tasks per worker> "
    "<starting number to be factored> -w <filename>"
)

# Config dosyasında izin verilen anahtarlar
CONFIG_KEYS = ("mode", "max_factors", "start_method", "log_level")


class _UsageParser(argparse.ArgumentParser):
    """Hatalı kullanımda exit code 2 yerine ConfigurationError fırlatır"""

    def error(self, message):
        raise ConfigurationError(message, code="CFG000")


class PrimeDecomposerApp:
    """Ana uygulama sınıfı"""

    def __init__(self, config: RunConfig):
        self.config = config

    def run(self) -> RunReport:
        """Coordinator'ı çalıştır"""
        # fork edilen child'lar tamponlanmış stdout'u tekrar yazmasın
        print(f"🚀 {self.config.worker_count} {self.config.mode.value} worker başlatılıyor "
              f"({self.config.tasks_per_worker} görev/worker, başlangıç: {self.config.start_value})",
              flush=True)
        return Coordinator(self.config).run()

    def show_report(self, report: RunReport):
        """Worker satırlarını ve özeti göster"""
        for summary in sorted(report.summaries, key=lambda s: s.worker_index):
            if summary.is_success:
                print(summary.format_line(), end="")

        print(f"\n📊 {report.numbers_processed} sayı, toplam {report.total_elapsed_us} usec, "
              f"duvar saati {report.wall_time_s:.3f} saniye")
        for summary in sorted(report.summaries, key=lambda s: s.worker_index):
            metrics = summary.metrics
            if summary.is_success:
                print(f"   worker {summary.worker_index}: cpu={metrics.get('cpu_time_s', 0.0):.3f}s "
                      f"rss={metrics.get('rss_mb', 0.0):.1f}MB")
            else:
                print(f"   worker {summary.worker_index}: ❌ {summary.error}")
        print(f"📝 Çıktı: {self.config.output_path}")


def load_config_from_file(config_path: str) -> Dict[str, Any]:
    """
    JSON dosyasından opsiyonel ayarları yükle

    Sadece CONFIG_KEYS içindeki anahtarlar okunur; iş yükü (W, T, start, -w)
    her zaman komut satırından gelir.

    Raises:
        ConfigurationError: Dosya okunamaz, JSON geçersiz veya bilinmeyen anahtar varsa
    """
    try:
        with open(config_path, 'r') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise ConfigurationError(f"Config yükleme hatası: {e}", code="CFG009") from e

    if not isinstance(data, dict):
        raise ConfigurationError("Config dosyası bir JSON object olmalı", code="CFG009")

    unknown = sorted(set(data) - set(CONFIG_KEYS))
    if unknown:
        raise ConfigurationError(f"Bilinmeyen config anahtarları: {', '.join(unknown)}", code="CFG009")

    return data


def build_parser(prog: str, with_mode: bool) -> argparse.ArgumentParser:
    """Komut satırı parser'ı"""
    parser = _UsageParser(
        prog=prog,
        usage=USAGE,
        description="Ardışık büyük sayıları trial division ile paralel olarak asal çarpanlara ayırır",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Örnekler:
  # 3 process, her biri 2 sayı: 10..15
  prime-process 3 2 10 -w out.log

  # Aynı iş yükü thread'lerle
  prime-thread 3 2 10 -w out.log
        """
    )

    parser.add_argument('worker_count', type=int, help='Worker sayısı')
    parser.add_argument('tasks_per_worker', type=int, help='Worker başına görev sayısı')
    parser.add_argument('start_value', type=str, help='Factorize edilecek ilk sayı (ondalık)')

    parser.add_argument(
        '-w',
        dest='output_path',
        required=True,
        metavar='filename',
        help='Sonuçların eklendiği log dosyası'
    )

    if with_mode:
        parser.add_argument(
            '--mode', '-m',
            choices=[m.value for m in WorkerMode],
            help='Eşzamanlılık modeli (varsayılan: process)'
        )

    parser.add_argument(
        '--max-factors',
        type=int,
        help=f'Sayı başına maksimum asal çarpan (0 = sınırsız, varsayılan: {MAX_FACTORS})'
    )

    parser.add_argument(
        '--start-method',
        choices=multiprocessing.get_all_start_methods(),
        help='Process modu için multiprocessing start method'
    )

    parser.add_argument(
        '--log-level',
        type=str,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Log seviyesi (varsayılan: INFO)'
    )

    parser.add_argument(
        '--config', '-c',
        type=str,
        help='Opsiyonel ayarlar için JSON dosyası'
    )

    parser.add_argument(
        '--strict',
        action='store_true',
        help='Başarısız worker varsa exit code 1 döndür'
    )

    return parser


def _build_config(args: argparse.Namespace, mode: Optional[WorkerMode]) -> RunConfig:
    """Config dosyası + komut satırı -> RunConfig (komut satırı önceliklidir)"""
    settings: Dict[str, Any] = {}
    if args.config:
        settings.update(load_config_from_file(args.config))

    if mode is not None:
        settings["mode"] = mode
    elif getattr(args, "mode", None):
        settings["mode"] = args.mode

    if args.max_factors is not None:
        settings["max_factors"] = args.max_factors
    if args.start_method:
        settings["start_method"] = args.start_method
    if args.log_level:
        settings["log_level"] = args.log_level

    # 0 = sınırsız
    if settings.get("max_factors") == 0:
        settings["max_factors"] = None

    return RunConfig(
        worker_count=args.worker_count,
        tasks_per_worker=args.tasks_per_worker,
        start_value=parse_start_value(args.start_value),
        output_path=args.output_path,
        **settings
    )


def main(
    argv: Optional[List[str]] = None,
    mode: Optional[WorkerMode] = None,
    prog: str = "prime-decomposer"
) -> int:
    """
    Ana fonksiyon

    Args:
        argv: Argümanlar (None = sys.argv[1:])
        mode: Sabit varyant (None ise --mode ile seçilir)
        prog: Usage mesajındaki program adı

    Returns:
        int: Exit code
    """
    parser = build_parser(prog, with_mode=mode is None)

    # Başlangıç sayısı ve kayıtlar 4300 basamaktan uzun olabilir
    with unbounded_int_digits():
        return _run_cli(parser, argv, mode)


def _run_cli(parser: argparse.ArgumentParser, argv: Optional[List[str]], mode: Optional[WorkerMode]) -> int:
    """Parse -> config -> run -> rapor"""
    try:
        args = parser.parse_args(argv)
        config = _build_config(args, mode)
    except ConfigurationError as e:
        parser.print_usage(sys.stderr)
        print(f"❌ {e}", file=sys.stderr)
        return 1

    app = PrimeDecomposerApp(config)

    try:
        report = app.run()
    except SpawnError as e:
        print(f"❌ Worker başlatma hatası: {e}", file=sys.stderr)
        return 1

    app.show_report(report)

    if args.strict:
        return report.exit_status
    return 0


def process_main() -> int:
    """prime-process giriş noktası"""
    return main(mode=WorkerMode.PROCESS, prog="prime-process")


def thread_main() -> int:
    """prime-thread giriş noktası"""
    return main(mode=WorkerMode.THREAD, prog="prime-thread")


if __name__ == "__main__":
    sys.exit(main())
