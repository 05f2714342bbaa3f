"""Command line entry point for the clinic appointment demonstrator."""
from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Callable, List, Optional

if __package__ is None or __package__ == "":  # pragma: no cover - runtime safety for script execution
    sys.path.append(str(Path(__file__).resolve().parent.parent))

from booking import ClinicRegistry, OperationResult, load_professionals
from connector import build_notifier

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_SEED_PATH = os.getenv("CLINIC_SEED_PATH")
SECTION_RULE = "-" * 30

logger = logging.getLogger(__name__)

Printer = Callable[[str], None]


def _emit(printer: Printer, text: str) -> None:
    printer(text.rstrip("\n"))


def _report(printer: Printer, result: OperationResult) -> None:
    _emit(printer, result.message)
    if result.success:
        printer("")


def build_registry(seed_path: Optional[str] = None) -> ClinicRegistry:
    """Create a registry seeded from ``seed_path`` or the built-in professionals."""

    notifier = build_notifier()
    if seed_path:
        return ClinicRegistry(load_professionals(seed_path), notifier=notifier)
    return ClinicRegistry.with_default_professionals(notifier=notifier)


def run_demo(registry: ClinicRegistry, printer: Printer = print) -> ClinicRegistry:
    """Walk through listing, booking, listing and cancelling appointments."""

    _emit(printer, registry.list_professionals())
    printer(SECTION_RULE)

    _report(printer, registry.create_appointment(2, "YuZt", "18466209754", "09:30"))
    _report(printer, registry.create_appointment(1, "DengSy", "12356786093", "14:20"))
    _report(printer, registry.create_appointment(4, "LiTz", "16587398765", "16:15"))
    _report(printer, registry.create_appointment(5, "LiuHy", "12409567734", "10:00"))

    _emit(printer, registry.list_appointments())

    _report(printer, registry.cancel_booking("18466209754"))

    _emit(printer, registry.list_appointments())
    printer(SECTION_RULE)
    return registry


def run_server(registry: ClinicRegistry, host: str, port: int) -> None:
    from ui.dashboard import create_app

    app = create_app(registry)
    logger.info("Starting dashboard on %s:%s", host, port)
    app.run(host=host, port=port, debug=False)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Clinic appointment demonstrator")
    parser.add_argument(
        "command",
        nargs="?",
        choices=("demo", "serve"),
        default="demo",
        help="Command to execute",
    )
    parser.add_argument(
        "--seed",
        default=DEFAULT_SEED_PATH,
        help="JSON file of health professionals to seed the registry with",
    )
    parser.add_argument("--host", default="127.0.0.1", help="Dashboard bind address")
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.environ.get("PORT", "5000")),
        help="Dashboard port",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging verbosity",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    try:
        registry = build_registry(args.seed)
    except (OSError, ValueError) as exc:
        logger.error("Unable to load professionals: %s", exc)
        return 1

    if args.command == "serve":
        run_server(registry, args.host, args.port)
    else:
        run_demo(registry)
    return 0


if __name__ == "__main__":
    sys.exit(main())
