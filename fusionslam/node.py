"""Command-line entry point that runs the SLAM system."""

import argparse
import faulthandler
import logging
import signal
import sys
import threading
import time
import traceback

import yaml

from .config import get_config
from .logger import setup_logging
from .system import System

__all__ = ["capture_stacktrace", "load_params", "install_crash_handlers", "main"]

_log = logging.getLogger("fusion_slam")


def capture_stacktrace(max_frames=64):
    """Describe the caller's stack, innermost frame first."""
    frames = traceback.extract_stack()[:-1]
    frames = frames[-max_frames:] if max_frames > 0 else []
    lines = ["Stacktrace:"]
    for i, frame in enumerate(reversed(frames)):
        lines.append(f"  {i}: {frame.filename}:{frame.lineno} in {frame.name}")
    return "\n".join(lines) + "\n"


def load_params(path):
    """Read a YAML parameter file into a dictionary."""
    with open(path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"parameter file must hold a mapping: {path}")
    return data


def install_crash_handlers():
    """Dump a trace on fatal signals and log uncaught exceptions; return the hook."""
    stream = sys.__stdout__ if sys.__stdout__ is not None else sys.__stderr__
    try:
        faulthandler.enable(file=stream, all_threads=True)
    except (AttributeError, ValueError, OSError):
        faulthandler.enable(all_threads=True)

    previous = sys.excepthook

    def _crash_hook(exc_type, exc, tb):
        if not issubclass(exc_type, KeyboardInterrupt):
            crash_logger = logging.getLogger("crash_logger")
            crash_logger.critical("program crashed: %s: %s", exc_type.__name__, exc)
            crash_logger.critical("Stacktrace:\n%s", "".join(traceback.format_tb(tb)))
        previous(exc_type, exc, tb)

    sys.excepthook = _crash_hook
    return _crash_hook


def _spin(stop, rate, duration):
    period = 1.0 / rate
    deadline = None if duration is None else time.monotonic() + duration
    while not stop.is_set():
        if deadline is not None and time.monotonic() >= deadline:
            break
        stop.wait(period)


def main(argv=None):
    """Run the node until interrupted (or for ``--duration`` seconds)."""
    parser = argparse.ArgumentParser(prog="fusion-slam")
    parser.add_argument("params", nargs="?", help="YAML parameter file")
    parser.add_argument("--rate", type=float, default=1000.0, help="loop rate in Hz")
    parser.add_argument("--duration", type=float, default=None, help="stop after this many seconds")
    args = parser.parse_args(argv)
    if args.rate <= 0:
        parser.error("--rate must be positive")

    install_crash_handlers()
    setup_logging()
    _log.info("[Fusion Slam Node Start!]")

    params = {}
    if args.params:
        try:
            get_config().set_config_path(args.params)
            params = load_params(args.params)
        except (FileNotFoundError, ValueError, yaml.YAMLError) as exc:
            _log.error("%s", exc)
            return 1

    try:
        System(params)
    except ValueError as exc:
        _log.error("%s", exc)
        return 1

    stop = threading.Event()
    previous = {}
    if threading.current_thread() is threading.main_thread():
        for signum in (signal.SIGINT, signal.SIGTERM):
            previous[signum] = signal.signal(signum, lambda *_: stop.set())
    try:
        _spin(stop, args.rate, args.duration)
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)

    _log.info("[Fusion Slam Node Exit!]")
    return 0