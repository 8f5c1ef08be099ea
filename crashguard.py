# crashguard.py
# ------------------------------------------------------------
#  Crash logger: import this FIRST in the entry script
# ------------------------------------------------------------
import os, sys, faulthandler, traceback, signal, threading, atexit, datetime

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
CRASH_LOG_PATH = os.path.join(BASE_DIR, "crash.txt")

try:
    _crash_fh = open(CRASH_LOG_PATH, "a", encoding="utf-8")
except OSError:
    _crash_fh = None


def _write_crash(msg: str):
    """Write to crash log and stderr."""
    timestamp = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    full_msg = f"[{timestamp}] {msg}\n"

    try:
        if _crash_fh:
            _crash_fh.write(full_msg)
            _crash_fh.flush()
            os.fsync(_crash_fh.fileno())
    except (OSError, ValueError):
        pass

    # Always write to stderr as backup
    sys.stderr.write(full_msg)
    sys.stderr.flush()


def _close_logs():
    """Close crash log on exit."""
    if _crash_fh:
        _crash_fh.close()

atexit.register(_close_logs)


# --- low-level / segfaults (SDL lives in C) ---
try:
    faulthandler.enable(_crash_fh or sys.stderr, all_threads=True)
except (RuntimeError, ValueError) as e:
    _write_crash(f"[CRASHGUARD] Failed to enable faulthandler: {e}")


# --- global exception hook ---
def _global_excepthook(exc_type, exc_value, exc_tb):
    trace = "".join(traceback.format_exception(exc_type, exc_value, exc_tb))
    _write_crash(f"\n=== Unhandled Exception ===\n{trace}")

    showlog = sys.modules.get("showlog")
    if showlog is not None:
        showlog.error(f"[CRASH] {exc_type.__name__}: {exc_value}")
        showlog.flush()

sys.excepthook = _global_excepthook


# --- thread hook ---
def _thread_excepthook(args):
    tb = "".join(traceback.format_exception(args.exc_type, args.exc_value, args.exc_traceback))
    _write_crash(f"\n=== THREAD CRASH in {args.thread.name} ===\n{tb}")

threading.excepthook = _thread_excepthook


# --- optional manual dump ---
if hasattr(signal, "SIGUSR1"):
    faulthandler.register(signal.SIGUSR1, file=_crash_fh or sys.stderr, all_threads=True)


_write_crash(f"[CRASHGUARD] Python {sys.version.split()[0]}, crash log: {CRASH_LOG_PATH}")


# --- public API for explicit checkpoints ---
def checkpoint(msg: str):
    """Manual checkpoint for tracking initialization progress."""
    _write_crash(f"[CHECKPOINT] {msg}")


def emergency_log(msg: str):
    """Emergency logging for critical failures."""
    _write_crash(f"[EMERGENCY] {msg}")


# Export public API
__all__ = ['checkpoint', 'emergency_log']
