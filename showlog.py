# showlog.py: leveled log with timestamps, auto-tag and a background file writer
import os, sys, time, datetime
import threading, queue, traceback
from typing import Optional

import config as cfg

# ---------- Paths & state ----------
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
LOG_FILE = os.path.join(
    getattr(cfg, "LOG_DIR", BASE_DIR),
    getattr(cfg, "LOG_FILE_NAME", "piano_log.txt"),
)

lastmsg = ""      # last full canonical log line written (with [LEVEL module])
_last_write_time = 0.0
_idle_sent = False
_IDLE_TIMEOUT = 0.5   # seconds of inactivity before separator

LEVELS = ("INFO", "WARN", "ERROR", "DEBUG", "VERBOSE")


# --- Numeric verbosity: 0=ERROR, 1=WARN, 2=INFO (default) ---
def _log_level() -> int:
    try:
        return int(getattr(cfg, "LOG_LEVEL", 2))
    except (TypeError, ValueError):
        return 2


def _allow_level(level_name: str) -> bool:
    """Filter by numeric LOG_LEVEL (0=error,1=warn,2=info) and debug switches."""
    lvl = (level_name or "INFO").upper()
    if lvl == "ERROR":
        return True
    elif lvl == "WARN":
        return _log_level() >= 1
    elif lvl == "INFO":
        return _log_level() >= 2
    elif lvl == "DEBUG":
        return bool(getattr(cfg, "DEBUG", False)) and bool(getattr(cfg, "DEBUG_LOG", False))
    elif lvl == "VERBOSE":
        return bool(getattr(cfg, "VERBOSE_LOG", False))
    else:
        # treat unknown/custom tags as INFO
        return _log_level() >= 2


# ---------------------------------------------------------------------
# Background file writer for non-blocking logging
# ---------------------------------------------------------------------
_log_queue = queue.Queue(maxsize=int(getattr(cfg, "LOG_QUEUE_SIZE", 512)))
_log_writer_started = False
_log_writer_lock = threading.Lock()


def _log_writer_loop():
    """Drain the log queue and write to file."""
    while True:
        msg = _log_queue.get()
        if msg is None:
            _log_queue.task_done()
            break
        try:
            _direct_write_file(msg)
        except OSError as e:
            sys.stderr.write(f"[showlog] writer failed: {e}\n")
        finally:
            _log_queue.task_done()


def _start_log_writer():
    global _log_writer_started
    with _log_writer_lock:
        if _log_writer_started:
            return
        t = threading.Thread(target=_log_writer_loop, name="showlog-writer", daemon=True)
        t.start()
        _log_writer_started = True


# ---------- helpers ----------
def _timestamp() -> str:
    return datetime.datetime.now().strftime("%H:%M:%S")


def _level_of(msg: str) -> str:
    upper = (msg or "").strip().upper()
    for level in LEVELS:
        if upper.startswith(f"[{level}"):
            return level
    return "INFO"


def _direct_write_file(msg: str):
    global _last_write_time, _idle_sent
    now = time.time()

    with open(LOG_FILE, "a", encoding="utf-8") as f:
        # --- idle separator check ---
        if (_last_write_time and not _idle_sent and
                (now - _last_write_time) >= _IDLE_TIMEOUT):
            f.write("--------------------------------\n")
            _idle_sent = True

        f.write(format_line(msg) + "\n")

    _last_write_time = now
    _idle_sent = False


def format_line(msg: str) -> str:
    """Return the timestamped file form of a canonical log line."""
    if bool(getattr(cfg, "SHOW_LOG_TYPE_AS_TEXT", True)):
        return f"[{_timestamp()}] {msg}"
    marks = {"INFO": "I", "WARN": "W", "ERROR": "E", "DEBUG": "D", "VERBOSE": "V"}
    return f"[{_timestamp()}] {marks.get(_level_of(msg), 'I')} {msg}"


def _write_file(msg: str):
    """Enqueue log lines for background writing."""
    _start_log_writer()
    try:
        _log_queue.put_nowait(msg)
    except queue.Full:
        # Drop oldest to keep throughput steady
        try:
            _log_queue.get_nowait()
            _log_queue.task_done()
            _log_queue.put_nowait(msg)
        except (queue.Empty, queue.Full):
            pass


def flush(timeout: float = 1.0):
    """Block until queued lines are written (or timeout elapses)."""
    if not _log_writer_started:
        return
    deadline = time.time() + timeout
    while _log_queue.unfinished_tasks and time.time() < deadline:
        time.sleep(0.01)


_THIS_FILE = os.path.abspath(__file__)


def _caller_info():
    """Return (module, line_no) of the first caller outside this module."""
    frame = sys._getframe(1)
    while frame:
        filename = frame.f_code.co_filename
        if os.path.abspath(filename) != _THIS_FILE:
            short = os.path.splitext(os.path.basename(filename))[0] or "main"
            return short, frame.f_lineno
        frame = frame.f_back
    return "main", 0


def _split_prefix(s: str):
    if s.startswith("[") and "]" in s:
        head, tail = s.split("]", 1)
        return head[1:].strip(), tail.strip()
    return None, s


def log_process(msg: str) -> Optional[str]:
    """
    Normalise a log message and hand it to the sinks.

    Accepts "[LEVEL] text", "[LEVEL module] text" or plain text (treated as
    INFO). Returns the canonical line that was emitted, or None when filtered.
    """
    global lastmsg

    if getattr(cfg, "LOG_OFF", False):
        return None
    if msg is None:
        return None
    raw = str(msg).strip()
    if not raw:
        return None

    if not raw.startswith("["):
        raw = f"[INFO] {raw}"

    tag, tail = _split_prefix(raw)
    module_name, module_line = _caller_info()
    is_level = any(tag.upper().startswith(L) for L in LEVELS)

    if is_level:
        parts = tag.split(" ", 1)
        level_name = parts[0].upper()
        if len(parts) == 2 and parts[1].strip():
            module_name = parts[1].strip()
        module_tag = f"{module_name}:{module_line}" if module_line else module_name
        file_line = f"[{level_name} {module_tag}] {tail}"
    else:
        level_name = "INFO"
        file_line = f"[INFO {module_name}] [{tag}] {tail}"

    if not _allow_level(level_name):
        return None

    # --- avoid duplicates ---
    if file_line == lastmsg:
        return None
    lastmsg = file_line

    if getattr(cfg, "LOG_TO_FILE", True):
        _write_file(file_line)
    if getattr(cfg, "LOG_TO_CONSOLE", False):
        sys.stderr.write(format_line(file_line) + "\n")

    return file_line


def last():
    return lastmsg


# --- helper: format traceback safely ---
def _format_exc_str(exc: Optional[BaseException] = None) -> str:
    """
    Return a full traceback string for the current exception context or a given exception.
    Safe to call even if no exception is active (returns empty string).
    """
    if exc is not None:
        return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    exc_type, exc_val, exc_tb = sys.exc_info()
    if exc_val is None:
        return ""
    return "".join(traceback.format_exception(exc_type, exc_val, exc_tb))


# ---------- public wrappers ----------
def error(msg: Optional[str] = None, exc: Optional[BaseException] = None):
    """
    Log an ERROR. If called inside an exception handler (or with exc=),
    append the full traceback to the message.
    """
    tb = _format_exc_str(exc)
    full = msg if msg else ""
    if tb:
        full = (full + ("\n" if full else "") + tb).rstrip()
    return log_process(f"[ERROR] {full}")


def debug(message):
    """Extra-detailed debug messages (need DEBUG and DEBUG_LOG)."""
    return log_process(f"[DEBUG] {message}")


def info(message):
    return log_process(f"[INFO] {message}")


def warn(message):
    return log_process(f"[WARN] {message}")


def verbose(message):
    """Per-event detail, only with VERBOSE_LOG."""
    if not getattr(cfg, "VERBOSE_LOG", False):
        return None
    return log_process(f"[VERBOSE] {message}")


def log(message):
    """Unified public entry point; plain messages are INFO."""
    return log_process(message)


# config queues its startup messages until we exist
try:
    cfg._notify_showlog_ready()
except AttributeError:
    pass
