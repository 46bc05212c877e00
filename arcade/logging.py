"""
Console and structured logging for the arcade.

Every module asks for a named logger and prints through it; levels can be
set globally or per module. Finished runs are also written as structured
records to per-module sinks, so a session can be replayed or charted later.

Usage:
    from arcade.logging import get_logger, emit_record

    log = get_logger('simulation')
    log.info("Run started (best %d)", best)
    log.tick_event(frame, events)            # only with ARCADE_LOG_TICKS=1

    emit_record('runs', {'score': 420, 'level': 3})

Environment:
    ARCADE_LOG_LEVEL=DEBUG              default level for every logger
    ARCADE_LOG_<MODULE>=WARNING         level for one logger
    ARCADE_LOG_TICKS=1                  print the events of every tick
    ARCADE_LOG_DIR=~/dodge-logs         where FileSink writes
    ARCADE_LOGGING_<MODULE>_ENABLED=1   give <MODULE> a FileSink
"""

import json
import os
import sys
import time
from abc import ABC, abstractmethod
from enum import IntEnum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, TextIO


class LogLevel(IntEnum):
    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    OFF = 100


_LEVEL_NAMES = {
    'TRACE': LogLevel.TRACE,
    'DEBUG': LogLevel.DEBUG,
    'INFO': LogLevel.INFO,
    'WARN': LogLevel.WARNING,
    'WARNING': LogLevel.WARNING,
    'ERROR': LogLevel.ERROR,
    'CRITICAL': LogLevel.CRITICAL,
    'OFF': LogLevel.OFF,
}

_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},
    'ticks': False,
    'log_dir': None,
    'modules': {},
}


def _level_from_string(name: str) -> LogLevel:
    return _LEVEL_NAMES.get(name.upper(), LogLevel.INFO)


def _parse_env_value(value: str) -> Any:
    """Turn an env string into bool, int, float or leave it a string."""
    lowered = value.lower()
    if lowered in ('true', '1', 'yes', 'on'):
        return True
    if lowered in ('false', '0', 'no', 'off'):
        return False
    for cast in (int, float):
        try:
            return cast(value)
        except ValueError:
            continue
    return value


def _load_env_config() -> None:
    """Read ARCADE_LOG_* levels and ARCADE_LOGGING_* module settings.

    ARCADE_LOGGING_RUNS_FLUSH_EVERY=5 becomes
    modules['runs'] == {'flush': {'every': 5}}.
    """
    env = os.environ
    if 'ARCADE_LOG_LEVEL' in env:
        _config['default_level'] = _level_from_string(env['ARCADE_LOG_LEVEL'])
    if 'ARCADE_LOG_DIR' in env:
        _config['log_dir'] = env['ARCADE_LOG_DIR']
    _config['ticks'] = env.get('ARCADE_LOG_TICKS', '').lower() in ('1', 'true', 'yes')

    for key, value in env.items():
        if key.startswith('ARCADE_LOGGING_'):
            module, *path = key[len('ARCADE_LOGGING_'):].lower().split('_')
            if not path:
                continue
            node = _config['modules'].setdefault(module, {})
            for part in path[:-1]:
                node = node.setdefault(part, {})
            node[path[-1]] = _parse_env_value(value)
        elif key.startswith('ARCADE_LOG_') and key not in ('ARCADE_LOG_LEVEL', 'ARCADE_LOG_DIR', 'ARCADE_LOG_TICKS'):
            _config['module_levels'][key[len('ARCADE_LOG_'):].lower()] = _level_from_string(value)


_load_env_config()


def configure_logging(level: str = 'INFO',
                      modules: Optional[Dict[str, str]] = None,
                      ticks: bool = False) -> None:
    """
    Set levels from code instead of the environment.

    Args:
        level: Default level name for every logger
        modules: Per-logger level names, e.g. {'persistence': 'WARNING'}
        ticks: Print the events of every simulation tick
    """
    _config['default_level'] = _level_from_string(level)
    for name, module_level in (modules or {}).items():
        _config['module_levels'][name] = _level_from_string(module_level)
    _config['ticks'] = ticks


def enable_all_logging() -> None:
    """DEBUG everywhere, with tick tracing."""
    configure_logging(level='DEBUG', ticks=True)


def disable_logging() -> None:
    _config['default_level'] = LogLevel.OFF
    _config['ticks'] = False


def get_module_config(module: str) -> Dict[str, Any]:
    """Settings collected from ARCADE_LOGGING_<MODULE>_* ({} if none)."""
    return _config['modules'].get(module.lower(), {})


def get_log_dir() -> str:
    """Directory for structured logs.

    Configured value first, then ARCADE_LOG_DIR, then the platform's user
    data directory (Application Support, APPDATA or XDG_DATA_HOME).
    """
    configured = _config.get('log_dir') or os.environ.get('ARCADE_LOG_DIR')
    if configured:
        return str(Path(configured).expanduser())

    if sys.platform == 'darwin':
        base = Path.home() / 'Library' / 'Application Support' / 'Arcade'
    elif sys.platform == 'win32':
        base = Path(os.environ.get('APPDATA', str(Path.home()))) / 'Arcade'
    else:
        base = Path(os.environ.get('XDG_DATA_HOME', str(Path.home() / '.local' / 'share'))) / 'arcade'
    return str(base / 'logs')


# =============================================================================
# Console loggers
# =============================================================================

class ArcadeLogger:
    """Named console logger; output is '[module] LEVEL: message'."""

    def __init__(self, module: str):
        self.module = module
        self._key = module.lower().replace('.', '_')

    @property
    def level(self) -> LogLevel:
        return _config['module_levels'].get(self._key, _config['default_level'])

    def _log(self, level: LogLevel, label: str, msg: str, *args) -> None:
        if level < self.level:
            return
        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"
        print(f"[{self.module}] {label}: {msg}")

    def trace(self, msg: str, *args) -> None:
        self._log(LogLevel.TRACE, 'TRACE', msg, *args)

    def debug(self, msg: str, *args) -> None:
        self._log(LogLevel.DEBUG, 'DEBUG', msg, *args)

    def info(self, msg: str, *args) -> None:
        self._log(LogLevel.INFO, 'INFO', msg, *args)

    def warning(self, msg: str, *args) -> None:
        self._log(LogLevel.WARNING, 'WARN', msg, *args)

    def error(self, msg: str, *args) -> None:
        self._log(LogLevel.ERROR, 'ERROR', msg, *args)

    def critical(self, msg: str, *args) -> None:
        self._log(LogLevel.CRITICAL, 'CRIT', msg, *args)

    def tick_event(self, frame: int, events: Iterable[Any]) -> None:
        """
        Print the events of one tick, sorted by name.

        Silent unless tick tracing is on, and for ticks without events.

        Args:
            frame: Frame counter after the tick
            events: GameEvent members (or anything with a str form)
        """
        if not _config['ticks']:
            return
        names = sorted(getattr(e, 'value', str(e)) for e in events)
        if names:
            self._log(LogLevel.DEBUG, 'TICK', f"{frame}: {', '.join(names)}")


@lru_cache(maxsize=64)
def get_logger(module: str) -> ArcadeLogger:
    """Logger for a module; the same name always returns the same object."""
    return ArcadeLogger(module)


# =============================================================================
# Structured records
# =============================================================================

class LogSink(ABC):
    """Destination for structured (JSON-serializable) records."""

    @abstractmethod
    def emit(self, module: str, record: Dict[str, Any]) -> None:
        pass

    @abstractmethod
    def flush(self) -> None:
        pass

    @abstractmethod
    def close(self) -> None:
        pass

    def __enter__(self) -> 'LogSink':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class FileSink(LogSink):
    """
    JSON Lines files, one per module: <session>_<module>.jsonl.

    Each file opens with a header line and is closed with a footer line;
    records in between get a wall_time unless they carry one.

    Args:
        log_dir: Target directory (default: get_log_dir())
        session_name: File prefix (default: start timestamp)
    """

    def __init__(self, log_dir: Optional[str] = None, session_name: Optional[str] = None):
        self._log_dir = Path(log_dir) if log_dir else None
        self._session_name = session_name or time.strftime("%Y%m%d_%H%M%S")
        self._files: Dict[str, TextIO] = {}

    def _path_for(self, module: str) -> Path:
        if self._log_dir is None:
            self._log_dir = Path(get_log_dir())
        self._log_dir.mkdir(parents=True, exist_ok=True)
        return self._log_dir / f"{self._session_name}_{module}.jsonl"

    def _write(self, f: TextIO, record: Dict[str, Any]) -> None:
        f.write(json.dumps(record) + "\n")

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        f = self._files.get(module)
        if f is None:
            f = self._files[module] = open(self._path_for(module), 'a')
            self._write(f, {
                'type': 'header',
                'module': module,
                'session_name': self._session_name,
                'start_time': time.time(),
            })
        if 'wall_time' not in record:
            record = {'wall_time': time.time(), **record}
        self._write(f, record)

    def flush(self) -> None:
        for f in self._files.values():
            f.flush()

    def close(self) -> None:
        for module, f in self._files.items():
            self._write(f, {'type': 'footer', 'module': module, 'end_time': time.time()})
            f.close()
        self._files.clear()

    @property
    def log_paths(self) -> Dict[str, Path]:
        """Files opened so far, by module."""
        return {module: self._path_for(module) for module in self._files}


class NullSink(LogSink):
    """Discards records."""

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        pass

    def flush(self) -> None:
        pass

    def close(self) -> None:
        pass


_sinks: Dict[str, LogSink] = {}
_default_sink: Optional[LogSink] = None


def register_sink(module: str, sink: LogSink) -> None:
    _sinks[module] = sink


def set_default_sink(sink: Optional[LogSink]) -> None:
    """Sink for modules without one of their own (None to drop them)."""
    global _default_sink
    _default_sink = sink


def get_sink(module: str) -> Optional[LogSink]:
    return _sinks.get(module, _default_sink)


def emit_record(module: str, record: Dict[str, Any]) -> bool:
    """
    Route a record to the module's sink.

    Returns:
        False if no sink (and no default sink) is registered
    """
    sink = get_sink(module)
    if sink is None:
        return False
    sink.emit(module, record)
    return True


def close_all_sinks() -> None:
    """Close and unregister every sink, the default one included."""
    global _default_sink
    for sink in _sinks.values():
        sink.close()
    _sinks.clear()
    if _default_sink is not None:
        _default_sink.close()
        _default_sink = None


def create_sink_for_module(module: str, session_name: Optional[str] = None) -> LogSink:
    """
    FileSink when ARCADE_LOGGING_<MODULE>_ENABLED is set, else NullSink.

    A configured ARCADE_LOGGING_<MODULE>_DIR overrides the log directory.
    """
    settings = get_module_config(module)
    if not settings.get('enabled', False):
        return NullSink()
    return FileSink(log_dir=settings.get('dir'), session_name=session_name)
