"""
Logging Tests

Tests for console loggers, env configuration and structured record sinks.

Run with: pytest tests/test_arcade_logging.py -v
"""

import copy
import json

import pytest

from arcade import logging as arcade_logging
from arcade.logging import (
    FileSink,
    LogLevel,
    NullSink,
    close_all_sinks,
    configure_logging,
    create_sink_for_module,
    disable_logging,
    emit_record,
    enable_all_logging,
    get_logger,
    get_module_config,
    register_sink,
    set_default_sink,
)
from models import GameEvent


@pytest.fixture(autouse=True)
def restore_config():
    saved = copy.deepcopy(arcade_logging._config)
    yield
    close_all_sinks()
    arcade_logging._config.clear()
    arcade_logging._config.update(saved)


class RecordingSink(NullSink):
    def __init__(self):
        self.records = []
        self.closed = False

    def emit(self, module, record):
        self.records.append((module, record))

    def close(self):
        self.closed = True


class TestArcadeLogger:
    """Tests for console loggers."""

    def test_cached(self):
        """Same module name returns the same logger."""
        assert get_logger('cache-test') is get_logger('cache-test')

    def test_level_filtering(self, capsys):
        """Messages below the default level are dropped."""
        configure_logging(level='WARNING')
        log = get_logger('filter-test')

        log.info("hidden")
        log.warning("shown %d", 3)

        out = capsys.readouterr().out
        assert "hidden" not in out
        assert "[filter-test] WARN: shown 3" in out

    def test_module_level_overrides_default(self, capsys):
        """Per-module levels win over the default."""
        configure_logging(level='ERROR', modules={'chatty': 'DEBUG'})

        get_logger('chatty').debug("detail")
        get_logger('quiet').debug("detail")

        out = capsys.readouterr().out
        assert out.count("detail") == 1
        assert get_logger('chatty').level == LogLevel.DEBUG

    def test_bad_format_args_still_logged(self, capsys):
        """A mismatched format string does not raise."""
        configure_logging(level='INFO')
        get_logger('fmt-test').info("value %d", "not a number")

        assert "value %d" in capsys.readouterr().out

    def test_unknown_level_name_is_info(self):
        """Unrecognized level names fall back to INFO."""
        configure_logging(level='LOUD')
        assert get_logger('level-test').level == LogLevel.INFO

    def test_tick_event_needs_tracing(self, capsys):
        """Tick events are printed only with tracing on."""
        configure_logging(level='DEBUG', ticks=False)
        log = get_logger('tick-test')
        log.tick_event(5, [GameEvent.PLAYER_DAMAGED])
        assert capsys.readouterr().out == ""

        configure_logging(level='DEBUG', ticks=True)
        log.tick_event(5, [GameEvent.PLAYER_DAMAGED, GameEvent.HAZARD_AVOIDED])
        out = capsys.readouterr().out
        assert "TICK: 5:" in out
        assert "hazard_avoided, player_damaged" in out

    def test_disable_and_enable(self, capsys):
        """disable_logging silences everything; enable_all_logging opens DEBUG."""
        log = get_logger('toggle-test')

        disable_logging()
        log.critical("gone")
        assert capsys.readouterr().out == ""

        enable_all_logging()
        log.debug("back")
        assert "[toggle-test] DEBUG: back" in capsys.readouterr().out

    def test_tick_event_silent_without_events(self, capsys):
        """Empty ticks print nothing even when tracing."""
        configure_logging(level='DEBUG', ticks=True)
        get_logger('tick-test').tick_event(6, [])

        assert capsys.readouterr().out == ""


class TestEnvConfig:
    """Tests for environment-driven configuration."""

    def test_levels_from_env(self, monkeypatch):
        """ARCADE_LOG_* sets default and per-module levels."""
        monkeypatch.setenv('ARCADE_LOG_LEVEL', 'ERROR')
        monkeypatch.setenv('ARCADE_LOG_ENVMOD', 'TRACE')
        arcade_logging._load_env_config()

        assert get_logger('envmod').level == LogLevel.TRACE
        assert get_logger('other-env').level == LogLevel.ERROR

    def test_module_settings_from_env(self, monkeypatch):
        """ARCADE_LOGGING_* builds nested module settings."""
        monkeypatch.setenv('ARCADE_LOGGING_RUNS_ENABLED', 'true')
        monkeypatch.setenv('ARCADE_LOGGING_RUNS_FLUSH_EVERY', '5')
        arcade_logging._load_env_config()

        assert get_module_config('runs') == {'enabled': True, 'flush': {'every': 5}}

    @pytest.mark.parametrize("raw, expected", [
        ('yes', True),
        ('off', False),
        ('12', 12),
        ('0.5', 0.5),
        ('text', 'text'),
    ])
    def test_parse_env_value(self, raw, expected):
        """Env values are typed."""
        assert arcade_logging._parse_env_value(raw) == expected

    def test_log_dir_override(self, monkeypatch, tmp_path):
        """ARCADE_LOG_DIR picks the log directory."""
        arcade_logging._config['log_dir'] = None
        monkeypatch.setenv('ARCADE_LOG_DIR', str(tmp_path))

        assert arcade_logging.get_log_dir() == str(tmp_path)


class TestSinks:
    """Tests for structured record routing."""

    def test_emit_without_sink(self):
        """Records without a sink are reported as not emitted."""
        assert emit_record('nowhere', {'a': 1}) is False

    def test_emit_to_registered_sink(self):
        """Registered sinks receive their module's records."""
        sink = RecordingSink()
        register_sink('runs', sink)

        assert emit_record('runs', {'score': 10}) is True
        assert sink.records == [('runs', {'score': 10})]

    def test_default_sink(self):
        """The default sink catches unregistered modules."""
        sink = RecordingSink()
        set_default_sink(sink)

        emit_record('misc', {'x': 1})
        assert sink.records == [('misc', {'x': 1})]

    def test_close_all_sinks(self):
        """Closing drops every registered sink."""
        sink = RecordingSink()
        register_sink('runs', sink)
        close_all_sinks()

        assert sink.closed
        assert emit_record('runs', {}) is False

    def test_create_sink_disabled_by_default(self):
        """Unconfigured modules get a NullSink."""
        assert isinstance(create_sink_for_module('unconfigured'), NullSink)

    def test_create_sink_enabled(self, tmp_path):
        """Enabled modules get a FileSink in their directory."""
        arcade_logging._config['modules']['runs'] = {'enabled': True, 'dir': str(tmp_path)}

        sink = create_sink_for_module('runs', session_name='s1')
        assert isinstance(sink, FileSink)
        sink.emit('runs', {'score': 1})
        sink.close()
        assert (tmp_path / 's1_runs.jsonl').exists()


class TestFileSink:
    """Tests for JSONL output."""

    def test_writes_header_record_footer(self, tmp_path):
        """Each module file is framed by header and footer lines."""
        with FileSink(log_dir=str(tmp_path), session_name='test') as sink:
            sink.emit('runs', {'score': 42})
            path = sink.log_paths['runs']
            sink.flush()

        lines = [json.loads(line) for line in path.read_text().splitlines()]
        assert [line.get('type') for line in lines] == ['header', None, 'footer']
        assert lines[1]['score'] == 42
        assert 'wall_time' in lines[1]

    def test_one_file_per_module(self, tmp_path):
        """Different modules write different files."""
        sink = FileSink(log_dir=str(tmp_path), session_name='multi')
        sink.emit('runs', {})
        sink.emit('sessions', {})
        sink.close()

        assert sorted(p.name for p in tmp_path.iterdir()) == [
            'multi_runs.jsonl', 'multi_sessions.jsonl',
        ]
