# Path: benchutil/tests/unit/test_core.py
"""
Unit Tests for the core helpers

Tests system information, measurement, random data, progress dots
and layered logging.
"""

import io
import logging
import random
from collections import namedtuple
from unittest.mock import MagicMock, patch

import psutil
import pytest

from benchutil.core.logger import (
    get_input_logger,
    get_output_logger,
    get_process_logger,
    setup_ipo_logging,
)
from benchutil.core.logger.ipo_logging import LOGGER_ROOT
from benchutil.core.measurement import run_benchmark, trace_allocations, time_calls
from benchutil.core.progress import DOTS_PER_LINE, DotProgress, dot
from benchutil.core.random_data import (
    ALPHANUM,
    MAX_SEED,
    rand_bool,
    rand_bytes,
    rand_string,
    seed_value,
)
from benchutil.core.system_info import clock_speed, get_system_info
from benchutil.errors import CollaboratorError, SystemInfoError
from benchutil.output.report_models import Result


FakeFreq = namedtuple('FakeFreq', 'current min max')


# ==============================================================================
# SYSTEM INFORMATION
# ==============================================================================

class TestSystemInfo:
    """Test get_system_info()."""

    def test_basic_fields(self):
        """Basic info names processor, CPUs, memory and OS."""
        info = get_system_info()

        assert info.startswith('Processor:')
        assert 'CPUs:' in info
        assert 'Memory:' in info
        assert 'OS:' in info
        assert 'Kernel:' not in info
        assert info.endswith('\n')

    def test_detailed_fields(self):
        """Detailed info adds clock, cache, cores and kernel."""
        with patch('benchutil.core.system_info.psutil.cpu_freq', return_value=FakeFreq(2400.0, 0, 0)):
            info = get_system_info(detailed=True)

        assert 'Clock speed:    2400 MHz' in info
        assert 'Cache size:' in info
        assert 'Physical cores:' in info
        assert 'Kernel:' in info
        assert 'Architecture:' in info

    def test_probe_failure(self):
        """A failing psutil probe becomes SystemInfoError."""
        with patch(
            'benchutil.core.system_info.psutil.virtual_memory',
            side_effect=psutil.AccessDenied(),
        ):
            with pytest.raises(SystemInfoError):
                get_system_info()

    def test_os_failure_is_collaborator_error(self):
        """OS errors are wrapped as well."""
        with patch(
            'benchutil.core.system_info.psutil.virtual_memory',
            side_effect=OSError('no /proc/meminfo'),
        ):
            with pytest.raises(CollaboratorError):
                get_system_info(detailed=True)

    def test_clock_speed_unknown(self):
        """No frequency data reads as unknown."""
        with patch('benchutil.core.system_info.psutil.cpu_freq', return_value=None):
            assert clock_speed() == 'unknown'


# ==============================================================================
# MEASUREMENT
# ==============================================================================

class TestMeasurement:
    """Test the measurement harness."""

    def test_run_benchmark(self):
        """run_benchmark() returns a Result for n operations."""
        result = run_benchmark(lambda: None, 50, trace_memory=False)

        assert isinstance(result, Result)
        assert result.operations == 50
        assert result.nanos_per_op >= 0
        assert result.bytes_per_op == 0
        assert result.allocs_per_op == 0

    def test_rejects_zero(self):
        """n must be at least one."""
        with pytest.raises(ValueError):
            run_benchmark(lambda: None, 0)

    def test_calls_function_n_times(self):
        """Timing calls the function exactly n times."""
        func = MagicMock()

        time_calls(func, 7)

        assert func.call_count == 7

    def test_trace_allocations_counts_growth(self):
        """Retained allocations are counted."""
        keep = []

        total_bytes, total_blocks = trace_allocations(lambda: keep.append([0] * 100), 20)

        assert total_bytes > 0
        assert total_blocks > 0

    def test_memory_traced(self):
        """Allocating functions report bytes per op."""
        keep = []

        result = run_benchmark(lambda: keep.append(bytearray(1024)), 10)

        assert result.bytes_per_op >= 1024


# ==============================================================================
# RANDOM DATA
# ==============================================================================

class TestRandomData:
    """Test random input helpers."""

    def test_rand_string(self):
        """Strings have the requested length and alphabet."""
        value = rand_string(32)

        assert len(value) == 32
        assert set(value) <= set(ALPHANUM)

    def test_rand_bytes(self):
        """Bytes are ASCII alphanumerics."""
        value = rand_bytes(16)

        assert isinstance(value, bytes)
        assert len(value) == 16
        assert set(value.decode('ascii')) <= set(ALPHANUM)

    def test_seeded_rng_is_repeatable(self):
        """The same seed gives the same data."""
        assert rand_string(20, random.Random(42)) == rand_string(20, random.Random(42))

    def test_rand_bool(self):
        """rand_bool() returns both values over enough draws."""
        rng = random.Random(1)
        values = {rand_bool(rng) for _ in range(100)}

        assert values == {True, False}

    def test_seed_value_range(self):
        """Seeds are non-negative 63-bit integers."""
        for _ in range(10):
            assert 0 <= seed_value() < MAX_SEED


# ==============================================================================
# PROGRESS
# ==============================================================================

class TestProgress:
    """Test progress dots."""

    def test_dot_until_done(self):
        """One dot per elapsed interval until the event is set."""
        done = MagicMock()
        done.wait.side_effect = [False, False, False, True]
        stream = io.StringIO()

        count = dot(done, stream, interval=0.01)

        assert count == 3
        assert stream.getvalue() == '...'

    def test_dot_line_break(self):
        """A newline follows every full line of dots."""
        done = MagicMock()
        done.wait.side_effect = [False] * (DOTS_PER_LINE + 1) + [True]
        stream = io.StringIO()

        dot(done, stream)

        assert stream.getvalue() == '.' * DOTS_PER_LINE + '\n' + '.'

    def test_context_manager_stops(self):
        """DotProgress stops its thread on exit."""
        stream = io.StringIO()

        with DotProgress(stream, interval=0.01) as progress:
            pass

        assert not progress._thread.is_alive()


# ==============================================================================
# LOGGING
# ==============================================================================

class TestIPOLogging:
    """Test layered logging setup."""

    @pytest.fixture
    def package_logger(self):
        """Remove benchutil handlers after each test."""
        logger = logging.getLogger(LOGGER_ROOT)
        yield logger
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

    def test_logger_names(self):
        """Layer helpers prefix logger names."""
        assert get_input_logger('x').name == 'benchutil.input.x'
        assert get_process_logger('x').name == 'benchutil.process.x'
        assert get_output_logger('x').name == 'benchutil.output.x'

    def test_layer_files(self, package_logger, temp_dir):
        """Each layer logs to its own file and to the full log."""
        setup_ipo_logging(log_dir=temp_dir, log_level='DEBUG', console_output=False)

        get_process_logger('layout').debug('widths computed')
        for handler in package_logger.handlers:
            handler.flush()

        assert 'widths computed' in (temp_dir / 'process_activity.log').read_text()
        assert 'widths computed' in (temp_dir / 'full_activity.log').read_text()
        assert 'widths computed' not in (temp_dir / 'output_activity.log').read_text()

    def test_setup_replaces_handlers(self, package_logger):
        """Calling setup twice does not stack console handlers."""
        setup_ipo_logging(console_output=True)
        setup_ipo_logging(console_output=True)

        assert len(package_logger.handlers) == 1
        assert package_logger.level == logging.WARNING
