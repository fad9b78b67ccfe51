# Path: benchutil/tests/conftest.py
"""
Pytest Configuration and Shared Fixtures for benchutil

Provides common test fixtures used across all test modules.
"""

import os
import sys
import tempfile
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

# Add the repository root to path for imports
REPO_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(REPO_ROOT))

from benchutil.output.report_models import MeasurementRecord, RecordSet, Result


FAKE_SYSTEM_INFO = 'Processor:      Test CPU\nCPUs:           4'
FAKE_DETAILED_SYSTEM_INFO = FAKE_SYSTEM_INFO + '\nKernel:         6.0-test'


# ==============================================================================
# ENVIRONMENT FIXTURES
# ==============================================================================

@pytest.fixture
def mock_env_vars():
    """Provide mock environment variables for testing."""
    env_vars = {
        'BENCHUTIL_DEBUG': 'false',

        # Logging
        'BENCHUTIL_LOG_LEVEL': 'INFO',
        'BENCHUTIL_LOG_DIR': '/tmp/benchutil_test/logs',
        'BENCHUTIL_LOG_CONSOLE': 'false',

        # Output
        'BENCHUTIL_OUTPUT_DIR': '/tmp/benchutil_test/output',
        'BENCHUTIL_OUTPUT_FORMAT': 'text,csv',

        # Report layout
        'BENCHUTIL_COLUMN_PADDING': '3',
        'BENCHUTIL_OPS_DESCRIPTORS': 'true',
        'BENCHUTIL_SYSTEM_INFO': 'false',
        'BENCHUTIL_DETAILED_SYSTEM_INFO': 'false',
        'BENCHUTIL_SECTION_PER_GROUP': 'yes',
        'BENCHUTIL_SECTION_HEADERS': 'false',
        'BENCHUTIL_NAME_SECTIONS': '0',
    }

    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def clean_env():
    """Remove every BENCHUTIL_ variable for the duration of a test."""
    stripped = {k: v for k, v in os.environ.items() if not k.startswith('BENCHUTIL_')}
    with patch.dict(os.environ, stripped, clear=True):
        yield


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def reset_singletons():
    """Reset any singleton instances between tests."""
    from benchutil.config_loader import ConfigLoader
    ConfigLoader._instance = None
    ConfigLoader._initialized = False

    yield

    ConfigLoader._instance = None
    ConfigLoader._initialized = False


# ==============================================================================
# RECORD FIXTURES
# ==============================================================================

@pytest.fixture
def two_group_records():
    """Two records, each in its own group."""
    return [
        MeasurementRecord(name='A', group='g1', result=Result(1, 100, 10, 1)),
        MeasurementRecord(name='B', group='g2', result=Result(2, 200, 20, 2)),
    ]


@pytest.fixture
def full_record_set():
    """A named record set using every textual column."""
    records = RecordSet(
        name='String building',
        description='64 parts of 16 characters',
        note='lower is better',
    )
    records.add(
        MeasurementRecord(
            name='join', group='str', subgroup='64x16', description='str.join',
            result=Result(1000, 1250, 1024, 1),
        ),
        MeasurementRecord(
            name='+=', group='str', subgroup='64x16', description='repeated +=',
            note='quadratic', result=Result(1000, 5400, 8192, 64),
        ),
        MeasurementRecord(
            name='join', group='bytes', subgroup='64x16', description='bytes.join',
            result=Result(1000, 900, 1024, 1),
        ),
    )
    return records


@pytest.fixture
def mixed_group_records():
    """Groups a, a, b, b, a, c in that order."""
    groups = ['a', 'a', 'b', 'b', 'a', 'c']
    return [
        MeasurementRecord(name=f'bench{i}', group=g, result=Result(10, 5, 0, 0))
        for i, g in enumerate(groups)
    ]


# ==============================================================================
# COLLABORATOR FIXTURES
# ==============================================================================

@pytest.fixture
def fake_system_info():
    """System-info provider returning canned text."""
    provider = MagicMock(
        side_effect=lambda detailed: FAKE_DETAILED_SYSTEM_INFO if detailed else FAKE_SYSTEM_INFO
    )
    return provider


@pytest.fixture
def mock_config():
    """Create a mock ConfigLoader."""
    values = {
        'output_dir': None,
        'output_format': 'text',
        'column_padding': 2,
    }
    config = MagicMock()
    config.get.side_effect = lambda key, default=None: values.get(key, default)
    config.values = values
    return config
