"""
Pytest configuration and shared fixtures for the scrapermetrics test suite.
"""

import shutil
import sys
import tempfile
from pathlib import Path

import pytest

# Add src to Python path for testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


# ============================================================================
# Test Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")


# ============================================================================
# Core Fixtures
# ============================================================================


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def time_report():
    """A complete `/usr/bin/time -v` report, indented as GNU time writes it."""
    return (
        '\tCommand being timed: "ruby ./scraper.rb"\n'
        "\tUser time (seconds): 1.34\n"
        "\tSystem time (seconds): 24.45\n"
        "\tPercent of CPU this job got: 97%\n"
        "\tElapsed (wall clock) time (h:mm:ss or m:ss): 2:02.04\n"
        "\tAverage shared text size (kbytes): 0\n"
        "\tAverage unshared data size (kbytes): 0\n"
        "\tAverage stack size (kbytes): 0\n"
        "\tAverage total size (kbytes): 0\n"
        "\tMaximum resident set size (kbytes): 3808\n"
        "\tAverage resident set size (kbytes): 0\n"
        "\tMajor (requiring I/O) page faults: 2\n"
        "\tMinor (reclaiming a frame) page faults: 312\n"
        "\tVoluntary context switches: 43\n"
        "\tInvoluntary context switches: 65\n"
        "\tSwaps: 0\n"
        "\tFile system inputs: 480\n"
        "\tFile system outputs: 23\n"
        "\tSocket messages sent: 0\n"
        "\tSocket messages received: 0\n"
        "\tSignals delivered: 0\n"
        "\tPage size (bytes): 4096\n"
        "\tExit status: 0\n"
    )


@pytest.fixture
def parquet_store(temp_dir):
    """An empty Parquet store in the temporary directory."""
    from scrapermetrics.storage import ParquetMetricStore

    return ParquetMetricStore(temp_dir / "metrics.parquet")


@pytest.fixture
def json_store(temp_dir):
    """An empty JSON store in the temporary directory."""
    from scrapermetrics.storage import JsonMetricStore

    return JsonMetricStore(temp_dir / "metrics.json")


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def sample_config_data():
    """Sample `[metrics]` configuration for testing."""
    return {
        "general": {
            "log_level": "DEBUG",
            "output_filename": "time.output",
        },
        "storage": {
            "format": "json",
            "compression": "snappy",
            "data_dir": "data",
        },
    }


@pytest.fixture
def config_file(temp_dir, sample_config_data):
    """Write a config.toml into the temporary directory and select it."""
    import toml

    from scrapermetrics.config import set_config_path

    path = temp_dir / "config.toml"
    with open(path, "w") as f:
        toml.dump({"metrics": sample_config_data}, f)
    set_config_path(path)
    return path


@pytest.fixture(autouse=True)
def clear_config_after_test():
    """Automatically reset the configuration singleton after each test."""
    default_config_path = Path(__file__).parent.parent / "conf" / "config.toml"

    yield

    from scrapermetrics.config import clear_config_cache, set_config_path

    clear_config_cache()
    set_config_path(default_config_path)
