"""Pytest configuration and shared fixtures for the mdoverlay test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import logging
import os
from pathlib import Path
from typing import Generator

import pytest
from utils import cleanup_test_dir, create_test_temp_dir

from mdoverlay.buffer import TextBuffer
from mdoverlay.options import RenderOptions

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    # Register custom Hypothesis profiles
    settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=20)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

    # Load profile from environment or use default
    settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Generator[None, None, None]:
    """Undo root logger changes made by configure_logging in CLI tests."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    try:
        yield
    finally:
        for handler in root_logger.handlers:
            if handler not in handlers:
                handler.close()
        root_logger.handlers[:] = handlers
        root_logger.setLevel(level)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for test files.

    Yields
    ------
    Path
        Temporary directory path that will be cleaned up after test.

    """
    temp_path = create_test_temp_dir()
    try:
        yield temp_path
    finally:
        cleanup_test_dir(temp_path)


@pytest.fixture
def default_options() -> RenderOptions:
    """Provide the default render configuration."""
    return RenderOptions()


@pytest.fixture
def sample_markdown() -> str:
    """Provide a markdown document exercising every decorated construct.

    Returns
    -------
    str
        Standard sample document used across multiple tests.

    """
    return """# Sample Document

Intro paragraph.

## Tasks

- [ ] Write the parser
- [x] Write the renderer
- Nested:
  - inner item

---

```python
print("hello")
```

> [!NOTE]
> Callouts are quotes.

| Name  | Value   |
|-------|---------|
| alpha | charlie |
"""


@pytest.fixture
def sample_buffer(sample_markdown: str) -> TextBuffer:
    """Provide a text buffer over the sample document."""
    return TextBuffer(sample_markdown, width=40)
