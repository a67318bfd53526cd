"""
Pytest configuration and shared fixtures for the dumpstats test suite.

This module provides common fixtures, a heap dump byte builder, and marker
registration for all test modules.
"""

import shutil
import struct
import sys
import tempfile
from pathlib import Path
from typing import Callable

import pytest

# Add src to Python path for testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


# ============================================================================
# Test Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
    config.addinivalue_line("markers", "slow: mark test as slow running")


# ============================================================================
# Core Fixtures
# ============================================================================


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path, ignore_errors=True)


# ============================================================================
# Heap Dump Builder
# ============================================================================


class DumpBuilder:
    """
    Fluent builder for heap dump byte streams.

    Example:
        DumpBuilder().root(5).size(2).push(5).pop().push(5).build()
    """

    def __init__(self):
        self._parts = []

    def root(self, object_id: int) -> "DumpBuilder":
        self._parts.append(struct.pack(">bi", 0, object_id))
        return self

    def size(self, words: int) -> "DumpBuilder":
        self._parts.append(struct.pack(">bi", 1, words))
        return self

    def class_name(self, name: str) -> "DumpBuilder":
        encoded = name.encode("utf-8")
        self._parts.append(struct.pack(">bi", 2, len(encoded)) + encoded)
        return self

    def push(self, object_id: int) -> "DumpBuilder":
        self._parts.append(struct.pack(">bi", 3, object_id))
        return self

    def pop(self) -> "DumpBuilder":
        self._parts.append(b"\x04")
        return self

    def raw(self, data: bytes) -> "DumpBuilder":
        self._parts.append(data)
        return self

    def build(self) -> bytes:
        return b"".join(self._parts)


@pytest.fixture
def dump_builder() -> Callable[[], DumpBuilder]:
    """Provide a factory for fresh DumpBuilder instances."""
    return DumpBuilder


@pytest.fixture
def write_dump(tmp_path: Path) -> Callable[[bytes], Path]:
    """Return a function that writes bytes to a dump file under tmp_path."""

    def _write(data: bytes, name: str = "heap.dump") -> Path:
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _write


@pytest.fixture
def sample_dump_bytes() -> bytes:
    """
    A small dump with three classes:

    - class 10 "java/lang/String": 3 instances of 4 words
    - class 20 "java/lang/Object": 1 instance of 2 words
    - class 30 (unnamed): 2 instances of 5 words, one revisit suppressed
    """
    return (
        DumpBuilder()
        .root(10)
        .class_name("java/lang/String")
        .size(4)
        .push(10)
        .push(10)
        .push(10)
        .root(20)
        .class_name("java/lang/Object")
        .size(2)
        .push(20)
        .size(5)
        .push(30)
        .push(30)
        .pop()
        .push(30)
        .build()
    )
