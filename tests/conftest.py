"""
Pytest configuration for the service sort benchmark.

Provides fixtures for:
- Sample service records and randomized datasets
- Writing dataset files into a temporary directory
- Settings isolation between tests
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable, List

import pytest

from sortbench.config import get_settings
from sortbench.domain.models import Service
from tests.helpers import DATASET_HEADER, DATASET_PATTERN, make_random_services


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch):
    """
    Clear the cached settings so environment overrides in one test never leak
    into another.
    """
    for var in ("DATASET_SIZES", "DATASETS_DIR", "RESULTS_DIR", "LOG_LEVEL", "LOG_JSON"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def restore_root_logging():
    """
    Undo `configure_logging` calls made by a test; its handlers are bound to
    streams that pytest closes after the test.
    """
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers and type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def scenario_services() -> List[Service]:
    return [
        Service(name="B", cost=10.0, duration=5, prepayment=2.0),
        Service(name="A", cost=10.0, duration=5, prepayment=2.0),
        Service(name="C", cost=5.0, duration=1, prepayment=1.0),
    ]


@pytest.fixture
def random_services() -> List[Service]:
    return make_random_services(200)


@pytest.fixture
def write_dataset(tmp_path: Path) -> Callable[..., Path]:
    """
    Write a dataset file for a nominal size into `tmp_path / "datasets"`.

    `lines` are raw data lines; the header is written unless `header=False`.
    """
    datasets_dir = tmp_path / "datasets"
    datasets_dir.mkdir(exist_ok=True)

    def _write(size: int, lines: Iterable[str], header: bool = True) -> Path:
        path = datasets_dir / DATASET_PATTERN.format(size=size)
        content = [DATASET_HEADER] if header else []
        content.extend(lines)
        path.write_text("\n".join(content) + ("\n" if content else ""), encoding="utf-8")
        return path

    return _write
