import logging
from pathlib import Path

import pytest

from calc import Calculator
from calc.logs import setup_logging
from tests.infrastructure import write_holder_module


@pytest.fixture
def calc() -> Calculator:
    return Calculator()


@pytest.fixture
def holder_proj(tmp_path: Path, monkeypatch) -> Path:
    """Проект с модулем fake_holders, импортируемым в текущем процессе."""
    write_holder_module(tmp_path)
    monkeypatch.syspath_prepend(str(tmp_path))
    return tmp_path


@pytest.fixture(autouse=True)
def _isolate_calc_logger(monkeypatch):
    # setup_logging меняет общий логгер "calc": возвращаем уровень и хендлеры
    log = logging.getLogger("calc")
    level, handlers = log.level, list(log.handlers)
    monkeypatch.delattr(setup_logging, "_inited", raising=False)
    monkeypatch.delenv("CALC_DEBUG", raising=False)
    yield
    log.handlers[:] = handlers
    log.setLevel(level)
