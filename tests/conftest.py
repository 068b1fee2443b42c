from __future__ import annotations

import logging

import pytest

from csvsplit.config import get_settings

SAMPLE_CSV = """name,age,city
John,25,New York
Jane,30,Los Angeles
Bob,35,Chicago
Alice,28,Miami
Tom,32,Seattle
Sarah,27,Boston
Mike,29,Denver
Lisa,31,Phoenix"""


@pytest.fixture
def sample_csv() -> str:
    return SAMPLE_CSV


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    for name in (
        "CSVSPLIT_MAX_LINES_PER_FILE",
        "CSVSPLIT_INCLUDE_HEADER",
        "CSVSPLIT_OUTPUT_ROOT",
        "CSVSPLIT_FILE_PREFIX",
        "CSVSPLIT_VALIDATE_PREVIEW_ROWS",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("CSVSPLIT_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    logger = logging.getLogger("csvsplit")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
