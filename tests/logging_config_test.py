import copy
import logging
import logging.config
import os

import pytest

from src.fleet_readiness import logging_config
from src.fleet_readiness.logging_config import LOGGING_CONFIG, setup_logging


@pytest.fixture
def log_dir(tmp_path, monkeypatch):
    """Point the file handlers at a temporary directory."""
    config = copy.deepcopy(LOGGING_CONFIG)
    for handler in config["handlers"].values():
        if "filename" in handler:
            handler["filename"] = str(tmp_path / os.path.basename(handler["filename"]))
    monkeypatch.setattr(logging_config, "LOGGING_CONFIG", config)
    try:
        yield tmp_path
    finally:
        logging.config.dictConfig(LOGGING_CONFIG)


def _count(path, marker):
    if not path.exists():
        return 0
    return path.read_text().count(marker)


def test_package_record_written_once(log_dir):
    setup_logging()
    logger = logging.getLogger("src.fleet_readiness.expansion_readiness.services")

    logger.info("utilization-marker")

    assert _count(log_dir / "app.log", "utilization-marker") == 1
    assert _count(log_dir / "error.log", "utilization-marker") == 0


def test_package_debug_reaches_app_log(log_dir):
    setup_logging()
    logger = logging.getLogger("src.fleet_readiness.expansion_readiness.revenue_days")

    logger.debug("skipped-load-marker")

    assert _count(log_dir / "app.log", "skipped-load-marker") == 1


def test_package_error_written_to_both_files_once(log_dir):
    setup_logging()
    logger = logging.getLogger("src.fleet_readiness.database.database")

    logger.error("connection-marker")

    assert _count(log_dir / "app.log", "connection-marker") == 1
    assert _count(log_dir / "error.log", "connection-marker") == 1


def test_no_unused_named_loggers():
    assert set(LOGGING_CONFIG["loggers"]) == {
        "fastapi",
        "uvicorn",
        "src.fleet_readiness",
    }


@pytest.mark.parametrize("name", ["uvicorn", "fastapi"])
def test_server_record_written_once(log_dir, name):
    setup_logging()

    logging.getLogger(name).info(f"{name}-marker")

    assert _count(log_dir / "app.log", f"{name}-marker") == 1
