import sys

from loguru import logger

from coin_charts.logging_setup import configure_logging


def test_file_sink_created_in_log_dir(tmp_path):
    log_dir = tmp_path / "logs"
    try:
        configure_logging("WARNING", str(log_dir))
        logger.debug("written to file only")
        files = list(log_dir.glob("coin_charts_*.log"))
    finally:
        logger.remove()
        logger.add(sys.stderr, level="DEBUG")

    assert len(files) == 1
    assert "written to file only" in files[0].read_text()
