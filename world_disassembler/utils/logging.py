"""Logging configuration for the world disassembler."""
import logging
import sys
from pathlib import Path
from datetime import datetime


def setup_logging(log_dir: str, log_level: int = logging.INFO) -> Path:
    """Route disassembler logs to a timestamped file in log_dir and to stderr.

    Returns:
        Path of the log file that was opened
    """
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    file_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    console_formatter = logging.Formatter(
        '%(levelname)s: %(message)s'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Drop handlers left over from a previous setup
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    log_file = log_path / f'world_disassembler_{timestamp}.log'
    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setFormatter(file_formatter)
    file_handler.setLevel(log_level)
    root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(console_formatter)
    console_handler.setLevel(log_level)
    root_logger.addHandler(console_handler)

    root_logger.info(f"Logging initialized at {logging.getLevelName(log_level)}")
    root_logger.info(f"Log file: {log_file}")
    return log_file
