"""
Logging configuration for VarModel.

Provides centralized logging that outputs to files in a 'logs' subdirectory
next to the masters or designspace file being processed. Log filename format:
varmodel_{input_name}_{timestamp}.log

Until setup_logger() is called every message is dropped, so the core can log
freely when it is used as a library. Old log files with the 'varmodel_' prefix
are pruned after each setup.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional


class VarModelLogger:
    """Centralized logger for VarModel operations."""

    _logger: Optional[logging.Logger] = None
    _current_log_file: Optional[Path] = None

    @classmethod
    def _cleanup_old_logs(cls, logs_dir: Path, keep_count: int = 5) -> None:
        """
        Remove old log files, keeping only the most recent ones.

        Args:
            logs_dir: Directory containing log files
            keep_count: Number of most recent log files to keep (default: 5)
        """
        log_files = sorted(
            logs_dir.glob("varmodel_*.log"),
            key=lambda p: p.stat().st_mtime,
            reverse=True
        )

        for old_log in log_files[keep_count:]:
            try:
                old_log.unlink()
            except OSError as e:
                cls.debug(f"Could not remove old log {old_log}: {e}")

    @classmethod
    def setup_logger(
        cls, file_path: str, log_level: int = logging.INFO, keep_count: int = 5
    ) -> logging.Logger:
        """
        Setup logger for one processing run.

        Args:
            file_path: Path to the input file (masters document or designspace)
            log_level: Logging level (default: INFO)
            keep_count: Number of log files to keep in the logs directory

        Returns:
            Configured logger instance
        """
        input_path = Path(file_path)
        base_name = input_path.stem
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")[:17]

        logs_dir = input_path.parent / "logs"
        logs_dir.mkdir(exist_ok=True)

        log_path = logs_dir / f"varmodel_{base_name}_{timestamp}.log"

        if cls._logger:
            for handler in cls._logger.handlers[:]:
                cls._logger.removeHandler(handler)
                handler.close()

        cls._logger = logging.getLogger('varmodel')
        cls._logger.setLevel(log_level)

        file_handler = logging.FileHandler(log_path, mode='w', encoding='utf-8')
        file_handler.setLevel(log_level)

        # Console only gets the important messages, debug traces stay in the file
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.INFO)

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        file_handler.setFormatter(formatter)
        console_handler.setFormatter(formatter)

        cls._logger.addHandler(file_handler)
        cls._logger.addHandler(console_handler)

        cls._current_log_file = log_path

        cls._logger.info(f"VarModel logging started for file: {file_path}")
        cls._logger.info(f"Log file: {log_path}")

        # Done after creating the new log so it's included in the count
        cls._cleanup_old_logs(logs_dir, keep_count=keep_count)

        return cls._logger

    @classmethod
    def get_logger(cls) -> Optional[logging.Logger]:
        """Get the current logger instance."""
        return cls._logger

    @classmethod
    def get_log_file_path(cls) -> Optional[Path]:
        """Get the current log file path."""
        return cls._current_log_file

    @classmethod
    def is_enabled_for(cls, level: int) -> bool:
        """Whether a message at level would be emitted."""
        return cls._logger is not None and cls._logger.isEnabledFor(level)

    @classmethod
    def info(cls, message: str) -> None:
        """Log info message."""
        if cls._logger:
            cls._logger.info(message)

    @classmethod
    def warning(cls, message: str) -> None:
        """Log warning message."""
        if cls._logger:
            cls._logger.warning(message)

    @classmethod
    def error(cls, message: str) -> None:
        """Log error message."""
        if cls._logger:
            cls._logger.error(message)

    @classmethod
    def debug(cls, message: str) -> None:
        """Log debug message."""
        if cls._logger:
            cls._logger.debug(message)

    @classmethod
    def success(cls, message: str) -> None:
        """Log success message (using info level)."""
        if cls._logger:
            cls._logger.info(f"✅ {message}")

    @classmethod
    def cleanup(cls) -> None:
        """Clean up logger resources."""
        if cls._logger:
            for handler in cls._logger.handlers[:]:
                cls._logger.removeHandler(handler)
                handler.close()
            cls._logger = None
            cls._current_log_file = None
