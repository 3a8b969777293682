"""
Utility functions shared by the database layer and the exercise script
"""

import os
import sys
import logging
from datetime import datetime
from typing import Any, Dict, Optional

from config import LOG_DIR, LOG_TO_FILE


# ============== LOGGING SETUP ==============

def setup_logging(level: str = "INFO", log_dir: Optional[str] = None,
                  to_file: bool = LOG_TO_FILE) -> None:
    """Setup logging configuration"""
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(log_format, date_format)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))

    if to_file:
        directory = ensure_directory(log_dir or LOG_DIR)
        file_handler = logging.FileHandler(
            os.path.join(directory, f"people_{datetime.now().strftime('%Y%m%d')}.log"),
            encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Set specific log levels for noisy libraries
    logging.getLogger("pymongo").setLevel(logging.WARNING)
    logging.getLogger("motor").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)


# ============== FILE HELPERS ==============

def ensure_directory(path: str) -> str:
    """Create directory if it doesn't exist"""
    os.makedirs(path, exist_ok=True)
    return path


# ============== TEXT HELPERS ==============

def truncate_text(text: str, max_length: int = 40) -> str:
    """Truncate text with ellipsis"""
    if not text:
        return ""
    if len(text) <= max_length:
        return text
    return text[:max_length - 3] + "..."


def describe_person(document: Optional[Dict[str, Any]]) -> str:
    """Short one-line description of a person document for log lines"""
    if not document:
        return "<none>"

    parts = [f"{document.get('name', '?')} ({document.get('_id', 'unsaved')})"]
    if document.get("age") is not None:
        parts.append(f"age={document['age']}")
    foods = document.get("favoriteFoods")
    if foods:
        parts.append(truncate_text("foods=" + ",".join(foods)))
    return " ".join(parts)
