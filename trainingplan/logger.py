"""
Logging for the training plan codec.
Every module gets its logger from setup_logger so output shares one format.
"""

import logging
import sys
from pathlib import Path
from .config import LOG_LEVEL, LOG_FORMAT, LOG_TO_FILE

# Only used when LOG_TO_FILE is enabled
LOG_DIR = Path(__file__).parent.parent / "logs"
LOG_FILE = LOG_DIR / "trainingplan.log"


def setup_logger(name: str) -> logging.Logger:
    """
    Create the logger for a parsing or writing module.
    
    Console output starts at INFO. With LOG_TO_FILE set, DEBUG detail such
    as header repairs and dropped blank rows also goes to logs/trainingplan.log.
    
    Args:
        name: Module name (typically __name__)
        
    Returns:
        Logger with the project format applied
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, LOG_LEVEL))
    
    # Reimporting a module must not stack handlers
    logger.handlers.clear()
    formatter = logging.Formatter(LOG_FORMAT)
    
    if LOG_TO_FILE:
        LOG_DIR.mkdir(exist_ok=True)
        file_handler = logging.FileHandler(LOG_FILE)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
    
    return logger


def log_week_stats(weeks, logger: logging.Logger, name: str = "Training plan"):
    """Log how many weeks a plan holds and the countdown they span."""
    if not weeks:
        # A header without data rows is a valid, empty plan
        logger.info(f"{name}: 0 weeks")
        return
    
    easy_total = sum(week.weekly_easy_mileage for week in weeks)
    logger.info(
        f"{name}: {len(weeks)} weeks, "
        f"{weeks[0].weeks_until_race} to {weeks[-1].weeks_until_race} weeks until race, "
        f"{easy_total:g}k easy planned"
    )
