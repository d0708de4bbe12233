"""
Storage utility.

File I/O helpers for persisting D&R reports and keyword tables.
"""

import json
import os
import logging
import time
from typing import Optional

import pandas as pd

from src.models.report import Report

logger = logging.getLogger(__name__)


class ReportStorage:
    """
    Manages file I/O for report persistence.

    Handles:
    - JSON reports (<results_dir>/dr_result_<epoch-millis>.json)
    - Keyword tables (<results_dir>/dr_result_<epoch-millis>_keywords.csv)
    """

    def __init__(self, results_dir: str):
        """
        Initialize storage.

        Args:
            results_dir: Collector directory for reports (created if absent)
        """
        self.results_dir = os.path.abspath(results_dir)
        os.makedirs(self.results_dir, exist_ok=True)

        logger.debug(f"Initialized ReportStorage with results_dir={self.results_dir}")

    def report_path(self, millis: Optional[int] = None) -> str:
        """Path for a report named by a millisecond timestamp."""
        if millis is None:
            millis = time.time_ns() // 1_000_000
        return os.path.join(self.results_dir, f"dr_result_{millis}.json")

    def save_report(self, report: Report, path: Optional[str] = None) -> str:
        """
        Write report JSON atomically.

        Args:
            report: Assembled report
            path: Target path, defaults to a fresh timestamped name

        Returns:
            Path of the written file
        """
        path = path or self.report_path()
        temp_path = f"{path}.tmp"

        try:
            with open(temp_path, 'w', encoding='utf-8') as f:
                json.dump(report.to_dict(), f, indent=2, ensure_ascii=False)
            os.replace(temp_path, path)
            logger.info(f"Saved report to {path}")
        except Exception as e:
            logger.error(f"Failed to save report to {path}: {e}")
            if os.path.exists(temp_path):
                os.remove(temp_path)
            raise

        return path

    def save_keyword_table(self, table: pd.DataFrame, report_path: str) -> str:
        """
        Write a keyword table next to its report.

        Args:
            table: DataFrame from KeywordTableBuilder
            report_path: Path returned by save_report()

        Returns:
            Path of the written CSV
        """
        csv_path = os.path.splitext(report_path)[0] + "_keywords.csv"

        try:
            table.to_csv(csv_path, index=False)
            logger.info(f"Saved keyword table ({len(table)} rows) to {csv_path}")
        except Exception as e:
            logger.error(f"Failed to save keyword table to {csv_path}: {e}")
            if os.path.exists(csv_path):
                os.remove(csv_path)
            raise

        return csv_path

    def discard_report(self, report_path: str) -> None:
        """Remove a report whose run did not complete."""
        if os.path.exists(report_path):
            os.remove(report_path)
            logger.warning(f"Removed incomplete report {report_path}")


# Design Rationale and Trade-offs:
#
# 1. Why write to a temp file and rename?
#    - A crash mid-write never leaves a truncated report behind
#    - os.replace is atomic on the same filesystem
#    - Trade-off: Brief extra .tmp file during the write
#
# 2. Why millisecond file names instead of ISO timestamps?
#    - Sort in creation order with plain `ls`
#    - No characters that need escaping on any filesystem
#    - Trade-off: Two runs in the same millisecond collide, acceptable for a CLI
