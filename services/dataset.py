# WORKFLOW: Holder for the current packing list snapshot.
# Used by: API routers (analyze, records, dashboard, stats)
# Functions:
# 1. analyze() - Parse raw text and replace the snapshot on success
# 2. load_sample() - Analyze the built-in sample CSV
# 3. snapshot() - Current immutable record tuple
#
# Lifecycle: Raw text -> Parser -> New snapshot replaces the old one in full
# A failed parse leaves the previous snapshot and raw text untouched.

"""
Holder for the current packing list snapshot.
"""

import logging
import threading
from typing import Optional, Tuple

from core.config import settings
from core.sample_data import SAMPLE_CSV
from etl.packing_list_parser import parse_table
from etl.records import PackingListItem

logger = logging.getLogger(__name__)


class PackingListDataset:
    """Owns the current record snapshot and the text it was parsed from."""

    def __init__(self, delimiter: Optional[str] = None, quoted: Optional[bool] = None):
        self.delimiter = delimiter if delimiter is not None else settings.csv_delimiter
        self.quoted = quoted if quoted is not None else settings.csv_quoted_fields
        self._lock = threading.Lock()
        self._records: Tuple[PackingListItem, ...] = ()
        self._headers: Tuple[str, ...] = ()
        self._raw_text = ""
        self._version = 0

    @property
    def raw_text(self) -> str:
        return self._raw_text

    @property
    def version(self) -> int:
        return self._version

    @property
    def headers(self) -> Tuple[str, ...]:
        return self._headers

    def snapshot(self) -> Tuple[PackingListItem, ...]:
        return self._records

    def state(self) -> Tuple[int, Tuple[PackingListItem, ...]]:
        """Version and records read together."""
        with self._lock:
            return self._version, self._records

    def analyze(self, raw_text: str) -> Tuple[PackingListItem, ...]:
        """
        Parse ``raw_text`` and make it the current snapshot.

        Args:
            raw_text: Delimited packing list text

        Returns:
            The new record snapshot

        Raises:
            ParseError: If the text cannot be parsed; the previous snapshot is kept
        """
        try:
            headers, records = parse_table(raw_text, self.delimiter, self.quoted)
        except Exception as e:
            logger.error(f"Packing list parse failed, keeping version {self._version}: {e}")
            raise

        snapshot = tuple(records)
        with self._lock:
            self._records = snapshot
            self._headers = tuple(headers)
            self._raw_text = raw_text
            self._version += 1
            version = self._version

        logger.info(f"Packing list dataset replaced: version {version}, {len(records)} records")
        return snapshot

    def load_sample(self) -> Tuple[PackingListItem, ...]:
        return self.analyze(SAMPLE_CSV)


packing_list_dataset = PackingListDataset()
