"""
loadtable/io/workbook.py
========================
Reads the faculty-workload sheet. Only the first sheet is used and the
banner rows above the real header are skipped.
"""

import logging
import os

import pandas as pd

from loadtable.config.time_config import get_active_config
from loadtable.scheduler.workload import normalize_rows

logger = logging.getLogger(__name__)

EXCEL_EXTENSIONS = (".xlsx", ".xlsm", ".xls")


def read_workload(path, skip_rows=None, config=None):
    config = config or get_active_config()
    if skip_rows is None:
        skip_rows = config.get("header_rows", 5)

    path = str(path)
    if not os.path.exists(path):
        raise FileNotFoundError(path)

    ext = os.path.splitext(path)[1].lower()
    if ext in EXCEL_EXTENSIONS:
        df = pd.read_excel(path, sheet_name=0, skiprows=skip_rows)
    elif ext == ".csv":
        df = pd.read_csv(path, skiprows=skip_rows)
    else:
        raise ValueError(f"unsupported workload file type: {ext or path}")

    df.columns = [str(c).strip() for c in df.columns]
    logger.info("read %d rows from %s", len(df), os.path.basename(path))
    return df


def load_subjects(path, skip_rows=None, config=None):
    return normalize_rows(read_workload(path, skip_rows=skip_rows, config=config), config=config)
