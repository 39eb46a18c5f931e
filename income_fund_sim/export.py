"""CSV export of the monthly ledger."""

from pathlib import Path
from typing import Iterable

import pandas as pd

from income_fund_sim.simulation import REPORT_FIELDS, MonthlyReport

DEFAULT_OUTPUT_PATH = Path("reports/output.csv")

CSV_COLUMNS = [column for column, _ in REPORT_FIELDS]


class ExportError(Exception):
    """Writing the output artifact failed."""


def reports_frame(reports: Iterable[MonthlyReport]) -> pd.DataFrame:
    """Ledger as a DataFrame of formatted rows (monetary columns as strings)."""
    return pd.DataFrame([r.formatted() for r in reports], columns=CSV_COLUMNS)


def render_csv(reports: Iterable[MonthlyReport]) -> str:
    return reports_frame(reports).to_csv(index=False, lineterminator="\n")


def write_csv(reports: Iterable[MonthlyReport], path: Path = DEFAULT_OUTPUT_PATH) -> Path:
    """Write the ledger to path (parent directories are created).

    Raises ExportError on any filesystem failure.
    """
    text = render_csv(reports)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise ExportError(f"failed to write {path}: {e}") from e
    return path
