"""CLI adapter exporting the financial report as a JSON file."""

from datetime import datetime
import json
from pathlib import Path

from src.application.use_cases.get_financial_report import (
    GetFinancialReportUseCase,
)
from src.infrastructure.container import build_record_store
from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root


def export_path(now: datetime, directory: Path | None = None) -> Path:
    """Return the report file path for the given timestamp."""
    base = directory or get_project_root() / "reports"
    return base / f"relatorio-financeiro-{now:%Y-%m-%d}.json"


def main() -> None:
    """Write the report export to the reports directory."""
    logger = get_app_logger()
    store = build_record_store()
    now = datetime.now()

    payload = GetFinancialReportUseCase(store, logger=logger).export(now=now)

    path = export_path(now)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2),
        encoding="utf-8",
    )
    logger.info(f"Report exported to {path}")
    print(f"Relatório exportado para {path}")


if __name__ == "__main__":  # pragma: no cover
    main()
