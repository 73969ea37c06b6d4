# report.py
from pathlib import Path

import yaml

from .constants import logger
from .models import VerificationResult
from .screenshots import ensure_dir


def write_report(result: VerificationResult, path: str) -> str:
    report_path = Path(path)
    ensure_dir(report_path.parent)
    report_path.write_text(
        yaml.safe_dump(result.to_dict(), allow_unicode=True, default_flow_style=False, sort_keys=False),
        encoding='utf-8',
    )
    logger.info(f"📝 Report saved: {report_path}")
    return str(report_path)
