"""
Error reports for failed fetch runs.

Failures an operator has to inspect after the scheduler has moved on are
written as plain-text reports, one file per incident, named after the
pipeline stage that failed.
"""

import os
from datetime import datetime
from typing import Any

DEFAULT_REPORT_DIR = os.path.join(os.path.dirname(__file__), "logs")
REPORT_DIR_ENV = "NOTIFICATION_ERROR_LOG_DIR"


def log_pipeline_error(
    error_type: str, error_message: str, context: dict[str, Any] | None = None
) -> str:
    """
    Write one incident report for a pipeline stage.

    Args:
        error_type: Stage that failed: 'fetch' (one provider), 'dispatch'
            (email batch) or 'run' (whole run)
        error_message: What went wrong
        context: Run details worth keeping, e.g. run_id, provider, failed
            recipients

    Returns:
        Path of the report
    """
    report_dir = os.getenv(REPORT_DIR_ENV) or DEFAULT_REPORT_DIR
    os.makedirs(report_dir, exist_ok=True)

    reported_at = datetime.now()
    # Microseconds: several providers can fail within the same second
    path = os.path.join(
        report_dir, f"{error_type}_error_{reported_at.strftime('%Y%m%d_%H%M%S_%f')}.txt"
    )

    lines = [
        f"News Fetch Incident - {reported_at.isoformat(timespec='seconds')}",
        "=" * 60,
        "",
        f"Stage: {error_type}",
        f"Error Message: {error_message}",
    ]
    if context:
        lines += ["", "Run details:", "-" * 60]
        lines += [f"{key}: {value}" for key, value in context.items()]

    with open(path, "w", encoding="utf-8") as f:
        f.write("\n".join(lines) + "\n")

    return path
