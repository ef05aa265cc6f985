"""Command-line entry point: print one month's attendance report.

Usage:
    attendance-report --month 2024-02
    attendance-report --month 2024-02 --user-id EMP001 --days
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv
from mysql.connector import Error as MySQLError

from config import get_settings_module

from .common.datetime_utils import now_local
from .container import build_container
from .core.constants import DEFAULT_REPORT_MAX_WORKERS
from .core.exceptions import DomainError
from .database.bootstrap import apply_schema, list_tables
from .payroll.service import MonthlyReport, day_row

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def parse_month(value: str) -> tuple[int, int]:
    try:
        year, month = (int(part) for part in value.split("-"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM, got {value!r}")
    return year, month


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="attendance-report", description=__doc__.splitlines()[0])
    parser.add_argument("--month", type=parse_month, help="Target month as YYYY-MM (default: current month)")
    parser.add_argument("--user-id", help="Only report this employee")
    parser.add_argument("--workers", type=int, help="Employees processed in parallel")
    parser.add_argument("--days", action="store_true", help="Also print the daily grid")
    parser.add_argument("--init-db", action="store_true", help="Apply database/schema.sql before reporting")
    return parser


def render_report(report: MonthlyReport, *, with_days: bool = False) -> str:
    lines = [f"Monthly Status Report {report.year:04d}-{report.month:02d}"]
    for row, summary in zip(report.summary, report.summaries):
        lines.append("")
        lines.append(f"Employee: {row['user_id']} - {row['full_name']}")
        lines.append(
            f"  Gross {row['total_gross_hours']} h, Net {row['total_net_hours']} h, "
            f"Break {row['total_break_hours']} h, OT {row['total_ot_hours']} h"
        )
        lines.append(
            f"  Present {row['present']}, Half Days {row['half_days']}, Absent {row['absent']}, "
            f"WeeklyOff {row['week_offs']}, Holidays {row['holidays']}, F/H {row['floating_holidays']}, "
            f"LOP {row['loss_of_pay']}, HP {row['holiday_presents']}, WOP {row['weekend_presents']}, "
            f"Total Payable Days {row['total_payable_days']}"
        )
        lines.append(f"  Average Working Hrs {row['average_working_hours']}, Shift Count {row['shift_counts'] or '-'}")
        if with_days:
            lines.append("  Day Status In    Out   Net   OT    Shift")
            for day in map(day_row, summary.days):
                lines.append(
                    f"  {day['date']:>3} {day['status']:<6} {day['in_time']:<5} {day['out_time']:<5} "
                    f"{day['net_worked_hours']:<5} {day['ot']:<5} {day['shift']}"
                )
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv(override=False)
    args = build_parser().parse_args(argv)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    db_config = dict(settings.DB_CONFIG)
    logger.debug("settings=%s db=%s@%s/%s", settings_module, db_config.get("user"), db_config.get("host"), db_config.get("database"))

    if args.month:
        year, month = args.month
    else:
        today = now_local().date()
        year, month = today.year, today.month

    try:
        if args.init_db:
            apply_schema(db_config, schema_path=SCHEMA_PATH)
            logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))

        container = build_container(
            db_config=db_config,
            max_workers=args.workers or getattr(settings, "REPORT_MAX_WORKERS", DEFAULT_REPORT_MAX_WORKERS),
            timezone=getattr(settings, "LOCAL_TIMEZONE", ""),
        )
        report = container.report_service.build_monthly_report(year=year, month=month, user_id=args.user_id)
    except DomainError as exc:
        logger.error("%s", exc)
        return 2
    except MySQLError as exc:
        logger.error("Database error: %s", exc)
        return 1

    print(render_report(report, with_days=args.days))
    return 0


if __name__ == "__main__":
    sys.exit(main())
