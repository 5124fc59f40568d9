"""Deployment preflight checks for ChemLedger.

Usage:
    python scripts/db_preflight.py

Checks database, secret and alerting settings before deployment.
Exits non-zero when any required control fails.
"""

from __future__ import annotations

import os
import sys
from typing import Mapping, Optional


DEFAULT_SECRET = "chemledger-super-secret-key-change-in-production"
DEFAULT_ADMIN_SECRET = "chemledger-admin-registration-secret"
ALERT_ORDERS = {"severity", "severity_date"}


def _bool_env(env: Mapping[str, str], name: str, default: bool) -> bool:
    value = env.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "y", "on"}


def _int_env(env: Mapping[str, str], name: str, default: int) -> Optional[int]:
    try:
        return int(env.get(name, default))
    except (TypeError, ValueError):
        return None


def collect_checks(env: Mapping[str, str]) -> list[tuple[str, bool, str]]:
    environment = env.get("ENVIRONMENT", "development").strip().lower()
    database_url = env.get("DATABASE_URL", "sqlite:///./chemledger.db")
    secret_key = env.get("SECRET_KEY", DEFAULT_SECRET)
    admin_secret = env.get("ADMIN_REGISTRATION_SECRET", DEFAULT_ADMIN_SECRET)
    auto_create_tables = _bool_env(env, "AUTO_CREATE_TABLES", True)
    alert_order = env.get("DASHBOARD_ALERT_ORDER", "severity")
    window = _int_env(env, "CERTIFICATION_EXPIRY_WINDOW_DAYS", 30)
    critical = _int_env(env, "CERTIFICATION_CRITICAL_DAYS", 7)

    checks: list[tuple[str, bool, str]] = [
        (
            "ENVIRONMENT is explicitly set",
            bool(environment),
            f"ENVIRONMENT={environment or '<empty>'}",
        ),
        (
            "DASHBOARD_ALERT_ORDER is supported",
            alert_order in ALERT_ORDERS,
            f"DASHBOARD_ALERT_ORDER={alert_order}",
        ),
        (
            "Certification critical band fits the expiry window",
            window is not None and critical is not None and 0 <= critical <= window,
            f"CERTIFICATION_CRITICAL_DAYS={critical}, CERTIFICATION_EXPIRY_WINDOW_DAYS={window}",
        ),
    ]

    if environment in {"production", "prod"}:
        checks.extend(
            [
                (
                    "DATABASE_URL is not SQLite",
                    "sqlite" not in database_url.lower(),
                    f"DATABASE_URL={database_url}",
                ),
                (
                    "SECRET_KEY is not the default value",
                    secret_key != DEFAULT_SECRET,
                    "SECRET_KEY is custom" if secret_key != DEFAULT_SECRET else "SECRET_KEY is default",
                ),
                (
                    "ADMIN_REGISTRATION_SECRET is not the default value",
                    admin_secret != DEFAULT_ADMIN_SECRET,
                    "admin secret is custom" if admin_secret != DEFAULT_ADMIN_SECRET else "admin secret is default",
                ),
                (
                    "AUTO_CREATE_TABLES is disabled",
                    not auto_create_tables,
                    f"AUTO_CREATE_TABLES={auto_create_tables}",
                ),
            ]
        )
    return checks


def run(env: Optional[Mapping[str, str]] = None) -> int:
    env = os.environ if env is None else env
    checks = collect_checks(env)

    has_failures = False
    print("ChemLedger Preflight")
    print(f"- environment: {env.get('ENVIRONMENT', 'development')}")
    for title, ok, detail in checks:
        marker = "PASS" if ok else "FAIL"
        print(f"[{marker}] {title} ({detail})")
        if not ok:
            has_failures = True

    if has_failures:
        print("\nPreflight failed. Resolve failed checks before deployment.")
        return 1

    print("\nPreflight passed.")
    return 0


if __name__ == "__main__":
    sys.exit(run())
