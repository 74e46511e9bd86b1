#!/usr/bin/env python3
"""Create every portfolio table against the configured database (idempotent)."""
from __future__ import annotations

import argparse
import sys

from portfolio.core.database import create_db_engine, get_engine, init_db
from portfolio.core.logging_config import LoggingConfig

logger = LoggingConfig.get_logger(__name__)


def build_parser():
    p = argparse.ArgumentParser(prog="init_db", description=__doc__)
    p.add_argument(
        "--database-url",
        help="SQLAlchemy URL; defaults to the configured DATABASE_URL / postgres_* settings",
    )
    return p


def main(argv=None):
    args = build_parser().parse_args(argv)
    engine = create_db_engine(args.database_url) if args.database_url else get_engine()
    try:
        init_db(engine)
    except Exception as exc:
        logger.error(f"Schema creation failed: {exc}")
        print("Schema creation failed:", exc, file=sys.stderr)
        raise
    print(f"Tables created on {engine.url.render_as_string(hide_password=True)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
