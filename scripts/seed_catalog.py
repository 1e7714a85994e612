"""
Seed the catalog tables (`meals`, `meal_categories`, `meal_plans`).

Usage
-----

    # built-in seed catalog for all three kinds
    python -m scripts.seed_catalog

    # one kind from a CSV / JSON file (columns = table columns)
    python -m scripts.seed_catalog --kind meal --file path/to/meals.csv
"""
from __future__ import annotations

import argparse
import asyncio
from pathlib import Path
from typing import Any, Dict, List

from dotenv import load_dotenv
load_dotenv()

import pandas as pd

from core.models.catalog import CatalogKind
from services.catalog import tabulate_rows
from services.db import CategoryRow, MealRow, PlanRow, create_tables, session_scope
from services.fallback import fallback_rows

_TABLES = {
    CatalogKind.meal: MealRow,
    CatalogKind.category: CategoryRow,
    CatalogKind.plan: PlanRow,
}


def read_rows(path: Path) -> List[Dict[str, Any]]:
    """CSV or JSON (list of objects) ➜ row dicts; blank cells become None."""
    if path.suffix.lower() == ".csv":
        df = pd.read_csv(path)
    elif path.suffix.lower() == ".json":
        df = pd.read_json(path, orient="records")
    else:
        raise ValueError(f"unsupported seed file type: {path.suffix}")
    return tabulate_rows(df)


def to_table_rows(kind: CatalogKind, rows: List[Dict[str, Any]]) -> list:
    """Keep only the columns the table has; unknown columns are dropped."""
    model = _TABLES[kind]
    cols = set(model.__table__.columns.keys())
    return [model(**{k: v for k, v in r.items() if k in cols}) for r in rows]


async def _seed(batches: Dict[CatalogKind, List[Dict[str, Any]]]) -> None:
    await create_tables()
    async with session_scope() as db:
        for kind, rows in batches.items():
            db.add_all(to_table_rows(kind, rows))
            print(f"✓ queued {len(rows)} {kind.value} rows")
        await db.commit()


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--kind",
        choices=[k.value for k in CatalogKind],
        help="catalog kind to seed (required with --file)",
    )
    parser.add_argument(
        "--file",
        type=Path,
        help="optional CSV/JSON file with rows to seed (overrides defaults)",
    )
    args = parser.parse_args()

    if args.file:
        if not args.kind:
            parser.error("--file needs --kind")
        batches = {CatalogKind(args.kind): read_rows(args.file)}
    elif args.kind:
        batches = {CatalogKind(args.kind): fallback_rows(args.kind)}
    else:
        batches = {k: fallback_rows(k) for k in CatalogKind}

    asyncio.run(_seed(batches))


if __name__ == "__main__":
    main()
