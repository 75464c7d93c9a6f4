"""
Store Loader - builds the catalog and inventory from the seed CSVs.

Produces a load report (input hashes, row counts, category coverage,
stock warnings) alongside the loaded objects.
"""
import hashlib
from datetime import datetime
from pathlib import Path
from typing import Optional

from ..catalog import Catalog, Inventory
from ..config.settings import get_settings, Settings


def get_file_hash(path: Path) -> str:
    """Get SHA256 hash of a file."""
    if not path.exists():
        return ""
    with open(path, 'rb') as f:
        return hashlib.sha256(f.read()).hexdigest()[:12]


def load_store(settings: Optional[Settings] = None, verbose: bool = False) -> tuple[Catalog, Inventory, dict]:
    """
    Load catalog and inventory from the configured seed files.

    Args:
        settings: Optional settings override
        verbose: Print progress messages

    Returns:
        (catalog, inventory, report)

    Raises:
        FileNotFoundError: a seed file is missing
    """
    settings = settings or get_settings()

    report = {
        "timestamp": datetime.now().isoformat(),
        "input_files": {},
        "metrics": {},
        "warnings": [],
    }

    catalog = Catalog.from_csv(settings.catalog_csv)
    report["input_files"]["catalog"] = {
        "path": str(settings.catalog_csv),
        "hash": get_file_hash(settings.catalog_csv),
    }
    if verbose:
        print(f"Loaded {len(catalog)} products from {settings.catalog_csv}")

    inventory = Inventory.from_csv(settings.stock_csv)
    report["input_files"]["stock"] = {
        "path": str(settings.stock_csv),
        "hash": get_file_hash(settings.stock_csv),
    }

    frame = catalog.to_frame()
    report["metrics"]["product_count"] = len(catalog)
    report["metrics"]["products_by_category"] = {
        str(k): int(v) for k, v in frame['category'].value_counts(sort=False).items()
    }

    stock = inventory.to_frame()
    unknown = sorted(set(stock['sku']) - set(catalog.skus()))
    for sku in unknown:
        report["warnings"].append(f"Stock entry for unknown SKU {sku}")
    out_of_stock = [sku for sku in catalog.skus() if inventory.get_quantity(sku) == 0]
    for sku in out_of_stock:
        report["warnings"].append(f"SKU {sku} has no stock")
    report["metrics"]["units_on_hand"] = int(stock['quantity'].sum()) if not stock.empty else 0

    if verbose:
        print(f"Loaded stock for {len(stock)} SKUs ({report['metrics']['units_on_hand']} units)")
        for warning in report["warnings"]:
            print(f"WARNING: {warning}")

    return catalog, inventory, report


if __name__ == "__main__":
    load_store(verbose=True)
