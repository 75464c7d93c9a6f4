"""Shared store state for the API: catalog, inventory and engine loaded once."""
from ..data.load_store import load_store
from ..engine import PriceEngine

catalog, inventory, load_report = load_store()
engine = PriceEngine(catalog)
