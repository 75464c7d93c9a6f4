"""Catalog subpackage - products, categories, tax table and stock."""
from .models import Category, Product, TAX_RATES
from .catalog import Catalog
from .inventory import Inventory

__all__ = ['Category', 'Product', 'TAX_RATES', 'Catalog', 'Inventory']
