"""Reports subpackage - receipts and sales reporting."""
from .receipt import Receipt, format_brl, print_lines
from .sales_report import SalesReport

__all__ = ['Receipt', 'format_brl', 'print_lines', 'SalesReport']
