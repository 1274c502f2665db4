"""HTTP adapters for the upstream data providers."""

from .jolpica_adapter import JolpicaAdapter
from .openf1_adapter import OpenF1Adapter
from .overtake_sheet_adapter import OvertakeSheetAdapter

__all__ = ["JolpicaAdapter", "OpenF1Adapter", "OvertakeSheetAdapter"]
