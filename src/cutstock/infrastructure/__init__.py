"""Infrastructure layer - import and output formatting."""

from .formatters import CuttingPlanFormatter, JsonExporter, format_number
from .importers import (
    DemandImportError,
    load_demand_csv,
    load_demand_xlsx,
    parse_demand_csv,
    parse_demand_rows,
)

__all__ = [
    "CuttingPlanFormatter",
    "DemandImportError",
    "JsonExporter",
    "format_number",
    "load_demand_csv",
    "load_demand_xlsx",
    "parse_demand_csv",
    "parse_demand_rows",
]
