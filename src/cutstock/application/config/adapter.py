"""Conversion from job configuration models to domain objects."""

from cutstock.application.config.schema import CuttingJobConfig
from cutstock.domain import DemandRecord


def config_to_demand(config: CuttingJobConfig) -> list[DemandRecord]:
    """Convert the job's items into demand records, preserving order."""
    return [
        DemandRecord(name=item.name, length=item.length, quantity=item.quantity)
        for item in config.items
    ]
