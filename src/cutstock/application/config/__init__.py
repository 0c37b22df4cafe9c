"""Job configuration schema, loading and validation.

Public API:
    - CuttingJobConfig: Root job model
    - DemandItemConfig: Cut list line model
    - OptimizerConfigSchema: Engine options model
    - load_config: Load a job from a JSON file
    - load_config_from_dict: Load a job from a dictionary
    - ConfigError: Exception for job file errors
    - ValidationResult: Container for validation results
    - validate_config: Check feasibility and advisories
    - config_to_demand: Convert job items to domain demand records

Example:
    >>> from pathlib import Path
    >>> from cutstock.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("job.json"))
    ...     print(f"Stock length: {config.stock_length}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from .adapter import config_to_demand
from .loader import ConfigError, load_config, load_config_from_dict
from .schema import (
    SUPPORTED_VERSIONS,
    CuttingJobConfig,
    DemandItemConfig,
    OptimizerConfigSchema,
)
from .validator import (
    LARGE_PIECE_COUNT,
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "LARGE_PIECE_COUNT",
    "SUPPORTED_VERSIONS",
    "ConfigError",
    "CuttingJobConfig",
    "DemandItemConfig",
    "OptimizerConfigSchema",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "config_to_demand",
    "load_config",
    "load_config_from_dict",
    "validate_config",
]
