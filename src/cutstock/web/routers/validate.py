"""Job validation endpoint."""

from fastapi import APIRouter

from cutstock.application.config import load_config_from_dict, validate_config
from cutstock.web.schemas.requests import JobValidateRequest
from cutstock.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_job(request: JobValidateRequest) -> ValidationResultSchema:
    """Validate a cutting job without optimizing.

    Schema errors are returned as 422 by the ConfigError handler.
    """
    config = load_config_from_dict(request.config)
    result = validate_config(config)

    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[{"message": e.message, "path": e.path} for e in result.errors],
        warnings=[{"message": w.message, "path": w.path} for w in result.warnings],
    )
