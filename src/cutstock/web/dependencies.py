"""FastAPI dependency injection for optimizer services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from cutstock.domain import FirstFitDecreasingPacker, LocalImprover


@lru_cache(maxsize=1)
def get_packer() -> FirstFitDecreasingPacker:
    """Get cached packer instance. The packer holds no state."""
    return FirstFitDecreasingPacker()


@lru_cache(maxsize=1)
def get_improver() -> LocalImprover:
    """Get cached improver instance. The improver holds no state."""
    return LocalImprover()


PackerDep = Annotated[FirstFitDecreasingPacker, Depends(get_packer)]
ImproverDep = Annotated[LocalImprover, Depends(get_improver)]
