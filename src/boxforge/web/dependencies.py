"""FastAPI dependency injection for box services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from boxforge.application import FoldAnglesCommand, GenerateBoxDesignCommand


@lru_cache(maxsize=1)
def get_design_command() -> GenerateBoxDesignCommand:
    """Shared GenerateBoxDesignCommand; it holds no per-request state."""
    return GenerateBoxDesignCommand()


def get_fold_command() -> FoldAnglesCommand:
    return FoldAnglesCommand()


DesignCommandDep = Annotated[GenerateBoxDesignCommand, Depends(get_design_command)]
FoldCommandDep = Annotated[FoldAnglesCommand, Depends(get_fold_command)]
