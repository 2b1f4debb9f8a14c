"""
Settings for the refraction package.

Values come from REFRACTION_* environment variables, optionally loaded from a
.env file first. Explicit settings passed to an InstanceReflector always win.
"""

import os
import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv, find_dotenv
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

ENV_PREFIX = "REFRACTION_"


class RefractionSettings(BaseModel):
    """Lookup and caching behaviour of InstanceReflector."""
    method_names_case_sensitive: bool = Field(
        default=False,
        description="Compare names case-sensitively in has_method()"
    )
    property_names_case_sensitive: bool = Field(
        default=True,
        description="Compare names case-sensitively in has_property()"
    )
    cache_members: bool = Field(
        default=False,
        description="Compute visible members once per reflector instead of on every call"
    )


def load_settings(env_file: Optional[Union[str, Path]] = None) -> RefractionSettings:
    """
    Load settings from the environment.

    Args:
        env_file: Optional .env file to load first (default: nearest .env found
                  from the working directory, if any)

    Returns:
        RefractionSettings validated by pydantic

    Raises:
        pydantic.ValidationError: If a REFRACTION_* variable cannot be coerced
    """
    dotenv_path = str(env_file) if env_file is not None else find_dotenv(usecwd=True)
    if dotenv_path:
        # Variables already present in the environment take precedence
        load_dotenv(dotenv_path, override=False)
        logger.debug(f"Loaded environment from {dotenv_path}")

    values = {}
    for field_name in RefractionSettings.model_fields:
        env_name = f"{ENV_PREFIX}{field_name.upper()}"
        if env_name in os.environ:
            values[field_name] = os.environ[env_name]

    return RefractionSettings.model_validate(values)


@lru_cache(maxsize=1)
def get_settings() -> RefractionSettings:
    """Process-wide settings, loaded on first use."""
    return load_settings()
