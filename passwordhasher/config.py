"""Hasher settings from the environment (and an optional .env file)."""
import logging
import os
from typing import Mapping

from dotenv import dotenv_values, find_dotenv
from pydantic import BaseModel, Field, ValidationError

from .errors import InvalidParameter
from .params import (DEFAULT_ITERATIONS, DEFAULT_KEY_LENGTH, DEFAULT_MEMORY_COST,
                     DEFAULT_PARALLELISM, DEFAULT_SALT_LENGTH, ParameterProfile)

logger = logging.getLogger(__name__)

ENV_PREFIX = "PASSWORD_HASHER_"


class HasherSettings(BaseModel):
    memory_cost: int = Field(default=DEFAULT_MEMORY_COST, gt=0, description="KiB")
    iterations: int = Field(default=DEFAULT_ITERATIONS, gt=0)
    parallelism: int = Field(default=DEFAULT_PARALLELISM, gt=0)
    salt_length: int = Field(default=DEFAULT_SALT_LENGTH, gt=0)
    key_length: int = Field(default=DEFAULT_KEY_LENGTH, gt=0)

    def to_profile(self) -> ParameterProfile:
        profile = ParameterProfile(memory_cost=self.memory_cost,
                                   iterations=self.iterations,
                                   parallelism=self.parallelism,
                                   salt_length=self.salt_length,
                                   key_length=self.key_length)
        if profile.weaker_than(ParameterProfile.default()):
            logger.warning("password hasher configured below the default profile: %s", profile)
        return profile


def load_settings(env_file: str | None = None,
                  environ: Mapping[str, str] | None = None) -> HasherSettings:
    """Read PASSWORD_HASHER_* variables; the process environment wins over .env."""
    values = {}
    path = env_file or find_dotenv(usecwd=True)
    if path:
        values.update(dotenv_values(path))
    values.update(os.environ if environ is None else environ)

    fields = {}
    for name in HasherSettings.model_fields:
        raw = values.get(ENV_PREFIX + name.upper())
        if raw is not None and raw != "":
            fields[name] = raw
    try:
        return HasherSettings(**fields)
    except ValidationError as e:
        raise InvalidParameter(f"invalid password hasher settings: {e}") from e
