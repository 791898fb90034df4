from __future__ import annotations

import logging
from dataclasses import field
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ConfigDict
from pydantic.dataclasses import dataclass

from where_is_my_resume.resume import ResumeLocation

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    pass


@dataclass(frozen=True, config=ConfigDict(extra="forbid"))
class Config:
    resume: ResumeLocation = field(default_factory=ResumeLocation)


def load_config(path: Optional[Path]) -> Config:
    if path is None:
        return Config()

    logger.debug("loading config from %s", path)

    with path.open() as f:
        raw = yaml.load(f, Loader=yaml.CLoader)

    # an empty document means every default applies
    if raw is None:
        raw = {}

    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: expected a mapping, got {type(raw).__name__}")

    return Config(**raw)
