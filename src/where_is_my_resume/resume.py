from __future__ import annotations

import logging
import os

from pydantic import ConfigDict, field_validator
from pydantic.dataclasses import dataclass

from where_is_my_resume import fs

logger = logging.getLogger(__name__)


@dataclass(frozen=True, config=ConfigDict(extra="forbid"))
class ResumeLocation:
    directory: str = "/home/h/Documents/"
    prefix: str = "CV"
    version: int = 3
    filename: str = "resume.pdf"

    @field_validator("filename")
    @classmethod
    def filename_has_final_segment(cls, value: str) -> str:
        if fs.basename(value) == "":
            raise ValueError(f"filename has no final path segment: {value!r}")

        return value

    @property
    def subdirectory(self) -> str:
        return f"{self.prefix}_v{self.version}"

    @property
    def path(self) -> str:
        return os.path.join(self.directory, self.subdirectory, self.filename)


def find_resume(location: ResumeLocation) -> str:
    path = location.path
    logger.debug("constructed resume path: %s", path)

    return fs.basename(path)
