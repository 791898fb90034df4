from __future__ import annotations

import os


def basename(path: str) -> str:
    return os.path.basename(path)
