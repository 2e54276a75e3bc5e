"""Shared type aliases."""

from __future__ import annotations

import os
from typing import Literal, TypeAlias

PathInput: TypeAlias = str | os.PathLike[str]
TaskStage: TypeAlias = Literal["read", "decode", "write"]
