# src/mkvsub/model/choice.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Choice:
    key: str     # label shown to the operator
    value: Any
