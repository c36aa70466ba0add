from dataclasses import dataclass
from typing import Optional, List


@dataclass
class Inputs:
    incomes: List[float]
    labels: Optional[List[str]] = None


@dataclass
class Assumptions:
    rules_version: str = "flat.v1"
