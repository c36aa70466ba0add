# core/table.py
from __future__ import annotations
import pandas as pd
from typing import Dict, Any, Iterable

from .schema import Inputs, Assumptions
from .tax import calculate_tax
from .logging_config import get_logger

logger = get_logger(__name__)

COLUMNS = ["Label", "Income", "Tax", "Effective Tax Rate"]
MONEY_COLS = ["Income", "Tax"]


def total_tax(incomes: Iterable[float]) -> float:
    return sum(calculate_tax(float(x)) for x in incomes)


def tax_table(inputs: Inputs, assumptions: Assumptions | None = None,
              round_whole: bool = False) -> Dict[str, Any]:
    """
    Build a per-row tax table for `inputs.incomes`.
    Rounding here is display-only; the Tax column comes straight from calculate_tax.
    """
    assumptions = assumptions or Assumptions()
    incomes = [float(x) for x in inputs.incomes]

    if inputs.labels is None:
        labels = [str(i) for i in range(1, len(incomes) + 1)]
    else:
        labels = [str(x) for x in inputs.labels]
        if len(labels) != len(incomes):
            raise ValueError(f"got {len(labels)} labels for {len(incomes)} incomes")

    df = pd.DataFrame({"Label": labels, "Income": pd.Series(incomes, dtype="float64")})
    df["Tax"] = calculate_tax(df["Income"])
    nonzero = df["Income"] != 0
    df["Effective Tax Rate"] = (df["Tax"] / df["Income"]).where(nonzero, 0.0)

    if round_whole:
        df[MONEY_COLS] = df[MONEY_COLS].round(0)
    else:
        df[MONEY_COLS] = df[MONEY_COLS].round(2)
    df["Effective Tax Rate"] = df["Effective Tax Rate"].round(4)

    logger.info(
        "tax_table_built",
        rows=len(df),
        total_income=float(sum(incomes)),
        total_tax=float(total_tax(incomes)),
        rules_version=assumptions.rules_version,
    )
    return {"table": df}
