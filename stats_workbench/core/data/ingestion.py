"""Dataset loading from Excel/CSV and saving analysis columns back."""

from __future__ import annotations

from dataclasses import dataclass, field
from io import BytesIO
from typing import Any, Sequence

import numpy as np
import pandas as pd

from .variables import Variable, infer_variables


@dataclass
class Dataset:
    df: pd.DataFrame
    variables: list[Variable] = field(default_factory=list)
    sheet_names: list[str] = field(default_factory=list)
    source_name: str = ""

    def __post_init__(self):
        if not self.variables:
            self.variables = infer_variables(self.df)

    @property
    def shape(self) -> tuple[int, int]:
        return self.df.shape


def load_excel(file_buffer: BytesIO | Any, sheet_name: str | int = 0) -> Dataset:
    xls = pd.ExcelFile(file_buffer, engine="openpyxl")
    df = pd.read_excel(xls, sheet_name=sheet_name)
    source = getattr(file_buffer, "name", "uploaded_file.xlsx")
    return Dataset(df=df, sheet_names=xls.sheet_names, source_name=source)


def load_csv(file_buffer: BytesIO | Any) -> Dataset:
    df = pd.read_csv(file_buffer)
    source = getattr(file_buffer, "name", "uploaded_file.csv")
    return Dataset(df=df, source_name=source)


def load_file(file_buffer: BytesIO | Any, filename: str, sheet_name: str | int = 0) -> Dataset:
    ext = filename.rsplit(".", 1)[-1].lower()
    if ext in ("xlsx", "xls"):
        return load_excel(file_buffer, sheet_name=sheet_name)
    elif ext == "csv":
        return load_csv(file_buffer)
    else:
        raise ValueError(f"Unsupported file type: .{ext}. Use .xlsx, .xls, or .csv.")


def append_result_column(
    dataset: Dataset,
    base: Variable,
    suffix: str,
    values: Sequence[float | None],
) -> Variable:
    """Save an analysis series as a new scale variable, padding short columns with NaN."""
    n_rows = len(dataset.df)
    if len(values) > n_rows:
        raise ValueError(f"Result has {len(values)} values but the dataset only has {n_rows} rows.")

    column = np.full(n_rows, np.nan)
    for i, value in enumerate(values):
        if value is not None:
            column[i] = value

    index = len(dataset.variables)
    name = f"{base.name} {suffix}-{index}"
    dataset.df[name] = column

    variable = Variable(
        column_index=index,
        name=name,
        label=f"{base.display_name} ({suffix})",
        measure="scale",
        type="NUMERIC",
    )
    dataset.variables.append(variable)
    return variable
