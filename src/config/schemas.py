"""Schema definitions for structured data passed between modules and the app."""

from typing import TypedDict, List, Optional


class ColumnSummary(TypedDict):
    count: int
    mean: float
    std: float
    min: float
    max: float


class PanelResult(TypedDict, total=False):
    status: str            # "success" | "no_data" | "no_variable" | ...
    module_id: str         # qualified id of the module instance
    variable: Optional[str]
    bins: int
    rows: int


class DatasetInfo(TypedDict):
    name: str
    rows: int
    columns: List[str]
