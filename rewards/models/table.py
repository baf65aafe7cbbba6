"""Table column and sort state models"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Literal, Optional

from rewards.constants import SortDirection


class ColumnSpec(BaseModel):
    """Column descriptor for a sortable table"""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Row attribute the column reads")
    label: str = Field("", description="Header text")
    sortable: bool = True
    align: Literal["left", "right"] = "left"


class SortState(BaseModel):
    """Current sort column and direction"""

    model_config = ConfigDict(frozen=True)

    sort_key: Optional[str] = None
    sort_direction: SortDirection = SortDirection.ASC
