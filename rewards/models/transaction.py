"""Transaction data model"""

import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Transaction(BaseModel):
    """Purchase transaction entity"""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "customerId": 1,
                "name": "Alice Johnson",
                "date": "2024-10-05",
                "amount": 120.00,
                "isManual": False
            }
        }
    )

    id: int = Field(..., gt=0, description="Unique transaction ID")
    customer_id: int = Field(..., gt=0, alias="customerId", description="Customer ID, stable per name")
    name: str = Field(..., description="Customer display name")
    date: datetime.date = Field(..., description="Purchase date (YYYY-MM-DD)")
    amount: float = Field(..., allow_inf_nan=False, description="Purchase amount in USD")
    is_manual: bool = Field(False, alias="isManual", description="Entered through the manual form")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be empty")
        return value
