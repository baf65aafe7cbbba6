"""Customer lookup model"""

from pydantic import BaseModel, ConfigDict


class CustomerOption(BaseModel):
    """Distinct customer known to the store"""

    model_config = ConfigDict(frozen=True)

    customer_id: int
    name: str
    transaction_count: int = 0
