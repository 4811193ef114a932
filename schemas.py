"""
Request schemas for the cars endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field

REQUIRED_FIELDS_MESSAGE = "Brand, model, and price are required"


class CarCreate(BaseModel):
    # JSON clients send prices as numbers; the column is text
    model_config = ConfigDict(coerce_numbers_to_str=True)

    brand: str = Field(..., min_length=1)
    model: str = Field(..., min_length=1)
    price: str = Field(..., min_length=1)
