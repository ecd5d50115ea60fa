from pydantic import BaseModel, ConfigDict, field_validator

from parking_lot.domain.common import CarType


class Vehicle(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: CarType
    plate: str

    @field_validator("category")
    @classmethod
    def validate_category(cls, v: CarType) -> CarType:
        if v == CarType.NA:
            raise ValueError("NA is not a valid vehicle category")
        return v

    def __str__(self) -> str:
        return f"{self.plate} [{self.category.name}]"
