from pydantic import BaseModel, ConfigDict
from typing import List


class VehicleMake(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str


class VehicleModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    make_name: str


class MakesOut(BaseModel):
    makes: List[VehicleMake]


class ModelsOut(BaseModel):
    models: List[VehicleModel]


class YearsOut(BaseModel):
    years: List[int]
