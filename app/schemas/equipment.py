"""Equipment schemas."""

from pydantic import BaseModel, ConfigDict

from app.domain import Equipment


class EquipmentFields(BaseModel):
    equipment_id: int = 0
    name: str = ""
    description: str = ""
    category: str = ""
    target: str = ""


class EquipmentSave(EquipmentFields):
    def to_entity(self) -> Equipment:
        return Equipment(**self.model_dump())


class EquipmentRead(EquipmentFields):
    model_config = ConfigDict(from_attributes=True)
