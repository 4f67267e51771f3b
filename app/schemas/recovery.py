"""Recovery schemas."""

from pydantic import BaseModel, ConfigDict

from app.domain import Recovery


class RecoveryFields(BaseModel):
    recovery_id: int = 0
    recovery_date: str = ""
    duration: int = 0
    type: str = ""
    helpers: str = ""


class RecoverySave(RecoveryFields):
    def to_entity(self) -> Recovery:
        return Recovery(**self.model_dump())


class RecoveryRead(RecoveryFields):
    model_config = ConfigDict(from_attributes=True)


class RecoveryTimeTotal(BaseModel):
    start: str
    end: str
    total_minutes: int
