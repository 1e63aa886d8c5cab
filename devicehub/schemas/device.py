from datetime import datetime
from typing import Literal
from pydantic import AliasChoices, BaseModel, Field
from pydantic.alias_generators import to_camel

DeviceStatus = Literal["on", "off"]

# Requests accept both snake_case and camelCase keys
class DeviceRegister(BaseModel):
    device_name: str = Field(min_length=1, validation_alias=AliasChoices("device_name", "deviceName"))
    enroll_id: str = Field(min_length=1, validation_alias=AliasChoices("enroll_id", "enrollId"))
    status: DeviceStatus | None = None  # None: "off" for new devices, unchanged for existing ones

class DeviceLogin(BaseModel):
    enroll_id: str = Field(min_length=1, validation_alias=AliasChoices("enroll_id", "enrollId"))


# Responses are always camelCase
class CamelModel(BaseModel):
    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True

class DeviceRead(CamelModel):
    id: int
    device_name: str
    enroll_id: str
    status: DeviceStatus
    last_value: datetime | None = None
    created_at: datetime | None = None

class DeviceRegistered(CamelModel):
    message: str
    device: DeviceRead

class DeviceToken(CamelModel):
    device_name: str
    enroll_id: str
    token: str

class DeviceStatusRead(CamelModel):
    status: DeviceStatus
    last_value: datetime | None = None

class DeviceLogRead(CamelModel):
    action: Literal["ON", "OFF"]
    timestamp: datetime

class Message(BaseModel):
    message: str
