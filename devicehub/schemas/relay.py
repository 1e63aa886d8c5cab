from pydantic import BaseModel

class RelayStatus(BaseModel):
    status: bool

class RelayChanged(BaseModel):
    message: str
    status: bool
