"""
CloudKit SDK Data Models
"""

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TableCreate(BaseModel):
    """Create table request"""

    name: str = Field(..., min_length=1, description="Name of the new table")


class Database(BaseModel):
    """Database record, shared by every database provider"""

    model_config = ConfigDict(frozen=True)

    id: str
    host: str
    uri: str
    # Azure tables carry no per-resource credentials
    username: str = ""
    password: str = ""


class VolumeType(BaseModel):
    """Block storage volume type"""

    model_config = ConfigDict(frozen=True, extra="allow")

    id: str
    name: Optional[str] = None
    extra_specs: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        # the service returns numeric ids on older deployments
        return str(v) if isinstance(v, int) else v

    @field_validator("extra_specs", mode="before")
    @classmethod
    def empty_extra_specs(cls, v):
        return v or {}

    def __eq__(self, other: object) -> bool:
        if isinstance(other, VolumeType):
            return self.id == other.id
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.id)


VolumeTypeRef = Union[VolumeType, str]


def volume_type_id(ref: VolumeTypeRef) -> str:
    """Return the id for a volume type record or a raw id."""
    if isinstance(ref, VolumeType):
        return ref.id
    return ref
