"""Label schemas."""
from pydantic import BaseModel, ConfigDict


class LabelBase(BaseModel):
    """Base label fields."""
    name: str = ""
    country: str = ""


class LabelCreate(LabelBase):
    """Label creation request."""


class LabelResponse(LabelBase):
    """Label response."""
    model_config = ConfigDict(from_attributes=True)

    id: int

    @classmethod
    def zero(cls) -> "LabelResponse":
        """Placeholder for an album whose label row does not exist."""
        return cls(id=0, name="", country="")
