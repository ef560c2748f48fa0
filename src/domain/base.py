"""Base class for persisted domain entities"""

from sqlmodel import SQLModel


class BaseModel(SQLModel):
    """Shared base for all table models (single metadata registry)"""

    pass
