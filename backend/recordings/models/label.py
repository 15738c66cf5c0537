"""Label model."""
from sqlalchemy import Column, Integer, String
from recordings.database import Base


class Label(Base):
    """Record label."""

    __tablename__ = "labels"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    country = Column(String(64), nullable=False)

    def __repr__(self):
        return f"<Label {self.name}>"
