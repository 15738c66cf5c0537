"""Album model."""
from sqlalchemy import Column, Integer, String, Numeric
from recordings.database import Base


class Album(Base):
    """Album in the catalog."""

    __tablename__ = "albums"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(128), nullable=False)
    price = Column(Numeric(5, 2, asdecimal=False), nullable=False)
    # References labels.id; not enforced, the label may be missing
    label_id = Column(Integer, nullable=False, index=True)

    def __repr__(self):
        return f"<Album {self.title}>"
