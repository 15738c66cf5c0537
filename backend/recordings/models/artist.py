"""Artist model."""
from sqlalchemy import Column, Integer, String
from recordings.database import Base


class Artist(Base):
    """Artist credited on exactly one album."""

    __tablename__ = "artists"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    # No FK constraint: deleting an album leaves its artists in place
    album_id = Column(Integer, nullable=False, index=True)

    def __repr__(self):
        return f"<Artist {self.name}>"
