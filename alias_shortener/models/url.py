from sqlalchemy import Column, Integer, String, Text
from alias_shortener.database.connection import Base


class URL(Base):
    """
    Alias -> URL record.

    - alias is UNIQUE: the database rejects a second row with the same alias,
      which is what makes save a single atomic check-and-insert
    - url is stored as given, never validated here
    - id is the autoincrement key returned to callers of save
    """
    __tablename__ = "url"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # Note: unique=True also creates the index used by get/delete lookups
    alias = Column(String, unique=True, nullable=False, index=True)
    url = Column(Text, nullable=False)

    def __repr__(self):
        return f"<URL(id={self.id}, alias={self.alias!r}, url={self.url!r})>"
