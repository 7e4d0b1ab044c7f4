from sqlalchemy import Column, String, DateTime, Text
from sqlalchemy.sql import func
from app.db.session import Base

class Exercise(Base):
    __tablename__ = "exercises"

    # Sequential numeric string, kept gapless ("1".."N") by re-packing after deletes
    id = Column(String, primary_key=True)
    name = Column(String, nullable=False, index=True)
    video_url = Column(String, nullable=True)
    category = Column(String, nullable=True)
    instructions = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
