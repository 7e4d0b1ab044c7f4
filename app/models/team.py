from sqlalchemy import Column, String, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.db.session import Base

class Team(Base):
    __tablename__ = "teams"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Relationships
    athlete_links = relationship("TeamAthlete", back_populates="team", cascade="all, delete", passive_deletes=True)
    workouts = relationship("Workout", back_populates="team", cascade="all, delete", passive_deletes=True)

class TeamAthlete(Base):
    __tablename__ = "team_athletes"

    # Composite primary key keeps each team/athlete pair unique
    team_id = Column(String, ForeignKey("teams.id", ondelete="CASCADE"), primary_key=True, index=True)
    athlete_id = Column(String, ForeignKey("athletes.id", ondelete="CASCADE"), primary_key=True, index=True)

    team = relationship("Team", back_populates="athlete_links")
    athlete = relationship("Athlete", back_populates="team_links")
