from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, Text, Boolean, UniqueConstraint, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.db.session import Base

class Workout(Base):
    __tablename__ = "workouts"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    date = Column(String, nullable=False, index=True)  # "YYYY-MM-DD"
    # Both owners empty means the workout is a template
    athlete_id = Column(String, ForeignKey("athletes.id", ondelete="CASCADE"), nullable=True, index=True)
    team_id = Column(String, ForeignKey("teams.id", ondelete="CASCADE"), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Relationships
    team = relationship("Team", back_populates="workouts")
    blocks = relationship(
        "Block",
        back_populates="workout",
        order_by="Block.order_index",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

class Block(Base):
    __tablename__ = "blocks"

    id = Column(String, primary_key=True)  # "{workout_id}_block_{i}"
    workout_id = Column(String, ForeignKey("workouts.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String, nullable=False)
    order_index = Column(Integer, nullable=False)

    __table_args__ = (
        Index("idx_blocks_order", "workout_id", "order_index"),
    )

    workout = relationship("Workout", back_populates="blocks")
    exercises = relationship(
        "BlockExercise",
        back_populates="block",
        order_by="BlockExercise.order_index",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

class BlockExercise(Base):
    __tablename__ = "block_exercises"

    id = Column(String, primary_key=True)  # "{block_id}_ex_{j}"
    block_id = Column(String, ForeignKey("blocks.id", ondelete="CASCADE"), nullable=False, index=True)
    exercise_name = Column(String, nullable=False)
    sets = Column(Integer, nullable=False)  # planned set count
    reps = Column(String, nullable=False)  # Could be "8-12" or just "10"
    weight = Column(String, nullable=True)
    order_index = Column(Integer, nullable=False)

    __table_args__ = (
        Index("idx_block_exercises_order", "block_id", "order_index"),
    )

    block = relationship("Block", back_populates="exercises")

class ExerciseSet(Base):
    __tablename__ = "exercise_sets"

    id = Column(String, primary_key=True)  # "{block_exercise_id}_{athlete_id}_{set_number}"
    block_exercise_id = Column(String, ForeignKey("block_exercises.id", ondelete="CASCADE"), nullable=False)
    workout_id = Column(String, ForeignKey("workouts.id", ondelete="CASCADE"), nullable=False)
    athlete_id = Column(String, ForeignKey("athletes.id", ondelete="CASCADE"), nullable=False)
    set_number = Column(Integer, nullable=False)
    weight = Column(String, nullable=True)
    reps = Column(String, nullable=True)
    completed = Column(Boolean, default=False, nullable=False)
    completed_at = Column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        UniqueConstraint("block_exercise_id", "workout_id", "athlete_id", "set_number"),
        Index("idx_exercise_sets_block_exercise", "block_exercise_id", "workout_id", "athlete_id"),
    )

class ExerciseNote(Base):
    __tablename__ = "exercise_notes"

    id = Column(String, primary_key=True)  # "{block_exercise_id}_{workout_id}_{athlete_id}"
    block_exercise_id = Column(String, ForeignKey("block_exercises.id", ondelete="CASCADE"), nullable=False)
    workout_id = Column(String, ForeignKey("workouts.id", ondelete="CASCADE"), nullable=False)
    athlete_id = Column(String, ForeignKey("athletes.id", ondelete="CASCADE"), nullable=False)
    notes = Column(Text, nullable=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    __table_args__ = (
        UniqueConstraint("block_exercise_id", "workout_id", "athlete_id"),
    )

class WorkoutCompletion(Base):
    __tablename__ = "workout_completions"

    workout_id = Column(String, ForeignKey("workouts.id", ondelete="CASCADE"), primary_key=True, index=True)
    athlete_id = Column(String, ForeignKey("athletes.id", ondelete="CASCADE"), primary_key=True, index=True)
    completed_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
