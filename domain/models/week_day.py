"""
Calendar day model for the week planner.
"""

from sqlalchemy import Column, Date, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from domain.models.database import Base


class WeekDay(Base):
    """One calendar day and the recipe planned for it (if any)"""

    __tablename__ = "week_day"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # One row per calendar day
    date = Column(Date, nullable=False, unique=True, index=True)
    recipe_id = Column(
        String(36), ForeignKey("recipe.id", ondelete="SET NULL"), nullable=True
    )

    recipe = relationship("Recipe", back_populates="week_days")

    def __repr__(self) -> str:
        return f"<WeekDay date={self.date} recipe_id={self.recipe_id}>"
