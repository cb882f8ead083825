"""
Recipe model. Week days only hold a reference to it.
"""

from sqlalchemy import Column, String, Text, TIMESTAMP
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base


class Recipe(Base):
    """Recipes that can be linked to calendar days"""

    __tablename__ = "recipe"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(Text, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    week_days = relationship("WeekDay", back_populates="recipe")
