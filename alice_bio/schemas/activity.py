from uuid import UUID

from pydantic import BaseModel


class UserActivity(BaseModel):
    user_id: UUID
    total_simulations: int = 0
    total_screenings: int = 0
    total_predictions: int = 0
    molecules_analyzed: int = 0
