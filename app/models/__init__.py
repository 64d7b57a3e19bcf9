from app.models.card import Card
from app.models.team_member import TeamMember

__all__ = [
    "TeamMember",
    "Card",
]
