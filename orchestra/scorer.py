# orchestra/scorer.py
from .models import OrchestraState


def calculate_orchestra_value(state: OrchestraState) -> int:
    """
    Value = Budget + Roster_Value + Room_Value + Experience
    Hired musicians and the practice room count at what was paid for them.
    Practice minutes are not money and are left out.
    """
    roster_value = sum(m.price for m in state.musicians)
    room_value = state.practice_room.price

    return state.budget + roster_value + room_value + state.experience
