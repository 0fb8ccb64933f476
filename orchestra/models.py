# orchestra/models.py
from enum import Enum
from typing import Annotated, Dict, List, Literal, Optional, Set, Union
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from .errors import ErrorCode


class Instrument(str, Enum):
    BASSOON = 'bassoon'
    OBOE = 'oboe'
    FLUTE = 'flute'
    CLARINET = 'clarinet'
    HORN = 'horn'
    TRUMPET = 'trumpet'
    TROMBONE = 'trombone'
    TUBA = 'tuba'
    VIOLIN = 'violin'
    VIOLA = 'viola'
    CELLO = 'cello'
    DOUBLE_BASS = 'double_bass'
    HARP = 'harp'
    PERCUSSION = 'percussion'
    PIANO = 'piano'


class Musician(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    instrument: Instrument
    description: str = ""
    experience: int = 0  # Skill level, display only
    price: int = 0


class Room(BaseModel):
    model_config = ConfigDict(frozen=True)

    size: int
    price: int
    location: str = ""


# Activities
# Every purchase is its own instance: two practices of equal length are still
# two different things to schedule.

class Practice(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal['practice'] = 'practice'
    id: UUID = Field(default_factory=uuid4)
    duration: int  # Minutes


class Concert(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal['concert'] = 'concert'
    id: UUID = Field(default_factory=uuid4)
    price: int
    location: str = ""
    experience_reward: int = 0
    revenue: int = 0
    required_experience: int = 0


class Trip(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal['trip'] = 'trip'
    id: UUID = Field(default_factory=uuid4)
    price: int
    location: str = ""
    experience_reward: int = 0


Activity = Annotated[Union[Practice, Concert, Trip], Field(discriminator='kind')]


class OrchestraState(BaseModel):
    name: str
    budget: int
    experience: int = 0
    practice_minutes: int = 0
    weekly_minutes: int = 1
    required_practice_for_concert: int = 2
    musicians: Set[Musician] = set()
    practice_room: Room
    unused_activities: Set[Activity] = set()
    schedule: Dict[int, Optional[Activity]]
    week: int = 1
    log_history: List[str] = []


class ScheduleAssignment(BaseModel):
    day: int
    activity_id: UUID


class WeekAction(BaseModel):
    rename: Optional[str] = None
    hire: List[Musician] = []
    practice_room: Optional[Room] = None
    practices: List[Practice] = []
    trips: List[Trip] = []
    concerts: List[Concert] = []
    assignments: List[ScheduleAssignment] = []


class ActionResult(BaseModel):
    action: str  # e.g. 'buy_trip', 'update_schedule'
    ok: bool
    error: Optional[ErrorCode] = None
    message: str = ""


class Market(BaseModel):
    """Offers available to the orchestra during one week."""
    week: int
    musicians: List[Musician] = []
    rooms: List[Room] = []
    practices: List[Practice] = []
    trips: List[Trip] = []
    concerts: List[Concert] = []
