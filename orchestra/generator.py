# orchestra/generator.py
import numpy as np
from typing import Any, Dict, List, Optional, Tuple

from .config import *
from .models import Concert, Instrument, Market, Musician, Practice, Room, Trip

SCENARIO_DEFINITIONS = [
    {
        "id": "O-01",
        "name": "The Debut",
        "seed": 42,
        "description": "Standard season, no tricks",
        "config_overrides": {}
    },
    {
        "id": "O-02",
        "name": "Shoestring",
        "seed": 101,
        "description": "Half the usual starting budget",
        "config_overrides": {
            "initial_budget": 500
        }
    },
    {
        "id": "O-03",
        "name": "Star Market",
        "seed": 202,
        "description": "Musicians are scarce and expensive",
        "config_overrides": {
            "musician_price_mult": 2.0,
            "market_musicians": 2
        }
    },
    {
        "id": "O-04",
        "name": "Festival Season",
        "seed": 303,
        "description": "Concerts pay more but ask for more experience",
        "config_overrides": {
            "concert_revenue_mult": 1.5,
            "required_experience_mult": 2.0
        }
    },
    {
        "id": "O-05",
        "name": "Road Warriors",
        "seed": 404,
        "description": "Cheap trips everywhere",
        "config_overrides": {
            "trip_price_mult": 0.5,
            "market_trips": 4
        }
    },
]

SCENARIOS = {s_def['id']: s_def for s_def in SCENARIO_DEFINITIONS}

FIRST_NAMES = ["Peter", "Mie", "Clara", "Jonas", "Ida", "Magnus", "Freja", "Oskar",
               "Asta", "Viggo", "Alma", "Emil", "Karla", "Storm", "Nora", "Aksel"]
TRAITS = ["Loves tests", "Never late", "Plays too loud", "Sight-reads anything",
          "Forgets the mute", "Brings cake", "Tunes for ages", "Former prodigy"]
LOCATIONS = ["Town Hall", "Old Church", "Harbour Stage", "Library Basement",
             "Concert House", "School Gym", "City Park", "Jazz Cellar"]
CITIES = ["Aarhus", "Berlin", "Vienna", "Prague", "Oslo", "Leipzig", "Salzburg", "Amsterdam"]


def get_scenario(scenario_id: str) -> Dict[str, Any]:
    """Look up a scenario definition by id."""
    if scenario_id not in SCENARIOS:
        raise KeyError(f"Unknown scenario {scenario_id}")
    return SCENARIOS[scenario_id]


def _randint(rng: np.random.RandomState, bounds: Tuple[int, int], mult: float = 1.0) -> int:
    low, high = bounds
    return int(rng.randint(low, high + 1) * mult)


def _pick(rng: np.random.RandomState, options: List[str]) -> str:
    return str(options[rng.randint(len(options))])


def generate_musician(rng: np.random.RandomState, overrides: Optional[dict] = None) -> Musician:
    overrides = overrides or {}
    instruments = list(Instrument)
    return Musician(
        name=_pick(rng, FIRST_NAMES),
        instrument=instruments[rng.randint(len(instruments))],
        description=_pick(rng, TRAITS),
        experience=_randint(rng, MUSICIAN_EXPERIENCE_RANGE),
        price=_randint(rng, MUSICIAN_PRICE_RANGE, overrides.get('musician_price_mult', 1.0)),
    )


def generate_market(week: int, rng: np.random.RandomState, overrides: Optional[dict] = None) -> Market:
    """
    Build the offers for one week.
    Concerts ask for more experience as the season goes on.
    """
    overrides = overrides or {}

    musicians = [generate_musician(rng, overrides)
                 for _ in range(overrides.get('market_musicians', MARKET_MUSICIANS))]

    rooms = []
    for _ in range(overrides.get('market_rooms', MARKET_ROOMS)):
        rooms.append(Room(
            size=_randint(rng, ROOM_SIZE_RANGE),
            price=_randint(rng, ROOM_PRICE_RANGE),
            location=f"Rehearsal room at {_pick(rng, LOCATIONS)}",
        ))

    practices = [Practice(duration=_randint(rng, PRACTICE_DURATION_RANGE))
                 for _ in range(overrides.get('market_practices', MARKET_PRACTICES))]

    trips = []
    for _ in range(overrides.get('market_trips', MARKET_TRIPS)):
        trips.append(Trip(
            price=_randint(rng, TRIP_PRICE_RANGE, overrides.get('trip_price_mult', 1.0)),
            location=_pick(rng, CITIES),
            experience_reward=_randint(rng, TRIP_EXPERIENCE_RANGE),
        ))

    concerts = []
    max_required = int((week - 1) * CONCERT_REQUIRED_EXPERIENCE_STEP *
                       overrides.get('required_experience_mult', 1.0))
    for _ in range(overrides.get('market_concerts', MARKET_CONCERTS)):
        concerts.append(Concert(
            price=_randint(rng, CONCERT_PRICE_RANGE),
            location=_pick(rng, LOCATIONS),
            experience_reward=_randint(rng, CONCERT_EXPERIENCE_RANGE),
            revenue=_randint(rng, CONCERT_REVENUE_RANGE, overrides.get('concert_revenue_mult', 1.0)),
            required_experience=int(rng.randint(0, max_required + 1)),
        ))

    return Market(week=week, musicians=musicians, rooms=rooms,
                  practices=practices, trips=trips, concerts=concerts)
