# orchestra/baselines.py
from typing import Any, Dict, List
from .models import Market, ScheduleAssignment, WeekAction


def _free_days(obs: Dict[str, Any]) -> List[int]:
    return [int(day) for day, slot in obs['schedule'].items() if slot is None]


def idle_agent(obs: Dict[str, Any], market: Market) -> WeekAction:
    """Agent 1: Idle. Buys nothing, plays nothing."""
    return WeekAction()


def practice_agent(obs: Dict[str, Any], market: Market) -> WeekAction:
    """
    Agent 2: Practice Only
    - Books every free practice on offer.
    - Fills the week with rehearsals, never spends money.
    """
    days = _free_days(obs)
    practices = market.practices[:len(days)]
    assignments = [ScheduleAssignment(day=day, activity_id=p.id) for day, p in zip(days, practices)]
    return WeekAction(practices=practices, assignments=assignments)


def touring_agent(obs: Dict[str, Any], market: Market) -> WeekAction:
    """
    Agent 3: Touring
    - Buys every trip it can afford (cheapest first).
    - Pads the rest of the week with practice.
    """
    budget = obs['budget']
    trips = []
    for trip in sorted(market.trips, key=lambda t: t.price):
        if trip.price <= budget:
            trips.append(trip)
            budget -= trip.price

    days = _free_days(obs)
    planned = trips + market.practices
    assignments = [ScheduleAssignment(day=day, activity_id=a.id) for day, a in zip(days, planned)]
    return WeekAction(trips=trips, practices=market.practices, assignments=assignments)


class SmartAgent:
    def __init__(self, reserve: int = 200, max_roster: int = 8):
        self.reserve = reserve  # Cash kept back for next week
        self.max_roster = max_roster

    def act(self, obs: Dict[str, Any], market: Market) -> WeekAction:
        budget = obs['budget']
        experience = obs['experience']
        roster = len(obs['musicians'])
        room = obs['practice_room']

        # 1. Concerts that pay back both the booking and the night itself
        concerts = []
        for c in sorted(market.concerts, key=lambda c: c.revenue - 2 * c.price, reverse=True):
            if c.revenue - 2 * c.price <= 0:
                continue
            if c.price <= budget - self.reserve and c.required_experience <= experience:
                concerts.append(c)
                budget -= c.price

        # 2. Trips while experience is too low for the concerts on offer
        trips = []
        if any(c.required_experience > experience for c in market.concerts):
            for t in sorted(market.trips, key=lambda t: t.price / max(1, t.experience_reward)):
                if t.price <= budget - self.reserve:
                    trips.append(t)
                    budget -= t.price
                    break

        # 3. Bigger room before the roster outgrows it
        practice_room = None
        if roster >= room['size']:
            rooms = [r for r in market.rooms if r.size > roster and r.price <= budget - self.reserve]
            if rooms:
                practice_room = min(rooms, key=lambda r: r.price)
                budget -= practice_room.price

        # 4. Hire while there is space
        hire = []
        capacity = (practice_room.size if practice_room else room['size']) - roster
        for m in sorted(market.musicians, key=lambda m: m.price):
            if capacity <= 0 or roster + len(hire) >= self.max_roster:
                break
            if m.price <= budget - self.reserve:
                hire.append(m)
                budget -= m.price
                capacity -= 1

        # 5. Schedule: concerts need rehearsal minutes, so practice goes first
        days = _free_days(obs)
        planned = market.practices[:1] + concerts + trips + market.practices[1:]
        assignments = [ScheduleAssignment(day=day, activity_id=a.id) for day, a in zip(days, planned)]

        return WeekAction(
            hire=hire,
            practice_room=practice_room,
            practices=market.practices,
            trips=trips,
            concerts=concerts,
            assignments=assignments,
        )


# Wrapper to make it compatible with main.py's function call style
_smart_agent_instance = None

def smart_agent_wrapper(obs: Dict[str, Any], market: Market) -> WeekAction:
    global _smart_agent_instance
    if _smart_agent_instance is None or obs['week'] == 1:
        _smart_agent_instance = SmartAgent()
    return _smart_agent_instance.act(obs, market)
