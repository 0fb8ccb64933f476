# orchestra/engine.py
import logging
from typing import Any, Callable, Dict, List, Optional, Set
from uuid import UUID

from .config import *
from .errors import (
    ActivityNotFoundError,
    InsufficientCapacityError,
    InsufficientExperienceError,
    InsufficientFundsError,
    OrchestraError,
    ScheduleOutOfRangeError,
)
from .models import (
    ActionResult,
    Concert,
    Musician,
    OrchestraState,
    Practice,
    Room,
    Trip,
    WeekAction,
)
from .scorer import calculate_orchestra_value

logger = logging.getLogger(__name__)


def default_practice_room() -> Room:
    return Room(size=DEFAULT_ROOM_SIZE, price=DEFAULT_ROOM_PRICE, location=DEFAULT_ROOM_LOCATION)


def empty_schedule(days: int = SCHEDULE_DAYS) -> Dict[int, Any]:
    return {day: None for day in range(days)}


class Orchestra:
    """
    The orchestra engine. Owns all mutable game state.

    Purchases and scheduling validate first and only then write, so a call
    that raises leaves the state as it was.
    """

    def __init__(self,
                 name: str,
                 musicians: Optional[Set[Musician]] = None,
                 schedule: Optional[Dict[int, Any]] = None,
                 activities: Optional[Set[Any]] = None,
                 schedule_days: int = SCHEDULE_DAYS,
                 budget: int = INITIAL_BUDGET):
        if schedule is None:
            schedule = empty_schedule(schedule_days)
        if sorted(schedule) != list(range(len(schedule))):
            raise ValueError("Schedule days must be numbered 0..N-1")
        activities = set(activities or ())
        if any(a is not None and a in activities for a in schedule.values()):
            raise ValueError("An activity cannot be both scheduled and unused")

        self.state = OrchestraState(
            name=name,
            budget=budget,
            experience=INITIAL_EXPERIENCE,
            practice_minutes=INITIAL_PRACTICE_MINUTES,
            weekly_minutes=INITIAL_WEEKLY_MINUTES,
            required_practice_for_concert=REQUIRED_PRACTICE_FOR_CONCERT,
            musicians=set(musicians or ()),
            practice_room=default_practice_room(),
            unused_activities=activities,
            schedule=dict(schedule),
        )
        self._schedule_days = len(schedule)

        # Event lines of the running turn, published to state.log_history by step()
        self._turn_logs: List[str] = []
        self._in_turn = False
        self._last_results: List[ActionResult] = []
        self._last_week: Dict[str, int] = {}

    # --- Read accessors ---

    @property
    def name(self) -> str:
        return self.state.name

    @name.setter
    def name(self, value: str):
        self.state.name = value

    @property
    def budget(self) -> int:
        return self.state.budget

    @property
    def experience(self) -> int:
        return self.state.experience

    @property
    def practice_minutes(self) -> int:
        return self.state.practice_minutes

    @property
    def weekly_minutes(self) -> int:
        return self.state.weekly_minutes

    @property
    def required_practice_for_concert(self) -> int:
        return self.state.required_practice_for_concert

    @property
    def musicians(self) -> Set[Musician]:
        return self.state.musicians

    @property
    def practice_room(self) -> Room:
        return self.state.practice_room

    @property
    def unused_activities(self) -> Set[Any]:
        return self.state.unused_activities

    @property
    def schedule(self) -> Dict[int, Any]:
        return self.state.schedule

    @property
    def schedule_days(self) -> int:
        return self._schedule_days

    @property
    def week(self) -> int:
        return self.state.week

    @property
    def last_results(self) -> List[ActionResult]:
        return self._last_results

    @property
    def last_week(self) -> Dict[str, int]:
        return self._last_week

    # --- Roster ---

    def buy_musician(self, musician: Musician):
        # No affordability check here: hiring may push the budget below zero.
        self.state.musicians.add(musician)
        self.state.budget -= musician.price
        self._log(f"ROSTER: Hired {musician.name} ({musician.instrument.value}) for ${musician.price}.")

    # --- Activities ---

    def buy_practice(self, practice: Practice):
        self.state.unused_activities.add(practice)
        self._log(f"FINANCE: Booked {practice.duration} min practice.")

    def buy_trip(self, trip: Trip):
        if self.state.budget < trip.price:
            raise InsufficientFundsError(trip.price, self.state.budget)

        self.state.budget -= trip.price
        self.state.unused_activities.add(trip)
        self._log(f"FINANCE: Bought trip to {trip.location} for ${trip.price}.")

    def buy_concert(self, concert: Concert):
        # Funds are checked before experience
        if self.state.budget < concert.price:
            raise InsufficientFundsError(concert.price, self.state.budget)
        if self.state.experience < concert.required_experience:
            raise InsufficientExperienceError(concert.required_experience, self.state.experience)

        self.state.budget -= concert.price
        self.state.unused_activities.add(concert)
        self._log(f"FINANCE: Booked concert at {concert.location} for ${concert.price}.")

    # --- Practice Room ---

    def buy_practice_room(self, room: Room):
        if room.price > self.state.budget:
            raise InsufficientFundsError(room.price, self.state.budget)
        if room.size < len(self.state.musicians):
            raise InsufficientCapacityError(room.size, len(self.state.musicians))

        self.state.budget -= room.price
        self.state.practice_room = room
        self._log(f"FINANCE: Moved into {room.location or 'new room'} (size {room.size}) for ${room.price}.")

    # --- Schedule ---

    def update_schedule(self, day: int, activity):
        if not 0 <= day < self._schedule_days:
            raise ScheduleOutOfRangeError(day, self._schedule_days)
        if activity not in self.state.unused_activities:
            raise ActivityNotFoundError(getattr(activity, 'id', None))

        current = self.state.schedule[day]
        if current is not None:
            self.state.unused_activities.add(current)
        self.state.unused_activities.remove(activity)
        self.state.schedule[day] = activity
        self._log(f"SCHEDULE: Day {day} set to {activity.kind}.")

    def find_unused(self, activity_id: UUID):
        return next((a for a in self.state.unused_activities if a.id == activity_id), None)

    # --- Weekly Resolution ---

    def run_scheduled_week(self) -> Dict[str, int]:
        """
        Play every scheduled activity once, in day order, then empty the schedule.
        Played activities are consumed; they do not go back to the unused pool.
        Returns the week's deltas.
        """
        start_budget = self.state.budget
        start_experience = self.state.experience
        start_minutes = self.state.practice_minutes
        played = {'practice': 0, 'concert': 0, 'trip': 0}

        for day in sorted(self.state.schedule):
            activity = self.state.schedule[day]
            if activity is None:
                continue

            if activity.kind == 'practice':
                self.state.practice_minutes += activity.duration

            elif activity.kind == 'concert':
                self.state.experience += activity.experience_reward
                self.state.budget += activity.revenue - activity.price
                self.state.practice_minutes -= self.state.required_practice_for_concert

            elif activity.kind == 'trip':
                self.state.experience += activity.experience_reward

            played[activity.kind] += 1

        for day in self.state.schedule:
            self.state.schedule[day] = None

        summary = {
            'practices': played['practice'],
            'concerts': played['concert'],
            'trips': played['trip'],
            'budget_change': self.state.budget - start_budget,
            'experience_gained': self.state.experience - start_experience,
            'practice_minutes_change': self.state.practice_minutes - start_minutes,
        }
        self._last_week = summary

        self._log(
            f"WEEK: {sum(played.values())} activities played | "
            f"Budget {summary['budget_change']:+d} | XP {summary['experience_gained']:+d} | "
            f"Practice {summary['practice_minutes_change']:+d} min"
        )
        logger.info("Week resolved for %s: %s", self.state.name, summary)
        return summary

    # --- Turn Driver ---

    def step(self, action: WeekAction) -> Dict[str, Any]:
        """
        Apply one week's decisions, then play the week.
        Declined purchases and assignments are reported, never raised.
        """
        results = []
        self._turn_logs = []
        self._in_turn = True

        # 1. Identity
        if action.rename:
            self.state.name = action.rename

        # 2. Roster
        for musician in action.hire:
            results.append(self._attempt('buy_musician', self.buy_musician, musician))

        # 3. Practice Room
        if action.practice_room is not None:
            results.append(self._attempt('buy_practice_room', self.buy_practice_room, action.practice_room))

        # 4. Activities
        for practice in action.practices:
            results.append(self._attempt('buy_practice', self.buy_practice, practice))
        for trip in action.trips:
            results.append(self._attempt('buy_trip', self.buy_trip, trip))
        for concert in action.concerts:
            results.append(self._attempt('buy_concert', self.buy_concert, concert))

        # 5. Schedule
        for assignment in action.assignments:
            results.append(self._attempt('update_schedule', self._assign, assignment.day, assignment.activity_id))

        # 6. Play the week
        self.run_scheduled_week()

        # Final State Update
        self.state.week += 1
        self._in_turn = False
        self.state.log_history = self._turn_logs
        self._turn_logs = []
        self._last_results = results

        obs = self._create_observation(self.state)
        obs['_internal_metrics'] = {
            'orchestra_value': calculate_orchestra_value(self.state),
            'week_summary': dict(self._last_week),
        }
        return obs

    def _attempt(self, name: str, operation: Callable, *args) -> ActionResult:
        try:
            operation(*args)
        except OrchestraError as e:
            prefix = 'SCHEDULE' if name == 'update_schedule' else 'FINANCE'
            self._log(f"{prefix}: {name} declined ({e}).")
            logger.debug("%s declined: %s", name, e)
            return ActionResult(action=name, ok=False, error=e.code, message=e.message)
        return ActionResult(action=name, ok=True)

    def _assign(self, day: int, activity_id: UUID):
        # Same check order as update_schedule: day first, then the pool
        if not 0 <= day < self._schedule_days:
            raise ScheduleOutOfRangeError(day, self._schedule_days)
        activity = self.find_unused(activity_id)
        if activity is None:
            raise ActivityNotFoundError(activity_id)
        self.update_schedule(day, activity)

    def _log(self, line: str):
        # Direct operation calls outside a turn only go to the module logger
        if self._in_turn:
            self._turn_logs.append(line)
        logger.debug(line)

    # --- Observation ---

    def _create_observation(self, state: OrchestraState) -> Dict[str, Any]:
        """Plain-dict snapshot of the orchestra for agents and the console."""
        return {
            'week': state.week,
            'name': state.name,
            'budget': state.budget,
            'experience': state.experience,
            'practice_minutes': state.practice_minutes,
            'required_practice_for_concert': state.required_practice_for_concert,
            'musicians': [m.model_dump(mode='json') for m in sorted(state.musicians, key=lambda m: m.name)],
            'practice_room': state.practice_room.model_dump(mode='json'),
            'unused_activities': [a.model_dump(mode='json') for a in state.unused_activities],
            'schedule': {
                day: (a.model_dump(mode='json') if a is not None else None)
                for day, a in sorted(state.schedule.items())
            },
            'daily_logs': state.log_history[-10:],
            'last_results': [r.model_dump(mode='json') for r in self._last_results],
        }
