# orchestra/diagnostics.py
from typing import Any, Dict, List
import numpy as np
from .models import ActionResult, OrchestraState, WeekAction


class Diagnostics:
    def __init__(self, scenario_id: str):
        self.scenario_id = scenario_id

        # Tracking Data
        self.history = []
        self.actions = []

        # Metrics
        self.total_hires = 0
        self.total_practices = 0
        self.total_trips = 0
        self.total_concerts = 0
        self.room_changes = 0
        self.declined = 0

    def record_step(self, state: OrchestraState, action: WeekAction, results: List[ActionResult],
                    week_summary: Dict[str, int]):
        """Record a single simulated week"""
        step_data = {
            'week': state.week,
            'budget': state.budget,
            'experience': state.experience,
            'practice_minutes': state.practice_minutes,
            'roster_size': len(state.musicians),
            'room_size': state.practice_room.size,
            'concerts_played': week_summary.get('concerts', 0),
        }
        self.history.append(step_data)
        self.actions.append(action)

        # Update Aggregate Metrics
        accepted = [r.action for r in results if r.ok]
        self.total_hires += accepted.count('buy_musician')
        self.total_practices += accepted.count('buy_practice')
        self.total_trips += accepted.count('buy_trip')
        self.total_concerts += accepted.count('buy_concert')
        self.room_changes += accepted.count('buy_practice_room')
        self.declined += len([r for r in results if not r.ok])

    def classify_strategy(self) -> str:
        """Classify the agent's strategy based on behavior"""
        if not self.history:
            return "Unknown"

        avg_budget = np.mean([d['budget'] for d in self.history])
        weeks = len(self.history)

        if self.total_practices + self.total_trips + self.total_concerts == 0:
            return "Idle"
        elif avg_budget < 0:
            return "Overspender"
        elif self.total_concerts > weeks:
            return "Performer"
        elif self.total_trips > self.total_concerts:
            return "Touring"
        else:
            return "Rehearsal Focused"

    def generate_report(self) -> Dict[str, Any]:
        """Generate final diagnostic report"""
        return {
            'scenario_id': self.scenario_id,
            'strategy': self.classify_strategy(),
            'final_budget': self.history[-1]['budget'] if self.history else 0,
            'final_experience': self.history[-1]['experience'] if self.history else 0,
            'final_practice_minutes': self.history[-1]['practice_minutes'] if self.history else 0,
            'weeks': len(self.history),
            'avg_concerts_per_week': float(np.mean([d['concerts_played'] for d in self.history])) if self.history else 0.0,
            'metrics': {
                'hires': self.total_hires,
                'practices': self.total_practices,
                'trips': self.total_trips,
                'concerts': self.total_concerts,
                'room_changes': self.room_changes,
                'declined': self.declined,
            }
        }
