"""
Training plan data models and type definitions.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Workout:
    """
    One quality session within a training week.
    
    Attributes:
        description: Workout description, e.g. "8k easy"
        notes: Free-text notes for the session
        target_distance: Planned distance (not present in the source file)
    """
    description: str = ''
    notes: Optional[str] = None
    target_distance: Optional[float] = None
    
    def to_dict(self) -> dict:
        """Convert workout to dictionary."""
        return {
            'description': self.description,
            'notes': self.notes,
            'target_distance': self.target_distance,
        }
    
    @classmethod
    def from_dict(cls, data: Optional[dict]) -> 'Workout':
        """Create Workout from dictionary."""
        data = data or {}
        return cls(
            description=data.get('description') or '',
            notes=data.get('notes'),
            target_distance=data.get('target_distance'),
        )


@dataclass(frozen=True)
class TrainingWeek:
    """
    Represents a single row of the training plan.
    
    Attributes:
        weeks_until_race: Weeks remaining before race day
        fraction_of_peak: Share of peak weekly volume planned for this week
        q1: First quality session
        q2: Second quality session
        weekly_easy_mileage: Planned easy kilometres
        actual_mileage: Kilometres actually run, None if not recorded
        difference: Actual minus planned, None if not recorded
        notes: Free-text notes for the week
    """
    weeks_until_race: float = 0
    fraction_of_peak: float = 0
    q1: Workout = field(default_factory=Workout)
    q2: Workout = field(default_factory=Workout)
    weekly_easy_mileage: float = 0
    actual_mileage: Optional[float] = None
    difference: Optional[float] = None
    notes: Optional[str] = None
    
    @property
    def is_empty(self) -> bool:
        """Whether this row is a blank placeholder (no countdown and no Q1 workout)."""
        return self.weeks_until_race == 0 and self.q1.description == ''
    
    def to_dict(self) -> dict:
        """Convert training week to dictionary."""
        return {
            'weeks_until_race': self.weeks_until_race,
            'fraction_of_peak': self.fraction_of_peak,
            'q1': self.q1.to_dict(),
            'q2': self.q2.to_dict(),
            'weekly_easy_mileage': self.weekly_easy_mileage,
            'actual_mileage': self.actual_mileage,
            'difference': self.difference,
            'notes': self.notes,
        }
    
    @classmethod
    def from_dict(cls, data: dict) -> 'TrainingWeek':
        """Create TrainingWeek from dictionary."""
        return cls(
            weeks_until_race=data.get('weeks_until_race') or 0,
            fraction_of_peak=data.get('fraction_of_peak') or 0,
            q1=Workout.from_dict(data.get('q1')),
            q2=Workout.from_dict(data.get('q2')),
            weekly_easy_mileage=data.get('weekly_easy_mileage') or 0,
            actual_mileage=data.get('actual_mileage'),
            difference=data.get('difference'),
            notes=data.get('notes'),
        )
