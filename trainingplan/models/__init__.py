"""
Models package - Data models and type definitions.
"""

from .training_week import Workout, TrainingWeek

__all__ = ['Workout', 'TrainingWeek']
