"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import GameState, GameView, RejectionReason, SubmissionResult

__all__ = ['GameState', 'GameView', 'RejectionReason', 'SubmissionResult']
