"""
AI module for Pong3D
"""

from pong3d.ai.predictive import PredictiveAI
from pong3d.ai.predictive import create_ai

__all__ = ["PredictiveAI", "create_ai"]
