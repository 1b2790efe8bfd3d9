from .vector2d import Vector2D

__all__ = ["Vector2D"]
