"""Console exercises: Kirchhoff's laws, ASCII shapes, a boss fight and a seven-segment display."""

__version__ = "0.1.0"
__all__ = ["circuits", "shapes", "boss_fight", "segment_display"]