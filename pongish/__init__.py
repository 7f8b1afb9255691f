"""
Pongish - somewhat Pong-like
"""

__version__ = "0.1.0"
