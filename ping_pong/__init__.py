"""
Ping Pong: a two-player paddle-and-ball game built on pygame
"""

__version__ = "0.1.0"
