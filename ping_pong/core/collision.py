"""
Collision detection for Ping Pong
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ping_pong.core.entities import Vector2D


def intersects(
    circle_pos: "Vector2D", circle_radius: float, rect_pos: "Vector2D", rect_size: "Vector2D"
) -> bool:
    """
    Detects collision between a circle and an axis-aligned rectangle.

    Args:
        circle_pos: Center of the circle
        circle_radius: Radius of the circle
        rect_pos: Center of the rectangle
        rect_size: Width and height of the rectangle

    Returns:
        True if the shapes overlap or touch
    """
    half_width = rect_size.x / 2
    half_height = rect_size.y / 2

    distance_x = abs(circle_pos.x - rect_pos.x)
    distance_y = abs(circle_pos.y - rect_pos.y)

    # Far outside the rectangle grown by the radius
    if distance_x > half_width + circle_radius:
        return False
    if distance_y > half_height + circle_radius:
        return False

    # Inside the cross formed by the rectangle extended along each axis
    if distance_x <= half_width:
        return True
    if distance_y <= half_height:
        return True

    corner_distance_sq = (distance_x - half_width) ** 2 + (distance_y - half_height) ** 2

    return corner_distance_sq <= circle_radius**2
