"""
Fixed gameplay constants. Rules are not configurable.
"""

# Ball
BALL_RADIUS = 5.0
BALL_SPEED = 150.0
BALL_SPEED_INCREASE = 1.05

# The ball advances by velocity / FIXED_STEP_RATE every frame, whatever the
# real frame time was. Paddle smoothing uses the real frame time.
FIXED_STEP_RATE = 60.0

# Paddles
PADDLE_WIDTH = 10.0
PADDLE_HEIGHT = 200.0
PADDLE_MARGIN = 16.0
PADDLE_SPEED = 30.0
PADDLE_SMOOTHING = 0.2

# Seconds spent showing the winner before the next round
ROUND_DWELL = 3.0
