# core/constants.py

SPEED_OF_LIGHT = 3e8  # meters per second, not used by the travel-time math

ALPHA_CENTAURI_DISTANCE_M = 41_315_314_000_000_000.0  # meters

WAITING_FOR_INPUT = "waiting for input"

DIVISION_BY_ZERO_MESSAGE = (
    "Division by zero is quite problematic. "
    "(https://en.wikipedia.org/wiki/Division_by_zero)"
)
