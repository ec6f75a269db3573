# Prior state assumed for a card the user has never reviewed
DEFAULT_INTERVAL_DAYS = 1
DEFAULT_EASE_FACTOR = 2.5
DEFAULT_REPETITIONS = 0

MIN_EASE_FACTOR = 1.3
EASE_BONUS = 0.1

# Interval after the first and second consecutive successful review
FIRST_INTERVAL_DAYS = 1
SECOND_INTERVAL_DAYS = 6

LAPSE_INTERVAL_DAYS = 1
