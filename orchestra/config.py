# orchestra/config.py

# Base Economic Constants
INITIAL_BUDGET = 1000
INITIAL_EXPERIENCE = 0
INITIAL_PRACTICE_MINUTES = 0
INITIAL_WEEKLY_MINUTES = 1

# Practice minutes burned by every concert that is played
REQUIRED_PRACTICE_FOR_CONCERT = 2

# Schedule
SCHEDULE_DAYS = 7

# Default Practice Room (free, tiny)
DEFAULT_ROOM_SIZE = 3
DEFAULT_ROOM_PRICE = 0
DEFAULT_ROOM_LOCATION = "The smallest room at a very small music school - it even smells a bit"

# Market Sizes (offers per week)
MARKET_MUSICIANS = 4
MARKET_ROOMS = 2
MARKET_PRACTICES = 3
MARKET_TRIPS = 2
MARKET_CONCERTS = 3

# Market Price Ranges (low, high)
MUSICIAN_PRICE_RANGE = (50, 300)
ROOM_PRICE_RANGE = (100, 800)
ROOM_SIZE_RANGE = (4, 40)
TRIP_PRICE_RANGE = (20, 250)
CONCERT_PRICE_RANGE = (10, 200)
CONCERT_REVENUE_RANGE = (0, 400)
PRACTICE_DURATION_RANGE = (30, 180)

# Experience
MUSICIAN_EXPERIENCE_RANGE = (1, 10)
TRIP_EXPERIENCE_RANGE = (5, 60)
CONCERT_EXPERIENCE_RANGE = (20, 150)
CONCERT_REQUIRED_EXPERIENCE_STEP = 50  # Required experience grows with this per week
