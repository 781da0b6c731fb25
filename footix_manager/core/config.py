import os

# =====================================
# Global configuration for Footix Manager
# =====================================

# TEST_MODE:
# When True, testing features are enabled.
# Example uses:
#   - Seed demo data on startup
#   - Echo SQL statements
TEST_MODE = os.getenv("FOOTIX_TEST_MODE", "false").lower() in ("1", "true", "yes")

# --- Database ---
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DATABASE_PATH = os.getenv("FOOTIX_DATABASE_PATH", os.path.join(BASE_DIR, "footix.db"))
SQL_ECHO = os.getenv("FOOTIX_SQL_ECHO", "false").lower() in ("1", "true", "yes")

# --- Logging ---
LOG_LEVEL = os.getenv("FOOTIX_LOG_LEVEL", "INFO")

# =====================================
# Auction rules
# =====================================
BALANCE_BUFFER_RATIO = 0.20       # Share of balance kept aside for other operations
MARKET_VALUE_MIN_RATIO = 0.7      # Lowest accepted bid, relative to market value
MARKET_VALUE_MAX_RATIO = 1.5      # Highest accepted bid, relative to market value
MULTI_BID_BALANCE_RATIO = 0.7     # Ceiling for one club's bids in one auction

BASE_BID_INCREMENT = 100_000
BID_INCREMENT_STEP = 0.1          # +10% of the base increment per bid already placed
MAX_INCREMENT_MULTIPLIER = 2      # Increment never goes above 2x the base

BID_HISTORY_LIMIT = 10            # Bids returned with auction details

# =====================================
# Market value
# =====================================
MARKET_VALUE_BASE_OVERALL = 70
OVERALL_ADJUSTMENT_PER_POINT = 0.02
POTENTIAL_ADJUSTMENT_PER_POINT = 0.03

# =====================================
# Loans
# =====================================
LOAN_BASE_INTEREST_RATE = 0.05    # Monthly
LOAN_MIN_REPUTATION_FACTOR = 0.5
LOAN_MAX_REPUTATION_FACTOR = 1.5
LOAN_MIN_DURATION_MONTHS = 1
LOAN_MAX_DURATION_MONTHS = 36

# =====================================
# Competitions
# =====================================
DEFAULT_POINTS_WIN = 3
DEFAULT_POINTS_DRAW = 1
