import os
from dotenv import load_dotenv

load_dotenv(override=True)

RANK_VALUE = {**{i: i for i in range(1, 10)}, 10: 10, 11: 10, 12: 10, 13: 10}

HAND_SIZE = 4
DEAL_SIZE = 6
FIFTEEN = 15
MAX_COUNT = 31

WINNING_SCORE = int(os.getenv("CRIB_WINNING_SCORE", "121"))
SCORE_DELAY = float(os.getenv("CRIB_SCORE_DELAY", "1.5"))

# computer discard heuristic: crib pips are worth more when the crib is ours
DEALER_CRIB_BIAS = float(os.getenv("CRIB_DEALER_CRIB_BIAS", "0.12"))
PONE_CRIB_BIAS = float(os.getenv("CRIB_PONE_CRIB_BIAS", "0.08"))

LOG_FILE = os.getenv("CRIB_LOG_FILE")
LOG_LEVEL = os.getenv("CRIB_LOG_LEVEL", "INFO")
