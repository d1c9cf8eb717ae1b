import os

# Everything else goes through this host, the same way the web front end proxies /assist/* to it.
BASE_URL: str = os.environ.get("ASSIST_BASE_URL", "https://assist.org").rstrip("/")

REQUEST_TIMEOUT_SECONDS: float = 30.0

# ASSIST answers with a 200 and this body once the quota is used up.
RATE_LIMIT_MESSAGE: str = "API calls quota exceeded! maximum admitted 50 per 5m."
RATE_LIMIT_RETRY_SECONDS: float = 30.0

# At most this many requests in flight, each holding its slot for REQUEST_DELAY_SECONDS after it returns.
MAX_CONCURRENT_REQUESTS: int = 4
REQUEST_DELAY_SECONDS: float = 3.0

MAJOR_CATEGORY_CODE: str = "major"

SYSTEMS: list[str] = [
    "California Polytechnic University",
    "California State University",
    "University of California",
]

DEFAULT_SYSTEM: str = "California Polytechnic University"

# Cal Poly SLO
DEFAULT_INSTITUTION_ID: int = 11
