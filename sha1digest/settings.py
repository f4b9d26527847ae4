import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_BUFFER_SIZE = 1024 * 4

# "1" skips timing the external sha1sum program in the benchmark
WITHOUT_SHA1SUM = os.getenv("WITHOUT_SHA1SUM", "0") == "1"

LOG_LEVEL = os.getenv("SHA1DIGEST_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
# validated by the cli when it is used
BUFFER_SIZE = os.getenv("SHA1DIGEST_BUFFER_SIZE", str(DEFAULT_BUFFER_SIZE))
