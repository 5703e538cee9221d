KB = 1024
MB = 1024 * KB
GB = 1024 * MB

CHUNK_SIZE = 1 * MB                 # write in 1 MB chunks
MAX_FILE_SIZE = 2 * GB              # absolute per-file ceiling

OUTPUT_PREFIX = "DATA"

DEFAULT_EXTENSIONS = ["conf", "sql", "bak", "zip"]
LOGGABLE_EXTENSIONS = frozenset({"sql", "bak"})
KEYWORD_PROBABILITY = 0.5

FILE_COUNT_RANGE = (4, 10)          # [low, high)

CONF_SIZE_BAND = (1 * KB, 25 * KB)  # [low, high)
RANDOM_FRACTION_BAND = (0.10, 0.40)

MAX_NAME_ATTEMPTS = 5000

FREE_SPACE_WARN_RATIO = 0.95
FILLERS = ("urandom", "keystream", "repeat")
