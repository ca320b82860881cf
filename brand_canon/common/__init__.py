# Common utilities
from .config_loader import load_config, load_priority_config
from .csv_utils import read_csv
from .errors import InvalidInputError, InvalidRecordError
from .log_config import setup_logging
from .text_utils import normalize_title, title_words, whole_word_pattern
