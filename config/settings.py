"""Quizmatch — centralized configuration."""
import os
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# Flask
SECRET_KEY = os.environ.get('SECRET_KEY', 'quizmatch-dev-key')
LOG_FILE = os.environ.get('LOG_FILE', os.path.join(BASE_DIR, 'quizmatch.log'))
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()


def _env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


# Answer matching
MATCH_DEFAULTS = {
    # Share of correct words a 3+ word answer must cover
    'long_answer_word_ratio': 0.8,
    # Require each correct list item to be paired with a distinct user item
    'list_one_to_one': _env_flag('ANSWER_LIST_ONE_TO_ONE'),
}

# Scoring
SCORING_DEFAULTS = {
    'default_point_value': int(os.environ.get('DEFAULT_POINT_VALUE', 200)),
}
