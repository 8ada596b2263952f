"""Number-word to digit substitution ("twenty" -> "20")."""
import re

NUMBER_WORDS = {
    'zero': '0', 'one': '1', 'two': '2', 'three': '3', 'four': '4',
    'five': '5', 'six': '6', 'seven': '7', 'eight': '8', 'nine': '9',
    'ten': '10', 'eleven': '11', 'twelve': '12', 'thirteen': '13',
    'fourteen': '14', 'fifteen': '15', 'sixteen': '16', 'seventeen': '17',
    'eighteen': '18', 'nineteen': '19', 'twenty': '20',
    'thirty': '30', 'forty': '40', 'fifty': '50', 'sixty': '60',
    'seventy': '70', 'eighty': '80', 'ninety': '90',
    'hundred': '100', 'thousand': '1000', 'million': '1000000',
}

_NUMBER_WORD_RE = re.compile(
    r'\b(' + '|'.join(sorted(NUMBER_WORDS, key=len, reverse=True)) + r')\b')


def normalize_numbers(text):
    """Replace whole-word number names in lowercase text with digits."""
    return _NUMBER_WORD_RE.sub(lambda m: NUMBER_WORDS[m.group(1)], text)
