"""Double Metaphone phonetic coding.

encode() returns a (primary, secondary) pair of codes, each at most four
characters, for one word. The secondary code carries an alternate
pronunciation ("Smith" -> ("SM0", "XMT")); '0' stands for the "th" sound.
Words without any Latin letters encode to ("", "").
"""
from functools import lru_cache

from engine.text_normalizer import strip_accents

CODE_LENGTH = 4
VOWELS = frozenset('AEIOUY')
SILENT_STARTS = ('GN', 'KN', 'PN', 'WR', 'PS')
_PADDING = ' ' * 5


class _Encoder:
    """Cursor over a single padded, uppercased buffer of one word."""

    def __init__(self, word):
        self.word = strip_accents(word).upper()
        self.length = len(self.word)
        self.last = self.length - 1
        self.buffer = self.word + _PADDING
        self.pos = 0
        self.primary = []
        self.secondary = []
        self.slavo_germanic = ('W' in self.word or 'K' in self.word
                               or 'CZ' in self.word or 'WITZ' in self.word)

    # --- buffer helpers ---------------------------------------------------

    def at(self, pos):
        if 0 <= pos < len(self.buffer):
            return self.buffer[pos]
        return ''

    def string_at(self, start, *candidates):
        if start < 0:
            return False
        return self.buffer.startswith(candidates, start)

    def is_vowel(self, pos):
        return self.at(pos) in VOWELS

    def add(self, main, alt=None):
        self.primary.append(main)
        self.secondary.append(main if alt is None else alt)

    def skip_double(self, letter):
        """Advance past one letter, or two when it is doubled."""
        self.pos += 2 if self.at(self.pos + 1) == letter else 1

    def _full(self):
        return (len(''.join(self.primary)) >= CODE_LENGTH
                and len(''.join(self.secondary)) >= CODE_LENGTH)

    # --- driver -----------------------------------------------------------

    def run(self):
        if self.string_at(0, *SILENT_STARTS):
            self.pos += 1
        if self.at(0) == 'X':
            self.add('S')
            self.pos += 1

        while self.pos < self.length and not self._full():
            ch = self.at(self.pos)
            if ch in VOWELS:
                if self.pos == 0:
                    self.add('A')
                self.pos += 1
                continue
            handler = _HANDLERS.get(ch)
            if handler is None:
                self.pos += 1
            else:
                handler(self)

        return (''.join(self.primary)[:CODE_LENGTH],
                ''.join(self.secondary)[:CODE_LENGTH])

    # --- letter rules -----------------------------------------------------

    def _b(self):
        self.add('P')
        self.skip_double('B')

    def _c(self):
        pos = self.pos
        # Germanic "ach" as in "bacher", "macher"
        if (pos > 1 and not self.is_vowel(pos - 2)
                and self.string_at(pos - 1, 'ACH')
                and self.at(pos + 2) != 'I'
                and (self.at(pos + 2) != 'E'
                     or self.string_at(pos - 2, 'BACHER', 'MACHER'))):
            self.add('K')
            self.pos += 2
            return
        if pos == 0 and self.string_at(pos, 'CAESAR'):
            self.add('S')
            self.pos += 2
            return
        if self.string_at(pos, 'CHIA'):
            self.add('K')
            self.pos += 2
            return
        if self.string_at(pos, 'CH'):
            self._ch()
            self.pos += 2
            return
        if self.string_at(pos, 'CZ') and not self.string_at(pos - 2, 'WICZ'):
            self.add('S', 'X')
            self.pos += 2
            return
        if self.string_at(pos + 1, 'CIA'):
            self.add('X')
            self.pos += 3
            return
        if self.string_at(pos, 'CC') and not (pos == 1 and self.at(0) == 'M'):
            if (self.string_at(pos + 2, 'I', 'E', 'H')
                    and not self.string_at(pos + 2, 'HU')):
                if ((pos == 1 and self.at(pos - 1) == 'A')
                        or self.string_at(pos - 1, 'UCCEE', 'UCCES')):
                    self.add('KS')
                else:
                    self.add('X')
                self.pos += 3
            else:
                self.add('K')
                self.pos += 2
            return
        if self.string_at(pos, 'CK', 'CG', 'CQ'):
            self.add('K')
            self.pos += 2
            return
        if self.string_at(pos, 'CI', 'CE', 'CY'):
            if self.string_at(pos, 'CIO', 'CIE', 'CIA'):
                self.add('S', 'X')
            else:
                self.add('S')
            self.pos += 2
            return

        self.add('K')
        if self.string_at(pos + 1, ' C', ' Q', ' G'):
            self.pos += 3
        elif (self.string_at(pos + 1, 'C', 'K', 'Q')
              and not self.string_at(pos + 1, 'CE', 'CI')):
            self.pos += 2
        else:
            self.pos += 1

    def _ch(self):
        pos = self.pos
        if pos > 0 and self.string_at(pos, 'CHAE'):
            self.add('K', 'X')
            return
        # Greek roots: "character", "charisma", "chorus", "chemistry"
        if (pos == 0
                and (self.string_at(pos + 1, 'HARAC', 'HARIS')
                     or self.string_at(pos + 1, 'HOR', 'HYM', 'HIA', 'HEM'))
                and not self.string_at(0, 'CHORE')):
            self.add('K')
            return
        if (self.string_at(0, 'VAN ', 'VON ', 'SCH')
                or self.string_at(pos - 2, 'ORCHES', 'ARCHIT', 'ORCHID')
                or self.string_at(pos + 2, 'T', 'S')
                or ((self.string_at(pos - 1, 'A', 'O', 'U', 'E') or pos == 0)
                    and self.string_at(pos + 2, 'L', 'R', 'N', 'M', 'B', 'H',
                                       'F', 'V', 'W', ' '))):
            self.add('K')
        elif pos > 0:
            if self.string_at(0, 'MC'):
                self.add('K')
            else:
                self.add('X', 'K')
        else:
            self.add('X')

    def _d(self):
        pos = self.pos
        if self.string_at(pos, 'DG'):
            if self.string_at(pos + 2, 'I', 'E', 'Y'):
                self.add('J')
                self.pos += 3
            else:
                self.add('TK')
                self.pos += 2
            return
        if self.string_at(pos, 'DT', 'DD'):
            self.add('T')
            self.pos += 2
            return
        self.add('T')
        self.pos += 1

    def _f(self):
        self.add('F')
        self.skip_double('F')

    def _g(self):
        pos = self.pos
        nxt = self.at(pos + 1)
        if nxt == 'H':
            self._gh()
            return
        if nxt == 'N':
            if pos == 1 and self.is_vowel(0) and not self.slavo_germanic:
                self.add('KN', 'N')
            elif (not self.string_at(pos + 2, 'EY') and nxt != 'Y'
                  and not self.slavo_germanic):
                self.add('N', 'KN')
            else:
                self.add('KN')
            self.pos += 2
            return
        if self.string_at(pos + 1, 'LI') and not self.slavo_germanic:
            self.add('KL', 'L')
            self.pos += 2
            return
        if pos == 0 and (nxt == 'Y' or self.string_at(
                pos + 1, 'ES', 'EP', 'EB', 'EL', 'EY', 'IB', 'IL', 'IN', 'IE',
                'EI', 'ER')):
            self.add('K', 'J')
            self.pos += 2
            return
        if ((self.string_at(pos + 1, 'ER') or nxt == 'Y')
                and not self.string_at(0, 'DANGER', 'RANGER', 'MANGER')
                and not self.string_at(pos - 1, 'E', 'I')
                and not self.string_at(pos - 1, 'RGY', 'OGY')):
            self.add('K', 'J')
            self.pos += 2
            return
        if (self.string_at(pos + 1, 'E', 'I', 'Y')
                or self.string_at(pos - 1, 'AGGI', 'OGGI')):
            if (self.string_at(0, 'VAN ', 'VON ', 'SCH')
                    or self.string_at(pos + 1, 'ET')):
                self.add('K')
            elif self.string_at(pos + 1, 'IER '):
                self.add('J')
            else:
                self.add('J', 'K')
            self.pos += 2
            return
        self.add('K')
        self.skip_double('G')

    def _gh(self):
        pos = self.pos
        if pos > 0 and not self.is_vowel(pos - 1):
            self.add('K')
        elif pos == 0:
            self.add('J' if self.at(pos + 2) == 'I' else 'K')
        elif ((pos > 1 and self.string_at(pos - 2, 'B', 'H', 'D'))
              or (pos > 2 and self.string_at(pos - 3, 'B', 'H', 'D'))
              or (pos > 3 and self.string_at(pos - 4, 'B', 'H'))):
            # Silent as in "hugh", "bough", "broughton"
            pass
        elif (pos > 2 and self.at(pos - 1) == 'U'
              and self.string_at(pos - 3, 'C', 'G', 'L', 'R', 'T')):
            # "laugh", "cough", "tough"
            self.add('F')
        elif pos > 0 and self.at(pos - 1) != 'I':
            self.add('K')
        self.pos += 2

    def _h(self):
        pos = self.pos
        if (pos == 0 or self.is_vowel(pos - 1)) and self.is_vowel(pos + 1):
            self.add('H')
            self.pos += 2
        else:
            self.pos += 1

    def _j(self):
        pos = self.pos
        if self.string_at(pos, 'JOSE') or self.string_at(0, 'SAN '):
            if (pos == 0 and self.at(pos + 4) == ' ') or self.string_at(0, 'SAN '):
                self.add('H')
            else:
                self.add('J', 'H')
            self.pos += 1
            return
        if pos == 0:
            self.add('J', 'A')
        elif (self.is_vowel(pos - 1) and not self.slavo_germanic
              and self.at(pos + 1) in ('A', 'O')):
            self.add('J', 'H')
        elif pos == self.last:
            self.add('J', '')
        elif (not self.string_at(pos + 1, 'L', 'T', 'K', 'S', 'N', 'M', 'B', 'Z')
              and not self.string_at(pos - 1, 'S', 'K', 'L')):
            self.add('J')
        self.skip_double('J')

    def _k(self):
        self.add('K')
        self.skip_double('K')

    def _l(self):
        pos = self.pos
        if self.at(pos + 1) == 'L':
            # Spanish "-illo", "-illa", "-alle"
            if ((pos == self.length - 3
                 and self.string_at(pos - 1, 'ILLO', 'ILLA', 'ALLE'))
                    or ((self.string_at(self.last - 1, 'AS', 'OS')
                         or self.string_at(self.last, 'A', 'O'))
                        and self.string_at(pos - 1, 'ALLE'))):
                self.add('L', '')
            else:
                self.add('L')
            self.pos += 2
            return
        self.add('L')
        self.pos += 1

    def _m(self):
        pos = self.pos
        self.add('M')
        # "dumb", "thumb", "plumber"
        if ((self.string_at(pos - 1, 'UMB')
             and (pos + 1 == self.last or self.string_at(pos + 2, 'ER')))
                or self.at(pos + 1) == 'M'):
            self.pos += 2
        else:
            self.pos += 1

    def _n(self):
        self.add('N')
        self.skip_double('N')

    def _p(self):
        pos = self.pos
        if self.at(pos + 1) == 'H':
            self.add('F')
            self.pos += 2
            return
        self.add('P')
        self.pos += 2 if self.string_at(pos + 1, 'P', 'B') else 1

    def _q(self):
        self.add('K')
        self.skip_double('Q')

    def _r(self):
        pos = self.pos
        # French final "-ier" is silent in the primary code
        if (pos == self.last and not self.slavo_germanic
                and self.string_at(pos - 2, 'IE')
                and not self.string_at(pos - 4, 'ME', 'MA')):
            self.add('', 'R')
        else:
            self.add('R')
        self.skip_double('R')

    def _s(self):
        pos = self.pos
        if self.string_at(pos - 1, 'ISL', 'YSL'):
            # "island", "carlysle"
            self.pos += 1
            return
        if pos == 0 and self.string_at(pos, 'SUGAR'):
            self.add('X', 'S')
            self.pos += 1
            return
        if self.string_at(pos, 'SH'):
            if self.string_at(pos + 1, 'HEIM', 'HOEK', 'HOLM', 'HOLZ'):
                self.add('S')
            else:
                self.add('X')
            self.pos += 2
            return
        if self.string_at(pos, 'SIO', 'SIA', 'SIAN'):
            if self.slavo_germanic:
                self.add('S')
            else:
                self.add('S', 'X')
            self.pos += 3
            return
        if ((pos == 0 and self.string_at(pos + 1, 'M', 'N', 'L', 'W'))
                or self.string_at(pos + 1, 'Z')):
            self.add('S', 'X')
            self.skip_double('Z')
            return
        if self.string_at(pos, 'SC'):
            self._sc()
            self.pos += 3
            return
        if pos == self.last and self.string_at(pos - 2, 'AI', 'OI'):
            # French "-ais", "-ois"
            self.add('', 'S')
        else:
            self.add('S')
        self.pos += 2 if self.string_at(pos + 1, 'S', 'Z') else 1

    def _sc(self):
        pos = self.pos
        if self.at(pos + 2) == 'H':
            if self.string_at(pos + 3, 'OO', 'ER', 'EN', 'UY', 'ED', 'EM'):
                # Dutch "school", "schenker"
                if self.string_at(pos + 3, 'ER', 'EN'):
                    self.add('X', 'SK')
                else:
                    self.add('SK')
            elif pos == 0 and not self.is_vowel(3) and self.at(3) != 'W':
                self.add('X', 'S')
            else:
                self.add('X')
        elif self.string_at(pos + 2, 'I', 'E', 'Y'):
            self.add('S')
        else:
            self.add('SK')

    def _t(self):
        pos = self.pos
        if self.string_at(pos, 'TION'):
            self.add('X')
            self.pos += 3
            return
        if self.string_at(pos, 'TIA', 'TCH'):
            self.add('X')
            self.pos += 3
            return
        if self.string_at(pos, 'TH', 'TTH'):
            if (self.string_at(pos + 2, 'OM', 'AM')
                    or self.string_at(0, 'VAN ', 'VON ', 'SCH')):
                self.add('T')
            else:
                self.add('0', 'T')
            self.pos += 2
            return
        self.add('T')
        self.pos += 2 if self.string_at(pos + 1, 'T', 'D') else 1

    def _v(self):
        self.add('F')
        self.skip_double('V')

    def _w(self):
        pos = self.pos
        if self.string_at(pos, 'WR'):
            self.add('R')
            self.pos += 2
            return
        if pos == 0 and (self.is_vowel(pos + 1) or self.string_at(pos, 'WH')):
            if self.is_vowel(pos + 1):
                self.add('A', 'F')
            else:
                self.add('A')
        # Polish "-ewski", Germanic "sch-"
        if ((pos == self.last and self.is_vowel(pos - 1))
                or self.string_at(pos - 1, 'EWSKI', 'EWSKY', 'OWSKI', 'OWSKY')
                or self.string_at(0, 'SCH')):
            self.add('', 'F')
            self.pos += 1
        elif self.string_at(pos, 'WICZ', 'WITZ'):
            self.add('TS', 'FX')
            self.pos += 4
        else:
            self.pos += 1

    def _x(self):
        pos = self.pos
        # French final "-eaux", "-ieux"
        if not (pos == self.last
                and (self.string_at(pos - 3, 'IAU', 'EAU')
                     or self.string_at(pos - 2, 'AU', 'OU'))):
            self.add('KS')
        self.pos += 2 if self.string_at(pos + 1, 'C', 'X') else 1

    def _z(self):
        pos = self.pos
        if self.at(pos + 1) == 'H':
            self.add('J')
            self.pos += 2
            return
        if (self.string_at(pos + 1, 'ZO', 'ZI', 'ZA')
                or (self.slavo_germanic and pos > 0 and self.at(pos - 1) != 'T')):
            self.add('S', 'TS')
        else:
            self.add('S')
        self.skip_double('Z')


_HANDLERS = {
    'B': _Encoder._b, 'C': _Encoder._c, 'D': _Encoder._d, 'F': _Encoder._f,
    'G': _Encoder._g, 'H': _Encoder._h, 'J': _Encoder._j, 'K': _Encoder._k,
    'L': _Encoder._l, 'M': _Encoder._m, 'N': _Encoder._n, 'P': _Encoder._p,
    'Q': _Encoder._q, 'R': _Encoder._r, 'S': _Encoder._s, 'T': _Encoder._t,
    'V': _Encoder._v, 'W': _Encoder._w, 'X': _Encoder._x, 'Z': _Encoder._z,
}


@lru_cache(maxsize=4096)
def encode(word):
    """Double Metaphone codes for a word: (primary, secondary)."""
    if not word:
        return '', ''
    return _Encoder(word).run()


def phonetic_match(word1, word2):
    """True if any code of word1 equals any code of word2.

    Empty codes never match, so text without Latin letters gets no
    phonetic leniency.
    """
    codes1 = {code for code in encode(word1) if code}
    codes2 = {code for code in encode(word2) if code}
    return bool(codes1 & codes2)
