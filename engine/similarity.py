"""String similarity: Jaro-Winkler score and anagram detection."""

WINKLER_PREFIX_LIMIT = 4
WINKLER_SCALE = 0.1


def jaro_winkler(s1, s2):
    """Jaro-Winkler similarity in [0, 1]; 1.0 only for identical strings.

    Jaro counts characters matching within a window of
    max(len) // 2 - 1 positions and the transpositions among them; the
    Winkler boost rewards a common prefix of up to four characters.
    """
    if s1 == s2:
        return 1.0
    if not s1 or not s2:
        return 0.0

    len1, len2 = len(s1), len(s2)
    window = max(0, max(len1, len2) // 2 - 1)
    matched1 = [False] * len1
    matched2 = [False] * len2

    matches = 0
    for i, ch in enumerate(s1):
        start = max(0, i - window)
        end = min(i + window + 1, len2)
        for j in range(start, end):
            if matched2[j] or s2[j] != ch:
                continue
            matched1[i] = matched2[j] = True
            matches += 1
            break

    if not matches:
        return 0.0

    transpositions = 0
    k = 0
    for i in range(len1):
        if not matched1[i]:
            continue
        while not matched2[k]:
            k += 1
        if s1[i] != s2[k]:
            transpositions += 1
        k += 1

    jaro = (matches / len1 + matches / len2
            + (matches - transpositions / 2) / matches) / 3

    prefix = 0
    for a, b in zip(s1[:WINKLER_PREFIX_LIMIT], s2[:WINKLER_PREFIX_LIMIT]):
        if a != b:
            break
        prefix += 1

    return min(jaro + prefix * WINKLER_SCALE * (1 - jaro), 1.0)


def is_transposition_typo(s1, s2):
    """True if s2 is s1 with exactly one pair of adjacent letters swapped."""
    if len(s1) != len(s2):
        return False
    diffs = [i for i, (a, b) in enumerate(zip(s1, s2)) if a != b]
    if len(diffs) != 2:
        return False
    i, j = diffs
    return j == i + 1 and s1[i] == s2[j] and s1[j] == s2[i]


def is_problematic_anagram(s1, s2):
    """True if s1 and s2 are different words built from the same letters.

    A single adjacent swap ("recieve"/"receive") is a typo, not an anagram.
    """
    if len(s1) != len(s2) or s1 == s2:
        return False
    if sorted(s1) != sorted(s2):
        return False
    return not is_transposition_typo(s1, s2)
