"""Text modes: words, letters, Unicode and ASCII strings."""
from randcore.config import settings
from randcore.logic.arrays import clamp_int
from randcore.logic.models import GeneratorOutput
from randcore.logic.rng import RNGBase
from randcore.protocol import GeneratorParams


NOUNS = (
    "time", "year", "people", "way", "day", "man", "woman", "child", "world",
    "life", "hand", "part", "place", "case", "week", "company", "system",
    "program", "question", "work", "government", "number", "night", "point",
    "home", "water", "room", "mother", "area", "money", "story", "fact", "month",
    "lot", "right", "study", "book", "eye", "job", "word", "business", "issue",
    "side", "kind", "head", "house", "service", "friend", "father", "power",
    "hour", "game", "line", "end", "member", "law", "car", "city", "community",
    "name", "team", "minute", "idea", "kid", "body", "information", "back",
    "parent", "face", "others", "level", "office", "door", "health", "person",
    "art", "war", "history", "party", "result", "change", "morning", "reason",
    "research", "girl", "guy", "moment", "air", "student", "force", "education",
)

VERBS = (
    "be", "have", "do", "say", "go", "get", "make", "know", "think", "take",
    "see", "come", "want", "look", "use", "find", "give", "tell", "work", "call",
    "try", "ask", "need", "feel", "become", "leave", "put", "mean", "keep", "let",
    "begin", "seem", "help", "talk", "turn", "start", "show", "hear", "play",
    "run", "move", "like", "live", "believe", "hold", "bring", "happen", "write",
    "sit", "stand", "lose", "pay", "meet", "include", "continue", "set", "change",
    "lead", "understand", "watch", "follow", "stop", "create", "speak", "read",
    "allow", "add", "spend", "grow", "open", "walk", "win", "offer", "remember",
    "love", "consider", "appear", "buy", "wait", "serve", "die", "send", "expect",
    "build", "stay", "fall", "cut", "reach", "kill", "remain",
)

ADJECTIVES = (
    "good", "new", "first", "last", "long", "great", "little", "own", "other",
    "old", "right", "big", "high", "different", "small", "large", "next", "early",
    "young", "important", "few", "public", "bad", "same", "able", "white",
    "black", "red", "blue", "green", "yellow", "hot", "cold", "warm", "cool",
    "fast", "slow", "hard", "soft", "easy", "difficult", "happy", "sad", "angry",
    "afraid", "beautiful", "ugly", "clean", "dirty", "rich", "poor", "full",
    "empty", "heavy", "light", "loud", "quiet", "sharp", "dull", "wet", "dry",
    "sweet", "sour", "fresh", "stale", "strong", "weak", "brave", "cowardly",
    "wise", "foolish", "kind", "cruel", "calm", "wild",
)

WORD_LISTS = {
    "nouns": NOUNS,
    "verbs": VERBS,
    "adjectives": ADJECTIVES,
    "all": NOUNS + VERBS + ADJECTIVES,
}

VOWELS = "AEIOU"
CONSONANTS = "BCDFGHJKLMNPQRSTVWXYZ"

UNICODE_RANGES = {
    "basic": ((0x0020, 0x007E),),
    "latin": ((0x0020, 0x007E), (0x00A0, 0x00FF), (0x0100, 0x017F)),
    "emoji": ((0x1F300, 0x1F9FF),),
    "symbols": ((0x2000, 0x206F), (0x2100, 0x214F), (0x2190, 0x21FF)),
    "all": ((0x0020, 0xFFFF),),
}
SURROGATES = range(0xD800, 0xE000)

MAX_WORDS_PER_RESULT = 1_000
MAX_UNICODE_CHARS = 100
MAX_ASCII_CHARS = 1_000


def pick_from(rng: RNGBase, seq):
    return seq[rng.uniform_in_range(0, len(seq) - 1)]


def generate_words(params: GeneratorParams, rng: RNGBase) -> GeneratorOutput:
    count = clamp_int(params.count, 1, settings.max_count, 1)
    per_result = clamp_int(params.word_count, 1, MAX_WORDS_PER_RESULT, 10)
    word_type = params.word_type or "all"
    words = WORD_LISTS[word_type]

    values = [
        " ".join(pick_from(rng, words) for _ in range(per_result)) for _ in range(count)
    ]
    return GeneratorOutput(
        values=values,
        meta={"words_per_result": per_result, "type": word_type, "total_words": len(words)},
    )


def generate_alphabet(params: GeneratorParams, rng: RNGBase) -> GeneratorOutput:
    """Single letters; mixed case flips a fair coin per letter."""
    count = clamp_int(params.count, 1, settings.max_count, 10)
    case = params.alphabet_case or "mixed"
    vowels_only = bool(params.alphabet_vowels_only)
    source = VOWELS if vowels_only else CONSONANTS + VOWELS

    values = []
    for _ in range(count):
        letter = pick_from(rng, source)
        if case == "lower" or (case == "mixed" and rng.uniform_in_range(0, 1) == 1):
            letter = letter.lower()
        values.append(letter)
    return GeneratorOutput(values=values, meta={"case": case, "vowels_only": vowels_only})


def _unicode_char(rng: RNGBase, ranges) -> str:
    low, high = pick_from(rng, ranges)
    while True:
        code_point = rng.uniform_in_range(low, high)
        # lone surrogates are not encodable text
        if code_point not in SURROGATES:
            return chr(code_point)


def generate_unicode(params: GeneratorParams, rng: RNGBase) -> GeneratorOutput:
    count = clamp_int(params.count, 1, settings.max_count, 10)
    per_result = clamp_int(params.unicode_count, 1, MAX_UNICODE_CHARS, 1)
    name = params.unicode_range or "basic"
    ranges = UNICODE_RANGES[name]

    values = [
        "".join(_unicode_char(rng, ranges) for _ in range(per_result)) for _ in range(count)
    ]
    return GeneratorOutput(values=values, meta={"range": name, "chars_per_result": per_result})


def generate_ascii(params: GeneratorParams, rng: RNGBase) -> GeneratorOutput:
    count = clamp_int(params.count, 1, settings.max_count, 10)
    per_result = clamp_int(params.ascii_count, 1, MAX_ASCII_CHARS, 10)
    printable = params.ascii_printable is not False
    low, high = (32, 126) if printable else (0, 255)

    values = [
        "".join(chr(rng.uniform_in_range(low, high)) for _ in range(per_result))
        for _ in range(count)
    ]
    return GeneratorOutput(
        values=values, meta={"printable_only": printable, "chars_per_result": per_result}
    )
