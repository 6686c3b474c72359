"""
Language heuristics for prompt rendering.

Provides a deterministic Portuguese/English guess used when the requested
output language is "auto", plus light cleanup of dictated text before it is
quoted in a prompt. The detection is keyword and diacritic sniffing, not real
language identification.
"""

import re

WORD_PATTERN = re.compile(r"[^\W\d_]+")
WHITESPACE_PATTERN = re.compile(r"\s+")

# Spoken fillers dropped from quoted transcripts; "um" only with a trailing comma since it is also Portuguese
FILLER_PATTERN = re.compile(r"\b(?:uh+|erm+|hmm+)\b,?\s*|\bum+,\s*", re.IGNORECASE)

# Words common in Portuguese and rare as standalone English tokens
PORTUGUESE_STOPWORDS = frozenset(
    {
        "não", "que", "para", "com", "uma", "os", "da", "das", "dos", "em", "por", "mais",
        "como", "mas", "também", "está", "estão", "são", "isso", "isto", "este", "esta", "preciso",
        "quero", "fazer", "tem", "nós", "eu", "você", "muito", "sobre", "então", "porque", "onde",
        "quando", "ao", "à", "pelo", "pela", "num", "numa", "foi", "já", "ainda", "seu", "sua",
        "precisamos", "podes", "pode", "deve", "sem", "até",
    }
)
# "um" is also an English filler, so it only counts alongside other evidence
WEAK_STOPWORDS = frozenset({"um"})

PORTUGUESE_DIACRITICS = frozenset("ãõçâêô")

MIN_STOPWORD_HITS = 2
STOPWORD_RATIO_THRESHOLD = 0.12
MIN_DIACRITIC_HITS = 2


def detect_language(text: str) -> str:
    """
    Guess whether a transcript is Portuguese or English.

    Portuguese wins when at least two stop-words make up 12% or more of the
    words, or when two or more Portuguese-specific diacritics appear.

    Args:
        text: Text to analyze

    Returns:
        'pt' or 'en'
    """
    if not text:
        return "en"

    lower = text.lower()
    words = WORD_PATTERN.findall(lower)
    hits = sum(1 for word in words if word in PORTUGUESE_STOPWORDS)
    if hits:
        hits += sum(1 for word in words if word in WEAK_STOPWORDS)

    if words and hits >= MIN_STOPWORD_HITS and hits / len(words) >= STOPWORD_RATIO_THRESHOLD:
        return "pt"

    diacritics = sum(1 for char in lower if char in PORTUGUESE_DIACRITICS)
    if diacritics >= MIN_DIACRITIC_HITS:
        return "pt"

    return "en"


def resolve_output_language(language: str, transcript: str) -> str:
    """
    Map a requested language option to the language the prompt is written in.

    Args:
        language: 'auto', 'en' or 'pt'
        transcript: Transcript used for 'auto' detection

    Returns:
        'en' or 'pt'
    """
    if language == "auto":
        return detect_language(transcript)
    return language


def clean_transcript(text: str) -> str:
    """Drop spoken fillers and collapse whitespace so the transcript quotes on one line."""
    cleaned = FILLER_PATTERN.sub("", text)
    cleaned = WHITESPACE_PATTERN.sub(" ", cleaned).strip()
    return cleaned or WHITESPACE_PATTERN.sub(" ", text).strip()
