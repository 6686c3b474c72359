"""
Rule-based transcript analysis for VoxPrompt.

This module derives intent, output type, topics, constraints, named entities
and an ambiguity score from raw transcript text. Matching is purely lexical
(substring and regular-expression search); no model or external service is
involved, so the same transcript always yields the same ExtractedData.
"""

import re
from typing import List, Optional, Sequence, Tuple

from .types import ExtractedData

# Vocabulary tables are ordered: intent and output type use first-match-wins
# over the declaration order, topics collect every match.
INTENT_VOCAB: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    (
        "create",
        ("create", "build", "make", "design", "develop", "generate", "write", "draft",
         "produce", "compose", "construct", "implement", "set up", "code", "program"),
    ),
    (
        "analyze",
        ("analyze", "analyse", "evaluate", "assess", "review", "examine", "investigate",
         "audit", "inspect", "measure", "compare", "benchmark"),
    ),
    (
        "fix",
        ("fix", "debug", "repair", "resolve", "solve", "troubleshoot", "correct", "patch",
         "address", "handle", "deal with"),
    ),
    (
        "explain",
        ("explain", "describe", "clarify", "summarize", "summarise", "outline", "define",
         "document", "illustrate", "teach", "show me"),
    ),
    (
        "optimize",
        ("optimize", "optimise", "improve", "enhance", "refactor", "refine", "upgrade",
         "speed up", "streamline", "simplify", "clean up"),
    ),
    (
        "convert",
        ("convert", "transform", "translate", "migrate", "change", "adapt", "rewrite",
         "format", "port", "move"),
    ),
    (
        "plan",
        ("plan", "organize", "organise", "structure", "schedule", "arrange", "prioritize",
         "prioritise", "coordinate", "roadmap"),
    ),
    (
        "research",
        ("research", "find", "search", "discover", "explore", "look up", "gather",
         "collect", "survey", "identify"),
    ),
)

OUTPUT_VOCAB: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    (
        "code",
        ("code", "function", "class", "api", "script", "program", "application", "component",
         "module", "library", "algorithm", "database", "query", "endpoint", "microservice",
         "test", "unit test"),
    ),
    (
        "list",
        ("list", "bullet", "items", "steps", "tasks", "checklist", "enumeration",
         "points", "action items"),
    ),
    (
        "document",
        ("document", "report", "summary", "outline", "brief", "overview", "write-up",
         "article", "essay", "documentation", "readme", "spec"),
    ),
    ("email", ("email", "message", "response", "reply", "letter", "communication", "newsletter")),
    (
        "analysis",
        ("analysis", "evaluation", "assessment", "review", "comparison", "breakdown",
         "findings", "insights"),
    ),
    ("plan", ("plan", "roadmap", "strategy", "approach", "proposal", "action items", "next steps")),
    ("presentation", ("presentation", "slides", "deck", "pitch", "slideshow")),
)

TOPIC_VOCAB: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    (
        "technology",
        ("software", "code", "programming", "tech", "algorithm", "database", "api",
         "web", "mobile", "cloud", "ai", "machine learning", "devops", "kubernetes",
         "docker", "microservice"),
    ),
    (
        "business",
        ("business", "company", "revenue", "profit", "market", "customer", "client",
         "sales", "product", "strategy", "startup", "enterprise", "b2b", "b2c"),
    ),
    (
        "marketing",
        ("marketing", "campaign", "brand", "audience", "content", "social media", "seo",
         "ads", "promotion", "engagement", "conversion", "funnel", "lead"),
    ),
    (
        "support",
        ("issue", "problem", "bug", "error", "ticket", "complaint", "support",
         "broken", "not working", "fails", "crash", "outage"),
    ),
    (
        "research",
        ("research", "study", "findings", "data", "evidence", "sources", "literature",
         "hypothesis", "experiment", "survey", "statistics"),
    ),
    (
        "meeting",
        ("meeting", "call", "discussion", "agenda", "attendees", "minutes", "decisions",
         "action items", "standup", "sync", "retrospective"),
    ),
)

# Hedging phrases; overlapping alternatives across patterns are counted once per pattern
AMBIGUITY_PATTERNS = [
    re.compile(
        r"\b(something|somehow|maybe|perhaps|probably|possibly|i think|i guess|not sure|kind of|sort of|a bit|kinda|sorta)\b",
        re.IGNORECASE,
    ),
    re.compile(r"\b(etc\.?|and so on|and stuff|or whatever|things like that|you know|like)\b", re.IGNORECASE),
    re.compile(r"\b(a thing|some thing|that thing|this thing|the thing|whatever)\b", re.IGNORECASE),
    re.compile(r"\b(not sure|unclear|might|could be|possibly|maybe)\b", re.IGNORECASE),
]

# Obligations, exclusions, quantitative bounds, exclusivity, deadlines
CONSTRAINT_PATTERNS = [
    re.compile(r"\b(?:must|should|need to|have to|required?|necessary|needs to)\b[^.!?\n]{3,80}", re.IGNORECASE),
    re.compile(r"\b(?:without|except|excluding|not including|avoid|don'?t use|no)\b[^.!?\n]{3,60}", re.IGNORECASE),
    re.compile(r"\b(?:within|less than|more than|at least|at most|maximum|minimum|max|min)\b[^.!?\n]{3,60}", re.IGNORECASE),
    re.compile(r"\b(?:only|just|specifically|exclusively|strictly)\b[^.!?\n]{3,60}", re.IGNORECASE),
    re.compile(r"\b(?:deadline|by|before|until|no later than)\b[^.!?\n]{3,60}", re.IGNORECASE),
]

CAPITALIZED_SEQUENCE_PATTERN = re.compile(r"\b([A-Z][a-z]+(?:\s+[A-Z][a-z]+){0,3})\b")
ACRONYM_PATTERN = re.compile(r"\b([A-Z]{2,})\b")
WHITESPACE_PATTERN = re.compile(r"\s+")

SENTENCE_TERMINATORS = ".!?\n"

MAX_CONSTRAINTS = 6
MAX_CONSTRAINT_LENGTH = 200
MAX_ENTITIES = 10


def extract_from_transcript(transcript: str) -> ExtractedData:
    """
    Extract semantic information from a raw transcript string.

    Never raises: empty or unusual input yields the default tags, a zero
    word count and a high ambiguity score.

    Args:
        transcript: Raw transcript text

    Returns:
        ExtractedData describing the transcript
    """
    lower = transcript.lower()
    word_count = len(transcript.split())

    return ExtractedData(
        primary_intent=detect_intent(lower),
        output_type=detect_output_type(lower),
        topics=detect_topics(lower),
        constraints=extract_constraints(transcript),
        entities=extract_entities(transcript),
        ambiguity_score=calculate_ambiguity(transcript, word_count),
        word_count=word_count,
    )


def _first_match(lower: str, vocab: Sequence[Tuple[str, Tuple[str, ...]]]) -> Optional[str]:
    for tag, phrases in vocab:
        if any(phrase in lower for phrase in phrases):
            return tag
    return None


def detect_intent(lower: str) -> str:
    """Return the first intent (in table order) with a phrase found in the lower-cased text."""
    return _first_match(lower, INTENT_VOCAB) or "general"


def detect_output_type(lower: str) -> str:
    """Return the first output type (in table order) with a phrase found in the lower-cased text."""
    return _first_match(lower, OUTPUT_VOCAB) or "response"


def detect_topics(lower: str) -> List[str]:
    """Return every topic with at least one phrase found in the lower-cased text."""
    return [topic for topic, phrases in TOPIC_VOCAB if any(phrase in lower for phrase in phrases)]


def has_intent_vocabulary(lower: str) -> bool:
    return _first_match(lower, INTENT_VOCAB) is not None


def extract_constraints(transcript: str) -> List[str]:
    """
    Collect constraint phrases in pattern-then-match order.

    Phrases are deduplicated on a lower-cased, whitespace-collapsed key;
    phrases of 200 characters or more are dropped and at most six are kept.

    Args:
        transcript: Original-case transcript text

    Returns:
        List of constraint phrases quoted from the transcript
    """
    seen = set()
    results: List[str] = []

    for pattern in CONSTRAINT_PATTERNS:
        for match in pattern.finditer(transcript):
            phrase = match.group(0).strip()
            key = WHITESPACE_PATTERN.sub(" ", phrase.lower())
            if key not in seen and len(phrase) < MAX_CONSTRAINT_LENGTH:
                seen.add(key)
                results.append(phrase)

    return results[:MAX_CONSTRAINTS]


def _starts_sentence(text: str, start: int) -> bool:
    """True when the position follows a sentence terminator and at most two whitespace characters."""
    if start == 0:
        return True
    for gap in range(3):
        boundary = start - gap - 1
        if boundary < 0:
            break
        if gap and not text[boundary + 1 : start].isspace():
            break
        if text[boundary] in SENTENCE_TERMINATORS:
            return True
    return False


def _capitalized_sequences(text: str) -> List[str]:
    sequences = []
    pos = 0
    while True:
        match = CAPITALIZED_SEQUENCE_PATTERN.search(text, pos)
        if match is None:
            return sequences
        if _starts_sentence(text, match.start()):
            # Retry from the next character so trailing capitalized words can still match
            pos = match.start() + 1
            continue
        sequences.append(match.group(1))
        pos = match.end()


def extract_entities(transcript: str) -> List[str]:
    """
    Find proper-noun-like names and acronyms.

    Two passes over the original-case text: capitalized sequences of one to
    four words that do not open a sentence, then ALL-CAPS tokens of two or
    more letters. First-seen order is kept and at most ten are returned.

    The start of the text counts as a sentence start, so a name that is the
    first word is dropped: "Alice met Bob." gives ["Bob"], not
    ["Alice", "Bob"]. Acronyms are found regardless of position.

    Args:
        transcript: Original-case transcript text

    Returns:
        Deduplicated entity strings
    """
    entities = dict.fromkeys(_capitalized_sequences(transcript))
    entities.update(dict.fromkeys(ACRONYM_PATTERN.findall(transcript)))
    return list(entities)[:MAX_ENTITIES]


def count_hedges(transcript: str) -> int:
    return sum(len(pattern.findall(transcript)) for pattern in AMBIGUITY_PATTERNS)


def calculate_ambiguity(transcript: str, word_count: int) -> float:
    """
    Score how underspecified a transcript is, from 0 (clear) to 1.

    Short transcripts, hedging phrases and the absence of any intent
    vocabulary each raise the score.

    Args:
        transcript: Original transcript text
        word_count: Number of whitespace-delimited tokens

    Returns:
        Score rounded to two decimals
    """
    score = 0.0

    if word_count < 15:
        score += 0.4
    elif word_count < 30:
        score += 0.2
    elif word_count < 50:
        score += 0.1

    score += min(count_hedges(transcript) * 0.12, 0.45)

    if not has_intent_vocabulary(transcript.lower()):
        score += 0.15

    return round(min(score, 1.0), 2)
