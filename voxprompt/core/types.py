"""
Type definitions for VoxPrompt.

This module defines the structured data that flows through the generation
pipeline: the features extracted from a transcript, the validated generation
options, and the generated prompt with its metadata.
"""

from typing import List, Literal

from pydantic import BaseModel, Field, field_validator

Intent = Literal["create", "analyze", "fix", "explain", "optimize", "convert", "plan", "research", "general"]
OutputType = Literal["code", "list", "document", "email", "analysis", "plan", "presentation", "response"]
Topic = Literal["technology", "business", "marketing", "support", "research", "meeting"]

PromptTemplate = Literal["general", "coding", "marketing", "meeting", "support", "research"]
ModelTarget = Literal["claude", "chatgpt", "universal"]
Verbosity = Literal["short", "medium", "detailed"]
OutputLanguage = Literal["auto", "en", "pt"]

MIN_TRANSCRIPT_LENGTH = 10
MAX_TRANSCRIPT_LENGTH = 10_000


class ExtractedData(BaseModel):
    """
    Features derived from a transcript by the rule-based extractor.

    Every field is fully determined by the transcript text.
    """

    primary_intent: Intent = Field(default="general", description="Detected action intent")
    output_type: OutputType = Field(default="response", description="Expected shape of the deliverable")
    topics: List[Topic] = Field(default_factory=list, description="Domain topics, in vocabulary order")
    constraints: List[str] = Field(default_factory=list, max_length=6, description="Constraint phrases quoted from the transcript")
    entities: List[str] = Field(default_factory=list, max_length=10, description="Proper-noun-like names and acronyms")
    ambiguity_score: float = Field(default=0.0, ge=0.0, le=1.0, description="0 = clear, 1 = very ambiguous")
    word_count: int = Field(default=0, ge=0, description="Whitespace-delimited tokens in the trimmed transcript")


class GenerateOptions(BaseModel):
    """
    Validated request for prompt generation.

    The transcript is stripped before its length is checked.
    """

    transcript: str = Field(..., min_length=MIN_TRANSCRIPT_LENGTH, max_length=MAX_TRANSCRIPT_LENGTH, description="Transcript text")
    template: PromptTemplate = Field(default="general", description="Template id")
    model_target: ModelTarget = Field(default="universal", description="Target assistant family")
    verbosity: Verbosity = Field(default="medium", description="Level of detail")
    language: OutputLanguage = Field(default="auto", description="Language of the generated prompt")

    @field_validator("transcript", mode="before")
    @classmethod
    def strip_transcript(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value


class PromptMetadata(BaseModel):
    """Options echoed back alongside a generated prompt."""

    template: PromptTemplate
    model_target: ModelTarget
    verbosity: Verbosity
    language: OutputLanguage
    timestamp: str = Field(..., description="ISO-8601 generation time (UTC)")
    used_ai: bool = Field(..., description="True when the AI-enhanced path produced the prompt")


class GeneratedPrompt(BaseModel):
    """Final result of a generation request."""

    prompt: str = Field(..., description="Markdown prompt")
    metadata: PromptMetadata
