"""
Tests for the template registry, request validation and language heuristics.
"""

import pytest
from pydantic import ValidationError

from voxprompt.core.lexicon import clean_transcript, detect_language, resolve_output_language
from voxprompt.core.phrasebook import PHRASES, phrase
from voxprompt.core.templates import LANGUAGE_INSTRUCTIONS, MODEL_INSTRUCTIONS, TEMPLATES, VERBOSITY_INSTRUCTIONS, get_template
from voxprompt.core.types import MAX_TRANSCRIPT_LENGTH, GenerateOptions


class TestTemplateRegistry:
    """Test the read-only template registry."""

    def test_six_templates(self):
        """The registry holds exactly the six template ids, keyed by their own id."""
        assert list(TEMPLATES) == ["general", "coding", "marketing", "meeting", "support", "research"]
        for template_id, template in TEMPLATES.items():
            assert template.id == template_id

    def test_templates_fully_populated(self):
        """Every template carries display metadata and both preambles."""
        for template in TEMPLATES.values():
            assert template.name and template.description and template.icon
            assert template.system_context
            assert template.role_preamble and template.role_preamble_pt

    def test_get_template(self):
        """Lookup by id returns the registered config."""
        assert get_template("coding").name == "Coding Task"

    def test_unknown_template_raises(self):
        """Unknown ids are a hard failure."""
        with pytest.raises(KeyError):
            get_template("poetry")

    def test_registry_is_read_only(self):
        """Neither the mapping nor its entries can be mutated."""
        with pytest.raises(TypeError):
            TEMPLATES["poetry"] = TEMPLATES["general"]  # type: ignore[index]
        with pytest.raises(ValidationError):
            TEMPLATES["general"].name = "Changed"  # type: ignore[misc]

    def test_instruction_tables_cover_options(self):
        """Instruction tables have an entry for every option value."""
        assert set(MODEL_INSTRUCTIONS) == {"claude", "chatgpt", "universal"}
        assert set(VERBOSITY_INSTRUCTIONS) == {"short", "medium", "detailed"}
        assert set(LANGUAGE_INSTRUCTIONS) == {"auto", "en", "pt"}


class TestPhrasebook:
    """Test localized phrase lookup."""

    def test_every_phrase_has_both_languages(self):
        """All phrases exist in English and Portuguese."""
        for key, texts in PHRASES.items():
            assert set(texts) == {"en", "pt"}, key

    def test_placeholders_filled(self):
        """Keyword fields are substituted into the phrase."""
        assert phrase("domain_line", "en", topics="Technology") == "Domain: Technology"

    def test_unknown_language_raises(self):
        """Unknown languages are a hard failure."""
        with pytest.raises(KeyError):
            phrase("goal", "fr")


class TestGenerateOptions:
    """Test request validation."""

    def test_defaults(self):
        """Omitted options take their documented defaults."""
        opts = GenerateOptions(transcript="Write a haiku about autumn leaves.")
        assert (opts.template, opts.model_target, opts.verbosity, opts.language) == ("general", "universal", "medium", "auto")

    def test_transcript_is_stripped(self):
        """Surrounding whitespace is removed before validation."""
        assert GenerateOptions(transcript="   Write a haiku please.  \n").transcript == "Write a haiku please."

    def test_too_short_after_strip(self):
        """Fewer than ten characters after stripping is rejected."""
        with pytest.raises(ValidationError):
            GenerateOptions(transcript="   short    ")

    def test_too_long(self):
        """Transcripts over the maximum length are rejected."""
        with pytest.raises(ValidationError):
            GenerateOptions(transcript="a" * (MAX_TRANSCRIPT_LENGTH + 1))

    def test_boundary_lengths_accepted(self):
        """Exactly ten and exactly the maximum characters are accepted."""
        GenerateOptions(transcript="a" * 10)
        GenerateOptions(transcript="a" * MAX_TRANSCRIPT_LENGTH)

    @pytest.mark.parametrize(
        "field,value",
        [("template", "poetry"), ("model_target", "gemini"), ("verbosity", "huge"), ("language", "fr")],
    )
    def test_unknown_values_rejected(self, field, value):
        """Option values outside their fixed sets are rejected."""
        with pytest.raises(ValidationError):
            GenerateOptions(transcript="Write a haiku about autumn leaves.", **{field: value})


class TestLanguageHeuristics:
    """Test Portuguese/English detection and transcript cleanup."""

    def test_portuguese_stopwords(self):
        """Dense Portuguese stop-words are detected."""
        assert detect_language("Preciso de uma aplicação para gerir as tarefas da equipa, com notificações por email.") == "pt"

    def test_english(self):
        """Plain English is English."""
        assert detect_language("Create a Python script that parses CSV files and writes a summary report.") == "en"

    def test_english_um_filler(self):
        """An English filler 'um' alone does not make text Portuguese."""
        assert detect_language("Um, so I want a report on our sales figures for the quarter.") == "en"

    def test_portuguese_diacritics(self):
        """Several Portuguese-specific diacritics are enough on their own."""
        assert detect_language("Configuração das notificações") == "pt"

    def test_empty_is_english(self):
        """Empty text defaults to English."""
        assert detect_language("") == "en"

    def test_resolve_passthrough(self):
        """Explicit languages are kept; auto is detected."""
        assert resolve_output_language("pt", "Write a report.") == "pt"
        assert resolve_output_language("en", "Preciso de uma aplicação para isto") == "en"
        assert resolve_output_language("auto", "Write a report about sales.") == "en"

    def test_clean_transcript(self):
        """Fillers are dropped and whitespace collapsed."""
        assert clean_transcript("uh  so,   hmm we need\n a plan") == "so, we need a plan"

    def test_clean_transcript_keeps_portuguese_um(self):
        """Portuguese 'um' without a trailing comma is not a filler."""
        assert clean_transcript("Preciso de um plano") == "Preciso de um plano"
