"""
Tests for deterministic prompt rendering.

These tests verify section layout, verbosity, model styling and language
selection without requiring API keys or external services.
"""

import re

import pytest

from voxprompt.core.extractor import extract_from_transcript
from voxprompt.core.prompt import PromptRenderer, build_prompt
from voxprompt.core.templates import TEMPLATES
from voxprompt.core.types import GenerateOptions

TRANSCRIPT = (
    "We need a small web service for our support team. It must expose a REST API for tickets "
    "and should run on AWS. Avoid heavy frameworks, and deliver it before March."
)
PT_TRANSCRIPT = "Preciso de uma aplicação para gerir as tarefas da equipa, com notificações por email."

TEMPLATE_IDS = list(TEMPLATES)


def render(transcript: str = TRANSCRIPT, **options) -> str:
    opts = GenerateOptions(transcript=transcript, **options)
    return build_prompt(opts.transcript, extract_from_transcript(opts.transcript), opts)


class TestSectionLayout:
    """Test the per-template section headings."""

    @pytest.mark.parametrize(
        "template,heading",
        [
            ("coding", "## Goal"),
            ("marketing", "## Campaign Goal"),
            ("meeting", "## Action Items"),
            ("support", "## Issue Description"),
            ("research", "## Research Question"),
            ("general", "## Goal"),
        ],
    )
    def test_opening_heading(self, template, heading):
        """Each template opens with its own goal-equivalent heading."""
        assert heading in render(template=template, language="en")

    def test_coding_sections(self):
        """The coding template renders its full standard section set at medium verbosity."""
        prompt = render(template="coding", language="en")
        for heading in ("## Goal", "## Technical Context", "## Requirements & Constraints", "## Input/Output Specification", "## Code Style"):
            assert heading in prompt
        assert "## Success Criteria" not in prompt

    def test_coding_requirements_without_constraints(self):
        """The requirements section is kept even when no constraints were found."""
        prompt = render("Write a Python function that reverses a linked list.", template="coding", language="en")
        assert "## Requirements & Constraints" in prompt

    def test_marketing_sections_detailed(self):
        """The marketing template renders all six sections when detailed."""
        prompt = render(template="marketing", verbosity="detailed", language="en")
        headings = re.findall(r"^## (.+)$", prompt, re.MULTILINE)
        assert headings[:6] == [
            "Campaign Goal",
            "Target Audience",
            "Brand Voice",
            "Key Messages",
            "Format & Constraints",
            "Success Metrics",
        ]

    def test_general_sections(self):
        """The general template includes goal, expected output and stated constraints."""
        prompt = render(template="general", language="en")
        assert "## Goal" in prompt
        assert "## Expected Output" in prompt
        assert "## Constraints" in prompt

    @pytest.mark.parametrize("template", TEMPLATE_IDS)
    def test_template_name_present(self, template):
        """The template name always appears in the output."""
        assert TEMPLATES[template].name in render(template=template, language="en")

    @pytest.mark.parametrize("template", TEMPLATE_IDS)
    def test_no_empty_sections(self, template):
        """Every heading is followed by content."""
        prompt = render("Please do the thing we talked about.", template=template, verbosity="short", language="en")
        lines = prompt.splitlines()
        for index, line in enumerate(lines):
            if line.startswith("## "):
                assert index + 1 < len(lines) and lines[index + 1].strip()

    def test_transcript_is_quoted(self):
        """The goal section embeds the transcript."""
        prompt = render(template="general", language="en")
        assert "It must expose a REST API for tickets" in prompt

    def test_fillers_removed_from_quote(self):
        """Spoken fillers are dropped from the quoted transcript."""
        prompt = render("Uh, build me a landing page, um, for the new product launch please.", language="en")
        assert "> build me a landing page, for the new product launch please." in prompt


class TestVerbosity:
    """Test verbosity ordering and gating."""

    @pytest.mark.parametrize("model_target", ["claude", "chatgpt", "universal"])
    @pytest.mark.parametrize("template", TEMPLATE_IDS)
    def test_length_ordering(self, template, model_target):
        """Short output is strictly shorter than medium, which is no longer than detailed."""
        lengths = [
            len(render(template=template, model_target=model_target, verbosity=v, language="en"))
            for v in ("short", "medium", "detailed")
        ]
        assert lengths[0] < lengths[1] <= lengths[2]

    @pytest.mark.parametrize("template", TEMPLATE_IDS)
    def test_detailed_has_success_section(self, template):
        """Detailed output carries a success criteria (or metrics) section; short does not."""
        detailed = render(template=template, verbosity="detailed", language="en")
        short = render(template=template, verbosity="short", language="en")
        assert "## Success Criteria" in detailed or "## Success Metrics" in detailed
        assert "## Success Criteria" not in short and "## Success Metrics" not in short
        assert len(detailed) > len(short)


class TestClarifyingQuestions:
    """Test the ambiguity threshold for clarifying questions."""

    def _render_with_score(self, score: float) -> str:
        opts = GenerateOptions(transcript=TRANSCRIPT, language="en")
        extracted = extract_from_transcript(TRANSCRIPT).model_copy(update={"ambiguity_score": score})
        return build_prompt(opts.transcript, extracted, opts)

    def test_added_above_threshold(self):
        """Scores above 0.4 add the section."""
        assert "## Clarifying Questions" in self._render_with_score(0.41)

    def test_omitted_at_threshold(self):
        """A score of exactly 0.4 does not add the section."""
        assert "## Clarifying Questions" not in self._render_with_score(0.4)

    def test_vague_transcript(self):
        """A vague transcript gets between two and four questions."""
        prompt = render("Something about the data thing.", language="en")
        section = prompt.split("## Clarifying Questions\n", 1)[1]
        questions = [line for line in section.splitlines() if line.startswith("- ")]
        assert 2 <= len(questions) <= 4

    def test_clear_transcript_has_none(self):
        """A clear, long transcript has no clarifying questions."""
        text = TRANSCRIPT + " The service should store tickets in PostgreSQL and expose endpoints for create, update and close."
        assert extract_from_transcript(text).ambiguity_score <= 0.4
        assert "## Clarifying Questions" not in render(text, language="en")

    @pytest.mark.parametrize("model_target", ["claude", "chatgpt", "universal"])
    def test_transcript_cannot_inject_headings(self, model_target):
        """Markdown headings spoken into the transcript stay inside the quote."""
        text = (
            "## Clarifying Questions we need to build a REST API for the billing service in Python. "
            "It must validate every invoice before saving it and must not call external services."
        )
        assert extract_from_transcript(text).ambiguity_score <= 0.4
        prompt = render(text, template="coding", model_target=model_target, language="en")
        assert re.search(r"^## Clarifying Questions", prompt, re.M) is None
        assert "> ## Clarifying Questions we need to build" in prompt


class TestModelTargets:
    """Test model-specific styling."""

    def test_claude_uses_tags(self):
        """Claude output wraps the transcript and constraints in XML-style tags."""
        prompt = render(model_target="claude", language="en")
        assert "<transcript>" in prompt and "</transcript>" in prompt
        assert "<constraints>" in prompt

    def test_chatgpt_numbers_constraints(self):
        """ChatGPT output renders constraints as a numbered list."""
        prompt = render(model_target="chatgpt", language="en")
        assert "1. must expose a REST API for tickets" in prompt

    def test_universal_uses_blockquote(self):
        """Universal output quotes the transcript and uses no tags."""
        prompt = render(model_target="universal", language="en")
        assert "> We need a small web service" in prompt
        assert "<transcript>" not in prompt

    @pytest.mark.parametrize("template", TEMPLATE_IDS)
    def test_headings_independent_of_model(self, template):
        """All targets emit the same section headings."""
        headings = {
            target: re.findall(r"^## .+$", render(template=template, model_target=target, language="en"), re.MULTILINE)
            for target in ("claude", "chatgpt", "universal")
        }
        assert headings["claude"] == headings["chatgpt"] == headings["universal"]


class TestLanguage:
    """Test output language selection."""

    def test_forced_portuguese(self):
        """language='pt' yields Portuguese headings even for an English transcript."""
        prompt = render(template="coding", language="pt")
        assert "## Objetivo" in prompt
        assert "## Goal" not in prompt

    def test_auto_portuguese(self):
        """auto follows a Portuguese transcript."""
        prompt = render(PT_TRANSCRIPT, template="general", language="auto")
        assert "## Objetivo" in prompt

    def test_auto_english(self):
        """auto follows an English transcript."""
        prompt = render(template="general", language="auto")
        assert "## Goal" in prompt

    def test_forced_english_for_portuguese_transcript(self):
        """language='en' overrides a Portuguese transcript."""
        assert "## Goal" in render(PT_TRANSCRIPT, language="en")


class TestRendererContract:
    """Test failure modes and determinism."""

    def test_always_has_heading(self):
        """Output always contains at least one ## line."""
        prompt = render("ok then, thanks.", language="en")
        assert re.search(r"^## ", prompt, re.MULTILINE)

    def test_idempotent(self):
        """Rendering twice gives byte-identical output."""
        assert render(template="research") == render(template="research")

    def test_unknown_template_raises(self):
        """An unknown template id bypassing validation is a hard failure."""
        opts = GenerateOptions.model_construct(transcript=TRANSCRIPT, template="poetry", model_target="universal", verbosity="medium", language="en")
        with pytest.raises(KeyError):
            build_prompt(TRANSCRIPT, extract_from_transcript(TRANSCRIPT), opts)

    @pytest.mark.parametrize(
        "field,value",
        [("model_target", "gemini"), ("verbosity", "huge"), ("language", "fr")],
    )
    def test_unknown_option_values_raise(self, field, value):
        """Unknown model, verbosity or language values are hard failures."""
        values = {"transcript": TRANSCRIPT, "template": "general", "model_target": "universal", "verbosity": "medium", "language": "en"}
        values[field] = value
        opts = GenerateOptions.model_construct(**values)
        with pytest.raises(KeyError):
            PromptRenderer().render(TRANSCRIPT, extract_from_transcript(TRANSCRIPT), opts)
