"""
Prompt rendering functionality for VoxPrompt.

This module provides the deterministic builder: it turns a transcript, its
ExtractedData and the generation options into a Markdown prompt with a
template-specific set of ## sections. Verbosity controls which sections are
included and how much prose each one carries, the model target controls list
and quoting style, and the output language selects English or European
Portuguese text. Rendering is pure: identical inputs give identical output.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from .lexicon import clean_transcript, resolve_output_language
from .phrasebook import INTENT_LABELS, OUTPUT_GUIDANCE, OUTPUT_LABELS, SUCCESS_CRITERIA, TOPIC_LABELS, phrase
from .templates import TemplateConfig, get_template
from .types import ExtractedData, GenerateOptions

VERBOSITY_LEVELS = {"short": 0, "medium": 1, "detailed": 2}
MODEL_TARGETS = ("claude", "chatgpt", "universal")
SHORT, MEDIUM, DETAILED = 0, 1, 2

# Clarifying questions are added strictly above this score
AMBIGUITY_THRESHOLD = 0.4
MIN_QUESTIONS = 2
MAX_QUESTIONS = 4

DEADLINE_PREFIXES = ("deadline", "by", "before", "until", "no later than")

Section = Tuple[str, List[str]]


@dataclass(frozen=True)
class RenderContext:
    """Per-call rendering state shared by the section builders."""

    transcript: str
    extracted: ExtractedData
    template: TemplateConfig
    model_target: str
    level: int
    lang: str

    def t(self, key: str, **fields: str) -> str:
        return phrase(key, self.lang, **fields)

    def items(self, values: List[str]) -> List[str]:
        """Render a list as numbered steps for ChatGPT and as bullets otherwise."""
        if self.model_target == "chatgpt":
            return [f"{index}. {value}" for index, value in enumerate(values, 1)]
        return [f"- {value}" for value in values]

    def tagged(self, tag: str, lines: List[str]) -> List[str]:
        """Wrap lines in an XML-style tag for Claude; other targets get the lines unchanged."""
        if self.model_target == "claude":
            return [f"<{tag}>", *lines, f"</{tag}>"]
        return lines

    @property
    def topics(self) -> str:
        return ", ".join(TOPIC_LABELS[self.lang][topic] for topic in self.extracted.topics)

    @property
    def entities(self) -> str:
        return ", ".join(self.extracted.entities)


class PromptRenderer:
    """
    Renders deterministic prompts for the six templates.

    Each template method returns its sections in fixed order; sections whose
    body is empty are skipped so no heading is ever emitted without content.
    """

    def __init__(self):
        self.templates: Dict[str, Callable[[RenderContext], List[Section]]] = {
            "general": self._render_general,
            "coding": self._render_coding,
            "marketing": self._render_marketing,
            "meeting": self._render_meeting,
            "support": self._render_support,
            "research": self._render_research,
        }

    def render(self, transcript: str, extracted: ExtractedData, options: GenerateOptions) -> str:
        """
        Render a Markdown prompt.

        Args:
            transcript: Transcript the data was extracted from
            extracted: Output of the extractor for this transcript
            options: Template, model target, verbosity and language

        Returns:
            Prompt text with ## section headings

        Raises:
            KeyError: If the template, model target, verbosity or language is not a known value
        """
        template = get_template(options.template)
        if options.model_target not in MODEL_TARGETS:
            raise KeyError(options.model_target)
        ctx = RenderContext(
            transcript=transcript,
            extracted=extracted,
            template=template,
            model_target=options.model_target,
            level=VERBOSITY_LEVELS[options.verbosity],
            lang=resolve_output_language(options.language, transcript),
        )

        preamble = template.role_preamble_pt if ctx.lang == "pt" else template.role_preamble
        blocks = [preamble]

        for key, lines in self.templates[template.id](ctx):
            if lines:
                blocks.append(f"## {ctx.t(key)}\n" + "\n".join(lines))

        if extracted.ambiguity_score > AMBIGUITY_THRESHOLD:
            questions = [ctx.t("questions_intro"), ""] + ctx.items(self._clarifying_questions(ctx))
            blocks.append(f"## {ctx.t('clarifying_questions')}\n" + "\n".join(questions))

        closing = self._closing(ctx)
        if closing:
            blocks.append(closing)

        return "\n\n".join(blocks)

    # Template layouts

    def _render_general(self, ctx: RenderContext) -> List[Section]:
        sections = [("goal", self._goal(ctx))]
        if ctx.level >= MEDIUM:
            sections.append(("context", self._context(ctx)))
        sections.append(("constraints", self._constraints(ctx)))
        sections.append(("expected_output", self._expected_output(ctx)))
        if ctx.level >= DETAILED:
            sections.append(("success_criteria", self._success_criteria(ctx)))
        return sections

    def _render_coding(self, ctx: RenderContext) -> List[Section]:
        sections = [
            ("goal", self._goal(ctx)),
            ("technical_context", self._technical_context(ctx)),
            ("requirements", self._constraints(ctx) or [ctx.t("requirements_default")]),
        ]
        if ctx.level >= MEDIUM:
            sections.append(("io_spec", self._with_detail(ctx, [ctx.t("io_body")], "io_detail")))
            style = [ctx.t("style_idioms"), ctx.t("style_names"), ctx.t("style_comments")]
            if ctx.level >= DETAILED:
                style.append(ctx.t("style_tests"))
            sections.append(("code_style", ctx.items(style)))
        if ctx.level >= DETAILED:
            sections.append(("success_criteria", self._success_criteria(ctx)))
        return sections

    def _render_marketing(self, ctx: RenderContext) -> List[Section]:
        audience = [ctx.t("audience_body")]
        if ctx.extracted.entities:
            audience.append(ctx.t("audience_names", entities=ctx.entities))

        sections = [
            ("campaign_goal", self._goal(ctx)),
            ("target_audience", self._with_detail(ctx, audience, "audience_detail")),
        ]
        if ctx.level >= MEDIUM:
            sections.append(("brand_voice", self._with_detail(ctx, [ctx.t("voice_body")], "voice_detail")))
            messages = [ctx.t("messages_body")]
            if ctx.extracted.topics:
                messages.append(ctx.t("domain_line", topics=ctx.topics))
            sections.append(("key_messages", self._with_detail(ctx, messages, "messages_detail")))

        fmt = [ctx.t("format_line", guidance=OUTPUT_GUIDANCE[ctx.lang][ctx.extracted.output_type])]
        sections.append(("format_constraints", fmt + self._constraint_block(ctx, "constraints_intro")))
        if ctx.level >= DETAILED:
            sections.append(("success_metrics", self._success_criteria(ctx)))
        return sections

    def _render_meeting(self, ctx: RenderContext) -> List[Section]:
        sections = [("meeting_summary", self._goal(ctx))]
        if ctx.level >= MEDIUM:
            sections.append(("key_decisions", self._with_detail(ctx, [ctx.t("decisions_body")], "decisions_detail")))

        actions = [ctx.t("actions_body")]
        if ctx.extracted.entities:
            actions.append(ctx.t("actions_people", entities=ctx.entities))
        actions += self._constraint_block(ctx, "actions_deadlines")
        sections.append(("action_items", self._with_detail(ctx, actions, "actions_detail")))

        if ctx.level >= MEDIUM:
            sections.append(("follow_ups", self._with_detail(ctx, [ctx.t("follow_body")], "follow_detail")))
        if ctx.level >= DETAILED:
            sections.append(("success_criteria", self._success_criteria(ctx)))
        return sections

    def _render_support(self, ctx: RenderContext) -> List[Section]:
        sections = [("issue_description", self._goal(ctx))]
        if ctx.level >= MEDIUM:
            if ctx.extracted.entities:
                environment = [ctx.t("environment_names", entities=ctx.entities)]
            else:
                environment = [ctx.t("environment_default")]
            sections += [
                ("environment", environment),
                ("steps_tried", [ctx.t("tried_body")]),
                ("expected_actual", [ctx.t("behaviour_body")]),
                ("urgency", [ctx.t("urgency_body")]),
            ]

        resolution = [ctx.t("resolution_body")] + self._constraint_block(ctx, "resolution_constraints")
        sections.append(("desired_resolution", self._with_detail(ctx, resolution, "resolution_detail")))
        if ctx.level >= DETAILED:
            sections.append(("success_criteria", self._success_criteria(ctx)))
        return sections

    def _render_research(self, ctx: RenderContext) -> List[Section]:
        sections = [("research_question", self._goal(ctx))]
        if ctx.level >= MEDIUM:
            sections.append(("background", self._context(ctx, default_key="background_default")))

        if ctx.extracted.topics:
            scope = [ctx.t("scope_focus", topics=ctx.topics)]
        else:
            scope = [ctx.t("scope_default")]
        sections.append(("scope", scope + self._constraint_block(ctx, "constraints_intro")))

        if ctx.level >= MEDIUM:
            sections.append(("methodology", self._with_detail(ctx, [ctx.t("method_body")], "method_detail")))
        sections.append(("deliverables", self._expected_output(ctx, extra_key="deliverables_summary")))
        if ctx.level >= MEDIUM:
            sections.append(("timeline", self._timeline(ctx)))
        if ctx.level >= DETAILED:
            sections.append(("success_criteria", self._success_criteria(ctx)))
        return sections

    # Section builders

    def _goal(self, ctx: RenderContext) -> List[str]:
        """Opening section: detected intent/output and the quoted request."""
        extracted = ctx.extracted
        lines = [
            ctx.t(
                "summary_line",
                template=ctx.template.name,
                intent=INTENT_LABELS[ctx.lang][extracted.primary_intent],
                output=OUTPUT_LABELS[ctx.lang][extracted.output_type],
            ),
            "",
            ctx.t("request_intro_direct") if ctx.model_target == "chatgpt" else ctx.t("request_intro"),
            "",
        ]

        request = clean_transcript(ctx.transcript)
        if ctx.model_target == "claude":
            lines += ctx.tagged("transcript", [f"> {request}"])
        else:
            lines.append(f"> {request}")

        if ctx.level >= DETAILED:
            lines += ["", ctx.t("transcript_note")]
        return lines

    def _context(self, ctx: RenderContext, default_key: str = "no_domain") -> List[str]:
        lines = []
        if ctx.extracted.topics:
            lines.append(ctx.t("domain_line", topics=ctx.topics))
        else:
            lines.append(ctx.t(default_key))
        if ctx.extracted.entities:
            lines.append(ctx.t("names_line", entities=ctx.entities))
        return self._with_detail(ctx, lines, "context_detail")

    def _technical_context(self, ctx: RenderContext) -> List[str]:
        if ctx.extracted.entities:
            lines = [ctx.t("tech_names", entities=ctx.entities)]
        else:
            lines = [ctx.t("tech_default")]
        if ctx.level >= MEDIUM and ctx.extracted.topics:
            lines.append(ctx.t("domain_line", topics=ctx.topics))
        return self._with_detail(ctx, lines, "tech_detail")

    def _constraints(self, ctx: RenderContext) -> List[str]:
        """Body of a section that holds only constraints; empty when none were extracted."""
        if not ctx.extracted.constraints:
            return []
        lines = ctx.tagged("constraints", ctx.items(ctx.extracted.constraints))
        return self._with_detail(ctx, lines, "constraints_detail")

    def _constraint_block(self, ctx: RenderContext, intro_key: str) -> List[str]:
        """Constraint sub-list appended to a section that also carries other content."""
        if not ctx.extracted.constraints:
            return []
        return ["", ctx.t(intro_key)] + ctx.tagged("constraints", ctx.items(ctx.extracted.constraints))

    def _expected_output(self, ctx: RenderContext, extra_key: Optional[str] = None) -> List[str]:
        lines = [OUTPUT_GUIDANCE[ctx.lang][ctx.extracted.output_type]]
        if ctx.level >= MEDIUM:
            if extra_key:
                lines.append(ctx.t(extra_key))
            lines.append(ctx.t("output_structure"))
        return self._with_detail(ctx, lines, "output_detail")

    def _timeline(self, ctx: RenderContext) -> List[str]:
        deadlines = [c for c in ctx.extracted.constraints if c.lower().startswith(DEADLINE_PREFIXES)]
        if not deadlines:
            return [ctx.t("timeline_default")]
        return [ctx.t("timeline_deadlines")] + ctx.items(deadlines)

    def _success_criteria(self, ctx: RenderContext) -> List[str]:
        return ctx.items(SUCCESS_CRITERIA[ctx.template.id][ctx.lang])

    def _with_detail(self, ctx: RenderContext, lines: List[str], detail_key: str) -> List[str]:
        if ctx.level >= DETAILED and lines:
            return lines + ["", ctx.t(detail_key)]
        return lines

    def _clarifying_questions(self, ctx: RenderContext) -> List[str]:
        """Pick two to four questions aimed at whatever the extractor could not find."""
        extracted = ctx.extracted
        keys = []
        if extracted.primary_intent == "general":
            keys.append("q_goal")
        if extracted.output_type == "response":
            keys.append("q_format")
        if not extracted.constraints:
            keys.append("q_constraints")
        if not extracted.topics:
            keys.append("q_domain")
        if not extracted.entities:
            keys.append("q_entities")
        for fallback in ("q_audience", "q_scope"):
            if len(keys) >= MIN_QUESTIONS:
                break
            keys.append(fallback)
        return [ctx.t(key) for key in keys[:MAX_QUESTIONS]]

    def _closing(self, ctx: RenderContext) -> Optional[str]:
        if ctx.model_target == "claude":
            return ctx.t("closing_claude")
        if ctx.model_target == "chatgpt":
            return ctx.t("closing_chatgpt")
        return None


_renderer = PromptRenderer()


def build_prompt(transcript: str, extracted: ExtractedData, options: GenerateOptions) -> str:
    """
    Convenience function to render a deterministic prompt.

    Args:
        transcript: Transcript text
        extracted: Data extracted from the transcript
        options: Generation options

    Returns:
        Markdown prompt
    """
    return _renderer.render(transcript, extracted, options)
