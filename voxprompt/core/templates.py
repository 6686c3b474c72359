"""
Template registry for VoxPrompt.

Each of the six templates bundles display metadata, the instruction used by
the AI-enhanced path (system_context) and the role preambles placed at the
top of deterministic output. The registry is built once at import time and
exposed through a read-only mapping.
"""

from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field


class TemplateConfig(BaseModel):
    """
    Static configuration for one prompt template.

    Attributes:
        id: Template id used in GenerateOptions
        name: Human-readable template name
        description: One-line description for listings
        icon: Emoji shown next to the name
        system_context: Task instruction for the AI-enhanced path
        role_preamble: Opening line of the deterministic prompt (English)
        role_preamble_pt: Opening line of the deterministic prompt (European Portuguese)
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Template id")
    name: str = Field(..., description="Display name")
    description: str = Field(..., description="Short description")
    icon: str = Field(..., description="Display icon")
    system_context: str = Field(..., description="Instruction for the AI-enhanced path")
    role_preamble: str = Field(..., description="Role line for English prompts")
    role_preamble_pt: str = Field(..., description="Role line for Portuguese prompts")


TEMPLATES: Mapping[str, TemplateConfig] = MappingProxyType(
    {
        "general": TemplateConfig(
            id="general",
            name="General Assistant",
            description="Clear, structured prompt for any general task",
            icon="✨",
            system_context=(
                "Transform this voice transcript into a clear, actionable prompt for a general-purpose AI assistant. "
                "Structure it with Goal, Context, Constraints, Expected Output, and Success Criteria."
            ),
            role_preamble="You are a helpful AI assistant. Please complete the following task carefully and thoroughly:",
            role_preamble_pt="És um assistente de IA prestável. Por favor, conclui a seguinte tarefa com cuidado e rigor:",
        ),
        "coding": TemplateConfig(
            id="coding",
            name="Coding Task",
            description="Optimised for code generation, review & debugging",
            icon="💻",
            system_context=(
                "Transform this voice transcript into a precise technical prompt for a coding AI assistant. "
                "Include Goal, Technical Context (languages/frameworks), Requirements & Constraints, "
                "Input/Output Specification, Code Style, and Success Criteria."
            ),
            role_preamble="You are an expert software engineer. Please help with the following technical task:",
            role_preamble_pt="És um engenheiro de software especialista. Por favor, ajuda com a seguinte tarefa técnica:",
        ),
        "marketing": TemplateConfig(
            id="marketing",
            name="Marketing Copy",
            description="Craft compelling marketing & copywriting prompts",
            icon="📣",
            system_context=(
                "Transform this voice transcript into an effective prompt for generating marketing copy. "
                "Include Campaign Goal, Target Audience, Brand Voice, Key Messages, Format & Constraints, "
                "and Success Metrics."
            ),
            role_preamble="You are a creative marketing copywriter and brand strategist. Please produce the following:",
            role_preamble_pt="És um copywriter criativo e estratega de marca. Por favor, produz o seguinte:",
        ),
        "meeting": TemplateConfig(
            id="meeting",
            name="Meeting → Action Plan",
            description="Convert meeting notes into structured action plans",
            icon="📋",
            system_context=(
                "Transform this voice transcript of meeting notes into a structured prompt that will produce "
                "a clear action plan. Include Meeting Summary, Key Decisions, Action Items with owners, "
                "Follow-ups, and Next Steps."
            ),
            role_preamble="You are a skilled project manager. Please process the following meeting notes into an action plan:",
            role_preamble_pt="És um gestor de projeto experiente. Por favor, transforma as seguintes notas de reunião num plano de ação:",
        ),
        "support": TemplateConfig(
            id="support",
            name="Support → Troubleshooting",
            description="Turn support tickets into troubleshooting guides",
            icon="🔧",
            system_context=(
                "Transform this voice transcript of a support issue into a structured troubleshooting prompt. "
                "Include Issue Description, Environment, Steps Already Tried, Expected vs Actual Behaviour, "
                "Urgency & Impact, and Desired Resolution."
            ),
            role_preamble="You are a senior technical support specialist. Please diagnose and help resolve the following issue:",
            role_preamble_pt="És um especialista sénior de suporte técnico. Por favor, diagnostica e ajuda a resolver o seguinte problema:",
        ),
        "research": TemplateConfig(
            id="research",
            name="Research Brief",
            description="Structure research questions into comprehensive briefs",
            icon="🔬",
            system_context=(
                "Transform this voice transcript into a comprehensive research brief prompt. "
                "Include Research Question, Background, Scope & Boundaries, Methodology, "
                "Expected Deliverables, and Timeline."
            ),
            role_preamble="You are a thorough research analyst. Please conduct the following research and deliver a comprehensive response:",
            role_preamble_pt="És um analista de investigação rigoroso. Por favor, realiza a seguinte investigação e entrega uma resposta completa:",
        ),
    }
)

# Instructions below are only used by the AI-enhanced path

MODEL_INSTRUCTIONS: Mapping[str, str] = MappingProxyType(
    {
        "claude": (
            "Format the output for Claude (Anthropic). "
            "Use XML tags (e.g. <goal>, <context>) for structured sections where helpful. "
            "Be explicit about the task, include all constraints, and end with a clear call-to-action."
        ),
        "chatgpt": (
            "Format the output for ChatGPT (OpenAI). "
            "Use clear Markdown headings (##), numbered lists, and explicit step-by-step instructions. "
            "Keep phrasing direct and action-oriented."
        ),
        "universal": (
            "Format the output for universal compatibility across modern AI assistants. "
            "Use clean Markdown with ## headings and bullet lists. "
            "Focus on clarity: any well-aligned LLM should be able to follow this prompt precisely."
        ),
    }
)

VERBOSITY_INSTRUCTIONS: Mapping[str, str] = MappingProxyType(
    {
        "short": (
            "Be concise. Keep the prompt to the essentials only and avoid extra context or explanation. "
            "The output should be scannable in under 30 seconds."
        ),
        "medium": (
            "Balance completeness with brevity. Include all key sections but avoid repetition or padding. "
            "Aim for a prompt that a professional would consider thorough but not bloated."
        ),
        "detailed": (
            "Be comprehensive. Include all relevant sections, examples where useful, edge cases, "
            "and explicit success criteria. Err on the side of providing more context rather than less."
        ),
    }
)

LANGUAGE_INSTRUCTIONS: Mapping[str, str] = MappingProxyType(
    {
        "auto": "Match the language used in the transcript. If it is in Portuguese, output in Portuguese; if in English, output in English.",
        "en": "Output the prompt entirely in English, regardless of the transcript language.",
        "pt": "Output the prompt entirely in European Portuguese (pt-PT), regardless of the transcript language.",
    }
)


def get_template(template_id: str) -> TemplateConfig:
    """
    Look up a template by id.

    Raises:
        KeyError: If the id is not one of the six registered templates
    """
    return TEMPLATES[template_id]
