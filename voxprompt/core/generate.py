"""
Prompt generation for VoxPrompt.

This module orchestrates a generation request: it tries the AI-enhanced path
when an API key is available and falls back to the deterministic builder on
any failure, so a valid request always produces a prompt.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from .config import ConfigError, config, is_usable_api_key
from .debug_log import get_debug_logger
from .extractor import extract_from_transcript
from .progress import reporter
from .prompt import build_prompt
from .types import GeneratedPrompt, GenerateOptions, PromptMetadata

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """Raised when no prompt could be produced, not even deterministically."""

    pass


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def _metadata(options: GenerateOptions, used_ai: bool) -> PromptMetadata:
    return PromptMetadata(
        template=options.template,
        model_target=options.model_target,
        verbosity=options.verbosity,
        language=options.language,
        timestamp=_timestamp(),
        used_ai=used_ai,
    )


def generate_deterministic(options: GenerateOptions) -> GeneratedPrompt:
    """
    Build a prompt with the rule-based extractor and formatter only.

    Args:
        options: Validated generation options

    Returns:
        GeneratedPrompt with used_ai False

    Raises:
        KeyError: If options carry an unknown template or model target
    """
    reporter.step("Extracting intent, topics and constraints")
    extracted = extract_from_transcript(options.transcript)

    reporter.step("Rendering the prompt")
    prompt = build_prompt(options.transcript, extracted, options)
    reporter.complete_step()

    return GeneratedPrompt(prompt=prompt, metadata=_metadata(options, used_ai=False))


class PromptGenerator:
    """
    Produces prompts, preferring the AI-enhanced path when it is usable.
    """

    def __init__(self, api_key: Optional[str] = None, use_ai: bool = True, project_root: str = "."):
        """
        Initialize the generator.

        Args:
            api_key: Key supplied by the caller, overrides OPENAI_API_KEY
            use_ai: Set False to always use the deterministic builder
            project_root: Directory for debug logs
        """
        # An empty key means "not supplied", so OPENAI_API_KEY still applies
        self.api_key = api_key or None
        self.use_ai = use_ai
        self.project_root = project_root

    def ai_available(self) -> bool:
        """True if AI generation is enabled and a usable key exists."""
        if not self.use_ai:
            return False
        if self.api_key is not None:
            return is_usable_api_key(self.api_key)
        try:
            config.openai_api_key
        except ConfigError:
            return False
        return True

    def generate(self, options: GenerateOptions) -> GeneratedPrompt:
        """
        Generate a prompt for a validated request.

        Args:
            options: Validated generation options

        Returns:
            GeneratedPrompt with metadata recording which path produced it

        Raises:
            GenerationError: If the deterministic builder fails
        """
        if self.ai_available():
            try:
                prompt = self._generate_with_ai(options)
                reporter.complete_step()
                return GeneratedPrompt(prompt=prompt, metadata=_metadata(options, used_ai=True))
            except Exception as e:
                logger.warning(f"AI generation failed, falling back to deterministic builder: {e}")
                reporter.fail_step("AI generation failed, using the deterministic builder")
                get_debug_logger(self.project_root).log_fallback(e, options.model_dump(exclude={"transcript"}))

        try:
            return generate_deterministic(options)
        except Exception as e:
            raise GenerationError(f"Failed to generate prompt: {e}") from e

    def _generate_with_ai(self, options: GenerateOptions) -> str:
        from .llm_handler import LLMHandler

        handler = LLMHandler(api_key=self.api_key, project_root=self.project_root)
        return handler.make_generation_request(options)


def generate_prompt(options: GenerateOptions, api_key: Optional[str] = None, use_ai: bool = True) -> GeneratedPrompt:
    """
    Convenience function to generate a prompt.

    Args:
        options: Validated generation options
        api_key: Optional caller-supplied OpenAI key
        use_ai: Set False to skip the AI-enhanced path

    Returns:
        GeneratedPrompt
    """
    return PromptGenerator(api_key=api_key, use_ai=use_ai).generate(options)
