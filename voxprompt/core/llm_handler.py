"""
AI-enhanced prompt generation through the OpenAI chat completions API.

This module builds the system and user messages for a generation request,
sends them with parameters suited to the configured model, and retries once
with reasoning-model parameters when the API rejects temperature or
max_tokens.
"""

import logging
from typing import Any, Dict, Optional

from .config import config, get_client
from .debug_log import get_debug_logger
from .progress import reporter
from .templates import LANGUAGE_INSTRUCTIONS, MODEL_INSTRUCTIONS, VERBOSITY_INSTRUCTIONS, get_template
from .types import GenerateOptions

logger = logging.getLogger(__name__)

MAX_TOKENS_BY_VERBOSITY = {"short": 600, "medium": 1200, "detailed": 2000}

FORMAT_RULES = (
    "FORMAT RULES:\n"
    "- Use Markdown with ## headings for each section\n"
    "- Be specific and actionable, avoid generic filler\n"
    "- Always end with a ## Clarifying Questions section IF there are genuinely ambiguous aspects\n"
    '- Do NOT add a preamble like "Here is your prompt:", output ONLY the prompt itself'
)


class ReasoningModelError(Exception):
    """Raised when a request still fails after switching to reasoning-model parameters."""

    pass


class LLMHandlerError(Exception):
    """Raised when the AI-enhanced generation request fails."""

    pass


def is_reasoning_model_error(exception: Exception) -> bool:
    """
    Check if an API error means the model rejects sampling parameters.

    Matches a 400 invalid_request_error whose code is unsupported_value or
    unsupported_parameter and whose param is temperature or max_tokens.

    Args:
        exception: Exception from the chat completions call

    Returns:
        True if the request should be retried with reasoning-model parameters
    """
    if getattr(exception, "status_code", None) != 400:
        return False

    error_data = getattr(exception, "body", None)
    if not isinstance(error_data, dict):
        return False

    # The SDK exposes either the full payload or just its "error" member
    error_info = error_data.get("error", error_data)
    if not isinstance(error_info, dict):
        return False

    error_type = (error_info.get("type") or "").lower()
    error_code = (error_info.get("code") or "").lower()
    error_param = (error_info.get("param") or "").lower()

    return (
        error_type == "invalid_request_error"
        and error_code in ("unsupported_value", "unsupported_parameter")
        and error_param in ("temperature", "max_tokens")
    )


def adjust_llm_params_for_reasoning_model(original_params: Dict[str, Any]) -> Dict[str, Any]:
    """
    Drop temperature and rename max_tokens to max_completion_tokens.

    Args:
        original_params: Request parameters as first sent

    Returns:
        New parameters dict suitable for a reasoning model
    """
    adjusted_params = {k: v for k, v in original_params.items() if k not in ("temperature", "max_tokens")}
    if "max_tokens" in original_params:
        adjusted_params["max_completion_tokens"] = original_params["max_tokens"]

    logger.info(f"Adjusted parameters for reasoning model: {sorted(adjusted_params)}")
    return adjusted_params


def make_llm_request_with_reasoning_fallback(client: Any, original_params: Dict[str, Any]) -> Any:
    """
    Send a chat completions request, retrying once with reasoning-model parameters.

    Args:
        client: OpenAI client instance
        original_params: Request parameters

    Returns:
        Response from the successful call

    Raises:
        ReasoningModelError: If the retry with adjusted parameters also fails
    """
    try:
        return client.chat.completions.create(**original_params)
    except Exception as e:
        if not is_reasoning_model_error(e):
            raise
        logger.info("Model rejected sampling parameters, retrying as a reasoning model")
        adjusted_params = adjust_llm_params_for_reasoning_model(original_params)
        try:
            return client.chat.completions.create(**adjusted_params)
        except Exception as retry_error:
            raise ReasoningModelError(f"LLM request failed even after adjusting for reasoning model: {retry_error}") from e


class LLMHandler:
    """
    Sends generation requests to the configured OpenAI model.
    """

    def __init__(self, api_key: Optional[str] = None, project_root: str = "."):
        """
        Initialize LLM Handler.

        Args:
            api_key: Key supplied by the caller, overrides OPENAI_API_KEY
            project_root: Directory for debug logs

        Raises:
            ConfigError: If no usable API key is available
        """
        self.project_root = project_root
        self.client = get_client(api_key)
        self.debug_logger = get_debug_logger(project_root)

    def make_generation_request(self, options: GenerateOptions) -> str:
        """
        Ask the model to turn a transcript into a structured prompt.

        Args:
            options: Validated generation options

        Returns:
            The generated prompt, stripped

        Raises:
            LLMHandlerError: If the request fails or returns no content
        """
        reporter.step("Calling the generation model")

        system_prompt = self.create_system_prompt(options)
        user_prompt = self.create_user_prompt(options.transcript)

        request_params: Dict[str, Any] = {
            "model": config.llm_model,
            "messages": [{"role": "system", "content": system_prompt}, {"role": "user", "content": user_prompt}],
        }
        max_tokens = MAX_TOKENS_BY_VERBOSITY[options.verbosity]
        if config.is_reasoning_model:
            request_params["max_completion_tokens"] = max_tokens
        else:
            request_params["max_tokens"] = max_tokens
            request_params["temperature"] = config.model_temperature

        self.debug_logger.log_llm_request(system_prompt, user_prompt, request_params)

        try:
            response = make_llm_request_with_reasoning_fallback(self.client, request_params)
        except Exception as e:
            raise LLMHandlerError(f"Generation request failed: {e}") from e

        content = response.choices[0].message.content if response.choices else None
        if not content or not content.strip():
            raise LLMHandlerError("Empty response from generation model")

        self.debug_logger.log_llm_response(content, options.transcript)
        reporter.complete_sub_step("Received response from generation model")
        return content.strip()

    def create_system_prompt(self, options: GenerateOptions) -> str:
        """Build the system message from the template context and output instructions."""
        template = get_template(options.template)
        lines = [
            "You are an expert prompt engineer specialising in crafting high-quality, structured prompts for AI assistants.",
            f"TASK: {template.system_context}",
            f"OUTPUT MODEL: {MODEL_INSTRUCTIONS[options.model_target]}",
            f"VERBOSITY: {VERBOSITY_INSTRUCTIONS[options.verbosity]}",
            f"LANGUAGE: {LANGUAGE_INSTRUCTIONS[options.language]}",
            FORMAT_RULES,
        ]
        return "\n\n".join(lines)

    def create_user_prompt(self, transcript: str) -> str:
        return f'Transform this voice transcript into a structured, high-quality prompt:\n\n"""\n{transcript}\n"""'
