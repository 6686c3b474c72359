"""
Test suite for VoxPrompt.

This package contains tests for:
- Transcript extraction
- Template registry, request validation and language heuristics
- Deterministic prompt rendering
- Configuration and the OpenAI client factory
- AI-enhanced generation and fallback
- The command-line interface
"""
