"""
Core functionality for VoxPrompt.

This package contains the main logic for:
- Rule-based feature extraction from transcripts
- The template registry and deterministic Markdown prompt rendering
- AI-enhanced generation with deterministic fallback
- Configuration management
"""
