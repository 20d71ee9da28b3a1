"""Manifest-driven snippet extraction."""

from .extractor import Snippet, SnippetExtractor, load_manifest

__all__ = ["Snippet", "SnippetExtractor", "load_manifest"]
