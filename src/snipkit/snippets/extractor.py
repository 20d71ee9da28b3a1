"""Extract snippets from source files using manifest definitions."""

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

from snipkit.core import LineRange
from snipkit.extraction import SelectorError, extract_anchored, extract_range, parse_selector

logger = logging.getLogger(__name__)


@dataclass
class Snippet:
    """A piece of a source file pulled out by a manifest entry."""
    id: str
    source: str
    selector: str
    content: str

    def __repr__(self) -> str:
        content_preview = self.content[:60] + "..." if len(self.content) > 60 else self.content
        return f"Snippet(id={self.id!r}, selector={self.selector!r}, content={content_preview!r})"


def load_manifest(manifest_path: Path) -> dict:
    """Load a snippet manifest from a YAML file.

    Args:
        manifest_path: Path to the manifest

    Returns:
        Manifest dictionary, empty if the file has no content

    Raises:
        FileNotFoundError: If the manifest does not exist
        ValueError: If the manifest is not a mapping
    """
    path = Path(manifest_path)
    if not path.exists():
        raise FileNotFoundError(f"Manifest not found: {path}")

    with open(path, encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    if not isinstance(config, dict):
        raise ValueError(f"Manifest must be a mapping with a 'snippets' list: {path}")
    return config


class SnippetExtractor:
    """Extracts every snippet listed in a manifest."""

    def __init__(
        self,
        config: dict | None = None,
        manifest_path: str | Path | None = None,
        base_dir: str | Path | None = None
    ):
        """Initialize the extractor.

        Args:
            config: Manifest dictionary. If None, loads from manifest_path.
            manifest_path: YAML manifest to load when no config is given
            base_dir: Directory that snippet file paths are relative to.
                      Defaults to the manifest's directory, else the cwd.
        """
        if config is None:
            if manifest_path is None:
                raise ValueError("Either config or manifest_path is required")
            config = load_manifest(Path(manifest_path))
        if not isinstance(config, dict):
            raise ValueError(f"Manifest must be a mapping, got {type(config).__name__}")
        self._config = config

        if base_dir is not None:
            self.base_dir = Path(base_dir)
        elif manifest_path is not None:
            self.base_dir = Path(manifest_path).parent
        else:
            self.base_dir = Path.cwd()

    def definitions(self) -> list[dict]:
        """Return the raw snippet entries from the manifest.

        Raises:
            ValueError: If 'snippets' is not a list
        """
        entries = self._config.get("snippets") or []
        if not isinstance(entries, list):
            raise ValueError(f"'snippets' must be a list, got {type(entries).__name__}")
        return entries

    def _read_source(self, source: str) -> str:
        path = Path(source)
        if not path.is_absolute():
            path = self.base_dir / path
        if not path.exists():
            raise FileNotFoundError(f"Snippet source not found: {path}")
        return path.read_text(encoding="utf-8")

    def extract(self, entry: dict) -> Snippet:
        """Extract a single manifest entry.

        An entry names a source `file` and at most one of `anchor` or
        `lines`; with neither, the whole file is taken.

        Raises:
            ValueError: If the entry is not a mapping, is missing fields,
                        sets both anchor and lines, or has a non-string lines value
            FileNotFoundError: If the source file does not exist
        """
        if not isinstance(entry, dict):
            raise ValueError(f"Snippet entry must be a mapping: {entry!r}")
        if entry.get("id") is None or entry.get("id") == "":
            raise ValueError(f"Snippet entry missing 'id': {entry!r}")
        snippet_id = str(entry["id"])
        source = entry.get("file")
        if not source:
            raise ValueError(f"Snippet '{snippet_id}' missing 'file'")
        if "anchor" in entry and "lines" in entry:
            raise ValueError(f"Snippet '{snippet_id}' sets both 'anchor' and 'lines'")

        text = self._read_source(source)
        if "anchor" in entry:
            selector = str(entry["anchor"])
            content = extract_anchored(text, selector)
        else:
            selector = entry.get("lines", "")
            if not isinstance(selector, str):
                # YAML reads an unquoted 1:30 as the base-60 integer 90
                raise ValueError(
                    f"Snippet '{snippet_id}' has a non-string 'lines' value {selector!r}; "
                    "quote it in YAML, e.g. lines: \"1:3\""
                )
            line_range = parse_selector(selector)
            if not isinstance(line_range, LineRange):
                raise SelectorError(f"Snippet '{snippet_id}' has an invalid 'lines' value: {selector!r}")
            content = extract_range(text, line_range)
        logger.debug("Extracted snippet %s from %s [%s]", snippet_id, source, selector)

        return Snippet(id=snippet_id, source=source, selector=selector, content=content)

    def extract_all(self) -> list[Snippet]:
        """Extract every snippet in the manifest, in manifest order."""
        snippets = []
        for entry in self.definitions():
            snippet = self.extract(entry)
            if not snippet.content:
                logger.warning(
                    "Snippet '%s' is empty (selector %r in %s)",
                    snippet.id, snippet.selector, snippet.source
                )
            snippets.append(snippet)
        return snippets

    def get_snippet(self, snippet_id: str) -> Snippet | None:
        """Extract the snippet with the given id, or None if it is not listed."""
        for entry in self.definitions():
            if not isinstance(entry, dict):
                raise ValueError(f"Snippet entry must be a mapping: {entry!r}")
            if str(entry.get("id")) == snippet_id:
                return self.extract(entry)
        return None
