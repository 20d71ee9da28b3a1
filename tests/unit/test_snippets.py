"""Unit tests for manifest-driven snippet extraction."""

import logging

import pytest

from snipkit.snippets import Snippet, SnippetExtractor, load_manifest

SOURCE = """import os

# ANCHOR: greet
def greet(name):
    return f"Hello, {name}"
# ANCHOR_END: greet

print(greet("world"))
"""

MANIFEST = """snippets:
  - id: greet
    file: example.py
    anchor: greet
  - id: header
    file: example.py
    lines: "0:1"
  - id: last
    file: example.py
    lines: "7"
"""


@pytest.fixture
def project(tmp_path):
    (tmp_path / "example.py").write_text(SOURCE, encoding="utf-8")
    manifest = tmp_path / "snippets.yaml"
    manifest.write_text(MANIFEST, encoding="utf-8")
    return manifest


def write_manifest(project, content):
    project.write_text(content, encoding="utf-8")
    return project


class TestLoadManifest:
    """Tests for load_manifest."""

    def test_loads_yaml(self, project):
        """Snippet entries are read in file order."""
        config = load_manifest(project)
        assert [s["id"] for s in config["snippets"]] == ["greet", "header", "last"]

    def test_missing_file(self, tmp_path):
        """A missing manifest raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_manifest(tmp_path / "nope.yaml")

    def test_empty_file(self, tmp_path):
        """An empty manifest loads as an empty mapping."""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_manifest(path) == {}

    def test_top_level_list_rejected(self, project):
        """A manifest that is a list instead of a mapping raises ValueError."""
        write_manifest(project, "- id: greet\n  file: example.py\n")
        with pytest.raises(ValueError, match="must be a mapping"):
            load_manifest(project)


class TestSnippetExtractor:
    """Tests for SnippetExtractor."""

    def test_extract_all(self, project):
        """Anchor and line entries are extracted in manifest order."""
        snippets = SnippetExtractor(manifest_path=project).extract_all()
        assert [s.id for s in snippets] == ["greet", "header", "last"]
        assert snippets[0].content == 'def greet(name):\n    return f"Hello, {name}"'
        assert snippets[1].content == "import os"
        assert snippets[2].content == 'print(greet("world"))'
        assert snippets[2].selector == "7"

    def test_get_snippet(self, project):
        """A single snippet can be fetched by id."""
        snippet = SnippetExtractor(manifest_path=project).get_snippet("header")
        assert isinstance(snippet, Snippet)
        assert snippet.source == "example.py"

    def test_get_snippet_unknown(self, project):
        """An unknown id gives None."""
        assert SnippetExtractor(manifest_path=project).get_snippet("missing") is None

    def test_numeric_id_matches_string(self, project):
        """A YAML integer id is looked up and stored as a string."""
        write_manifest(project, "snippets:\n  - id: 5\n    file: example.py\n    lines: \"0\"\n")
        extractor = SnippetExtractor(manifest_path=project)
        snippet = extractor.get_snippet("5")
        assert snippet is not None
        assert snippet.id == "5"
        assert extractor.extract_all()[0].id == "5"

    def test_config_with_base_dir(self, project):
        """With neither anchor nor lines, the whole file is taken."""
        config = {"snippets": [{"id": "all", "file": "example.py"}]}
        extractor = SnippetExtractor(config=config, base_dir=project.parent)
        assert extractor.extract_all()[0].content == SOURCE

    def test_requires_config_or_path(self):
        """Constructing without any manifest source raises ValueError."""
        with pytest.raises(ValueError):
            SnippetExtractor()

    def test_config_must_be_mapping(self, tmp_path):
        """A list passed as config is rejected."""
        with pytest.raises(ValueError, match="must be a mapping"):
            SnippetExtractor(config=[{"id": "x"}], base_dir=tmp_path)

    def test_no_snippets_key(self, tmp_path):
        """A manifest without snippets extracts nothing."""
        assert SnippetExtractor(config={}, base_dir=tmp_path).extract_all() == []

    def test_snippets_must_be_list(self, tmp_path):
        """A non-list 'snippets' value raises ValueError."""
        extractor = SnippetExtractor(config={"snippets": "example.py"}, base_dir=tmp_path)
        with pytest.raises(ValueError, match="must be a list"):
            extractor.extract_all()

    def test_string_entry_rejected(self, project):
        """An entry that is a bare string raises ValueError."""
        write_manifest(project, "snippets:\n  - example.py\n")
        extractor = SnippetExtractor(manifest_path=project)
        with pytest.raises(ValueError, match="Snippet entry must be a mapping"):
            extractor.extract_all()
        with pytest.raises(ValueError, match="Snippet entry must be a mapping"):
            extractor.get_snippet("anything")

    @pytest.mark.parametrize("entry,message", [
        ({"file": "example.py"}, "missing 'id'"),
        ({"id": "x"}, "missing 'file'"),
        ({"id": "x", "file": "example.py", "anchor": "a", "lines": "1:2"}, "both"),
        ({"id": "x", "file": "example.py", "lines": "greet"}, "invalid 'lines'"),
    ])
    def test_invalid_entries(self, project, entry, message):
        """Malformed entries raise ValueError naming the problem."""
        extractor = SnippetExtractor(config={"snippets": [entry]}, base_dir=project.parent)
        with pytest.raises(ValueError, match=message):
            extractor.extract_all()

    def test_unquoted_lines_rejected(self, project):
        """An unquoted 1:3 (a YAML base-60 integer) asks for quoting."""
        write_manifest(project, "snippets:\n  - id: x\n    file: example.py\n    lines: 1:3\n")
        extractor = SnippetExtractor(manifest_path=project)
        with pytest.raises(ValueError, match="quote it in YAML"):
            extractor.extract_all()

    def test_missing_source(self, tmp_path):
        """A missing source file raises FileNotFoundError."""
        config = {"snippets": [{"id": "x", "file": "gone.py"}]}
        with pytest.raises(FileNotFoundError):
            SnippetExtractor(config=config, base_dir=tmp_path).extract_all()

    def test_empty_snippet_logs_warning(self, project, caplog):
        """An empty result is returned and logged as a warning."""
        config = {"snippets": [{"id": "ghost", "file": "example.py", "anchor": "nothing"}]}
        extractor = SnippetExtractor(config=config, base_dir=project.parent)
        with caplog.at_level(logging.WARNING, logger="snipkit.snippets.extractor"):
            snippets = extractor.extract_all()
        assert snippets[0].content == ""
        assert "ghost" in caplog.text
