from __future__ import annotations

import io
import subprocess

import pytest

from schema_graft.sources import (
    DocumentError,
    SourceError,
    ecs_spec,
    iter_package_documents,
    iter_schema_documents,
)

SCHEMA_YAML = """\
registry:
  name: registry
  type: group
  reusable:
    top_level: true
    expected:
      - at: process
        as: registry
  fields:
    registry.path:
      name: path
      type: keyword
      level: core
      example: HKLM\\\\SOFTWARE
    registry.data.strings:
      name: data.strings
      type: wildcard
      normalize:
        - array
---
file:
  name: file
  type: group
  fields:
    file.path:
      name: path
      type: keyword
      multi_fields:
        - flat_name: file.path.text
          name: text
          type: match_only_text
"""

PACKAGE_YAML = """\
- name: foo_package
  type: group
  fields:
    - name: registry.path
      type: keyword
    - name: message
      external: ecs
---
- name: other
  type: keyword
"""


class TestSchemaDocuments:
    def test_decodes_multiple_documents(self):
        docs = list(iter_schema_documents(io.StringIO(SCHEMA_YAML)))
        assert len(docs) == 2
        registry = docs[0]["registry"]
        assert registry.fields["registry.path"].type == "keyword"
        assert registry.reusable.expected[0].as_ == "registry"
        assert docs[1]["file"].fields["file.path"].multi_fields[0].flat_name == "file.path.text"

    def test_accepts_a_string(self):
        assert len(list(iter_schema_documents(SCHEMA_YAML))) == 2

    def test_unknown_field_is_fatal_when_strict(self):
        text = "x:\n  fields:\n    x.y:\n      type: keyword\n      colour: red\n"
        with pytest.raises(DocumentError, match=r"x\.fields\[x\.y\]\.colour"):
            list(iter_schema_documents(text))

    def test_unknown_field_allowed_when_not_strict(self):
        text = "x:\n  fields:\n    x.y:\n      type: keyword\n      colour: red\n"
        (doc,) = iter_schema_documents(text, strict=False)
        assert doc["x"].fields["x.y"].type == "keyword"

    def test_invalid_yaml(self):
        with pytest.raises(DocumentError, match="invalid YAML"):
            list(iter_schema_documents("x: [unclosed\n"))

    def test_invalid_record(self):
        with pytest.raises(DocumentError, match="document 0"):
            list(iter_schema_documents("- not\n- a mapping\n"))


class TestPackageDocuments:
    def test_decodes_multiple_documents(self):
        docs = list(iter_package_documents(PACKAGE_YAML))
        assert [len(d) for d in docs] == [1, 1]
        foo = docs[0][0]
        assert foo.fields[0].name == "registry.path"
        assert foo.fields[1].external == "ecs"

    def test_unknown_field_is_fatal_when_strict(self):
        with pytest.raises(DocumentError, match="foo.colour"):
            list(iter_package_documents("- name: foo\n  colour: red\n"))

    def test_missing_name(self):
        with pytest.raises(DocumentError):
            list(iter_package_documents("- type: keyword\n"))

    def test_empty_documents_are_skipped(self):
        assert list(iter_package_documents("---\n---\n")) == []


class TestEcsSpec:
    def test_runs_git_show(self, monkeypatch, tmp_path):
        calls = []

        def fake_run(cmd, **kwargs):
            calls.append((cmd, kwargs))
            return subprocess.CompletedProcess(cmd, 0, stdout="registry: {}\n", stderr="")

        monkeypatch.setattr(subprocess, "run", fake_run)
        out = ecs_spec(tmp_path, "v8.11.0", "generated/ecs/ecs_nested.yml")
        assert out == "registry: {}\n"
        cmd, kwargs = calls[0]
        assert cmd == ["git", "show", "v8.11.0:generated/ecs/ecs_nested.yml"]
        assert kwargs["cwd"] == tmp_path

    def test_git_failure(self, monkeypatch, tmp_path):
        def fake_run(cmd, **kwargs):
            raise subprocess.CalledProcessError(128, cmd, stderr="fatal: invalid object name")

        monkeypatch.setattr(subprocess, "run", fake_run)
        with pytest.raises(SourceError, match="invalid object name"):
            ecs_spec(tmp_path, "nope", "generated/ecs/ecs_nested.yml")

    def test_git_missing(self, monkeypatch, tmp_path):
        def fake_run(cmd, **kwargs):
            raise FileNotFoundError("git")

        monkeypatch.setattr(subprocess, "run", fake_run)
        with pytest.raises(SourceError):
            ecs_spec(tmp_path, "v8.11.0", "generated/ecs/ecs_nested.yml")
