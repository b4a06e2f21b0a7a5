"""Tests for create-site and create-artifact."""

import json

import pytest
import yaml

from cs_commons.errors import ExternalToolFailure, ValidationFailure
from cs_commons.metadata.requirements import LICENSES
from cs_commons.metadata.store import load_global_config, save_global_config
from cs_commons.prompt import ScriptedInput
from cs_commons.scaffold.artifact import create_artifact, render_readme
from cs_commons.scaffold.site import create_site, render_site_config
from cs_commons.scaffold.templates import GITIGNORE, TEMPLATE_FILES


class TestCreateSite:

    def test_end_to_end(self, tmp_path, fake_tools):
        source = ScriptedInput(["git@github.com:alice/course.git", "CS 101"])
        result = create_site("demo", source, cwd=tmp_path)

        site = tmp_path / "demo"
        assert result["target"] == site
        for name in ["_config.yml", "index.md", ".gitignore", "cs-commons-site.json"]:
            assert (site / name).is_file(), name
        for rel in TEMPLATE_FILES:
            assert (site / rel).is_file(), rel

        metadata = json.loads((site / "cs-commons-site.json").read_text())
        assert metadata == result["metadata"]
        assert metadata == {
            "repo": "git@github.com:alice/course.git",
            "public_repo": "https://github.com/alice/course",
            "url": "http://alice.github.io/course",
            "title": "CS 101",
        }
        # derived URLs are never asked
        assert len(source.prompts) == 2

    def test_templates_fetched_with_curl(self, tmp_path, fake_tools, monkeypatch):
        monkeypatch.setenv("CS_COMMONS_TEMPLATE_URL", "https://templates.example.org/site/")
        create_site("demo", ScriptedInput(["git@github.com:alice/course.git", "CS 101"]), cwd=tmp_path)
        urls = [call[-1] for call in fake_tools.commands("curl")]
        assert urls == [f"https://templates.example.org/site/{rel}" for rel in TEMPLATE_FILES]

    def test_config_and_index_content(self, tmp_path, fake_tools):
        create_site("demo", ScriptedInput(["git@github.com:alice/course.git", "CS 101"]), cwd=tmp_path)
        config = yaml.safe_load((tmp_path / "demo" / "_config.yml").read_text())
        assert config["title"] == "CS 101"
        assert config["url"] == "http://alice.github.io"
        assert config["baseurl"] == "/course"
        assert config["repository"] == "https://github.com/alice/course"
        assert "cs-commons-site.json" in config["exclude"]

        index = (tmp_path / "demo" / "index.md").read_text()
        assert index.startswith("---\n")
        assert "# CS 101" in index
        assert (tmp_path / "demo" / ".gitignore").read_text() == GITIGNORE

    def test_unrecognized_url_asks_for_public_urls(self, tmp_path, fake_tools):
        source = ScriptedInput([
            "https://git.example.org/course.git",
            "https://git.example.org/course",
            "https://course.example.org",
            "Course",
        ])
        result = create_site("demo", source, cwd=tmp_path)
        assert result["metadata"]["public_repo"] == "https://git.example.org/course"
        assert result["metadata"]["url"] == "https://course.example.org"

    def test_existing_plain_directory_is_reused(self, tmp_path, fake_tools):
        (tmp_path / "demo").mkdir()
        (tmp_path / "demo" / "notes.md").write_text("keep me")
        create_site("demo", ScriptedInput(["git@github.com:alice/course.git", "CS 101"]), cwd=tmp_path)
        assert (tmp_path / "demo" / "notes.md").read_text() == "keep me"
        assert (tmp_path / "demo" / "cs-commons-site.json").is_file()

    def test_existing_site_rejected(self, tmp_path, fake_tools):
        (tmp_path / "demo").mkdir()
        (tmp_path / "demo" / "cs-commons-site.json").write_text("{}")
        source = ScriptedInput([])
        with pytest.raises(ValidationFailure, match="already a cs-commons site"):
            create_site("demo", source, cwd=tmp_path)
        assert source.prompts == []

    def test_template_failure_leaves_partial_directory(self, tmp_path, fake_tools):
        fake_tools.fail("curl", returncode=22, output="404 Not Found")
        with pytest.raises(ExternalToolFailure) as exc_info:
            create_site("demo", ScriptedInput(["git@github.com:alice/course.git", "CS 101"]), cwd=tmp_path)
        assert "404" in exc_info.value.output
        assert (tmp_path / "demo").is_dir()
        assert not (tmp_path / "demo" / "cs-commons-site.json").exists()

    def test_render_site_config_without_url(self):
        text = render_site_config({"title": "T", "url": "", "public_repo": ""})
        assert yaml.safe_load(text)["baseurl"] == ""


class TestCreateArtifact:

    def _answers(self):
        return [
            "git@github.com:alice/lab.git",
            "Ada Lovelace", "ada@example.org", "Analytical U",
            "y",        # save author info
            "n",        # another author
            "0",        # license
            "Loops Lab", "lab", "loops  arrays python",
        ]

    def test_end_to_end(self, tmp_path, home):
        result = create_artifact("lab1", ScriptedInput(self._answers()), cwd=tmp_path)

        target = tmp_path / "lab1"
        for name in ["cs-commons-artifact.json", "index.md", "README.md", ".gitignore"]:
            assert (target / name).is_file(), name

        metadata = json.loads((target / "cs-commons-artifact.json").read_text())
        assert metadata == result["metadata"]
        assert metadata["public_repo"] == "https://github.com/alice/lab"
        assert metadata["url"] == "http://alice.github.io/lab"
        assert metadata["authors"] == [
            {"name": "Ada Lovelace", "email": "ada@example.org", "affiliation": "Analytical U"},
        ]
        assert metadata["license"] == LICENSES[0].as_dict()
        assert metadata["keywords"] == ["loops", "arrays", "python"]
        assert metadata["title"] == "Loops Lab"
        assert metadata["type"] == "lab"

    def test_readme_templated(self, tmp_path, home):
        create_artifact("lab1", ScriptedInput(self._answers()), cwd=tmp_path)
        readme = (tmp_path / "lab1" / "README.md").read_text()
        assert "# Loops Lab" in readme
        assert "Ada Lovelace <ada@example.org>, Analytical U" in readme
        assert LICENSES[0].fullname in readme
        assert "A lab shared" in readme
        assert "`arrays`" in readme

    def test_author_saved_when_opted_in(self, tmp_path, home):
        create_artifact("lab1", ScriptedInput(self._answers()), cwd=tmp_path)
        assert load_global_config()["name"] == "Ada Lovelace"

    def test_author_not_saved_when_declined(self, tmp_path, home):
        answers = self._answers()
        answers[4] = "n"
        create_artifact("lab1", ScriptedInput(answers), cwd=tmp_path)
        assert not (home / ".cs-commons").exists()

    def test_prefilled_author_and_custom_license(self, tmp_path, home):
        save_global_config({"name": "Ada", "email": "ada@x", "affiliation": "U", "editor": "vim"})
        source = ScriptedInput([
            "git@github.com:alice/lab.git",
            "", "", "",             # accept saved author; unchanged so no save prompt
            "y", "Bob", "bob@x", "V",
            "n",
            "-1", "WTFPL", "Do What The F*ck You Want To Public License", "http://www.wtfpl.net",
            "Exam", "exam", "final",
        ])
        result = create_artifact("exam", source, cwd=tmp_path)
        metadata = result["metadata"]
        assert [a["name"] for a in metadata["authors"]] == ["Ada", "Bob"]
        assert metadata["license"]["shortname"] == "WTFPL"
        assert metadata["license"]["website"] == "http://www.wtfpl.net"
        assert not any("Save your author" in p for p in source.prompts)
        assert load_global_config()["editor"] == "vim"

    def test_existing_directory_rejected_before_prompting(self, tmp_path, home):
        (tmp_path / "lab1").mkdir()
        source = ScriptedInput([])
        with pytest.raises(ValidationFailure, match="already exists"):
            create_artifact("lab1", source, cwd=tmp_path)
        assert source.prompts == []
        assert list((tmp_path / "lab1").iterdir()) == []

    def test_render_readme_without_keywords(self):
        text = render_readme({
            "title": "T", "type": "lecture", "keywords": [],
            "authors": [{"name": "A"}],
            "license": LICENSES[3].as_dict(),
        })
        assert "*None*" in text
        assert "- A\n" in text
