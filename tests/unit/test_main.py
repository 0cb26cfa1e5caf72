# tests/unit/test_main.py

import io
import pytest
from verse.llm.base_llm import MockLLM, LLMConfig
from verse.main import main
from verse.models.form import PoemForm


@pytest.fixture
def mock_config(fixtures_dir):
    return str(fixtures_dir / "mock_config.yaml")


@pytest.mark.usefixtures("no_api_key")
class TestMain:

    def test_forms(self, capsys, mock_config):
        assert main(["--config", mock_config, "forms"]) == 0

        out = capsys.readouterr().out
        assert "sonnet" in out and "free-verse" in out
        assert "AABBA rhyme scheme" in out

    def test_validate_file(self, capsys, tmp_path, haiku_text, mock_config):
        path = tmp_path / "haiku.txt"
        path.write_text(haiku_text, encoding="utf-8")

        assert main(["--config", mock_config, "validate", "haiku", str(path)]) == 0
        assert "Valid haiku (3 lines)" in capsys.readouterr().out

    def test_validate_stdin(self, capsys, monkeypatch, mock_config):
        monkeypatch.setattr("sys.stdin", io.StringIO("Spring\nRain falls on the roof\nSoft sound"))

        assert main(["--config", mock_config, "validate", "haiku"]) == 1
        assert "First line should have ~5 syllables. Current: 1 syllables" in capsys.readouterr().out

    def test_validate_acrostic_topic(self, capsys, tmp_path, mock_config):
        path = tmp_path / "acrostic.txt"
        path.write_text("Curled\nAsleep\nTwitching\n", encoding="utf-8")

        assert main(["--config", mock_config, "validate", "acrostic", str(path), "--topic", "CAT"]) == 0
        assert main(["--config", mock_config, "validate", "acrostic", str(path), "--topic", "DOG"]) == 1
        assert 'must spell "DOG". Current: "CAT"' in capsys.readouterr().out

    def test_validate_with_review(self, capsys, tmp_path, haiku_text, mock_config):
        path = tmp_path / "haiku.txt"
        path.write_text(haiku_text, encoding="utf-8")

        assert main(["--config", mock_config, "validate", "haiku", str(path), "--review"]) == 0
        assert "Review: valid" in capsys.readouterr().out

    def test_validate_missing_file(self, capsys, tmp_path, mock_config):
        assert main(["--config", mock_config, "validate", "haiku", str(tmp_path / "nope.txt")]) == 1
        assert "Error:" in capsys.readouterr().out

    def test_validate_undecodable_file(self, capsys, tmp_path, mock_config):
        path = tmp_path / "haiku.txt"
        path.write_bytes(b"An old silent pond\nA frog jumps \xff\nSplash\n")

        assert main(["--config", mock_config, "validate", "haiku", str(path)]) == 1
        assert "Error:" in capsys.readouterr().out

    def test_generate_all_survives_a_failed_title(self, capsys, monkeypatch, mock_config):
        form_count = len(PoemForm)
        responses = [MockLLM.DEFAULT_POEM] * form_count + ['""'] + ['"Still Water"'] * (form_count - 1)
        llm = MockLLM(LLMConfig(model_name="test-model"), responses=responses)
        monkeypatch.setattr("verse.main.create_llm_from_config", lambda config: llm)

        assert main(["--config", mock_config, "generate", "rain", "--all", "--title"]) == 0

        out = capsys.readouterr().out
        assert "Title generation failed: Failed to generate title" in out
        assert "== Sonnet ==" in out
        assert "== Haiku: Still Water ==" in out
        assert "== Free Verse: Still Water ==" in out

    def test_generate(self, capsys, mock_config):
        assert main(["--config", mock_config, "generate", "an old pond", "--form", "haiku",
                     "--title", "--validate"]) == 0

        out = capsys.readouterr().out
        assert "== Haiku: Ripples on Still Water ==" in out
        assert "A frog jumps into the pond" in out
        assert "Structure OK" in out

    def test_generate_reports_invalid_structure(self, capsys, mock_config):
        assert main(["--config", mock_config, "generate", "an old pond", "--form", "sonnet", "--validate"]) == 1
        assert "Invalid poem structure: A sonnet must have exactly 14 lines. Current: 3 lines" \
            in capsys.readouterr().out

    def test_generate_all(self, capsys, mock_config):
        assert main(["--config", mock_config, "generate", "rain", "--all"]) == 0
        out = capsys.readouterr().out
        assert "== Sonnet ==" in out and "== Free Verse ==" in out

    def test_generate_without_service(self, capsys, tmp_path):
        assert main(["--config", str(tmp_path / "absent.yaml"), "generate", "rain"]) == 2
        assert "no text-generation service configured" in capsys.readouterr().out

    def test_random_topic(self, capsys, mock_config):
        assert main(["--config", mock_config, "random-topic"]) == 0
        assert capsys.readouterr().out.strip()

    def test_command_required(self):
        with pytest.raises(SystemExit):
            main([])
