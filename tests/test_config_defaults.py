from pathlib import Path

from corpusgen.config import load_config


def test_default_values() -> None:
    cfg = load_config()
    assert cfg.schema_version == 1
    assert cfg.generator.max_total_length == 200_000_000
    assert cfg.generator.seed == 42
    assert cfg.generator.probability == 0.01
    assert cfg.generator.min_line_length == 2
    assert cfg.logging.level == "WARNING"
    assert cfg.verification.max_reported_invalid == 20


def test_override_file(tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text("generator:\n  seed: 7\n  max_total_length: 1000\n")
    cfg = load_config(cfg_file)
    assert cfg.generator.seed == 7
    assert cfg.generator.max_total_length == 1000
    # untouched keys keep their defaults
    assert cfg.generator.probability == 0.01
    assert cfg.logging.level == "WARNING"


def test_empty_override_file(tmp_path: Path) -> None:
    cfg_file = tmp_path / "empty.yml"
    cfg_file.write_text("")
    assert load_config(cfg_file) == load_config()
