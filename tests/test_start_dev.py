"""Tests for the development launcher."""

import pytest

from config.settings import DevelopmentConfig
import start_dev

MEMORY_DB = "sqlite:///:memory:"


@pytest.fixture(autouse=True)
def development_env(monkeypatch):
    monkeypatch.delenv("FLASK_ENV", raising=False)


def test_unknown_weight_profile_is_rejected():
    with pytest.raises(SystemExit):
        start_dev.parse_args(["--weight-profile", "aggressive"])


def test_config_overrides():
    args = start_dev.parse_args([
        "--database", MEMORY_DB,
        "--weight-profile", "healthcare",
        "--likert-policy", "clamp",
        "--assessment-type", "advanced"
    ])
    config_class = start_dev.build_config(args)

    assert issubclass(config_class, DevelopmentConfig)
    assert config_class.SQLALCHEMY_DATABASE_URI == MEMORY_DB
    assert config_class.SQLALCHEMY_ENGINE_OPTIONS == {}
    assert config_class.WEIGHT_PROFILE == "healthcare"
    assert config_class.LIKERT_POLICY == "clamp"
    assert config_class.DEFAULT_ASSESSMENT_TYPE == "ADVANCED"
    # unset flags keep the base config
    assert config_class.PILLAR_ASSIGNMENT == DevelopmentConfig.PILLAR_ASSIGNMENT


def test_profile_warnings():
    def config(profile, assessment_type):
        args = start_dev.parse_args(["--database", MEMORY_DB,
                                     "--weight-profile", profile,
                                     "--assessment-type", assessment_type])
        return start_dev.build_config(args)

    assert start_dev.profile_warnings(config("balanced", "FRONTIER")) == []
    warnings = start_dev.profile_warnings(config("healthcare", "FRONTIER"))
    assert len(warnings) == 1
    assert "not meant for FRONTIER" in warnings[0]


def test_question_bank_report(app):
    assert start_dev.question_bank_report(app) == {"CORE": 40, "ADVANCED": 24, "FRONTIER": 16}


def test_demo_leads_load_once(app):
    assert start_dev.load_demo_leads(app, 2) == 2
    assert start_dev.load_demo_leads(app, 2) == 0


def test_check_mode_reports_and_exits(capsys):
    exit_code = start_dev.main(["--check", "--database", MEMORY_DB, "--demo", "2"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "CORE 40, ADVANCED 24, FRONTIER 16" in out
    assert "weight profile    Balanced" in out
    assert "demo leads        2" in out
