import textwrap
import warnings

import pytest

from question_separator.config import DEFAULT_PIPELINE, PipelineSpec, load_spec


def test_missing_file_uses_default_pipeline(tmp_path):
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        spec = load_spec(tmp_path / "absent.yaml")
    assert spec.pipeline == DEFAULT_PIPELINE
    assert spec.options == {}
    assert not caught


def test_unknown_option_emits_warning(tmp_path):
    cfg = tmp_path / "pipeline.yaml"
    cfg.write_text(
        textwrap.dedent(
            """
            pipeline: [validate_input, separate_questions]
            options:
              separate_questions:
                max_questions: 5
              extra_pass:
                foo: 1
            """
        )
    )
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        load_spec(cfg)

    messages = [w.message.args[0] for w in caught]
    assert messages == ["Unknown pipeline options: extra_pass"]


def test_load_spec_merges_env_and_cli_overrides(tmp_path, monkeypatch):
    cfg = tmp_path / "pipeline.yaml"
    cfg.write_text(
        textwrap.dedent(
            """
            pipeline: [validate_input, separate_questions]
            options:
              validate_input:
                max_chars: 5000
                force_mode: false
              separate_questions:
                max_questions: 20
            """
        )
    )
    monkeypatch.setenv("VALIDATE_INPUT__FORCE_MODE", "true")
    monkeypatch.setenv("SEPARATE_QUESTIONS__MAX_QUESTIONS", "7")
    overrides = {"separate_questions": {"max_questions": 3}}

    spec = load_spec(cfg, overrides=overrides)

    assert spec.pipeline == ["validate_input", "separate_questions"]
    assert spec.options["validate_input"] == {"max_chars": 5000, "force_mode": True}
    assert spec.options["separate_questions"] == {"max_questions": 3}


def test_env_overrides_ignore_steps_outside_pipeline(tmp_path, monkeypatch):
    monkeypatch.setenv("SOME_TOOL__SETTING", "1")
    spec = load_spec(tmp_path / "absent.yaml")
    assert "some_tool" not in spec.options


def test_non_mapping_yaml_raises(tmp_path):
    cfg = tmp_path / "pipeline.yaml"
    cfg.write_text("- not-a-mapping\n- still-not-a-mapping\n")

    with pytest.raises(TypeError, match="top-level mapping"):
        load_spec(cfg)


def test_step_options_returns_copy():
    spec = PipelineSpec(options={"separate_questions": {"max_questions": 2}})
    opts = spec.step_options("separate_questions")
    opts["max_questions"] = 99
    assert spec.options["separate_questions"]["max_questions"] == 2
    assert spec.step_options("validate_input") == {}
