import json

import pytest

from budget_core import settings
from budget_core.settings import defaults


def test_policy_defaults_are_loaded():
    policy = settings.get_policy_config()
    assert policy['status_thresholds']['near'] == 0.85
    assert policy['editor']['quantization_step'] == 5.0


def test_get_config_value_returns_default_for_missing_keys():
    assert settings.get_config_value('policy', 'editor', 'nope', default=7) == 7
    assert settings.get_config_value('missing-file', 'x', default='d') == 'd'


def test_load_config_raises_for_missing_file():
    with pytest.raises(FileNotFoundError):
        settings.load_config('does-not-exist')


def test_policy_can_be_overridden_from_another_directory(tmp_path, monkeypatch):
    (tmp_path / 'policy.json').write_text(
        json.dumps({'status_thresholds': {'near': 0.5, 'over': 1.0}}),
        encoding='utf-8',
    )
    monkeypatch.setattr(defaults, 'CONFIG_DIR', tmp_path)
    try:
        settings.reload_policy()
        assert settings.get_config_value('policy', 'status_thresholds', 'near') == 0.5
        # missing sections fall back to built-in defaults
        assert settings.get_config_value('policy', 'editor', 'quantization_step', default=5.0) == 5.0
    finally:
        monkeypatch.undo()
        settings.reload_policy()
