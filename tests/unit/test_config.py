"""
Unit tests for configuration and logging helpers.

Tests Settings defaults, environment variable loading and the skip list
parsing, plus the log value truncation processor.
"""

from a11y_bridge.config import Settings, get_settings
from a11y_bridge.core.logging import MAX_LOGGED_VALUE_LENGTH, truncate_long_values_processor


class TestSettings:
    """Test suite for Settings configuration class."""

    def test_settings_with_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.service_name == "a11y-bridge"
        assert settings.audit_engine_url == "http://host.docker.internal:3000"
        assert settings.audit_engine_timeout_seconds == 120.0
        assert settings.ignore_class_name == "phpally-ignore"
        assert settings.skip_rule_ids_set == frozenset()
        assert settings.rule_mapping_enabled is False
        assert settings.rule_mapping_path is None

    def test_settings_from_environment(self, monkeypatch):
        monkeypatch.setenv("AUDIT_ENGINE_URL", "http://engine:9000")
        monkeypatch.setenv("BACKGROUND_COLOR", "#eeeeee")
        monkeypatch.setenv("TEXT_COLOR", "#2D3B45")
        monkeypatch.setenv("IGNORE_CLASS_NAME", "a11y-ignore")
        monkeypatch.setenv("RULE_MAPPING_ENABLED", "true")

        settings = Settings(_env_file=None)

        assert settings.audit_engine_url == "http://engine:9000"
        assert settings.background_color == "#eeeeee"
        assert settings.text_color == "#2D3B45"
        assert settings.ignore_class_name == "a11y-ignore"
        assert settings.rule_mapping_enabled is True

    def test_skip_rule_ids_are_split_and_trimmed(self, monkeypatch):
        monkeypatch.setenv("SKIP_RULE_IDS", "a, b,,c ,")

        settings = Settings(_env_file=None)

        assert settings.skip_rule_ids_set == frozenset({"a", "b", "c"})

    def test_get_settings_is_cached(self):
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()


class TestTruncateProcessor:
    """Test suite for the long value truncation processor."""

    def test_long_values_are_shortened(self):
        snippet = "<p>" + "x" * (MAX_LOGGED_VALUE_LENGTH * 2) + "</p>"
        event = truncate_long_values_processor(None, "info", {"event": "e", "html": snippet})

        assert event["html"].startswith(snippet[:MAX_LOGGED_VALUE_LENGTH])
        assert event["html"].endswith(f"[{len(snippet)} chars]")

    def test_event_and_short_values_untouched(self):
        long_event = "y" * (MAX_LOGGED_VALUE_LENGTH + 1)
        event = truncate_long_values_processor(None, "info", {"event": long_event, "rule_id": "a", "count": 3})

        assert event == {"event": long_event, "rule_id": "a", "count": 3}
