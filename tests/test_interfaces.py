"""
Tests that verify Protocol definitions are valid and implementations comply.
These tests don't test behavior - just that contracts exist.
"""

from __future__ import annotations

from protochain import interfaces


def test_initializer_protocol_exists():
    """Initializer Protocol must be callable-shaped."""
    assert hasattr(interfaces, "Initializer")
    assert hasattr(interfaces.Initializer, "__call__")


def test_settings_model_protocol_exists():
    """SettingsModel Protocol must define required attributes."""
    assert hasattr(interfaces, "SettingsModel")

    protocol = interfaces.SettingsModel

    for attr in ["log_level", "log_format"]:
        assert hasattr(protocol, attr), f"SettingsModel missing {attr}"


def test_settings_conforms_to_settings_model():
    """Settings must implement all SettingsModel attributes."""
    from protochain.config import Settings

    settings = Settings({})
    for attr in ["log_level", "log_format"]:
        assert hasattr(settings, attr), f"Settings missing {attr}"
