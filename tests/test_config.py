"""Tests for global configuration."""

from datetime import datetime, timezone

from flexdates import DatesConfig, nice, relative, set_config, to_date

def test_defaults():
    """Test the out of the box values."""
    assert DatesConfig.get_config() == {'locale': 'en-US', 'text': 'long', 'utc': True}

def test_set_and_reset():
    """Test options can be changed and restored."""
    set_config(locale='fr-FR', text='short')
    assert DatesConfig.locale == 'fr-FR'
    assert DatesConfig.text == 'short'
    DatesConfig.reset()
    assert DatesConfig.get_config()['locale'] == 'en-US'

def test_set_ignores_unknown_options():
    """Test unknown keys are not added."""
    set_config(colour='blue')
    assert 'colour' not in DatesConfig.get_config()
    assert not hasattr(DatesConfig, 'colour')

def test_locale_and_text_defaults_used():
    """Test nice and relative fall back to the configured values."""
    set_config(locale='fr-FR')
    assert nice('2025-02-11', time=False) == 'mardi 11 février 2025'
    set_config(locale='en-US', text='short')
    assert nice('2025-02-11', time=False) == 'Tue, Feb 11, 2025'

def test_explicit_arguments_win():
    """Test arguments override the configured values."""
    set_config(locale='fr-FR', text='short')
    assert nice('2025-02-11', locale='en-US', text='long', time=False) == 'Tuesday, February 11, 2025'

def test_utc_default_used(eastern_host):
    """Test the utc flag falls back to the configured value."""
    set_config(utc=False)
    assert to_date('2025-02-11 09:00:00') == datetime(2025, 2, 11, 14, tzinfo=timezone.utc)
    assert to_date('2025-02-11 09:00:00', utc=True) == datetime(2025, 2, 11, 9, tzinfo=timezone.utc)

def test_relative_uses_config(frozen_now):
    """Test relative reads the configured text type."""
    set_config(text='short')
    assert relative('2025-01-05') == 'Jan 5'
