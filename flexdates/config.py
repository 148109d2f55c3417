class DatesConfig:
    """
    Global defaults for the date utilities.
    Use set(), reset(), and get_config() to manage options.
    """
    _defaults = {
        "locale": "en-US",  # Default: US English names and clock
        "text": "long",     # Default: full month and weekday names
        "utc": True,        # Default: timezone-less text is read as UTC
    }
    locale = _defaults["locale"]
    text = _defaults["text"]
    utc = _defaults["utc"]

    @classmethod
    def set(cls, **kwargs):
        """Set one or more config options."""
        for k, v in kwargs.items():
            if k in cls._defaults:
                setattr(cls, k, v)

    @classmethod
    def reset(cls):
        """Reset all config options to their default values."""
        for k, v in cls._defaults.items():
            setattr(cls, k, v)

    @classmethod
    def get_config(cls):
        """Return a dict of current config values."""
        return {k: getattr(cls, k) for k in cls._defaults}

def set_config(**kwargs):
    """Convenience function to set config options."""
    DatesConfig.set(**kwargs)

def resolve_utc(utc):
    """Return `utc`, or the configured default when it is None."""
    return DatesConfig.utc if utc is None else utc
