"""
Exceptions raised by the settings registry.

- MissingRequiredSetting: a required setting had no provider value at registration
- SettingNotLoaded: an accessor was asked for a setting with no usable value
- ParseError: a present value could not be converted to the requested type
- DuplicateSetting: a name was registered twice under the "error" duplicate policy
"""


class SettingsError(Exception):
    """Base class for all settings registry errors."""

    def __init__(self, name: str, message: str):
        self.name = name
        super().__init__(message)


class MissingRequiredSetting(SettingsError):
    """Raised during registration when a required setting is not set."""

    def __init__(self, name: str):
        super().__init__(name, f"Missing required environment setting: {name}")


class SettingNotLoaded(SettingsError, LookupError):
    """Raised by accessors when a setting is unknown or its value is blank."""

    def __init__(self, name: str):
        super().__init__(name, f"Setting not loaded: {name}")


class ParseError(SettingsError, ValueError):
    """Raised when a setting value cannot be converted to the requested type."""

    def __init__(self, name: str, kind: str):
        self.kind = kind
        super().__init__(name, f"Could not parse setting to {kind}: {name}")


class DuplicateSetting(SettingsError):
    """Raised when a setting name is registered more than once."""

    def __init__(self, name: str):
        super().__init__(name, f"Duplicate setting: {name}")
