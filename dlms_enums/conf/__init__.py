import importlib
import os

from dlms_enums.conf import global_settings
from dlms_enums.exceptions import ImproperlyConfigured

ENVIRONMENT_VARIABLE = "DLMS_ENUMS_SETTINGS_MODULE"


class Settings:
    """
    Class for storing all library settings. Inspired by Django settings.

    The defaults in global_settings are always loaded. If the environment variable
    is set the module it names is imported and its ALL_CAPS settings overrides the
    defaults.
    """

    def __init__(self, settings_module=None):
        if settings_module is None:
            settings_module = os.environ.get(ENVIRONMENT_VARIABLE)

        self._setup(settings_module)

    def _setup(self, settings_module):

        # Load the global settings (but only for ALL_CAPS settings)
        for setting in dir(global_settings):
            if setting.isupper():
                setattr(self, setting, getattr(global_settings, setting))

        self.SETTINGS_MODULE = settings_module

        if settings_module:
            try:
                module = importlib.import_module(settings_module)
            except ImportError as e:
                raise ImproperlyConfigured(
                    f"Could not import settings module {settings_module!r}, "
                    f"given in {ENVIRONMENT_VARIABLE}"
                ) from e

            for setting in dir(module):
                if setting.isupper():  # only care about ALL_CAPS settings
                    setattr(self, setting, getattr(module, setting))

        if not self.FLAG_SEPARATOR:
            raise ImproperlyConfigured("FLAG_SEPARATOR can not be empty")

    def __repr__(self):
        return '<%(cls)s "%(settings_module)s">' % {
            "cls": self.__class__.__name__,
            "settings_module": self.SETTINGS_MODULE,
        }


settings = Settings()
