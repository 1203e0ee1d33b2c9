"""Sentry initialization - import this module first to enable error reporting.

Reads SENTRY_DSN and MCPDOC_ENVIRONMENT through McpdocSettings, so both
can also come from a .env file.
"""

import sentry_sdk

from mcpdoc.settings import McpdocSettings

_settings = McpdocSettings()

sentry_sdk.init(
    dsn=_settings.sentry_dsn,
    environment=_settings.environment,
)
