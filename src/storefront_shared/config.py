"""Runtime configuration for the storefront checkout server.

Settings are read from the process environment exactly once, at startup,
and then passed explicitly to the services that need them. Request handling
code never touches ``os.environ``.

Environment variables:
    STRIPE_SECRET_KEY: Stripe secret API key (sk_...). Checkout fails without it.
    STRIPE_WEBHOOK_SECRET: Webhook signing secret (whsec_...). Webhooks are
        accepted unverified and ignored without it.
    PORT: Listening port (default 3000).
    RAILWAY_PUBLIC_DOMAIN: Externally reachable host name used for redirects.
    STATIC_DIR: Directory holding the front-end files (default "public").
    LOG_LEVEL: Root log level (default INFO).
    CORS_ORIGINS: Comma separated list of allowed origins (default "*").
"""

import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, SecretStr

DEFAULT_PORT = 3000


def _non_empty(environ: Mapping[str, str], key: str) -> str | None:
    """Return the stripped value of an env var, treating blanks as unset."""
    value = environ.get(key, "").strip()
    return value or None


class Settings(BaseModel):
    """Immutable process-wide settings."""

    model_config = ConfigDict(frozen=True)

    stripe_secret_key: SecretStr | None = Field(
        default=None,
        description="Stripe secret API key",
    )
    stripe_webhook_secret: SecretStr | None = Field(
        default=None,
        description="Stripe webhook signing secret",
    )
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    public_domain: str | None = Field(
        default=None,
        description="Public host name, without scheme",
        examples=["shop.up.railway.app"],
    )
    static_dir: Path = Field(default=Path("public"))
    log_level: str = Field(default="INFO")
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from environment variables.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Returns:
            Populated Settings instance.
        """
        env = os.environ if environ is None else environ

        values: dict = {}
        secret_key = _non_empty(env, "STRIPE_SECRET_KEY")
        if secret_key:
            values["stripe_secret_key"] = SecretStr(secret_key)
        webhook_secret = _non_empty(env, "STRIPE_WEBHOOK_SECRET")
        if webhook_secret:
            values["stripe_webhook_secret"] = SecretStr(webhook_secret)

        port = _non_empty(env, "PORT")
        if port:
            values["port"] = int(port)

        values["public_domain"] = _non_empty(env, "RAILWAY_PUBLIC_DOMAIN")

        static_dir = _non_empty(env, "STATIC_DIR")
        if static_dir:
            values["static_dir"] = Path(static_dir)

        log_level = _non_empty(env, "LOG_LEVEL")
        if log_level:
            values["log_level"] = log_level.upper()

        origins = _non_empty(env, "CORS_ORIGINS")
        if origins:
            values["cors_origins"] = [o.strip() for o in origins.split(",") if o.strip()]

        return cls(**values)

    @property
    def stripe_configured(self) -> bool:
        return self.stripe_secret_key is not None

    @property
    def webhook_configured(self) -> bool:
        return self.stripe_webhook_secret is not None

    @property
    def base_url(self) -> str:
        """Externally reachable base URL used to build redirect targets."""
        if self.public_domain:
            return f"https://{self.public_domain}"
        return f"http://localhost:{self.port}"
