"""
Auth configuration settings.

Session cookie parameters and the path tables consulted by the route gate.

Dependencies: pydantic, pydantic_settings
System role: Session and route-gate configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from braincast.configs.base import BaseSettings


class AuthSettings(BaseSettings):
    """Session cookie and route gate configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="AUTH_",
        case_sensitive=False,
        extra="ignore",
    )

    session_secret: str = Field(
        default="change-me-in-production",
        description="Secret used to sign the session cookie",
    )
    session_cookie: str = Field(default="braincast_session", description="Session cookie name")
    session_max_age: int = Field(
        default=14 * 24 * 60 * 60,
        description="Session lifetime in seconds",
    )
    https_only: bool = Field(default=False, description="Mark the session cookie Secure")

    protected_prefixes: list[str] = Field(
        default=["/quiz", "/profile", "/social", "/create"],
        description="Page prefixes that require a signed-in user",
    )
    login_path: str = Field(default="/login", description="Login page for regular users")

    admin_prefix: str = Field(default="/admin", description="Prefix of the admin area")
    admin_login_path: str = Field(default="/admin/login", description="Admin login page")
    admin_cookie: str = Field(default="adminSession", description="Admin flag cookie name")
    admin_cookie_value: str = Field(default="true", description="Value the admin cookie must hold")

    api_prefix: str = Field(default="/api", description="Prefix of JSON API routes")
    return_param: str = Field(default="returnUrl", description="Query parameter carrying the original path")

    sign_in_domain: str | None = Field(
        default=None,
        description="Domain sign-in messages must be issued for; unset accepts any",
    )

    cors_origins: list[str] = Field(default=["*"], description="Origins allowed by CORS")
