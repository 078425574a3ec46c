"""Verification of Google and Apple ID tokens presented at login."""

import logging
from dataclasses import dataclass

import httpx
from jose import JWTError, jwt

from barter.config import get_settings
from barter.exceptions import OAuthVerificationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Provider:
    """Where to fetch signing keys and which issuers to accept."""

    name: str
    jwks_url: str
    issuers: tuple[str, ...]


PROVIDERS = {
    "google": Provider(
        name="google",
        jwks_url="https://www.googleapis.com/oauth2/v3/certs",
        issuers=("accounts.google.com", "https://accounts.google.com"),
    ),
    "apple": Provider(
        name="apple",
        jwks_url="https://appleid.apple.com/auth/keys",
        issuers=("https://appleid.apple.com",),
    ),
}


def get_client_id(provider: str) -> str | None:
    """Configured audience for a provider."""
    settings = get_settings()
    if provider == "google":
        return settings.google_client_id
    if provider == "apple":
        return settings.apple_client_id
    return None


async def fetch_jwks(url: str) -> dict:
    """Fetch a provider's JSON Web Key Set."""
    async with httpx.AsyncClient(timeout=10.0) as client:
        response = await client.get(url)
        response.raise_for_status()
        return response.json()


async def verify_provider_id_token(provider: str, id_token: str) -> str:
    """Verify an ID token and return the email it vouches for.

    Apple may omit the email; the stable subject is used instead as
    ``<sub>@apple.local``.
    """
    config = PROVIDERS.get(provider)
    if config is None:
        raise OAuthVerificationError(f"Unsupported provider: {provider}")

    client_id = get_client_id(provider)
    if not client_id:
        raise OAuthVerificationError(f"Server missing {provider} client id configuration.")

    try:
        jwks = await fetch_jwks(config.jwks_url)
    except httpx.HTTPError as e:
        logger.error(f"Failed to fetch {provider} signing keys: {e}")
        raise OAuthVerificationError(f"Invalid {provider} token.") from e

    try:
        claims = jwt.decode(
            id_token,
            jwks,
            algorithms=["RS256"],
            audience=client_id,
            issuer=config.issuers,
            options={"verify_at_hash": False},
        )
    except JWTError as e:
        logger.warning(f"{provider} ID token validation failed: {e}")
        raise OAuthVerificationError(f"Invalid {provider} token.") from e

    email = claims.get("email")
    if not email:
        if provider == "apple" and claims.get("sub"):
            return f"{claims['sub']}@apple.local"
        raise OAuthVerificationError(f"{provider} account did not provide an email.")
    return email
