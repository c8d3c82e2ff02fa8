"""Credential providers for authenticated cluster connections."""

from kafkalens.controllers.auth.token_provider import (
    IamTokenProvider,
    TokenGenerator,
    generate_token,
)

__all__ = ["IamTokenProvider", "TokenGenerator", "generate_token"]
