"""IAM token generation for SASL/OAUTHBEARER connections.

Tokens are generated per client and never cached. Generation runs on a
one-shot worker thread so the caller can enforce a hard time cap even when
the underlying credential chain blocks.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError

from aws_msk_iam_sasl_signer import MSKAuthTokenProvider

from kafkalens.constants.timeouts import AUTH_TOKEN_TIMEOUT
from kafkalens.controllers.errors import AuthTokenError

logger = logging.getLogger(__name__)

# (region) -> (token, expiry epoch milliseconds)
TokenGenerator = Callable[[str], tuple[str, int]]


def generate_token(
    region: str,
    timeout: float = AUTH_TOKEN_TIMEOUT,
    generator: TokenGenerator | None = None,
) -> tuple[str, int]:
    """Generate an IAM auth token for ``region``.

    Args:
        region: AWS region used to sign the token.
        timeout: Seconds to wait; never more than ``AUTH_TOKEN_TIMEOUT``.
        generator: Token source, defaults to the MSK IAM signer.

    Returns:
        Tuple of (token, expiry in epoch milliseconds).

    Raises:
        AuthTokenError: Generation failed or did not finish in time.
    """
    effective_timeout = min(timeout, AUTH_TOKEN_TIMEOUT)
    generate = generator or MSKAuthTokenProvider.generate_auth_token
    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="kafkalens-token")
    future = executor.submit(generate, region)
    try:
        token, expiry_ms = future.result(timeout=effective_timeout)
    except FutureTimeoutError as exc:
        logger.warning("IAM token generation timed out after %.1fs", effective_timeout)
        raise AuthTokenError(
            f"IAM token generation for {region} timed out after {effective_timeout:.0f}s"
        ) from exc
    except Exception as exc:
        raise AuthTokenError(f"IAM token generation for {region} failed: {exc}") from exc
    finally:
        # A timed out generation keeps running in the background; do not wait.
        executor.shutdown(wait=False)

    logger.debug("Generated IAM token for %s (expires %s)", region, expiry_ms)
    return token, int(expiry_ms)


class IamTokenProvider:
    """Token provider bound to one region, usable as a librdkafka ``oauth_cb``."""

    def __init__(self, region: str, generator: TokenGenerator | None = None) -> None:
        self.region = region
        self._generator = generator

    def generate_token(self) -> tuple[str, int]:
        return generate_token(self.region, generator=self._generator)

    def oauth_cb(self, _oauth_config: str | None) -> tuple[str, float]:
        """Callback invoked by the Kafka client whenever it needs a token.

        librdkafka expects the expiry in epoch seconds.
        """
        token, expiry_ms = self.generate_token()
        return token, expiry_ms / 1000.0
