"""
Gateway endpoint: validate, route, normalize.

``complete_conversation`` is the single externally callable operation. It
never raises; every outcome is a ``CompletionResult``.
"""

import logging
from typing import Any, Dict, Optional, Tuple, Union

from opentelemetry import trace
from pydantic import ValidationError

from .core.errors import GatewayError, MalformedRequestError
from .core.config import load_config
from .core.registry import ProviderRegistry, create_default_registry
from .models.request import CompletionRequest
from .models.response import CompletionResult

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)


def parse_request(payload: Union[CompletionRequest, Dict[str, Any]]) -> CompletionRequest:
    """
    Validate an inbound payload.

    Raises:
        MalformedRequestError: If the payload fails shape checks
    """
    if isinstance(payload, CompletionRequest):
        return payload
    if not isinstance(payload, dict):
        raise MalformedRequestError("Request body must be a JSON object")

    try:
        return CompletionRequest.model_validate(payload)
    except ValidationError as e:
        raise MalformedRequestError(f"Invalid request: {_describe_validation_error(e)}") from e


def _describe_validation_error(error: ValidationError) -> str:
    problems = []
    for err in error.errors():
        location = ".".join(str(part) for part in err["loc"]) or "body"
        problems.append(f"{location}: {err['msg']}")
    return "; ".join(problems)


async def run_completion(
    payload: Union[CompletionRequest, Dict[str, Any]],
    registry: Optional[ProviderRegistry] = None,
) -> Tuple[CompletionResult, int]:
    """
    Run one gateway call and report the HTTP status it maps to.

    Without a registry, a registry scoped to this call is built from the
    loaded settings and its clients are closed before returning, so the
    call never reuses connections opened on another event loop.

    Returns:
        Tuple of (result, status code)
    """
    if registry is not None:
        return await _run_completion(payload, registry)

    registry = create_default_registry(timeout=load_config().timeout)
    try:
        return await _run_completion(payload, registry)
    finally:
        await registry.disconnect_all()


async def _run_completion(
    payload: Union[CompletionRequest, Dict[str, Any]],
    registry: ProviderRegistry,
) -> Tuple[CompletionResult, int]:
    try:
        request = parse_request(payload)
        config = request.config

        with tracer.start_as_current_span("provider_completion") as span:
            span.set_attribute("provider", config.provider)
            span.set_attribute("model", config.model)
            span.set_attribute("message_count", len(request.messages))

            content = await registry.route(
                config.provider,
                config.api_key,
                config.model,
                request.system_prompt,
                request.messages,
            )

        return CompletionResult.success(content), 200

    except GatewayError as e:
        logger.warning(f"Completion failed ({type(e).__name__}): {e.message}")
        return CompletionResult.failure(e.message), e.status_code

    except Exception as e:
        logger.exception("Unexpected error during completion")
        return CompletionResult.failure(str(e) or "Unknown error"), 500


async def complete_conversation(
    payload: Union[CompletionRequest, Dict[str, Any]],
    registry: Optional[ProviderRegistry] = None,
) -> CompletionResult:
    """
    Send a system prompt plus conversation to the configured provider.

    Args:
        payload: ``CompletionRequest`` or its JSON-decoded wire form
        registry: Provider registry (a per-call default registry when omitted)

    Returns:
        ``CompletionResult`` holding either the reply or the error message
    """
    result, _ = await run_completion(payload, registry)
    return result
