"""Response resolution pipeline — the single entry point for chat replies.

Providers are tried strictly in order, one bounded attempt each:

    provider_1 -> provider_2 -> ... -> provider_n -> local responder

Any failure (unconfigured, timeout, transport, bad status, empty payload)
advances to the next stage. The local responder is terminal and always
produces text, so resolution never fails.
"""

import asyncio
import logging
import random
from dataclasses import dataclass
from typing import Sequence

from opentelemetry import trace

from chat_assist._provider_errors import classify_provider_error
from chat_assist.config import Settings, get_settings
from chat_assist.personalities import decorate, resolve_personality
from chat_assist.providers import ProviderAdapter, build_providers
from chat_assist.responder import LocalResponder, thinking_delay
from chat_assist.telemetry import get_tracer

logger = logging.getLogger(__name__)

LOCAL_PROVENANCE = "local"


@dataclass(frozen=True)
class ResolvedResponse:
    text: str
    provenance: str  # provider name or "local"; diagnostics only


class ResponseResolver:
    """Chain-of-responsibility over provider adapters with a local terminal stage."""

    def __init__(
        self,
        providers: Sequence[ProviderAdapter],
        *,
        responder: LocalResponder | None = None,
        timeout: float = 8.0,
        rng: random.Random | None = None,
        simulate_latency: bool = False,
        tracer: trace.Tracer | None = None,
    ):
        self.providers = list(providers)
        self.rng = rng or random.Random()
        self.responder = responder or LocalResponder(self.rng)
        self.timeout = timeout
        self.simulate_latency = simulate_latency
        self.tracer = tracer or get_tracer()

    async def resolve(self, message: str, personality_id: str) -> ResolvedResponse:
        message = message or ""
        persona = resolve_personality(personality_id)

        with self.tracer.start_as_current_span("resolve") as span:
            span.set_attribute("chat.personality", persona.id)

            for provider in self.providers:
                text = await self._attempt(provider, message, persona.system_prompt)
                if text is None:
                    continue
                reply = decorate(text, persona.id, self.rng)
                if not reply:
                    logger.warning("%s reply was empty after post-processing", provider.name)
                    continue
                logger.info("Reply resolved by %s", provider.name)
                span.set_attribute("chat.provenance", provider.name)
                return ResolvedResponse(reply, provider.name)

            if self.simulate_latency:
                await thinking_delay(self.rng)
            reply = self.responder.generate(message, persona.id)
            logger.info("Reply resolved by %s responder", LOCAL_PROVENANCE)
            span.set_attribute("chat.provenance", LOCAL_PROVENANCE)
            return ResolvedResponse(reply, LOCAL_PROVENANCE)

    async def _attempt(
        self, provider: ProviderAdapter, message: str, system_prompt: str,
    ) -> str | None:
        """One bounded attempt; every failure class collapses to None."""
        with self.tracer.start_as_current_span(f"provider.{provider.name}") as span:
            try:
                text = await asyncio.wait_for(
                    provider.try_generate(message, system_prompt),
                    timeout=self.timeout,
                )
            except asyncio.TimeoutError:
                logger.warning("%s unavailable [timeout]: no reply within %.1fs", provider.name, self.timeout)
                span.set_attribute("chat.outcome", "timeout")
                return None
            except Exception as e:
                reason, msg = classify_provider_error(e)
                logger.warning("%s unavailable [%s]: %s", provider.name, reason.value, msg)
                span.set_attribute("chat.outcome", reason.value)
                return None

            if not isinstance(text, str) or not text.strip():
                span.set_attribute("chat.outcome", "unavailable")
                return None
            span.set_attribute("chat.outcome", "success")
            return text


def build_resolver(
    settings: Settings | None = None, *, rng: random.Random | None = None,
) -> ResponseResolver:
    """Resolver wired from settings: providers in priority order, bounded timeout."""
    settings = settings or get_settings()
    return ResponseResolver(
        build_providers(settings),
        timeout=settings.provider_timeout,
        rng=rng,
        simulate_latency=settings.local_simulated_latency,
    )


async def get_response(
    message: str,
    personality: str = "helpful",
    *,
    resolver: ResponseResolver | None = None,
) -> str:
    """Resolve a reply and return its text only."""
    resolver = resolver or build_resolver()
    resolved = await resolver.resolve(message, personality)
    return resolved.text


def get_response_sync(
    message: str,
    personality: str = "helpful",
    *,
    resolver: ResponseResolver | None = None,
) -> str:
    """Blocking wrapper around get_response() for scripts and the CLI."""
    return asyncio.run(get_response(message, personality, resolver=resolver))
