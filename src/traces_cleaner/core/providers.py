"""Reference data: what each AI provider is known to leave in its output.

Informational only; no scanner reads it.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from traces_cleaner.core.models import AIProviderProfile, Effectiveness

_PROFILES: tuple[AIProviderProfile, ...] = (
    AIProviderProfile(
        label="ChatGPT / OpenAI",
        icon="🟢",
        techniques=(
            "Zero-width characters",
            "Variation selectors",
            "BOM insertion",
            "Statistical (research)",
        ),
        effectiveness=Effectiveness.FULL,
        note=(
            "OpenAI API & ChatGPT web UI may insert zero-width spaces, variation "
            "selectors, and BOMs. All removed by TracesCleaner."
        ),
    ),
    AIProviderProfile(
        label="Claude / Anthropic",
        icon="🟠",
        techniques=("Minimal invisible chars", "No known statistical watermark"),
        effectiveness=Effectiveness.FULL,
        note=(
            "Claude outputs are generally clean. Any invisible characters from "
            "copy-paste artifacts are removed."
        ),
    ),
    AIProviderProfile(
        label="Gemini / Google",
        icon="🔵",
        techniques=("SynthID (statistical)", "Possible invisible chars via web UI"),
        effectiveness=Effectiveness.PARTIAL,
        note=(
            "Invisible chars are fully removed. SynthID statistical watermarks "
            "require text paraphrasing."
        ),
    ),
    AIProviderProfile(
        label="Copilot / Microsoft",
        icon="🟣",
        techniques=("Uses OpenAI models", "Web UI copy-paste artifacts"),
        effectiveness=Effectiveness.FULL,
        note=(
            "Inherits OpenAI watermarking. All invisible character patterns are "
            "detected and removed."
        ),
    ),
    AIProviderProfile(
        label="DeepSeek",
        icon="🔴",
        techniques=("Zero-width characters", "Web UI artifacts"),
        effectiveness=Effectiveness.FULL,
        note=(
            "DeepSeek web interface may add formatting artifacts. All invisible "
            "characters are stripped."
        ),
    ),
    AIProviderProfile(
        label="LLaMA / Meta",
        icon="🦙",
        techniques=("Open source — no built-in watermark", "Host-dependent"),
        effectiveness=Effectiveness.FULL,
        note=(
            "No built-in watermarking in LLaMA. Hosting platforms may add their "
            "own — all invisible chars are removed."
        ),
    ),
    AIProviderProfile(
        label="Grok / xAI",
        icon="⚡",
        techniques=("Web UI artifacts", "Possible invisible chars"),
        effectiveness=Effectiveness.FULL,
        note="Any invisible characters from Grok's interface are detected and removed.",
    ),
    AIProviderProfile(
        label="Mistral / Mixtral",
        icon="🌊",
        techniques=("Open source — no built-in watermark", "Host-dependent"),
        effectiveness=Effectiveness.FULL,
        note=(
            "No built-in watermarking. Hosting platforms may add artifacts — all "
            "are removed."
        ),
    ),
    AIProviderProfile(
        label="Perplexity",
        icon="🔍",
        techniques=("Web UI copy artifacts", "Underlying model watermarks"),
        effectiveness=Effectiveness.FULL,
        note=(
            "Any copy-paste artifacts or underlying model watermarks (invisible "
            "chars) are stripped."
        ),
    ),
)

AI_WATERMARK_INFO: Mapping[str, AIProviderProfile] = MappingProxyType(
    {profile.label: profile for profile in _PROFILES}
)
