"""InfraID generation."""

from __future__ import annotations

import logging

from infraid.core.context import GenerationContext, process_context
from infraid.utils.env import lookup_override
from infraid.utils.naming import normalize_string, truncate

INFRA_ID_ENV = "INFRA_ID"
INFRA_ID_SUFFIX_ENV = "INFRA_ID_SUFFIX"

RANDOM_LEN = 5
# lowercase alphanumerics without vowels and easily confused characters
RANDOM_ALPHABET = "bcdfghjklmnpqrstvwxz2456789"


def random_suffix(context: GenerationContext, length: int = RANDOM_LEN) -> str:
    return "".join(context.rng.choice(RANDOM_ALPHABET) for _ in range(length))


def generate_infra_id(base: str, max_len: int, context: GenerationContext | None = None) -> str:
    """Derive an InfraID from ``base`` that is at most ``max_len`` characters long.

    The result only contains alphanumerics and single dashes. An ``INFRA_ID``
    override is returned as-is after normalization, bypassing the length
    limit. Otherwise the normalized base is truncated to leave room for a
    suffix taken from ``INFRA_ID_SUFFIX`` or generated at random.

    Values derived from an override are remembered under ``INFRA_ID`` so
    subsequent calls with the same context return them unchanged.

    Raises:
        InvalidInputError: if neither ``base`` nor the applicable override
            contains an alphanumeric character.
        ValueError: if ``max_len`` leaves no room for the base.
    """
    context = context or process_context()

    predefined = lookup_override(INFRA_ID_ENV, context)
    if predefined:
        infra_id = normalize_string(predefined)
        context.remember(INFRA_ID_ENV, infra_id)
        logging.info("Using predefined infrastructure ID %s", infra_id)
        return infra_id

    max_base_len = max_len - (RANDOM_LEN + 1)
    if max_base_len < 1:
        raise ValueError(f"max_len must be at least {RANDOM_LEN + 2}, got {max_len}")

    # normalize before truncating to keep as many meaningful characters as possible
    base = truncate(normalize_string(base), max_base_len)

    suffix = lookup_override(INFRA_ID_SUFFIX_ENV, context)
    if suffix:
        infra_id = truncate(f"{base}-{suffix}", max_len)
        context.remember(INFRA_ID_ENV, infra_id)
        logging.info("Using infrastructure ID %s with predefined suffix", infra_id)
        return infra_id

    infra_id = f"{base}-{random_suffix(context)}"
    logging.info("Generated infrastructure ID %s", infra_id)
    return infra_id
