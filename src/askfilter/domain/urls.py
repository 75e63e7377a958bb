"""Prompt encoding and URL template substitution.

Templates are plain strings carrying the literal ``${prompt}`` marker.
Substitution is a global substring replace, not a template engine.

Prompts come from argv, so bytes that are not valid UTF-8 arrive as lone
surrogates (``surrogateescape``).  Encoding restores those original bytes.
"""

from __future__ import annotations

from urllib.parse import quote_plus

PROMPT_PLACEHOLDER = "${prompt}"


def prompt_bytes(prompt: str) -> bytes:
    """UTF-8 bytes of *prompt*, with surrogate-escaped argv bytes restored.

    Surrogates that cannot stand for a raw byte become ``?``.
    """
    try:
        return prompt.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        return prompt.encode("utf-8", "replace")


def display_text(prompt: str) -> str:
    """*prompt* as printable text; undecodable bytes show as U+FFFD."""
    return prompt_bytes(prompt).decode("utf-8", "replace")


def encode_prompt(prompt: str) -> str:
    """Percent-encode *prompt* for embedding in a URL.

    Only ``A-Z a-z 0-9 - _ . ~`` pass through; every other octet becomes
    ``%XX``.  Spaces are ``%20``, never ``+``.

    Examples:
        >>> encode_prompt("test & prompt?")
        'test%20%26%20prompt%3F'
        >>> encode_prompt("1+1")
        '1%2B1'
        >>> encode_prompt("caf\\udcff")
        'caf%FF'
    """
    # A literal "+" is already %2B here, so every remaining "+" is a space.
    return quote_plus(prompt_bytes(prompt), safe="").replace("+", "%20")


def render_url(template: str, prompt: str) -> str:
    """Replace every ``${prompt}`` in *template* with the encoded *prompt*."""
    return template.replace(PROMPT_PLACEHOLDER, encode_prompt(prompt))
