"""Solidity argument names → exported Go identifiers."""

from __future__ import annotations

import re

# Go's conventional initialisms (golint's list) plus token-standard ones;
# a word matching one is upper-cased whole.
ACRONYMS = frozenset(
    {
        "acl", "api", "ascii", "cpu", "css", "dns", "eof", "guid", "html", "http",
        "https", "id", "ip", "json", "lhs", "nft", "erc", "qps", "ram", "rhs", "rpc", "sla",
        "smtp", "sql", "ssh", "tcp", "tls", "ttl", "udp", "ui", "uid", "uuid",
        "uri", "url", "utf8", "vm", "xml", "xmpp", "xsrf", "xss",
    }
)

_WORD = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|[0-9]+")


def split_words(name: str) -> list[str]:
    """Split a camelCase / snake_case name into words, keeping original case."""
    words: list[str] = []
    for part in name.split("_"):
        words.extend(_WORD.findall(part))
    return words


def _export_word(word: str) -> str:
    if word.lower() in ACRONYMS:
        return word.upper()
    return word[:1].upper() + word[1:]


def normalize_name(source_name: str) -> str:
    """Return the exported Go identifier for a Solidity argument name.

    >>> normalize_name("from"), normalize_name("_tokenId"), normalize_name("tokenURI")
    ('From', 'TokenID', 'TokenURI')
    """
    words = split_words(source_name)
    if not words:
        return "Arg"
    name = "".join(_export_word(w) for w in words)
    if name[0].isdigit():
        name = "Arg" + name
    return name
