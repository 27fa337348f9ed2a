"""Value patterns shared by command parameters.

Patterns follow JSON-Schema ``pattern`` semantics: they are searched, not
implicitly anchored, so each one carries its own anchors. The end anchor is
the end-of-string escape rather than ``$``, which would also match before a
trailing newline.
"""

from __future__ import annotations

NAME_PATTERN = r"^([0-9a-z_.+-]{3,37})\Z"

NAMESPACE_PATTERN = r"^([0-9a-z_-]{1,19})\Z"

ADDRESS_CHARS = r"[123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz]{1,35}"

C32_ADDRESS_CHARS = r"[0123456789ABCDEFGHJKMNPQRSTVWXYZ]+"

ADDRESS_PATTERN = rf"^({ADDRESS_CHARS})\Z"

ID_ADDRESS_PATTERN = rf"^ID-{ADDRESS_CHARS}\Z"

STACKS_ADDRESS_PATTERN = rf"^({C32_ADDRESS_CHARS})\Z"

# hex private key, optionally with the trailing compression byte
PRIVATE_KEY_PATTERN = r"^([0-9a-f]{64,66})\Z"

PRIVATE_KEY_UNCOMPRESSED_PATTERN = r"^([0-9a-f]{64})\Z"

# m,pk1,pk2,...,pkn
PRIVATE_KEY_MULTISIG_PATTERN = r"^([0-9]+),([0-9a-f]{64,66},)*([0-9a-f]{64,66})\Z"

# segwit:p2sh:m,pk1,pk2,...,pkn
PRIVATE_KEY_SEGWIT_P2SH_PATTERN = r"^segwit:p2sh:([0-9]+),([0-9a-f]{64,66},)*([0-9a-f]{64,66})\Z"

PRIVATE_KEY_PATTERN_ANY = (
    f"{PRIVATE_KEY_PATTERN}|{PRIVATE_KEY_MULTISIG_PATTERN}|{PRIVATE_KEY_SEGWIT_P2SH_PATTERN}"
)

PUBLIC_KEY_PATTERN = r"^([0-9a-f]{66,130})\Z"

INT_PATTERN = r"^-?[0-9]+\Z"

UINT_PATTERN = r"^[0-9]+\Z"

ZONEFILE_HASH_PATTERN = r"^([0-9a-f]{40})\Z"

URL_PATTERN = r"^http[s]?://.+\Z"

SUBDOMAIN_PATTERN = r"^([0-9a-z_+-]{1,37})\.([0-9a-z_.+-]{3,37})\Z"

TXID_PATTERN = r"^([0-9a-f]{64})\Z"

PATH_PATTERN = r"^[/]+.+\Z"

BOOLEAN_PATTERN = r"^(0|1|true|false)\Z"

BLOCKSTACK_ID_PATTERN = f"{NAME_PATTERN}|{SUBDOMAIN_PATTERN}"

ANY_ADDRESS_PATTERN = f"{ADDRESS_PATTERN}|{STACKS_ADDRESS_PATTERN}"

NAME_OR_ID_ADDRESS_PATTERN = f"{NAME_PATTERN}|{SUBDOMAIN_PATTERN}|{ID_ADDRESS_PATTERN}"

__all__ = [
    "NAME_PATTERN",
    "NAMESPACE_PATTERN",
    "ADDRESS_CHARS",
    "C32_ADDRESS_CHARS",
    "ADDRESS_PATTERN",
    "ID_ADDRESS_PATTERN",
    "STACKS_ADDRESS_PATTERN",
    "PRIVATE_KEY_PATTERN",
    "PRIVATE_KEY_UNCOMPRESSED_PATTERN",
    "PRIVATE_KEY_MULTISIG_PATTERN",
    "PRIVATE_KEY_SEGWIT_P2SH_PATTERN",
    "PRIVATE_KEY_PATTERN_ANY",
    "PUBLIC_KEY_PATTERN",
    "INT_PATTERN",
    "UINT_PATTERN",
    "ZONEFILE_HASH_PATTERN",
    "URL_PATTERN",
    "SUBDOMAIN_PATTERN",
    "TXID_PATTERN",
    "PATH_PATTERN",
    "BOOLEAN_PATTERN",
    "BLOCKSTACK_ID_PATTERN",
    "ANY_ADDRESS_PATTERN",
    "NAME_OR_ID_ADDRESS_PATTERN",
]
