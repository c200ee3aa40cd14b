"""
Syntactic URL validation with an optional top level domain whitelist.
No network access and no canonicalization: only the shape of the string
is checked, end to end.
"""

import re
from typing import Optional, Sequence

from sec_upload.core.exceptions import EmptyWhitelistError, InvalidWhitelistEntryError

# Optional "scheme://", the authority (host + top level domain), then an
# optional tail starting with "/" or "#". "." in the tail stops at newlines.
_URL_PARTS = re.compile(
    r"(?:[A-Za-z0-9]+://)?(?P<authority>[^/#]*)(?P<tail>[/#][^\n]*)?"
)

_HOST = re.compile(r"[A-Za-z0-9.-]+")
TOP_LEVEL_PATTERN = r"\.[A-Za-z.]+[A-Za-z]"
_TOP_LEVEL = re.compile(TOP_LEVEL_PATTERN)
_HOST_AND_TOP_LEVEL = re.compile(_HOST.pattern + TOP_LEVEL_PATTERN)


def is_valid_top_level_domain(tld: object) -> bool:
    """Return True if tld is a dot followed by letters and dots, ending in a letter."""
    return isinstance(tld, str) and _TOP_LEVEL.fullmatch(tld) is not None


def _check_whitelist(whitelist: Sequence[str]) -> None:
    if not whitelist:
        raise EmptyWhitelistError()
    for tld in whitelist:
        if not is_valid_top_level_domain(tld):
            raise InvalidWhitelistEntryError(tld)


def _authority_in_whitelist(authority: str, whitelist: Sequence[str]) -> bool:
    for tld in whitelist:
        if authority.endswith(tld) and _HOST.fullmatch(authority[: -len(tld)]):
            return True
    return False


def validate_url(
    url: str,
    whitelist: Optional[Sequence[str]] = None,
) -> bool:
    """
    Validate a URL, optionally restricting its top level domain.

    Without a whitelist the top level domain only has to follow the generic
    grammar. With a whitelist it must equal one of the entries exactly
    (case-sensitive): "test.ch.com" is rejected by [".ch"].

    Args:
        url: The string to check
        whitelist: Top level domains such as [".com", ".ch"], compared literally

    Returns:
        bool: True if the whole string is a valid URL

    Raises:
        EmptyWhitelistError: If the whitelist is given but empty
        InvalidWhitelistEntryError: If an entry is not a valid top level domain
    """
    if whitelist is not None:
        _check_whitelist(whitelist)

    parts = _URL_PARTS.fullmatch(url)
    if parts is None:
        return False
    authority = parts.group("authority")

    if whitelist is None:
        return _HOST_AND_TOP_LEVEL.fullmatch(authority) is not None
    return _authority_in_whitelist(authority, whitelist)
