"""Parse a decrypted pass entry into a credential.

pass convention: the password is the first line, free-form lines follow.
A ``user:`` or ``username:`` line supplies the login.
"""

from __future__ import annotations

import re

from git_credential_pass.credential.models import Credential

_USERNAME_LINE = re.compile(r"^(?:user|username):\s*(.*)$")


def find_username(lines: list[str]) -> str | None:
    """First ``user:``/``username:`` value, case-sensitive.

    The password line is scanned too.
    """
    for line in lines:
        if match := _USERNAME_LINE.match(line):
            return match.group(1)
    return None


def extract_credential(content: str, known_username: str | None = None) -> Credential:
    """Split entry content into password and optional username.

    Args:
        content: Raw decrypted entry text
        known_username: Username git already sent. When set, the entry is not
            scanned and no username is returned, so git keeps its own.
    """
    # Only \n separates lines; other Unicode line breaks belong to the value
    lines = [line.removesuffix("\r") for line in content.split("\n")]
    password = lines[0]

    if known_username:
        return Credential(password=password)
    return Credential(password=password, username=find_username(lines))
