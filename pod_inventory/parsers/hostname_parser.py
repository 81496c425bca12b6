"""
Hostname parser for network service identity fields.

Logic:
1. A host name is a dot-separated list of RFC 1123 labels
2. The FQDN's first label is the host, the rest is the domain
3. HostName and FQDN agree when the FQDN's host label matches HostName
"""

import re
from typing import Optional, Tuple


class HostnameParser:
    """
    Parser for HostName / FQDN values of a network service.

    Only used for presentation and warnings - descriptors are never rejected.
    """

    # Single label: alphanumerics and hyphens, no leading/trailing hyphen
    LABEL_PATTERN = re.compile(r'^(?!-)[A-Za-z0-9-]{1,63}(?<!-)$')

    MAX_HOSTNAME_LENGTH = 253

    @classmethod
    def is_valid_hostname(cls, name: Optional[str]) -> bool:
        """
        Check if a string is a syntactically valid host name.

        Args:
            name: Host name or FQDN (a single trailing dot is allowed)

        Returns:
            True if every label is valid and the name is not too long
        """
        if not name:
            return False
        if name.endswith('.'):
            name = name[:-1]
        if not name or len(name) > cls.MAX_HOSTNAME_LENGTH:
            return False
        return all(cls.LABEL_PATTERN.match(label) for label in name.split('.'))

    @classmethod
    def split_fqdn(cls, fqdn: str) -> Tuple[str, Optional[str]]:
        """
        Split an FQDN into host and domain.

        Args:
            fqdn: Fully qualified domain name

        Returns:
            Tuple of (host, domain); domain is None for single-label names
        """
        host, _, domain = fqdn.rstrip('.').partition('.')
        return host, domain or None

    @classmethod
    def is_consistent(cls, host_name: Optional[str], fqdn: Optional[str]) -> bool:
        """
        Check if HostName and FQDN describe the same host.

        Missing values are never reported as inconsistent.
        """
        if not host_name or not fqdn:
            return True
        host, _ = cls.split_fqdn(fqdn)
        return host.lower() == host_name.lower()
