"""Utility functions for ipormac application."""


def article_for(address_type: str) -> str:
    """Indefinite article for an address type as it is read aloud ("an IPv4", "a MAC")."""
    return 'an' if address_type.lower().startswith(('i', 'a', 'e', 'o', 'u')) else 'a'
