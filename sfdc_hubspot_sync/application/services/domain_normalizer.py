"""
Normalizador de websites de Salesforce a dominio "marca + TLD" de HubSpot.

Ejemplos:
- https://www.blog.spotdev.co.uk -> spotdev.co.uk
- http://facebook.com            -> facebook.com
- not a url                      -> not a url (no se puede parsear, se devuelve igual)
- www.spotdev.co.uk              -> www.spotdev.co.uk (sin esquema, se devuelve igual)
"""
from typing import Any, Iterable
from urllib.parse import urlsplit

DEFAULT_COMPOUND_SUFFIXES = ("co.uk",)

# Caracteres que nunca pueden aparecer en un hostname
_FORBIDDEN_HOST_CHARS = frozenset(" \t\r\n#%/:<>?@[\\]^|")


def website_to_domain(
    website_url: Any,
    *,
    compound_suffixes: Iterable[str] = DEFAULT_COMPOUND_SUFFIXES,
) -> Any:
    """
    Transforma una URL en dominio registrable (sin subdominios).

    - Si el sufijo (dos últimas partes) es compuesto (e.g. "co.uk"),
      se conservan las tres últimas partes.
    - Si no, se conservan las dos últimas.
    - Si no se puede parsear, retorna el input sin cambios. Nunca levanta.
    """
    if not isinstance(website_url, str):
        return website_url

    try:
        hostname = _extract_hostname(website_url)
    except ValueError:
        return website_url

    parts = hostname.split(".")
    last_two = ".".join(parts[-2:])

    if last_two in set(compound_suffixes):
        # "www.blog.spotdev.co.uk" -> "spotdev.co.uk"
        if len(parts) > 3:
            parts = parts[-3:]
    elif len(parts) > 2:
        # "www.facebook.com" -> "facebook.com"
        parts = parts[-2:]

    return ".".join(parts)


def _extract_hostname(website_url: str) -> str:
    """
    Extrae el hostname en minúsculas.

    Una URL sin esquema ("www.spotdev.co.uk") no se puede parsear.
    Levanta ValueError si no hay esquema o un hostname válido.
    """
    candidate = website_url.strip()
    if "://" not in candidate:
        raise ValueError(f"URL sin esquema: {website_url!r}")

    # urlsplit puede levantar ValueError (e.g. IPv6 mal formada)
    hostname = urlsplit(candidate).hostname
    if not hostname or any(ch in _FORBIDDEN_HOST_CHARS for ch in hostname):
        raise ValueError(f"Hostname inválido en {website_url!r}")
    return hostname.lower()
