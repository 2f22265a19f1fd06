# urls.py

import tldextract

# Offline extractor: use the public suffix snapshot bundled with tldextract.
_extract = tldextract.TLDExtract(suffix_list_urls=())


def strip_trailing_slashes(url: str) -> str:
    return url.rstrip("/")


def get_scheme(url: str) -> str:
    """Text before '://', or an empty string when the URL has no scheme."""
    if "://" not in url:
        return ""
    return url.split("://", 1)[0]


def get_domain_from_url(url: str) -> str:
    """
    Host part of the URL: everything between '://' and the first '/'.
    'https://blog.example.com/foo' -> 'blog.example.com'
    """
    if "://" not in url:
        return ""
    return url.split("://", 1)[1].split("/")[0]


def get_path_suffix_from_url(url: str) -> str:
    """
    Path after the domain without the leading slash.
    'https://blog.example.com/foo/bar' -> 'foo/bar'
    """
    if "://" not in url:
        return ""
    parts = url.split("://", 1)[1].split("/")
    return "/".join(parts[1:])


def get_root_domain_from_url(url: str):
    """
    Registrable domain of the URL according to the public suffix list.
    'https://blog.example.co.uk/foo' -> 'example.co.uk'
    Returns None when the host has no registrable domain (e.g. 'localhost').
    """
    extracted = _extract(get_domain_from_url(url).lower())
    if not extracted.domain or not extracted.suffix:
        return None
    return f"{extracted.domain}.{extracted.suffix}"
