"""
Document retrieval for analysis targets.

A target is one of:
- an http(s) URL, fetched directly or through a CORS-style proxy
- a ``data:text/html`` URL (base64 or percent-encoded)
- raw markup (anything starting with ``<``)

The stylesheet text of a document is the concatenated content of its
``<style>`` elements. When retrieval fails, ``load_document_with_fallback``
substitutes the built-in sample document.
"""

from __future__ import annotations

import asyncio
import base64
import binascii
import logging
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Callable, Optional
from urllib.parse import quote, unquote, urlparse

from bs4 import BeautifulSoup

from .config import AnalysisConfig
from .errors import DocumentFetchError

log = logging.getLogger(__name__)

Fetcher = Callable[[str, AnalysisConfig], str]


# =============================================================================
# Sample Document
# =============================================================================

SAMPLE_HTML = """<div class="hero-section">
  <h1 class="main-heading">Welcome to Our Product</h1>
  <p class="description">Experience the future of design systems</p>
  <button class="btn-primary">Get Started</button>
  <button class="btn-secondary">Learn More</button>
</div>

<div class="feature-grid">
  <div class="feature-card">
    <h3>Fast Performance</h3>
    <p>Lightning-fast load times</p>
  </div>
  <div class="feature-card">
    <h3>Secure</h3>
    <p>Enterprise-grade security</p>
  </div>
</div>"""

SAMPLE_CSS = """.hero-section {
  padding: 60px 20px;
  text-align: center;
  background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
}

.main-heading {
  font-size: 3rem;
  font-weight: 700;
  color: white;
  margin-bottom: 20px;
}

.description {
  font-size: 1.2rem;
  color: #f0f0f0;
  margin-bottom: 40px;
}

.btn-primary {
  background-color: #ff6b6b;
  color: white;
  padding: 15px 30px;
  border: none;
  border-radius: 8px;
  font-weight: 600;
  margin: 0 10px;
}

.btn-secondary {
  background-color: transparent;
  color: white;
  padding: 15px 30px;
  border: 2px solid white;
  border-radius: 8px;
  font-weight: 600;
  margin: 0 10px;
}

.feature-grid {
  display: grid;
  grid-template-columns: repeat(auto-fit, minmax(300px, 1fr));
  gap: 30px;
  padding: 60px 20px;
  max-width: 1200px;
  margin: 0 auto;
}

.feature-card {
  padding: 30px;
  background: white;
  border-radius: 12px;
  box-shadow: 0 4px 20px rgba(0,0,0,0.1);
}

.feature-card h3 {
  font-size: 1.5rem;
  font-weight: 400;
  color: #333;
  margin-bottom: 15px;
}

.feature-card p {
  color: #666;
  line-height: 1.6;
}"""


@dataclass(frozen=True)
class Document:
    """Markup and stylesheet text of an analysis target."""

    url: str
    """Identifier of the target as given by the caller."""

    html: str
    """Full document markup."""

    css: str
    """Concatenated inline stylesheet text."""

    source: str
    """Where the content came from: 'remote', 'data', 'inline' or 'fallback'."""


# =============================================================================
# Composition
# =============================================================================


def compose_document(html: str, css: str = "") -> str:
    """Wrap an HTML fragment and stylesheet into a full document."""
    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "<head>\n"
        f"<style>{css}</style>\n"
        "</head>\n"
        "<body>\n"
        f"{html}\n"
        "</body>\n"
        "</html>\n"
    )


def to_data_url(html: str, css: str = "") -> str:
    """Encode an HTML fragment and stylesheet as a base64 data URL."""
    encoded = base64.b64encode(compose_document(html, css).encode("utf-8")).decode("ascii")
    return f"data:text/html;base64,{encoded}"


def decode_data_url(url: str) -> str:
    """Decode the markup carried by a ``data:`` URL.

    Raises:
        DocumentFetchError: If the URL is malformed or not decodable.
    """
    header, sep, payload = url.partition(",")
    if not sep or not header.lower().startswith("data:"):
        raise DocumentFetchError(url[:40], "malformed data URL")

    if header.lower().endswith(";base64"):
        try:
            raw = base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError) as e:
            raise DocumentFetchError(url[:40], f"invalid base64 payload ({e})") from e
        return raw.decode("utf-8", errors="replace")

    return unquote(payload)


def extract_styles(html: str) -> str:
    """Concatenate the text of every ``<style>`` element."""
    soup = BeautifulSoup(html, "html.parser")
    return "\n".join(style.get_text() for style in soup.find_all("style"))


# =============================================================================
# Target Classification
# =============================================================================


def is_valid_url(url: str) -> bool:
    """True for absolute http(s) URLs with a host."""
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def is_data_url(target: str) -> bool:
    return target[:5].lower() == "data:"


def is_markup(target: str) -> bool:
    return target.lstrip().startswith("<")


def build_fetch_url(url: str, config: AnalysisConfig) -> str:
    """Route a URL through the configured proxy, if enabled."""
    if not config.use_proxy:
        return url
    return config.proxy_url.replace("{url}", quote(url, safe=""))


# =============================================================================
# Retrieval
# =============================================================================


def fetch_html(url: str, config: AnalysisConfig) -> str:
    """Fetch a page's markup over HTTP. Blocking.

    Raises:
        DocumentFetchError: On network, HTTP, or decoding failure.
    """
    request = urllib.request.Request(
        build_fetch_url(url, config),
        headers={"User-Agent": config.user_agent},
    )
    try:
        with urllib.request.urlopen(request, timeout=config.fetch_timeout) as response:
            charset = response.headers.get_content_charset() or "utf-8"
            return response.read().decode(charset, errors="replace")
    except urllib.error.HTTPError as e:
        raise DocumentFetchError(url, f"HTTP {e.code}") from e
    except (urllib.error.URLError, OSError, ValueError, LookupError) as e:
        raise DocumentFetchError(url, str(e)) from e


async def load_document(
    target: str,
    config: Optional[AnalysisConfig] = None,
    fetcher: Optional[Fetcher] = None,
) -> Document:
    """Retrieve a target's markup and stylesheet.

    Remote fetches run in a worker thread and are bounded by
    ``config.fetch_timeout``. This is the only suspension point.

    Raises:
        DocumentFetchError: If the target cannot be retrieved.
    """
    config = config or AnalysisConfig()

    if is_markup(target):
        return Document(url="inline:html", html=target, css=extract_styles(target), source="inline")

    if is_data_url(target):
        html = decode_data_url(target)
        return Document(url=target, html=html, css=extract_styles(html), source="data")

    if not is_valid_url(target):
        raise DocumentFetchError(target, "not an http(s) URL, data URL, or markup")

    fetch = fetcher or fetch_html
    try:
        html = await asyncio.wait_for(
            asyncio.to_thread(fetch, target, config),
            timeout=config.fetch_timeout,
        )
    except asyncio.TimeoutError as e:
        raise DocumentFetchError(target, f"timed out after {config.fetch_timeout:g}s") from e

    return Document(url=target, html=html, css=extract_styles(html), source="remote")


def sample_document(url: str) -> Document:
    """The built-in sample document, reported under the given target."""
    html = compose_document(SAMPLE_HTML, SAMPLE_CSS)
    return Document(url=url, html=html, css=SAMPLE_CSS, source="fallback")


async def load_document_with_fallback(
    target: str,
    config: Optional[AnalysisConfig] = None,
    fetcher: Optional[Fetcher] = None,
) -> Document:
    """Retrieve a target, substituting the sample document on failure.

    Raises:
        DocumentFetchError: If retrieval fails and fallback is disabled.
    """
    config = config or AnalysisConfig()
    try:
        return await load_document(target, config, fetcher)
    except DocumentFetchError as e:
        if not config.fallback_to_sample:
            raise
        log.warning("%s; using built-in sample document", e)
        return sample_document(target)
