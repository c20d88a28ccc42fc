"""
Download the candidate word list over HTTP.

Any failure here (DNS, refused connection, timeout, non-2xx status) is
raised as WordlistUnavailable so callers can tell "no input" apart from
"searched and found nothing". The search is never started without input.
"""

import logging

import requests

logger = logging.getLogger(__name__)

URL = "http://followthewhiterabbit.trustpilot.com/cs/wordlist"


class WordlistUnavailable(RuntimeError):
    """The word list could not be fetched."""


def fetch_wordlist(url: str = URL, timeout: float = 30.0) -> str:
    """Return the raw body of the word list at `url`."""
    logger.info("fetching word list from %s", url)
    try:
        r = requests.get(url, timeout=timeout)
        r.raise_for_status()
    except requests.RequestException as e:
        raise WordlistUnavailable(f"could not fetch word list from {url}: {e}") from e
    logger.info("fetched %d bytes (status %d)", len(r.content), r.status_code)
    return r.text
