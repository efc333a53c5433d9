import hashlib
import logging
from typing import Optional

import requests


logger = logging.getLogger(__name__)

HIBP_RANGE_URL = "https://api.pwnedpasswords.com/range/{}"


class BreachCheckError(RuntimeError):
    """Interogarea HIBP a eșuat (rețea, timeout, răspuns HTTP de eroare)."""


def pwned_count(password: str, session: Optional[requests.Session] = None, timeout: float = 8) -> int:
    """
    Verifică dacă parola apare în breach-uri publice.
    Întoarce de câte ori a apărut (0 = nu apare).
    k-anonymity: trimitem DOAR prefixul SHA1 (primele 5 caractere hex).
    """
    sha1 = hashlib.sha1(password.encode("utf-8")).hexdigest().upper()
    prefix, suffix = sha1[:5], sha1[5:]

    http = session or requests
    try:
        resp = http.get(HIBP_RANGE_URL.format(prefix), timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as e:
        raise BreachCheckError(f"HIBP lookup failed: {e}") from e

    # răspunsul are multe linii "SUFFIX:COUNT"
    for line in resp.text.splitlines():
        parts = line.split(":")
        if len(parts) != 2:
            continue
        sfx, cnt = parts[0].strip(), parts[1].strip()
        if sfx == suffix:
            try:
                return int(cnt)
            except ValueError:
                logger.warning("Malformed count in HIBP response for prefix %s", prefix)
                return 0
    return 0
