import logging
import os
import random
import secrets
import threading
import time
from typing import List, Optional


logger = logging.getLogger(__name__)

ALLOW_INSECURE_ENV = "PASSGEN_ALLOW_INSECURE_RANDOM"

_UINT32_BYTES = 4


class RandomSourceUnavailableError(RuntimeError):
    """Nu există un CSPRNG pe platformă și fallback-ul nesigur nu e permis."""


class RandomSource:
    """
    Sursa de numere aleatoare folosită de generator.
    Există doar două variante: SecureRandomSource și InsecureRandomSource.
    """

    is_secure = False
    name = "abstract"

    def random_uint32(self, count: int) -> List[int]:
        raise NotImplementedError

    def __repr__(self):
        return f"<{type(self).__name__} secure={self.is_secure}>"


class SecureRandomSource(RandomSource):
    is_secure = True
    name = "os.urandom"

    def random_uint32(self, count: int) -> List[int]:
        raw = os.urandom(count * _UINT32_BYTES)
        return [
            int.from_bytes(raw[i:i + _UINT32_BYTES], "little")
            for i in range(0, len(raw), _UINT32_BYTES)
        ]


class InsecureRandomSource(RandomSource):
    """
    Mersenne Twister din `random`. NU e potrivit pentru parole;
    există doar ca ultimă variantă pe platforme fără CSPRNG.
    """

    is_secure = False
    name = "random.Random"

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed if seed is not None else time.time_ns())

    def random_uint32(self, count: int) -> List[int]:
        return [self._rng.getrandbits(32) for _ in range(count)]


def _csprng_available() -> bool:
    try:
        secrets.token_bytes(_UINT32_BYTES)
    except NotImplementedError:
        return False
    return True


def select_random_source(allow_insecure: bool = False) -> RandomSource:
    """
    Alege sursa de random o singură dată și loghează alegerea.
    Fără CSPRNG: ridică RandomSourceUnavailableError, sau, dacă allow_insecure
    e setat, întoarce InsecureRandomSource cu un WARNING explicit.
    """
    if _csprng_available():
        logger.info("Using secure random source (%s)", SecureRandomSource.name)
        return SecureRandomSource()

    if not allow_insecure:
        logger.error("No cryptographically secure random source available")
        raise RandomSourceUnavailableError(
            "No cryptographically secure random source is available on this platform"
        )

    logger.warning(
        "No cryptographically secure random source available; "
        "falling back to %s. Generated passwords are NOT secure.",
        InsecureRandomSource.name,
    )
    return InsecureRandomSource()


_default_source: Optional[RandomSource] = None
_default_lock = threading.Lock()


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in ("1", "true", "yes", "on")


def default_random_source() -> RandomSource:
    """Sursa implicită a procesului; selectată la primul apel, apoi refolosită."""
    global _default_source
    with _default_lock:
        if _default_source is None:
            _default_source = select_random_source(allow_insecure=_env_flag(ALLOW_INSECURE_ENV))
        return _default_source


def reset_default_random_source():
    """Uită selecția (folosit de teste)."""
    global _default_source
    with _default_lock:
        _default_source = None
