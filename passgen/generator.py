from typing import Optional

from passgen.password_settings import (
    CHARACTER_SETS,
    NO_CLASS_ERROR,
    GenerationSettings,
    InvalidSettingsError,
)
from passgen.random_source import RandomSource, default_random_source


def build_pool(settings: GenerationSettings) -> str:
    """
    Construiește pool-ul de caractere din clasele selectate,
    în ordinea: majuscule, minuscule, cifre, simboluri.
    """
    pool = ""
    if settings.include_uppercase:
        pool += CHARACTER_SETS["uppercase"]
    if settings.include_lowercase:
        pool += CHARACTER_SETS["lowercase"]
    if settings.include_numbers:
        pool += CHARACTER_SETS["numbers"]
    if settings.include_symbols:
        pool += settings.effective_symbols()

    if settings.exclude_similar:
        similar = CHARACTER_SETS["similar_chars"]
        pool = "".join(c for c in pool if c not in similar)

    return pool


def generate_password(settings: GenerationSettings, source: Optional[RandomSource] = None) -> str:
    """
    Generează o parolă de `settings.length` caractere din pool.

    Fiecare caracter e ales cu un uint32 modulo mărimea pool-ului.
    Modulo introduce un bias spre primele caractere din pool, de cel mult
    len(pool) / 2**32 relativ; îl acceptăm. Nu se face shuffle și nu se
    garantează că fiecare clasă apare în rezultat.
    """
    if settings.length < 1:
        raise InvalidSettingsError("Password length must be positive")

    pool = build_pool(settings)
    # verificat după excluderea caracterelor similare, înainte de orice random
    if not pool:
        if settings.has_character_class():
            raise InvalidSettingsError("Excluding similar characters leaves no characters to use")
        raise InvalidSettingsError(NO_CLASS_ERROR)

    if source is None:
        source = default_random_source()

    values = source.random_uint32(settings.length)
    return "".join(pool[v % len(pool)] for v in values)
