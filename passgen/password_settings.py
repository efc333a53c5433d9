from dataclasses import dataclass, asdict
from types import MappingProxyType
from typing import Optional


MIN_LENGTH = 4
MAX_LENGTH = 128

DEFAULT_SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

CHARACTER_SETS = MappingProxyType({
    "uppercase": "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "lowercase": "abcdefghijklmnopqrstuvwxyz",
    "numbers": "0123456789",
    "symbols": DEFAULT_SYMBOLS,
    "similar_chars": "0O1lI",
})

LENGTH_ERROR = f"Password length must be between {MIN_LENGTH} and {MAX_LENGTH} characters"
NO_CLASS_ERROR = "At least one character type must be selected"

# cheile documentului JSON persistat -> atributele dataclass-ului
_JSON_KEYS = {
    "length": "length",
    "includeUppercase": "include_uppercase",
    "includeLowercase": "include_lowercase",
    "includeNumbers": "include_numbers",
    "includeSymbols": "include_symbols",
    "excludeSimilar": "exclude_similar",
}


class InvalidSettingsError(ValueError):
    """Setările nu permit generarea unei parole (pool gol, lungime invalidă, date corupte)."""


@dataclass(frozen=True)
class GenerationSettings:
    length: int = 16
    include_uppercase: bool = True
    include_lowercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = False
    exclude_similar: bool = False
    symbol_set: Optional[str] = DEFAULT_SYMBOLS

    def has_character_class(self) -> bool:
        return (
            self.include_uppercase
            or self.include_lowercase
            or self.include_numbers
            or self.include_symbols
        )

    def effective_symbols(self) -> str:
        # un symbol_set gol înseamnă "folosește setul standard"
        return self.symbol_set or DEFAULT_SYMBOLS

    def to_dict(self) -> dict:
        """
        Forma JSON (camelCase) în care setările sunt salvate pe disc.
        """
        data = {json_key: getattr(self, attr) for json_key, attr in _JSON_KEYS.items()}
        if self.symbol_set is not None:
            data["symbolSet"] = self.symbol_set
        return data

    @staticmethod
    def from_dict(data) -> "GenerationSettings":
        """
        Reconstruiește setările dintr-un dict citit de pe disc.
        Datele care nu au forma corectă ridică InvalidSettingsError;
        cine încarcă date persistate decide dacă revine la valorile implicite.
        """
        if not isinstance(data, dict):
            raise InvalidSettingsError("Settings must be a JSON object")

        values = {}
        for json_key, attr in _JSON_KEYS.items():
            if json_key not in data:
                raise InvalidSettingsError(f"Missing setting: {json_key}")
            value = data[json_key]
            if json_key == "length":
                # bool e subclasă de int, dar True nu e o lungime
                if isinstance(value, bool) or not isinstance(value, int):
                    raise InvalidSettingsError("length must be an integer")
                if not MIN_LENGTH <= value <= MAX_LENGTH:
                    raise InvalidSettingsError(LENGTH_ERROR)
            elif not isinstance(value, bool):
                raise InvalidSettingsError(f"{json_key} must be a boolean")
            values[attr] = value

        symbol_set = data.get("symbolSet")
        if symbol_set is not None and not isinstance(symbol_set, str):
            raise InvalidSettingsError("symbolSet must be a string")

        return GenerationSettings(symbol_set=symbol_set, **values)


DEFAULT_SETTINGS = GenerationSettings()


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    errors: tuple = ()


def validate_settings(settings: GenerationSettings) -> ValidationResult:
    """
    Verifică setările fără să arunce excepții.
    Toate erorile sunt colectate: întâi lungimea, apoi selecția de caractere.
    """
    errors = []

    if not MIN_LENGTH <= settings.length <= MAX_LENGTH:
        errors.append(LENGTH_ERROR)

    if not settings.has_character_class():
        errors.append(NO_CLASS_ERROR)

    return ValidationResult(is_valid=not errors, errors=tuple(errors))


def settings_summary(settings: GenerationSettings) -> dict:
    """Vedere plată a setărilor, pentru afișare în meniu."""
    return asdict(settings)
