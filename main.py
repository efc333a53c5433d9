import logging
import os
import warnings
from dataclasses import replace
from getpass import getpass, GetPassWarning

from passgen.api_check import BreachCheckError, pwned_count
from passgen.display import describe, format_feedback, mask_password
from passgen.generator import generate_password
from passgen.password_settings import (
    GenerationSettings,
    InvalidSettingsError,
    settings_summary,
    validate_settings,
)
from passgen.random_source import RandomSourceUnavailableError, default_random_source
from passgen.settings_store import JsonFileStore, SettingsStore
from passgen.strength import evaluate_strength

try:
    # maschează cu ***** și merge în IDE-uri
    from pwinput import pwinput as hidden_input
except ImportError:
    hidden_input = None


def ask_secret(prompt: str) -> str:
    # preferă pwinput dacă e instalat
    if hidden_input is not None:
        return hidden_input(prompt)
    # fallback la getpass și ascunde warningul enervant
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", GetPassWarning)
        return getpass(prompt)


def show_menu():
    print("\n=== PASSWORD GENERATOR ===")
    print("1. Generate password")
    print("2. Check password strength")
    print("3. Show settings")
    print("4. Change settings")
    print("5. Reset settings to defaults")
    print("6. Show / hide last password")
    print("7. Check last password against HIBP")
    print("8. Exit")


def confirm(prompt: str) -> bool:
    ans = input(f"{prompt} [y/n]: ").strip().lower()
    return ans in ("y", "yes")


def ask_bool(prompt: str, current: bool) -> bool:
    ans = input(f"{prompt} [{'Y/n' if current else 'y/N'}]: ").strip().lower()
    if not ans:
        return current
    return ans in ("y", "yes")


def print_strength(password: str, visible: bool):
    result = evaluate_strength(password)
    print(f"Password: {mask_password(password, visible)}")
    print(describe(password, result))
    for line in format_feedback(result):
        print(f"  {line}")


def edit_settings(current: GenerationSettings):
    """
    Cere noile valori; întoarce setările noi sau None dacă nu sunt valide.
    """
    length_str = input(f"Length ({current.length}): ").strip()
    try:
        length = int(length_str) if length_str else current.length
    except ValueError:
        print("Invalid length.")
        return None

    symbol_set = input(f"Symbol set ({current.effective_symbols()}): ").strip()

    candidate = replace(
        current,
        length=length,
        include_uppercase=ask_bool("Uppercase letters", current.include_uppercase),
        include_lowercase=ask_bool("Lowercase letters", current.include_lowercase),
        include_numbers=ask_bool("Numbers", current.include_numbers),
        include_symbols=ask_bool("Symbols", current.include_symbols),
        exclude_similar=ask_bool("Exclude similar characters (0O1lI)", current.exclude_similar),
        symbol_set=symbol_set or current.symbol_set,
    )

    result = validate_settings(candidate)
    if not result.is_valid:
        for err in result.errors:
            print(f"✗ {err}")
        return None
    return candidate


def main():
    logging.basicConfig(
        level=os.environ.get("PASSGEN_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # 1) Sursa de random se alege o singură dată, la pornire
    try:
        source = default_random_source()
    except RandomSourceUnavailableError as e:
        print(f"✗ {e}")
        return
    if not source.is_secure:
        print("⚠️ No secure random source available: generated passwords are NOT secure.")

    # 2) Setările salvate
    store = SettingsStore(JsonFileStore(os.environ.get("PASSGEN_SETTINGS_FILE", "data/settings.json")))
    settings = store.load()

    last_password = ""
    visible = False

    while True:
        show_menu()
        choice = input("Choose an option: ").strip()

        if choice == "1":
            try:
                last_password = generate_password(settings, source)
            except InvalidSettingsError as e:
                print(f"✗ {e}")
                continue
            visible = True
            print_strength(last_password, visible)

        elif choice == "2":
            pw = ask_secret("Password to check: ")
            print_strength(pw, visible=False)

        elif choice == "3":
            for key, value in settings_summary(settings).items():
                print(f"{key:<18}: {value}")

        elif choice == "4":
            new_settings = edit_settings(settings)
            if new_settings is None:
                print("Settings unchanged.")
                continue
            settings = new_settings
            if store.save(settings):
                print("[✓] Settings saved.")
            else:
                print("⚠️ Settings applied but could not be saved.")

        elif choice == "5":
            if not confirm("Reset settings to defaults?"):
                print("Cancelled.")
                continue
            store.clear()
            settings = store.load()
            print("[✓] Settings reset.")

        elif choice == "6":
            if not last_password:
                print("(no password generated yet)")
                continue
            visible = not visible
            print(f"Password: {mask_password(last_password, visible)}")

        elif choice == "7":
            if not last_password:
                print("(no password generated yet)")
                continue
            try:
                count = pwned_count(last_password)
            except BreachCheckError as e:
                print(f"⚠️ Could not check HIBP right now: {e}")
                continue
            if count > 0:
                print(f"⚠️ Warning: this password appears in public breaches {count} times!")
            else:
                print("✅ Not found in HIBP.")

        elif choice == "8":
            print("Bye 👋")
            break

        else:
            print("Invalid option.")


if __name__ == "__main__":
    main()
