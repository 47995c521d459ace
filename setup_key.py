# setup_key.py
#
# Console helper to store the AI API key used by the AIQuiz application.

import sys
import logging

from config import Config, API_KEY_URL, API_KEY_ENV_VAR
from logic import QuestionBank
from startup import ask_user_to_continue


def main() -> int:
    """
    Ask for an API key, test it against the AI service and save it.

    A key that fails the test is only saved if the user confirms.

    Returns:
        int: 0 if a key was saved, 1 otherwise.
    """
    print("=" * 70)
    print("  🔑 AI QUIZ - API KEY SETUP")
    print("=" * 70)
    print(f"  Get your key at: {API_KEY_URL}\n")

    config = Config()
    if config.is_api_key_configured():
        print("  An API key is already configured and will be replaced.\n")

    try:
        new_key = input("  Enter new API key: ").strip()
    except (EOFError, OSError):
        new_key = ""
    if not new_key:
        print("❌ API key cannot be empty.", file=sys.stderr)
        return 1

    print("  Testing API key... ", end="")
    config.api_key = new_key
    if QuestionBank(config).test_connection():
        print("✅")
    else:
        print("⚠ FAILED")
        print("\n    ⚠️  The key could not be verified with the AI service.")
        if not ask_user_to_continue():
            return 1

    try:
        config.save_api_key(new_key)
    except OSError as e:
        print(f"❌ Failed to save API key: {e}", file=sys.stderr)
        return 1

    print(f"\n✅ API key saved to {config.path}")
    if config.key_from_env:
        print(f"    ⚠️  {API_KEY_ENV_VAR} is set in the environment and will be used instead.")
        print("    Unset it (or remove it from .env) to use the saved key.")
    return 0


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s"
    )
    sys.exit(main())
