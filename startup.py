# startup.py
#
# Startup sequence for the AIQuiz application.
# Validates the environment, reports to the console and hands over to the login window.

import os
import sys
import logging
import tkinter as tk
from tkinter import ttk
from typing import Optional

from config import Config, API_KEY_URL
from logic import QuestionBank
from gui import LoginWindow, show_error_dialog

logger = logging.getLogger(__name__)

PROFILES_DIR = "profiles"

# Preferred native theme per platform, first available wins
NATIVE_THEMES = {
    "win32": ("vista", "winnative"),
    "darwin": ("aqua",),
}
FALLBACK_THEMES = ("clam", "default")


def apply_native_theme(root: tk.Tk):
    """
    Switch ttk to the theme that looks most native on this platform.
    Failure only affects appearance, so it is logged and ignored.
    """
    try:
        style = ttk.Style(root)
        available = style.theme_names()
        for theme in NATIVE_THEMES.get(sys.platform, ()) + FALLBACK_THEMES:
            if theme in available:
                style.theme_use(theme)
                return
    except tk.TclError as e:
        logger.warning("Could not set look and feel: %s", e)


def print_welcome_banner():
    print("\n" + "=" * 70)
    print("  🤖 AI-POWERED QUIZ APPLICATION")
    print("  Powered by Groq AI")
    print("=" * 70)
    print()


def ask_user_to_continue() -> bool:
    """
    Ask on the console whether to continue despite a failed check.

    Returns:
        bool: True for "y" or "yes" (any case), False for anything else,
        including a closed or unreadable stdin.
    """
    try:
        response = input("\n  Continue anyway? (y/n): ")
    except (EOFError, OSError):
        return False
    return response.strip().lower() in ("y", "yes")


def perform_startup_checks() -> bool:
    """
    Run the startup checks in order: configuration, API key, AI connection,
    profiles directory and write permissions.

    Only the API key and connection checks can stop the startup, and only if
    the user declines to continue. Directory and permission problems are
    reported but never block the launch.

    Returns:
        bool: False if the user declined to continue, True otherwise (even if
        some checks failed).
    """
    all_checks_passed = True

    print("🔍 Performing startup checks...\n")

    print("  Checking configuration... ", end="")
    config = Config()
    print("✅")

    print("  Checking API key... ", end="")
    if not config.is_api_key_configured():
        print("⚠ NOT CONFIGURED")
        print("\n    ⚠️  AI API key is not configured!")
        print("    To configure, run: python setup_key.py")
        print(f"    Or get your key at: {API_KEY_URL}\n")

        if not ask_user_to_continue():
            return False
        all_checks_passed = False
    else:
        print("✅")

        print("  Testing AI connection... ", end="")
        question_bank = QuestionBank(config)
        if question_bank.test_connection():
            print("✅")
        else:
            print("⚠ FAILED")
            print("\n    ⚠️  Could not connect to the AI service")
            print("    Possible issues:")
            print("    - Invalid API key")
            print("    - No internet connection")
            print("    - AI service temporarily unavailable\n")

            if not ask_user_to_continue():
                return False
            all_checks_passed = False

    print("  Checking profiles directory... ", end="")
    if not os.path.exists(PROFILES_DIR):
        try:
            os.mkdir(PROFILES_DIR)
            print("✅ (created)")
        except OSError as e:
            logger.warning("Could not create %s: %s", PROFILES_DIR, e)
            print("❌ Could not create directory")
            all_checks_passed = False
    else:
        print("✅")

    print("  Checking write permissions... ", end="")
    if os.access(PROFILES_DIR, os.W_OK) and os.access(".", os.W_OK):
        print("✅")
    else:
        print("❌ No write permission")
        print("\n    ❌ The application needs write permissions")
        print("    to save user profiles and configuration.\n")
        all_checks_passed = False

    print()
    if all_checks_passed:
        print("✅ All checks passed!")
    else:
        print("⚠️  Some checks failed, but application can run with limited functionality.")
    print()

    return True


def report_launch_failure(message: str, root: Optional[tk.Tk] = None):
    """
    Print a launch failure and show it in an error dialog if a display allows it.
    """
    print(f"❌ Failed to launch application: {message}", file=sys.stderr)
    try:
        show_error_dialog("Failed to launch application", message, parent=root)
    except tk.TclError as e:
        logger.warning("Could not show error dialog: %s", e)


def open_login_window(root: tk.Tk):
    """
    Build and show the login window. Runs on the Tk event loop.
    Any failure is reported and shown in an error dialog instead of propagating.
    """
    try:
        login = LoginWindow(root)
        login.deiconify()
        print("✅ Application launched successfully!")
        print("📚 Ready to generate AI-powered questions!\n")
    except Exception as e:
        logger.exception("Failed to launch application")
        report_launch_failure(str(e), root)
        root.destroy()


def create_root() -> Optional[tk.Tk]:
    """
    Create the hidden Tk root and style it. The login window owns the visible UI.

    Returns:
        tk.Tk or None: The root, or None if Tk could not start (e.g. no display).
    """
    try:
        root = tk.Tk()
    except tk.TclError as e:
        logger.warning("Could not start the GUI toolkit: %s", e)
        return None
    root.withdraw()
    apply_native_theme(root)
    return root


def launch_application(root: Optional[tk.Tk]):
    """
    Schedule the login window on the event loop of root and run the loop.
    Without a root the launch is reported as failed.
    """
    if root is None:
        report_launch_failure("The main window could not be created (no display available?)")
        return

    # Executed once, after the checks, on the Tk thread
    root.after(0, lambda: open_login_window(root))
    root.mainloop()


def run() -> int:
    """
    Run the complete startup sequence and launch the application.

    Exits the process with status 1 if the user declines to continue past
    a failed check.

    Returns:
        int: 0 once the checks are done and the launch was attempted
        (even with failed checks or a failed launch).
    """
    root = create_root()
    print_welcome_banner()

    if not perform_startup_checks():
        print("\n❌ Startup checks failed. Please fix the issues above and restart.", file=sys.stderr)
        if root is not None:
            root.destroy()
        sys.exit(1)

    launch_application(root)
    return 0
