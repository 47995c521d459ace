import tkinter as tk
from tkinter import ttk, messagebox
from tkinter.scrolledtext import ScrolledText
from typing import Callable, Optional

from config import API_KEY_URL

HELP_TEXT = (
    "AI-Powered Quiz Application\n\n"
    "First Time Setup:\n"
    "1. Run: python setup_key.py\n"
    "2. Enter your AI API key\n"
    "3. Configure settings\n"
    "4. Run: python main.py\n\n"
    "Get API Key:\n"
    f"Visit: {API_KEY_URL}\n\n"
    "Features:\n"
    "• Fresh AI questions every time\n"
    "• Personal profiles\n\n"
    "Need Help?\n"
    "See README.md for detailed documentation"
)


def show_error_dialog(title: str, message: str, parent: Optional[tk.Misc] = None):
    """
    Show a blocking error message box.
    """
    messagebox.showerror(title, message, parent=parent)


def show_startup_help(master: tk.Misc):
    """
    Show the application help in a modal, read-only dialog.

    Args:
        master (tk.Misc): The window the dialog belongs to.
    """
    dialog = tk.Toplevel(master)
    dialog.title("Application Help")
    dialog.geometry("500x400")

    text_area = ScrolledText(dialog, font=("Courier", 12), wrap="word")
    text_area.insert("1.0", HELP_TEXT)
    text_area.config(state="disabled")
    text_area.pack(fill="both", expand=True, padx=10, pady=(10, 5))

    ttk.Button(dialog, text="OK", command=dialog.destroy).pack(pady=(0, 10))

    dialog.transient(master)
    dialog.grab_set()
    master.wait_window(dialog)


class LoginWindow(tk.Toplevel):
    """
    The first window the user sees after startup. Asks for a profile name.

    Args:
        master (tk.Tk): The application root. It is destroyed when this window closes.
        on_login (Callable[[str], None], optional): Called with the profile name
            once the user logs in. Defaults to a welcome message.

    Attributes:
        username (str): The name the user logged in with, empty until then.
    """

    def __init__(self, master: tk.Tk, on_login: Optional[Callable[[str], None]] = None):
        super().__init__(master)
        self.title("AI Quiz - Login")
        self.geometry("420x220")
        self.resizable(False, False)

        self.on_login = on_login or self.show_welcome
        self.username = ""

        self.create_widgets()

        # Closing the login window ends the application
        self.protocol("WM_DELETE_WINDOW", master.destroy)

    def create_widgets(self):
        """
        Creates the profile name entry and the Log in / Help buttons.
        """
        ttk.Label(self, text="Welcome to AI Quiz", font=("Arial", 16)).pack(pady=(20, 10))

        ttk.Label(self, text="Profile name:").pack(pady=(5, 2))
        self.name_var = tk.StringVar()
        self.name_entry = ttk.Entry(self, textvariable=self.name_var, width=30)
        self.name_entry.pack(pady=(0, 10))
        self.name_entry.bind("<Return>", lambda event: self.login())
        self.name_entry.focus_set()

        btn_frame = ttk.Frame(self)
        btn_frame.pack(pady=10)
        ttk.Button(btn_frame, text="Log in", command=self.login).grid(row=0, column=0, padx=5)
        ttk.Button(btn_frame, text="Help", command=lambda: show_startup_help(self)).grid(row=0, column=1, padx=5)

    def login(self):
        """
        Validates the entered name and hands it to the login callback.
        """
        name = self.name_var.get().strip()
        if not name:
            messagebox.showwarning("Validation", "Profile name cannot be empty.", parent=self)
            return

        self.username = name
        self.on_login(name)

    def show_welcome(self, name: str):
        messagebox.showinfo("Welcome", f"Welcome, {name}!", parent=self)
