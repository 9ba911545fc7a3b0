"""Affichage des erreurs d'authentification dans une boîte modale Tkinter."""

from __future__ import annotations

import tkinter as tk
from tkinter import messagebox
from typing import Callable

from shopauth.config import DEFAULT_ERROR_TITLE


class MessageBoxAlert:
    """Boîte d'erreur modale avec un unique bouton d'acquittement.

    Passez la fenêtre racine de l'application en ``parent`` : sans elle,
    Tkinter crée une fenêtre racine implicite qui n'est jamais détruite.
    """

    def __init__(self, title: str = DEFAULT_ERROR_TITLE, *, parent: tk.Misc | None = None) -> None:
        self._title = title
        self._parent = parent

    def present_error(self, message: str, on_acknowledge: Callable[[], None]) -> None:
        # showerror bloque jusqu'à la fermeture de la boîte.
        messagebox.showerror(self._title, message, parent=self._parent)
        on_acknowledge()
