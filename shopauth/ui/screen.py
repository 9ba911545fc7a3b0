"""Présentateur de l'écran de connexion / inscription."""

from __future__ import annotations

import logging
import tkinter as tk

from shopauth.config import AuthScreenConfig, load_config
from shopauth.services import (
    AlertPresenter,
    AuthOperations,
    Navigator,
    SubmissionController,
    SubmissionStatus,
)
from shopauth.state import FieldUpdate, FormState, Mode, initial_form_state, reduce, switch_mode
from shopauth.ui.alerts import MessageBoxAlert

logger = logging.getLogger(__name__)

TITLES = {Mode.LOGIN: "Đăng nhập", Mode.SIGNUP: "Đăng ký"}
SWITCH_LABELS = {
    Mode.LOGIN: "Tôi chưa có tài khoản",
    Mode.SIGNUP: "Tôi đã có tài khoản",
}


class AuthScreen:
    """État de l'écran : formulaire, mode et soumission.

    Le rendu des champs est laissé à la couche graphique, qui appelle
    :meth:`on_input_change` avec la valeur déjà validée.
    """

    def __init__(self, controller: SubmissionController, *, mode: Mode = Mode.LOGIN) -> None:
        self._controller = controller
        self._form_state = initial_form_state(mode)

    # ---------------------------------------------------------------- État -
    @property
    def mode(self) -> Mode:
        return self._form_state.mode

    @property
    def form_state(self) -> FormState:
        return self._form_state

    @property
    def controller(self) -> SubmissionController:
        return self._controller

    @property
    def title(self) -> str:
        """Titre de l'en-tête, repris sur le bouton de soumission."""
        return TITLES[self.mode]

    @property
    def switch_label(self) -> str:
        return SWITCH_LABELS[self.mode]

    @property
    def is_loading(self) -> bool:
        return self._controller.is_loading

    @property
    def error(self) -> str | None:
        return self._controller.error

    @property
    def can_submit(self) -> bool:
        """Indique si le bouton de soumission est actif."""
        return self._form_state.is_valid and self._controller.status is SubmissionStatus.IDLE

    def _is_replaced(self) -> bool:
        return self._controller.status is SubmissionStatus.SUCCEEDED

    # ----------------------------------------------------------- Callbacks -
    def on_input_change(self, field: str, value: str, is_valid: bool) -> None:
        if self._is_replaced():
            logger.debug("Saisie ignorée après authentification : %s", field)
            return
        self._form_state = reduce(self._form_state, FieldUpdate(field, value, is_valid))

    def toggle_mode(self) -> None:
        if self._is_replaced():
            return
        self._form_state = switch_mode(self._form_state, self.mode.toggled())
        logger.debug("Mode de l'écran : %s", self.mode.value)

    async def submit(self) -> None:
        if not self.can_submit:
            logger.debug("Soumission refusée : formulaire invalide ou envoi en cours")
            return
        await self._controller.submit(self.mode, self._form_state)


def build_auth_screen(
    auth: AuthOperations,
    navigator: Navigator,
    *,
    config: AuthScreenConfig | None = None,
    alerts: AlertPresenter | None = None,
    parent: tk.Misc | None = None,
) -> AuthScreen:
    """Initialise les dépendances de l'écran d'authentification.

    ``parent`` est la fenêtre racine Tkinter de l'application, utilisée par la
    boîte d'erreur par défaut.
    """
    config = config or load_config()
    if alerts is None:
        alerts = MessageBoxAlert(config.error_title, parent=parent)
    controller = SubmissionController(
        auth,
        navigator,
        alerts,
        destination=config.destination,
    )
    return AuthScreen(controller)
