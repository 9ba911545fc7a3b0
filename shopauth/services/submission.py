"""Orchestration de la soumission du formulaire d'authentification."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Protocol

from shopauth.config import DEFAULT_DESTINATION
from shopauth.services.auth_operations import AuthOperations, SubmissionFailure
from shopauth.state import EMAIL, NAME, PASSWORD, PHONE, FormState, Mode

logger = logging.getLogger(__name__)


class SubmissionStatus(Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class Navigator(Protocol):
    def navigate_to(self, destination: str) -> None: ...


class AlertPresenter(Protocol):
    def present_error(self, message: str, on_acknowledge: Callable[[], None]) -> None: ...


Listener = Callable[["SubmissionController"], None]


class SubmissionController:
    """Machine à états ``Idle -> Submitting -> {Succeeded | Failed} -> Idle``.

    Le contrôleur ne revalide pas le formulaire : l'appelant ne soumet qu'un
    formulaire valide. Une seule soumission peut être en cours à la fois ;
    tout appel à :meth:`submit` hors de l'état ``IDLE`` est ignoré.
    """

    def __init__(
        self,
        auth: AuthOperations,
        navigator: Navigator,
        alerts: AlertPresenter,
        *,
        destination: str = DEFAULT_DESTINATION,
    ) -> None:
        self._auth = auth
        self._navigator = navigator
        self._alerts = alerts
        self._destination = destination
        self._status = SubmissionStatus.IDLE
        self._error: str | None = None
        self._is_loading = False
        self._listeners: list[Listener] = []

    @property
    def status(self) -> SubmissionStatus:
        return self._status

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def destination(self) -> str:
        return self._destination

    def add_listener(self, listener: Listener) -> None:
        """Enregistre un rappel exécuté après chaque changement d'état."""
        self._listeners.append(listener)

    def _notify(self) -> None:
        # Un rappel défaillant ne doit pas bloquer la machine à états.
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                logger.exception("Erreur dans un rappel de changement d'état")

    async def submit(self, mode: Mode, form_state: FormState) -> None:
        """Soumet le formulaire au service d'authentification."""
        if self._status is not SubmissionStatus.IDLE:
            logger.debug("Soumission ignorée : état %s", self._status.value)
            return

        # Passage à SUBMITTING avant le premier await.
        self._status = SubmissionStatus.SUBMITTING
        self._error = None
        self._notify()
        self._is_loading = True
        self._notify()

        logger.debug("Soumission en mode %s", mode.value)
        try:
            await self._call(mode, form_state)
        except SubmissionFailure as exc:
            self._fail(exc.message)
            return
        except Exception as exc:
            logger.exception("Erreur inattendue pendant la soumission")
            self._fail(str(exc) or type(exc).__name__)
            return

        self._status = SubmissionStatus.SUCCEEDED
        self._notify()
        logger.debug("Authentification réussie, navigation vers %s", self._destination)
        self._navigator.navigate_to(self._destination)

    async def _call(self, mode: Mode, form_state: FormState) -> None:
        email = form_state.value(EMAIL)
        password = form_state.value(PASSWORD)
        if mode is Mode.SIGNUP:
            await self._auth.signup(
                email,
                password,
                name=form_state.value(NAME) or None,
                phone=form_state.value(PHONE) or None,
            )
        else:
            await self._auth.login(email, password)

    def _fail(self, message: str) -> None:
        logger.info("Échec de l'authentification : %s", message)
        self._status = SubmissionStatus.FAILED
        self._error = message
        self._is_loading = False
        self._notify()
        self._alerts.present_error(message, self.acknowledge)

    def acknowledge(self) -> None:
        """Ferme l'erreur affichée et autorise une nouvelle soumission."""
        if self._status is not SubmissionStatus.FAILED:
            return
        self._status = SubmissionStatus.IDLE
        self._error = None
        self._notify()
