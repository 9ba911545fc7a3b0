"""Contrat du service d'authentification distant."""

from __future__ import annotations

from typing import Protocol


class SubmissionFailure(RuntimeError):
    """Échec d'une tentative de connexion ou d'inscription.

    Le message est fourni par le service distant et présenté tel quel à
    l'utilisateur.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class AuthOperations(Protocol):
    """Opérations exposées par le service d'authentification.

    Les implémentations encapsulent le transport et convertissent leurs erreurs
    en :class:`SubmissionFailure` (``raise SubmissionFailure(...) from exc``).
    Toute autre exception est tout de même présentée à l'utilisateur.
    """

    async def login(self, email: str, password: str) -> None: ...

    async def signup(
        self,
        email: str,
        password: str,
        *,
        name: str | None = None,
        phone: str | None = None,
    ) -> None: ...
