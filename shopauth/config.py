"""Gestion centralisée de la configuration de l'écran d'authentification."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_DESTINATION = "Shop"
DEFAULT_ERROR_TITLE = "Lỗi xảy ra!"


class ConfigError(RuntimeError):
    """Erreur levée lorsque la configuration est invalide."""


@dataclass(frozen=True, slots=True)
class AuthScreenConfig:
    """Paramètres de l'écran de connexion / inscription."""

    destination: str = DEFAULT_DESTINATION
    error_title: str = DEFAULT_ERROR_TITLE

    def destination_is_configured(self) -> bool:
        """Indique si la destination post-authentification est renseignée."""
        return bool(self.destination and self.destination.strip())


def load_config() -> AuthScreenConfig:
    """Charge la configuration de l'écran depuis l'environnement."""
    load_dotenv()

    destination = os.getenv("SHOPAUTH_DESTINATION", DEFAULT_DESTINATION)
    error_title = os.getenv("SHOPAUTH_ERROR_TITLE", DEFAULT_ERROR_TITLE)

    config = AuthScreenConfig(
        destination=destination.strip(),
        error_title=error_title,
    )
    if not config.destination_is_configured():
        raise ConfigError(
            "La destination après authentification est vide. "
            "Définissez SHOPAUTH_DESTINATION."
        )
    return config
