"""État du formulaire de connexion / inscription et son réducteur."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping

EMAIL = "email"
PASSWORD = "password"
NAME = "name"
PHONE = "phone"


class Mode(Enum):
    """Mode de l'écran : connexion ou inscription."""

    LOGIN = "login"
    SIGNUP = "signup"

    @property
    def fields(self) -> tuple[str, ...]:
        """Champs actifs pour ce mode."""
        if self is Mode.SIGNUP:
            return (EMAIL, PASSWORD, NAME, PHONE)
        return (EMAIL, PASSWORD)

    def toggled(self) -> Mode:
        return Mode.LOGIN if self is Mode.SIGNUP else Mode.SIGNUP


ALL_FIELDS: tuple[str, ...] = Mode.SIGNUP.fields


@dataclass(frozen=True, slots=True)
class FieldUpdate:
    """Nouvelle valeur d'un champ, validée par le composant de saisie."""

    field: str
    value: str
    is_valid: bool


@dataclass(frozen=True, slots=True)
class FormState:
    """État immuable du formulaire.

    ``is_valid`` n'est jamais stocké : il est recalculé à chaque lecture à
    partir des validités des champs actifs du mode courant. Les champs absents
    de ``validities`` ne sont pas comptés.
    """

    values: Mapping[str, str] = field(default_factory=dict)
    validities: Mapping[str, bool] = field(default_factory=dict)
    mode: Mode = Mode.LOGIN

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))
        object.__setattr__(self, "validities", MappingProxyType(dict(self.validities)))

    @property
    def active_fields(self) -> tuple[str, ...]:
        return self.mode.fields

    @property
    def is_valid(self) -> bool:
        return all(
            self.validities[key] for key in self.active_fields if key in self.validities
        )

    def value(self, key: str) -> str:
        return self.values.get(key, "")


def initial_form_state(mode: Mode = Mode.LOGIN) -> FormState:
    """Crée un formulaire vierge : tous les champs vides et invalides."""
    return FormState(
        values={key: "" for key in ALL_FIELDS},
        validities={key: False for key in ALL_FIELDS},
        mode=mode,
    )


def reduce(state: FormState, update: FieldUpdate) -> FormState:
    """Applique la mise à jour d'un champ et retourne un nouvel état."""
    values = dict(state.values)
    validities = dict(state.validities)
    values[update.field] = update.value
    validities[update.field] = update.is_valid
    return FormState(values=values, validities=validities, mode=state.mode)


def switch_mode(state: FormState, mode: Mode) -> FormState:
    """Change le jeu de champs actifs.

    Les valeurs saisies dans les champs devenus inactifs sont conservées et
    comptent de nouveau si l'utilisateur revient au mode précédent.
    """
    return FormState(values=state.values, validities=state.validities, mode=mode)
