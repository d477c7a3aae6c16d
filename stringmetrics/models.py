"""Modèles Pydantic partagés par le moteur et le classement."""
from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict

# Entier pour les distances d'édition, réel dans [0, 1] pour Dice
Distance = Union[int, float]


class Ordering(str, Enum):
    """Sens de comparaison d'une métrique."""

    # Plus la valeur est petite, plus les chaînes sont proches (distances d'édition)
    NATURAL = "natural"
    # Plus la valeur est grande, plus les chaînes sont proches (coefficient de Dice)
    INVERSE = "inverse"


class MetricKind(str, Enum):
    """Ensemble fermé des métriques disponibles."""

    LEVENSHTEIN = "levenshtein"
    DAMERAU_LEVENSHTEIN = "damerau_levenshtein"
    DICE = "dice"


class RankedEntry(BaseModel): # pylint: disable=too-few-public-methods
    """Candidat accompagné de sa distance à la requête."""
    candidate: str
    distance: Distance

    model_config = ConfigDict(frozen=True)
