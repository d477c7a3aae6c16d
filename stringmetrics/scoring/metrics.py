"""Descripteurs de métriques : calcul, test de seuil et tri."""
from typing import Callable, Dict, Iterable, List, Optional, Union

from pydantic import BaseModel, ConfigDict

from stringmetrics.config import settings
from stringmetrics.logger import logger
from stringmetrics.models import Distance, MetricKind, Ordering, RankedEntry
from stringmetrics.scoring import distance
from stringmetrics.scoring.ranking import passes_threshold, ranker

_COMPUTERS: Dict[MetricKind, Callable[[str, str], Distance]] = {
    MetricKind.LEVENSHTEIN: distance.levenshtein,
    MetricKind.DAMERAU_LEVENSHTEIN: distance.damerau_levenshtein,
    MetricKind.DICE: distance.dice,
}

_ORDERINGS: Dict[MetricKind, Ordering] = {
    MetricKind.LEVENSHTEIN: Ordering.NATURAL,
    MetricKind.DAMERAU_LEVENSHTEIN: Ordering.NATURAL,
    MetricKind.DICE: Ordering.INVERSE,
}

_ALIASES: Dict[str, MetricKind] = {
    "damerau": MetricKind.DAMERAU_LEVENSHTEIN,
}


class StringMetric(BaseModel):
    """
    Métrique de chaînes immuable et réutilisable.

    Levenshtein et Damerau-Levenshtein suivent l'ordre naturel (0 = chaînes
    identiques), le coefficient de Dice l'ordre inverse (1.0 = identiques).
    """

    kind: MetricKind

    # L'ordre découle du type : un champ "ordering" passé au constructeur est refusé
    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def ordering(self) -> Ordering:
        return _ORDERINGS[self.kind]

    @property
    def is_natural_order(self) -> bool:
        return self.ordering is Ordering.NATURAL

    def compute(self, source: str, target: str) -> Distance:
        """Valeur de la métrique entre source et target."""
        return _COMPUTERS[self.kind](source, target)

    def match(self, source: str, target: str, threshold: Optional[Distance] = None) -> bool:
        """
        Indique si source et target sont assez proches.

        Args:
            source: Première chaîne
            target: Deuxième chaîne
            threshold: Seuil obligatoire (distance maximale en ordre naturel,
                similarité minimale en ordre inverse)

        Raises:
            TypeError: si aucun seuil n'est fourni
        """
        if threshold is None:
            raise TypeError("Threshold must be defined.")
        return passes_threshold(self.compute(source, target), self.ordering, threshold)

    def rank(
        self, candidates: Iterable[str], query: str, threshold: Optional[Distance] = None
    ) -> List[RankedEntry]:
        """Candidats retenus avec leur distance, meilleure correspondance en premier."""
        return ranker.rank(candidates, query, self.compute, self.ordering, threshold)

    def sort(
        self, candidates: Iterable[str], query: str, threshold: Optional[Distance] = None
    ) -> List[str]:
        """
        Trie les candidats selon leur distance à query.

        Seuls les candidats qui passent le seuil (voir match) sont conservés.
        Sans seuil, tous les candidats sont gardés.
        """
        return [entry.candidate for entry in self.rank(candidates, query, threshold)]


class SortOptions(BaseModel): # pylint: disable=too-few-public-methods
    """Configuration immuable d'un tri : métrique et seuil éventuel."""
    metric: StringMetric
    threshold: Optional[Distance] = None

    model_config = ConfigDict(frozen=True)


def _build(kind: MetricKind) -> StringMetric:
    return StringMetric(kind=kind)


def levenshtein_metric() -> StringMetric:
    """Distance de Levenshtein : insertions, suppressions, substitutions."""
    return _build(MetricKind.LEVENSHTEIN)


def damerau_levenshtein_metric() -> StringMetric:
    """Distance de Damerau-Levenshtein : Levenshtein plus transpositions adjacentes."""
    return _build(MetricKind.DAMERAU_LEVENSHTEIN)


def dice_metric() -> StringMetric:
    """Coefficient de Dice sur les bigrammes."""
    return _build(MetricKind.DICE)


def get_metric(name: Union[str, MetricKind, None] = None) -> StringMetric:
    """
    Retrouve une métrique par son nom.

    Args:
        name: MetricKind ou nom ("levenshtein", "damerau-levenshtein", "dice"...).
            Si None, la métrique par défaut de la configuration est utilisée.

    Raises:
        ValueError: si le nom ne correspond à aucune métrique
    """
    if name is None:
        name = settings.DEFAULT_METRIC
    if isinstance(name, MetricKind):
        return _build(name)
    if not isinstance(name, str):
        logger.error("Invalid string metric name: {name!r}", name=name)
        raise ValueError(f"Metric name must be a string or MetricKind, got {type(name).__name__}")

    key = name.strip().lower().replace("-", "_").replace(" ", "_")
    kind = _ALIASES.get(key)
    if kind is None:
        try:
            kind = MetricKind(key)
        except ValueError:
            logger.error("Unknown string metric: {name}", name=name)
            raise ValueError(
                f"Unknown metric '{name}', expected one of {[k.value for k in MetricKind]}"
            ) from None
    return _build(kind)


def sort_with(options: SortOptions, candidates: Iterable[str], query: str) -> List[str]:
    """Trie les candidats avec une configuration SortOptions."""
    return options.metric.sort(candidates, query, options.threshold)
