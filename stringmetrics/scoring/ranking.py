"""Filtrage et classement de candidats selon une métrique."""
import math
from typing import Callable, Iterable, List, Optional

from stringmetrics.logger import logger
from stringmetrics.models import Distance, Ordering, RankedEntry


def default_threshold(ordering: Ordering) -> Distance:
    """Seuil qui conserve tous les candidats pour l'ordre donné."""
    return math.inf if ordering is Ordering.NATURAL else 0


def passes_threshold(distance: Distance, ordering: Ordering, threshold: Distance) -> bool:
    """Vrai si la distance respecte le seuil (<= en ordre naturel, >= sinon)."""
    if ordering is Ordering.NATURAL:
        return distance <= threshold
    return distance >= threshold


class Ranker:
    """Classe les candidats du plus proche au plus éloigné de la requête."""

    def rank(
        self,
        candidates: Iterable[str],
        query: str,
        compute: Callable[[str, str], Distance],
        ordering: Ordering,
        threshold: Optional[Distance] = None,
    ) -> List[RankedEntry]:
        """
        Calcule la distance de chaque candidat à la requête, filtre et trie.

        La comparaison se fait en minuscules ; les candidats retournés gardent
        leur casse d'origine. Le tri est stable : à distance égale, l'ordre
        d'entrée est conservé.

        Args:
            candidates: Chaînes à classer
            query: Chaîne de référence
            compute: Fonction de distance (source, target)
            ordering: Sens de la métrique
            threshold: Seuil de conservation, tout est gardé si None

        Returns:
            Entrées retenues, meilleure correspondance en premier
        """
        if threshold is None:
            threshold = default_threshold(ordering)

        lc_query = query.lower()
        scanned = 0
        kept: List[RankedEntry] = []
        for candidate in candidates:
            scanned += 1
            distance = compute(candidate.lower(), lc_query)
            if passes_threshold(distance, ordering, threshold):
                kept.append(RankedEntry(candidate=candidate, distance=distance))

        natural = ordering is Ordering.NATURAL
        ranked = sorted(kept, key=lambda e: e.distance if natural else -e.distance)
        logger.debug(
            "Ranked {kept}/{scanned} candidates for {query!r} (threshold={threshold})",
            kept=len(ranked), scanned=scanned, query=query, threshold=threshold,
        )
        return ranked


# Instance globale réutilisable
ranker = Ranker()
