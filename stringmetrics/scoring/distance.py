"""Calcul des distances et similarités entre chaînes."""
from typing import List


def create_table(rows: int, cols: int, fill: int = 0) -> List[List[int]]:
    """Alloue une table rows x cols initialisée à fill."""
    return [[fill] * cols for _ in range(rows)]


def min3(a: int, b: int, c: int) -> int:
    """Minimum de trois valeurs."""
    return min(a, b, c)


def levenshtein(source: str, target: str) -> int:
    """
    Calcule la distance de Levenshtein entre deux chaînes.

    Nombre minimal d'insertions, suppressions ou substitutions d'un caractère
    pour transformer source en target. La comparaison est sensible à la casse.

    Args:
        source: Première chaîne
        target: Deuxième chaîne

    Returns:
        Distance de Levenshtein
    """
    source_len = len(source)
    target_len = len(target)

    distance = create_table(source_len + 1, target_len + 1)
    for i in range(source_len + 1):
        distance[i][0] = i
    for j in range(1, target_len + 1):
        distance[0][j] = j

    for i in range(1, source_len + 1):
        for j in range(1, target_len + 1):
            cost = 0 if source[i - 1] == target[j - 1] else 1
            distance[i][j] = min3(
                distance[i - 1][j] + 1,
                distance[i][j - 1] + 1,
                distance[i - 1][j - 1] + cost,
            )

    return distance[source_len][target_len]


def damerau_levenshtein(source: str, target: str) -> int:
    """
    Calcule la distance de Damerau-Levenshtein entre deux chaînes.

    Comme Levenshtein, avec en plus la transposition de deux caractères
    adjacents. Variante sans restriction : des éditions peuvent avoir lieu
    entre les caractères transposés (contrairement à la distance OSA).

    Args:
        source: Première chaîne
        target: Deuxième chaîne

    Returns:
        Distance de Damerau-Levenshtein
    """
    source_len = len(source)
    target_len = len(target)

    if source_len == 0:
        return target_len
    if target_len == 0:
        return source_len

    # Bordure à INF : aucune transposition ne peut partir de l'extérieur de la table
    inf = source_len + target_len
    score = create_table(source_len + 2, target_len + 2)
    score[0][0] = inf
    for i in range(source_len + 1):
        score[i + 1][1] = i
        score[i + 1][0] = inf
    for j in range(target_len + 1):
        score[1][j + 1] = j
        score[0][j + 1] = inf

    # Dernière ligne de source où chaque caractère a été vu (0 = jamais)
    alphabet = {}

    for i in range(1, source_len + 1):
        db = 0
        for j in range(1, target_len + 1):
            i1 = alphabet.get(target[j - 1], 0)
            j1 = db

            if source[i - 1] == target[j - 1]:
                score[i + 1][j + 1] = score[i][j]
                db = j
            else:
                score[i + 1][j + 1] = min3(score[i][j], score[i + 1][j], score[i][j + 1]) + 1

            transposition = score[i1][j1] + (i - i1 - 1) + 1 + (j - j1 - 1)
            score[i + 1][j + 1] = min(score[i + 1][j + 1], transposition)

        alphabet[source[i - 1]] = i

    return score[source_len + 1][target_len + 1]


def bigrams(s: str) -> List[str]:
    """Liste des bigrammes (fenêtres de deux caractères) de s, dans l'ordre."""
    return [s[i:i + 2] for i in range(len(s) - 1)]


def dice(source: str, target: str) -> float:
    """
    Calcule le coefficient de Dice sur les bigrammes de caractères.

    Un bigramme de target ne peut être apparié qu'une seule fois.

    Returns:
        Coefficient dans [0, 1], 0.0 si une chaîne a moins de deux caractères
    """
    source_bigrams = bigrams(source)
    pool = bigrams(target)
    if not source_bigrams or not pool:
        return 0.0

    total = len(source_bigrams) + len(pool)
    intersection = 0
    for bigram in source_bigrams:
        if bigram in pool:
            pool.remove(bigram)
            intersection += 1

    return (2.0 * intersection) / total
