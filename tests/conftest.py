# tests/conftest.py
import pytest

from stringmetrics import damerau_levenshtein, dice, levenshtein

# --- Descripteurs de métriques ---

@pytest.fixture
def lev():
    """Descripteur Levenshtein (ordre naturel)."""
    return levenshtein()

@pytest.fixture
def damerau():
    """Descripteur Damerau-Levenshtein (ordre naturel)."""
    return damerau_levenshtein()

@pytest.fixture
def dice_coef():
    """Descripteur Dice (ordre inverse)."""
    return dice()

# --- Données ---

@pytest.fixture
def kitten_candidates():
    """Candidats du scénario de tri de référence."""
    return ["kitten", "sitting", "bitten", "mitten"]
