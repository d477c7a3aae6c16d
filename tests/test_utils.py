# tests/test_utils.py

class Colors:
    HEADER = '\033[95m'
    OKGREEN = '\033[92m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'


def announce(name):
    """Affiche le nom du test en cours."""
    print(f"\n{Colors.HEADER}===== RUNNING: {name} ====={Colors.ENDC}")


def report(name, passed=True):
    """Affiche le résultat d'un test."""
    color, label = (Colors.OKGREEN, "PASSED") if passed else (Colors.FAIL, "FAILED")
    print(f"{color}===== {label}: {name} ====={Colors.ENDC}")
