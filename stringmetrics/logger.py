'''
Module de configuration du logger de la bibliothèque.

Ce module utilise Loguru. À l'import, les logs de stringmetrics sont désactivés
et aucun handler n'est ajouté ni supprimé : ceux de l'application hôte restent
intacts. configure_logging() active les logs et ajoute une sortie console
(avec couleurs) et, si la configuration le demande, des fichiers rotatifs.
'''

import os
import sys
from typing import List

from loguru import logger

from stringmetrics.config import settings

# ==============================================================================
# Configuration de Loguru
# ==============================================================================

# Silencieux par défaut ; l'application hôte peut faire logger.enable("stringmetrics")
logger.disable("stringmetrics")

LOG_FORMAT_CONSOLE = (
    "<white>{time:YYYY-MM-DD HH:mm:ss.SSS}</white> | "
    "<level>{level: <8}</level> | "
    "<light-black>{name}:{function}:{line}</light-black> - "
    "<level><b>{message}</b></level>"
)
LOG_FORMAT_FILE = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
    "{level: <8} | "
    "{name}:{function}:{line} - "
    "{message}"
)


def _only_stringmetrics(record) -> bool:
    return record["name"].startswith("stringmetrics")


def _add_file_handler(filename: str, level: str, levels=None, **kwargs) -> int:
    """Ajoute un fichier de log avec rotation journalière et compression."""
    if levels is None:
        record_filter = _only_stringmetrics
    else:
        def record_filter(record):
            return _only_stringmetrics(record) and record["level"].name in levels

    return logger.add(
        os.path.join(settings.LOG_DIR, filename),
        level=level,
        format=LOG_FORMAT_FILE,
        rotation="00:00",
        retention=settings.LOG_RETENTION,
        compression="zip",
        encoding="utf-8",
        filter=record_filter,
        **kwargs
    )


def configure_logging() -> List[int]:
    """
    Active les logs de stringmetrics et ajoute ses handlers.

    Les handlers déjà enregistrés ne sont pas touchés. Seuls les messages
    émis par stringmetrics sont envoyés aux handlers ajoutés ici.

    Returns:
        Identifiants des handlers ajoutés (pour logger.remove())
    """
    logger.enable("stringmetrics")

    handler_ids = [
        logger.add(
            sys.stderr,
            level=settings.LOG_LEVEL,
            format=LOG_FORMAT_CONSOLE,
            filter=_only_stringmetrics,
            colorize=True,
            backtrace=True,
            diagnose=False
        )
    ]

    if settings.LOG_TO_FILE:
        os.makedirs(settings.LOG_DIR, exist_ok=True)
        handler_ids.append(_add_file_handler("debug.log", "DEBUG", levels=("DEBUG",)))
        handler_ids.append(_add_file_handler("info.log", "INFO", levels=("INFO", "WARNING")))
        handler_ids.append(_add_file_handler("error.log", "ERROR", backtrace=True, diagnose=True))

    return handler_ids

# Exemple d'utilisation :
# from stringmetrics.logger import configure_logging
# configure_logging()
