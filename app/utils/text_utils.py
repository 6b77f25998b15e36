import re
from typing import Tuple


def find_and_replace(text: str, pattern: str, replacement: str,
                     use_regex: bool = True, ignore_case: bool = False) -> Tuple[str, int]:
    """
    Substitui todas as ocorrências de `pattern` em `text`.
    Com use_regex=False o padrão é tratado como texto literal.
    Retorna (novo_texto, quantidade_de_substituições).
    Levanta re.error se o padrão for inválido.
    """
    if not pattern:
        return text, 0

    if not use_regex:
        pattern = re.escape(pattern)
        replacement = replacement.replace('\\', '\\\\')

    flags = re.IGNORECASE if ignore_case else 0
    return re.subn(pattern, replacement, text, flags=flags)
