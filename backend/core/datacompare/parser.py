# datacompare/parser.py
"""
Parser de directivas {{compare:accion:arg1:arg2|transformacion:param}}.
"""

import re
from typing import Any, List

from .errors import DirectiveParseError
from .models import COMPARE_KEYWORDS, ParsedDirective, ParsedTransform


# Permite llaves dentro de la directiva (ej: cuantificadores regex como {5});
# el primer '}}' tras la apertura cierra la directiva.
DIRECTIVE_PATTERN = re.compile(r"\{\{compare:.+?\}\}")

_PREFIX = "{{compare:"
_SUFFIX = "}}"


class CompareParser:
    """Tokenizador de directivas de comparación."""

    def is_directive(self, value: Any) -> bool:
        """Indica si el texto completo (sin espacios exteriores) es una directiva."""
        if not isinstance(value, str):
            return False
        return DIRECTIVE_PATTERN.fullmatch(value.strip()) is not None

    def find_directives(self, content: Any) -> List[str]:
        """Devuelve todas las directivas contenidas en un texto."""
        if not isinstance(content, str):
            return []
        return DIRECTIVE_PATTERN.findall(content)

    def parse(self, directive: str) -> ParsedDirective:
        """
        Parsea una directiva.

        Ejemplos:
            {{compare:startsWith:Hello}}
            {{compare:time:range:-300:+300:seconds}}
            {{compare:regex:user_\\d+|toString}}

        Raises:
            DirectiveParseError: si el texto no es una directiva o no tiene acción
        """
        if not self.is_directive(directive):
            raise DirectiveParseError("Formato de directiva inválido", directive)

        inner = directive.strip()[len(_PREFIX):-len(_SUFFIX)]

        parts = self._split_unescaped(inner, "|")
        main_part, transform_parts = parts[0], parts[1:]

        segments = self._split_unescaped_colon(main_part)
        if not segments or not segments[0]:
            raise DirectiveParseError("Directiva sin acción", directive)

        return ParsedDirective(
            original=directive,
            action=segments[0],
            args=segments[1:],
            transforms=[self._parse_transform(part) for part in transform_parts]
        )

    def _parse_transform(self, transform: str) -> ParsedTransform:
        segments = self._split_unescaped_colon(transform)
        if not segments:
            return ParsedTransform(name="")
        return ParsedTransform(name=segments[0], params=segments[1:])

    @staticmethod
    def _split_unescaped(value: str, separator: str) -> List[str]:
        """Separa por `separator` salvo cuando va precedido de '\\' (queda como literal sin la barra)."""
        result = []
        current = []
        i = 0
        while i < len(value):
            char = value[i]
            if char == "\\" and i + 1 < len(value) and value[i + 1] == separator:
                current.append(separator)
                i += 2
            elif char == separator:
                result.append("".join(current))
                current = []
                i += 1
            else:
                current.append(char)
                i += 1
        result.append("".join(current))
        return result

    @staticmethod
    def _split_unescaped_colon(value: str) -> List[str]:
        """
        Separa por ':' no escapados.

        "a:b\\:c:d" -> ["a", "b:c", "d"]. Las barras que no escapan ':' se
        conservan ("user_\\d{5}" -> ["user_\\d{5}"]).
        """
        result = []
        current = []
        i = 0
        while i < len(value):
            char = value[i]
            if char == "\\" and i + 1 < len(value) and value[i + 1] == ":":
                current.append(":")
                i += 2
            elif char == ":":
                result.append("".join(current))
                current = []
                i += 1
            else:
                current.append(char)
                i += 1

        # El último segmento vacío solo cuenta si el texto termina en ':'
        if current or value.endswith(":"):
            result.append("".join(current))

        return result

    def unescape(self, value: str) -> str:
        """Revierte el escapado (\\: -> :, \\\\ -> \\)."""
        return value.replace("\\:", ":").replace("\\\\", "\\")

    def is_keyword(self, value: Any) -> bool:
        """Indica si el valor es una palabra clave estructural."""
        if not isinstance(value, str):
            return False
        return value in COMPARE_KEYWORDS.values()
